# core/evaluator.py
# This file is part of Boole - An RPN Boolean Formula Toolkit
#
# Boolean evaluation of expression trees

"""Boolean evaluation of parsed formulas.

The evaluator is a recursive-descent visitor that reads variable values from
the tree's variable table. It never mutates the tree, so the truth-table loop
can assign cells and evaluate again as often as it needs.

Operator semantics:
    AND, OR, XOR: the usual truth tables
    IMPL(l, r): ``not l or r``
    LEQ(l, r): ``l == r``

Binary nodes with more than two children are folded from the left. A node
with ``negations = m`` is XORed with ``m % 2``.
"""

from functools import reduce
from typing import Callable, Dict

from rpn import BinOp, Node, Tree, parse
from rpn.tree import VariableTable


BOOLEAN_OPERATORS: Dict[BinOp, Callable[[bool, bool], bool]] = {
    BinOp.AND: lambda left, right: left and right,
    BinOp.OR: lambda left, right: left or right,
    BinOp.XOR: lambda left, right: left != right,
    BinOp.IMPL: lambda left, right: (not left) or right,
    BinOp.LEQ: lambda left, right: left == right,
}


class BooleanEvaluator:
    """Visitor computing the truth value of a node.

    Attributes:
        variables: Table the variable values are read from
    """

    def __init__(self, variables: VariableTable):
        self.variables = variables

    def evaluate(self, node: Node) -> bool:
        return node.accept(self)

    def visit_const(self, n: Node) -> bool:
        return n.literal.value != n.is_negated

    def visit_var(self, n: Node) -> bool:
        return bool(self.variables[n.literal.name]) != n.is_negated

    def visit_binary(self, n: Node) -> bool:
        operator = BOOLEAN_OPERATORS[n.literal.op]
        values = [child.accept(self) for child in n.literal.children]
        return reduce(operator, values) != n.is_negated


def evaluate(tree: Tree) -> bool:
    """Evaluate a tree under the current values of its variable cells."""
    return BooleanEvaluator(tree.variables).evaluate(tree.root)


def eval_formula(formula: str) -> bool:
    """Parse and evaluate a formula with every variable bound to false.

    Raises:
        ParseError: The formula is malformed
    """
    return evaluate(parse(formula))
