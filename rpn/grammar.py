# rpn/grammar.py
# This file is part of Boole - An RPN Boolean Formula Toolkit
#
# Stack-machine parser for RPN formulas

"""RPN parser driven by the SLY token stream.

Reverse Polish Notation needs no grammar tables: a single left-to-right pass
over the tokens with an auxiliary stack of nodes is enough.

Token actions:
- CONST / VAR: push a leaf node
- NOT: pop the top node and push it back with one more pending negation
- binary operator: pop the right operand, then the left one, push the
  operator node built from them (this pop order matters for IMPL)

At end of input the stack must hold exactly one node.
"""

from typing import List

from .lexer import RPNLexer
from .ast_nodes import BinOp, Binary, Const, Node, Var
from .exceptions import MissingOperandError, ParseError, UnbalancedExpressionError
from .tree import Tree, VariableTable
from utils.logger import get_logger


_BINARY_TOKENS = {
    "AND": BinOp.AND,
    "OR": BinOp.OR,
    "XOR": BinOp.XOR,
    "IMPL": BinOp.IMPL,
    "LEQ": BinOp.LEQ,
}


class _RPNParser:
    """Single-pass stack machine turning RPN tokens into a Tree."""

    def parse(self, text: str) -> Tree:
        """Parse RPN formula text into an expression tree.

        Args:
            text: RPN formula string to parse

        Returns:
            Tree holding the root node and a fresh variable table

        Raises:
            ParseError: If the formula is malformed
        """
        logger = get_logger()
        logger.debug(f"Parsing formula: {text}")

        try:
            stack: List[Node] = []
            for token in RPNLexer().tokenize(text):
                self._apply(stack, token)

            if len(stack) != 1:
                raise UnbalancedExpressionError(len(stack))

            tree = Tree(stack.pop(), VariableTable())
            logger.debug(f"Successfully parsed formula into {tree.root}")
            return tree

        except ParseError:
            logger.debug("Parse error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise ParseError(f"Parse failed: {e}") from e

    def _apply(self, stack: List[Node], token) -> None:
        kind = token.type

        if kind == "CONST":
            stack.append(Node(Const(token.value == "1")))
        elif kind == "VAR":
            stack.append(Node(Var(token.value)))
        elif kind == "NOT":
            if not stack:
                raise MissingOperandError(token.value)
            operand = stack.pop()
            stack.append(Node(operand.literal, operand.negations + 1))
        else:
            if len(stack) < 2:
                raise MissingOperandError(token.value)
            right = stack.pop()
            left = stack.pop()
            stack.append(Node(Binary(_BINARY_TOKENS[kind], (left, right))))
