# tests/rpn_tests/test_parser_basic.py
# This file is part of Boole - An RPN Boolean Formula Toolkit
#
# Test suite for RPN parsing, tree structure and round-trip printing

"""Test suite for the RPN stack-machine parser.

Covers node construction, operand order, negation counting, printing back
to RPN, and the shared variable cells of a parsed tree.
"""

import random
import pytest
from rpn import parse, BinOp, Binary, Const, Node, Var, binary, const, var
from rpn.ast_nodes import build_left_assoc, iter_variables
from utils.expr_generator import random_rpn_expr
from utils.logger import get_logger


class TestParserStructure:
    """Test cases for the shape of parsed trees."""

    def setup_method(self):
        self.logger = get_logger()

    def test_constant(self):
        assert parse("1").root == Node(Const(True))
        assert parse("0").root == Node(Const(False))

    def test_variable(self):
        assert parse("Q").root == Node(Var("Q"))

    def test_operand_order(self):
        root = parse("AB>").root

        assert root.literal.op is BinOp.IMPL
        assert root.literal.children == (var("A"), var("B"))

    @pytest.mark.parametrize("char, op", [(op.value, op) for op in BinOp])
    def test_each_operator(self, char, op):
        assert parse(f"AB{char}").root == binary(op, var("A"), var("B"))
        assert BinOp.from_char(char) is op
        assert str(op) == char

    def test_negation_counter(self):
        root = parse("A!!!").root

        assert root.negations == 3
        assert root.is_negated
        assert root.normalized() == Node(Var("A"), 1)

    def test_negation_of_subexpression(self):
        root = parse("AB&!").root

        assert root.negations == 1
        assert isinstance(root.literal, Binary)

    def test_nested_structure(self):
        root = parse("AB|C&").root

        assert root == binary(BinOp.AND, binary(BinOp.OR, var("A"), var("B")), var("C"))

    def test_binary_requires_two_operands(self):
        with pytest.raises(ValueError):
            Binary(BinOp.AND, (var("A"),))


class TestRoundTrip:
    """Test cases for printing trees back to RPN."""

    VALID_FORMULAS = [
        "A",
        "0",
        "1!",
        "AB&",
        "AB|C&",
        "AB>!",
        "A!!B!=",
        "1011||=",
        "AB^C>D=E|F&",
        "ZYX&&!",
    ]

    @pytest.mark.parametrize("formula", VALID_FORMULAS)
    def test_round_trip(self, formula):
        tree = parse(formula)

        assert str(tree) == formula
        assert parse(str(tree)).root == tree.root

    @pytest.mark.parametrize("seed", range(30))
    def test_round_trip_random(self, seed):
        formula = random_rpn_expr(6, 5, rng=random.Random(seed))
        tree = parse(formula)

        assert str(tree) == formula
        assert parse(str(tree)).root == tree.root

    def test_nary_printing(self):
        node = binary(BinOp.AND, var("A"), var("B"), var("C"))
        assert str(node) == "ABC&&"

    def test_operator_overloads(self):
        node = ~(var("A") & var("B")) | const(False)
        assert str(node) == "AB&!0|"

    def test_build_left_assoc(self):
        node = build_left_assoc(BinOp.OR, [var("A"), var("B"), var("C")], False)
        assert str(node) == "AB|C|"
        assert build_left_assoc(BinOp.AND, [], True) == const(True)


class TestVariableCells:
    """Test cases for the variable table of a tree."""

    def test_var_list_sorted_and_distinct(self):
        tree = parse("CAB&|A^")
        assert tree.var_list == ["A", "B", "C"]

    def test_iter_variables_in_tree_order(self):
        assert list(iter_variables(parse("CA&B|").root)) == ["C", "A", "B"]

    def test_occurrences_share_one_cell(self):
        tree = parse("AA&")
        tree.set_var("A", True)

        assert tree.get_var("A") is True
        assert tree.variables.cell("A").value is True

    def test_assign_index_msb_first(self):
        tree = parse("ABC&&")
        tree.assign_index(0b100)

        assert [tree.get_var(name) for name in "ABC"] == [True, False, False]

    def test_each_parse_gets_own_table(self):
        first = parse("A")
        second = parse("A")
        first.set_var("A", True)

        assert second.get_var("A") is False

    def test_derive_copies_cells(self):
        tree = parse("AB&")
        tree.set_var("A", [1, 2])
        derived = tree.derive(tree.root)
        derived.variables["A"].append(3)

        assert tree.get_var("A") == [1, 2]
        assert len(tree.variables) == 26
