# tests/rewrite_tests/test_simplifier.py
# This file is part of Boole - An RPN Boolean Formula Toolkit
#
# Test suite for algebraic simplification

"""Test suite for the simplifier rules and their soundness."""

import pytest
from rpn import parse, BinOp, binary, var
from rewrite import NodeRelation, Simplifier, compare, simplify
from rewrite.simplifier import canonical_key
from core import evaluate
from utils.logger import get_logger


class TestSimplifierRules:
    """Test cases for the individual simplification rules."""

    def setup_method(self):
        self.logger = get_logger()

    RULE_CASES = [
        # Constants
        ("A0&", "0"),
        ("A1&", "A"),
        ("A0|", "A"),
        ("A1|", "1"),
        ("A0^", "A"),
        ("A1^", "A!"),
        ("A1>", "1"),
        ("0A>", "1"),
        ("1A>", "A"),
        ("A0>", "A!"),
        ("A1=", "A"),
        ("A0=", "A!"),
        ("1A=", "A"),
        # Structural equality
        ("AA&", "A"),
        ("AA|", "A"),
        ("AA^", "0"),
        ("AA=", "1"),
        ("AA>", "1"),
        ("AB&BA&^", "0"),
        ("AB|BA|=", "1"),
        # Contradiction and tautology
        ("AA!&", "0"),
        ("AA!|", "1"),
        ("AA!^", "1"),
        ("AA!=", "0"),
        ("A!A&", "0"),
        ("AB&AB&!|", "1"),
        # Negation handling
        ("A!!", "A"),
        ("1!", "0"),
        ("A1&!", "A!"),
        ("AA!&!", "1"),
        # Nothing to simplify
        ("AB>", "AB>"),
        ("AB^", "AB^"),
    ]

    @pytest.mark.parametrize("formula, expected", RULE_CASES)
    def test_rule(self, formula, expected):
        result = str(simplify(parse(formula)))
        self.logger.debug(f"Simplified {formula}: {result}")

        assert result == expected

    def test_flattening(self):
        result = simplify(parse("AB&C&"))

        assert result.root == binary(BinOp.AND, var("A"), var("B"), var("C"))
        assert str(result) == "ABC&&"

    def test_negated_children_not_flattened(self):
        result = simplify(parse("AB&!C&"))

        assert len(result.root.literal.children) == 2

    def test_duplicates_across_flattened_levels(self):
        assert str(simplify(parse("AB&A&"))) == "AB&"
        assert str(simplify(parse("AB|A!|"))) == "1"

    def test_nested_constants(self):
        assert str(simplify(parse("AB0&|C1|&"))) == "A"


class TestStructuralCompare:
    """Test cases for order-insensitive structural comparison."""

    @pytest.mark.parametrize(
        "left, right, relation",
        [
            ("A", "A", NodeRelation.EQUAL),
            ("A", "A!", NodeRelation.OPPOSITE),
            ("A!!", "A", NodeRelation.EQUAL),
            ("AB&", "BA&", NodeRelation.EQUAL),
            ("AB&!", "BA&", NodeRelation.OPPOSITE),
            ("AB>", "BA>", NodeRelation.UNRELATED),
            ("AB&", "AB|", NodeRelation.UNRELATED),
            ("A", "B", NodeRelation.UNRELATED),
        ],
    )
    def test_compare(self, left, right, relation):
        assert compare(parse(left).root, parse(right).root) is relation

    def test_compare_with_key_cache(self):
        keys = {}
        left, right = parse("AB&C|").root, parse("CBA&|").root

        assert compare(left, right, keys) is NodeRelation.EQUAL
        assert keys[left.literal] == canonical_key(left.literal)

    def test_structural_keys_reset_per_transform(self):
        simplifier = Simplifier()

        assert str(simplifier.transform(parse("AB&BA&|").root)) == "AB&"
        assert simplifier._keys

        simplifier.transform(parse("C").root)
        assert simplifier._keys == {}


class TestSimplifierSoundness:
    """Test cases for truth-table agreement."""

    FORMULAS = [
        "AB&C!|D^",
        "AB=C=D=",
        "AB>C>!",
        "AA!&B|",
        "AB&BA&|C&",
        "A1&B0|>",
        "AB!C&|D!E^=",
        "ABC&&AB&C&^",
        "AB>BA>&",
    ]

    @pytest.mark.parametrize("formula", FORMULAS)
    def test_equivalence(self, formula):
        tree = parse(formula)
        result = simplify(tree)
        variables = tree.var_list

        # The result may lose variables; evaluate both over the input's variables
        for index in range(1 << len(variables)):
            tree.assign_index(index, variables)
            result.assign_index(index, variables)
            assert evaluate(result) is evaluate(tree), f"{formula} -> {result} at row {index}"

    def test_constants_removed(self):
        assert str(simplify(parse("A0|B1&&C^"))) == "AB&C^"
