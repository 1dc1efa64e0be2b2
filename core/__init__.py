# core/__init__.py
# This file is part of Boole - An RPN Boolean Formula Toolkit
#
# Core module public API for formula evaluation

"""Evaluation components for parsed RPN formulas.

This package computes the meaning of an expression tree: its truth value
under the current variable cells, its full truth table in canonical
assignment order, whether it is satisfiable, and its value when the
connectives are read as set operations.

Primary Components:
    BooleanEvaluator / evaluate / eval_formula: Boolean evaluation
    TruthTable / build_truth_table / truth_table: truth-table enumeration
    format_truth_table: Markdown rendering, optionally colored
    satisfy / sat / find_model: brute-force satisfiability
    SignedSet / eval_set: set-theoretic evaluation

Example:
    >>> from core import eval_formula, truth_table
    >>> eval_formula("1011||=")
    True
    >>> truth_table("AB&")
    [False, False, False, True]
"""

from .evaluator import BooleanEvaluator, evaluate, eval_formula
from .truth_table import (
    TruthTable,
    assignment_bits,
    build_truth_table,
    format_truth_table,
    iter_assignments,
    truth_table,
)
from .satisfiability import find_model, sat, satisfy
from .set_evaluator import SetEvaluationError, SignedSet, eval_set

__all__ = [
    "BooleanEvaluator",
    "evaluate",
    "eval_formula",
    "TruthTable",
    "assignment_bits",
    "build_truth_table",
    "format_truth_table",
    "iter_assignments",
    "truth_table",
    "find_model",
    "sat",
    "satisfy",
    "SetEvaluationError",
    "SignedSet",
    "eval_set",
]

__version__ = "1.0.0"
__description__ = "Evaluation components for RPN formulas"
