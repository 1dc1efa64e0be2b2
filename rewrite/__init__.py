# rewrite/__init__.py
# This file is part of Boole - An RPN Boolean Formula Toolkit
#
# Rewriting components: normal forms and simplification

"""Equivalence-preserving rewrites of expression trees.

Every rewrite returns a new Tree holding a copy of the variable cells, so the
input tree can still be evaluated independently.

Core Functions:
    to_nnf: Negation Normal Form (only And, Or and literals)
    to_cnf: Conjunctive Normal Form by NNF conversion and distribution
    simplify: Constant folding, idempotence, contradiction/tautology
        detection and associative flattening

Example:
    >>> from rpn import parse
    >>> from rewrite import to_nnf
    >>> str(to_nnf(parse("AB>")))
    'A!B|'
"""

from .nnf_transformer import NNFTransformer, nnf, to_nnf
from .cnf_transformer import CNFTransformer, build_cnf, is_cnf, to_cnf
from .simplifier import NodeRelation, Simplifier, compare, simplify

__all__ = [
    "NNFTransformer",
    "nnf",
    "to_nnf",
    "CNFTransformer",
    "build_cnf",
    "is_cnf",
    "to_cnf",
    "NodeRelation",
    "Simplifier",
    "compare",
    "simplify",
]

__version__ = "1.0.0"
__description__ = "Rewriting components for RPN formulas"
