# core/truth_table.py
# This file is part of Boole - An RPN Boolean Formula Toolkit
#
# Truth-table enumeration in canonical assignment order

"""Truth tables over the variables of a formula.

For a formula with ``n`` distinct variables sorted alphabetically, row ``i``
of the table (``0 <= i < 2**n``) assigns the most significant bit of ``i`` to
the first variable and the least significant bit to the last one. Every
downstream component (minimizer, satisfiability, table printer) uses this
canonical order.

Output format (Markdown-like):

    | A | B | = |
    |---|---|---|
    | 0 | 0 | 0 |
    ...
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple, Union

from rpn import Tree, parse
from .evaluator import BooleanEvaluator
from utils.logger import get_logger


RED = "\x1b[31m"
GREEN = "\x1b[32m"
BLUE = "\x1b[34m"
RESET = "\x1b[0m"


@dataclass(frozen=True)
class TruthTable:
    """Result vector of a formula in canonical row order.

    Attributes:
        variables: Variable letters, alphabetically sorted (MSB first)
        results: One truth value per assignment index
    """

    variables: Tuple[str, ...]
    results: Tuple[bool, ...]

    @property
    def width(self) -> int:
        return len(self.variables)

    def __len__(self) -> int:
        return len(self.results)

    def __getitem__(self, index: int) -> bool:
        return self.results[index]

    def false_rows(self) -> List[int]:
        """Indices of the assignments making the formula false."""
        return [i for i, value in enumerate(self.results) if not value]

    def true_rows(self) -> List[int]:
        """Indices of the assignments making the formula true."""
        return [i for i, value in enumerate(self.results) if value]


def assignment_bits(index: int, width: int) -> List[bool]:
    """Decode an assignment index into per-variable values, MSB first."""
    return [(index >> (width - position - 1)) & 1 == 1 for position in range(width)]


def iter_assignments(tree: Tree, rows: Union[range, None] = None) -> Iterator[Tuple[int, bool]]:
    """Yield ``(index, result)`` for each assignment, in canonical order.

    Mutates the tree's variable cells as it goes.

    Args:
        tree: Tree to evaluate
        rows: Assignment indices to visit (default: all ``2**n``)
    """
    var_list = tree.var_list
    if rows is None:
        rows = range(1 << len(var_list))

    evaluator = BooleanEvaluator(tree.variables)
    for index in rows:
        tree.assign_index(index, var_list)
        yield index, evaluator.evaluate(tree.root)


def build_truth_table(tree: Tree) -> TruthTable:
    """Evaluate the tree under every assignment of its variables."""
    logger = get_logger()

    variables = tuple(tree.var_list)
    results = tuple(result for _, result in iter_assignments(tree))

    logger.debug(
        f"Truth table of {tree.root} over {''.join(variables) or '-'}: "
        f"{sum(results)}/{len(results)} rows true"
    )
    return TruthTable(variables, results)


def truth_table(formula: Union[str, Tree]) -> List[bool]:
    """Return the result vector of a formula (string or parsed tree)."""
    tree = parse(formula) if isinstance(formula, str) else formula
    return list(build_truth_table(tree).results)


def _cell(value: str, color: bool) -> str:
    if not color:
        return value
    return f"{GREEN if value == '1' else RED}{value}{RESET}"


def format_row(values: Sequence[bool], result: bool, color: bool = False) -> str:
    """Render one table row: assignment cells followed by the result cell."""
    separator = f"{BLUE}|{RESET}" if color else "|"
    cells = [_cell("1" if v else "0", color) for v in values]
    cells.append(_cell("1" if result else "0", color))
    return separator + separator.join(f" {c} " for c in cells) + separator


def format_header(variables: Sequence[str], color: bool = False) -> List[str]:
    """Render the header and separator lines of the table."""
    separator = f"{BLUE}|{RESET}" if color else "|"
    names = list(variables) + ["="]
    header = separator + separator.join(f" {name} " for name in names) + separator
    rule = separator + separator.join("---" for _ in names) + separator
    return [header, rule]


def format_truth_table(formula: Union[str, Tree], color: bool = False) -> str:
    """Render the full truth table of a formula as text."""
    tree = parse(formula) if isinstance(formula, str) else formula
    var_list = tree.var_list
    lines = format_header(var_list, color)
    for index, result in iter_assignments(tree):
        lines.append(format_row(assignment_bits(index, len(var_list)), result, color))
    return "\n".join(lines)
