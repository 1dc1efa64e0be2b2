# rpn/tree.py
# This file is part of Boole - An RPN Boolean Formula Toolkit
#
# Expression tree and its variable binding environment

"""Expression tree with one shared storage cell per variable letter.

A Tree owns its root node and a table of 26 variable cells indexed by the
letters A..Z. Every ``Var`` occurrence in the tree resolves to the cell of its
letter, so assigning a cell once changes the value seen by every occurrence.
The truth-table loop relies on exactly that: it mutates cells between
evaluations instead of rebuilding the tree.

A cell holds a truth value in Boolean mode and a list of integers in set mode.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional

from .ast_nodes import Node, VARIABLE_CHARS, iter_variables


@dataclass
class VariableCell:
    """Mutable binding storage for one letter.

    Attributes:
        name: The letter this cell belongs to
        value: Current payload (bool, or list of ints in set mode)
    """

    name: str
    value: Any = False


class VariableTable:
    """The 26 variable cells of a tree, indexed by letter."""

    def __init__(self, cells: Optional[Dict[str, VariableCell]] = None):
        if cells is None:
            cells = {name: VariableCell(name) for name in VARIABLE_CHARS}
        self._cells = cells

    def cell(self, name: str) -> VariableCell:
        try:
            return self._cells[name]
        except KeyError:
            raise KeyError(f"No variable cell for '{name}'") from None

    def __getitem__(self, name: str) -> Any:
        return self.cell(name).value

    def __setitem__(self, name: str, value: Any) -> None:
        self.cell(name).value = value

    def __iter__(self) -> Iterator[VariableCell]:
        return iter(self._cells.values())

    def __len__(self) -> int:
        return len(self._cells)

    def assign(self, name: str, value: Any) -> None:
        self[name] = value

    def value_of(self, name: str) -> Any:
        return self[name]

    def copy(self) -> VariableTable:
        """Return an independent table holding the same payloads."""
        return VariableTable(
            {
                name: VariableCell(name, list(c.value) if isinstance(c.value, list) else c.value)
                for name, c in self._cells.items()
            }
        )


class Tree:
    """A parsed formula: root node plus its variable table.

    Attributes:
        root: Root node of the expression
        variables: The 26 shared variable cells
    """

    def __init__(self, root: Node, variables: Optional[VariableTable] = None):
        self.root = root
        self.variables = variables if variables is not None else VariableTable()

    @property
    def var_list(self) -> List[str]:
        """Distinct letters used by the formula, sorted alphabetically."""
        return sorted(set(iter_variables(self.root)))

    def set_var(self, name: str, value: Any) -> None:
        self.variables.assign(name, value)

    def get_var(self, name: str) -> Any:
        return self.variables.value_of(name)

    def assign_index(self, index: int, var_list: Optional[List[str]] = None) -> None:
        """Bind the variables to the assignment encoded by ``index``.

        The first (alphabetically smallest) variable takes the most
        significant bit, the last one the least significant bit.
        """
        if var_list is None:
            var_list = self.var_list
        width = len(var_list)
        for position, name in enumerate(var_list):
            shift = width - position - 1
            self.variables.assign(name, (index >> shift) & 1 == 1)

    def derive(self, root: Node) -> Tree:
        """Return a new tree for ``root`` with a copy of this tree's cells."""
        return Tree(root, self.variables.copy())

    def __str__(self) -> str:
        return str(self.root)

    def __repr__(self) -> str:
        return f"Tree({self.root})"
