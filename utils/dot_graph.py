# utils/dot_graph.py
# This file is part of Boole - An RPN Boolean Formula Toolkit
#
# Graphviz rendering of expression trees

"""DOT rendering of expression trees.

Every node of the tree becomes a graph node labelled with its character
(``0``/``1``, the variable letter, or the operator). Pending negations are
drawn as a chain of ``!`` nodes above the literal they apply to. Edges go
from parent to child in operand order and carry no arrowheads:

    digraph {
        node [shape=none]
        edge [arrowhead=none]
        "&_A" [label="&"]
        "&_A" -> A_A
        ...
    }

Node ids are the label character, an underscore, and a per-character counter
written in bijective base 52 (``A`` .. ``Z``, ``a`` .. ``z``, ``AA``, ``AB``,
...), so the first ``&`` node is ``&_A`` and the second ``&_B``.
"""

import subprocess
from typing import Dict

import graphviz

from rpn.ast_nodes import Binary, Const, Node, NEGATION_CHAR
from .logger import get_logger


DOT_FORMAT = "svg"

_DIGITS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"


def base52(number: int) -> str:
    """Encode ``number`` (0-based) in bijective base 52."""
    digits = []
    number += 1
    while number > 0:
        number, remainder = divmod(number - 1, len(_DIGITS))
        digits.append(_DIGITS[remainder])
    return "".join(reversed(digits))


class DotBuilder:
    """Accumulates the nodes and edges of one expression tree."""

    def __init__(self, comment: str = ""):
        self.graph = graphviz.Digraph(comment=comment)
        self.graph.attr("node", shape="none")
        self.graph.attr("edge", arrowhead="none")
        self._counters: Dict[str, int] = {}

    def _new_id(self, label: str) -> str:
        count = self._counters.get(label, 0)
        self._counters[label] = count + 1
        return f"{label}_{base52(count)}"

    def _add(self, label: str) -> str:
        node_id = self._new_id(label)
        self.graph.node(node_id, label=label)
        return node_id

    def add_tree(self, node: Node) -> str:
        """Add ``node`` and its subtree; return the id of its topmost graph node."""
        top = None
        parent = None
        for _ in range(node.negations):
            negation_id = self._add(NEGATION_CHAR)
            if parent is None:
                top = negation_id
            else:
                self.graph.edge(parent, negation_id)
            parent = negation_id

        literal = node.literal
        if isinstance(literal, Const):
            literal_id = self._add(str(literal))
        elif isinstance(literal, Binary):
            literal_id = self._add(str(literal.op))
        else:
            literal_id = self._add(literal.name)

        if parent is not None:
            self.graph.edge(parent, literal_id)

        if isinstance(literal, Binary):
            for child in literal.children:
                self.graph.edge(literal_id, self.add_tree(child))

        return top if top is not None else literal_id


def build_graph(node: Node, comment: str = "") -> graphviz.Digraph:
    builder = DotBuilder(comment)
    builder.add_tree(node)
    return builder.graph


def to_dot(node: Node) -> str:
    """Return the DOT source for an expression tree."""
    return build_graph(node).source


def create_graph(node: Node, target: str, fmt: str = DOT_FORMAT) -> bool:
    """Write ``target.dot`` and render it to ``target.<fmt>`` with Graphviz.

    Failures (unwritable file, missing ``dot`` executable, rendering error)
    are logged, not raised.

    Args:
        node: Root of the tree to draw
        target: Output path without extension
        fmt: Output format for the rendered image

    Returns:
        True if both files were produced
    """
    logger = get_logger()
    graph = build_graph(node, comment=str(node))
    dot_target = f"{target}.dot"
    image_target = f"{target}.{fmt}"

    try:
        graph.render(filename=dot_target, format=fmt, outfile=image_target)
    except graphviz.ExecutableNotFound as e:
        logger.warning(f"Graphviz 'dot' not found, {image_target} not created: {e}")
        return False
    except subprocess.CalledProcessError as e:
        logger.warning(f"Error running dot on {dot_target}: {e}, image may not be created")
        return False
    except OSError as e:
        logger.error(f"Error writing {dot_target}: {e}")
        return False

    logger.info(f"Created {dot_target} and {image_target}")
    return True
