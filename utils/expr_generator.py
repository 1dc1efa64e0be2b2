# utils/expr_generator.py
# This file is part of Boole - An RPN Boolean Formula Toolkit
#
# Random well-formed RPN formula generation

"""Random formula generation for testing and the command line ``-r`` flag.

Randomness comes from the operating system's entropy source through
``random.SystemRandom``. A failure to read it raises ``EntropyError``; the
caller aborts the random path only.
"""

import random
from typing import Optional, Sequence

from rpn import ast_nodes as ast
from rpn.ast_nodes import BinOp, Node, VARIABLE_CHARS
from .logger import get_logger


MAX_RANDOM_VARIABLES = 5
DEFAULT_DEPTH = 4


class EntropyError(RuntimeError):
    """Raised when the OS entropy source cannot be read."""

    pass


def draw(rng: random.Random, stop: int) -> int:
    """Return a random integer in ``[0, stop)``.

    Raises:
        EntropyError: The entropy source failed
    """
    try:
        return rng.randrange(stop)
    except (OSError, NotImplementedError) as e:
        raise EntropyError(f"Cannot read from the entropy source: {e}") from e


class ExpressionGenerator:
    """Builds random expression trees over a fixed set of variable letters.

    Attributes:
        variables: Letters the leaves are drawn from
        rng: Entropy-backed random source
    """

    def __init__(self, variables: Sequence[str], rng: Optional[random.Random] = None):
        if not variables:
            raise ValueError("At least one variable is required")
        self.variables = list(variables)
        self.rng = rng if rng is not None else random.SystemRandom()

    def _randrange(self, stop: int) -> int:
        return draw(self.rng, stop)

    def node(self, depth: int) -> Node:
        """Return a random node of at most ``depth`` operator levels.

        From depth 5 upward the generator never picks a bare leaf, so deep requests
        produce non-trivial formulas.
        """
        if depth <= 0:
            return self.leaf()

        choice = self._randrange(6) + 1 if depth >= 5 else self._randrange(7)
        if choice == 0:
            return self.leaf()
        if choice == 1:
            return ~self.node(depth - 1)

        op = list(BinOp)[choice - 2]
        return ast.binary(op, self.node(depth - 1), self.node(depth - 1))

    def leaf(self) -> Node:
        return ast.var(self.variables[self._randrange(len(self.variables))])


def random_rpn_expr(
    max_vars: int = MAX_RANDOM_VARIABLES,
    max_depth: int = DEFAULT_DEPTH,
    rng: Optional[random.Random] = None,
) -> str:
    """Return a random well-formed RPN formula.

    The formula uses a random number (at least one) of the first
    ``max_vars`` letters.

    Args:
        max_vars: Upper bound on the number of distinct letters (1..26)
        max_depth: Upper bound on operator nesting
        rng: Random source (default: a fresh SystemRandom)

    Raises:
        ValueError: ``max_vars`` out of range
        EntropyError: The OS entropy source failed
    """
    logger = get_logger()

    if not 1 <= max_vars <= len(VARIABLE_CHARS):
        raise ValueError(f"max_vars must be between 1 and {len(VARIABLE_CHARS)}, got {max_vars}")

    source = rng if rng is not None else random.SystemRandom()
    count = draw(source, max_vars) + 1
    generator = ExpressionGenerator(VARIABLE_CHARS[:count], source)

    formula = str(generator.node(max_depth))
    logger.debug(f"Random formula over {count} variable(s): {formula}")
    return formula
