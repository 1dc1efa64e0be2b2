# minimizer/petrick.py
# This file is part of Boole - An RPN Boolean Formula Toolkit
#
# Minimum cover selection by Petrick's method

"""Petrick's method for choosing a minimum set of prime implicants.

Each index still to be covered contributes a *sum*: the set of primes that
cover it. The cover condition is the product of those sums. Multiplying the
product out (distributing, with the absorption law ``X + XY = X`` applied
after every step) yields a sum of products; each product is a sufficient
set of primes. The winner is the product with the fewest primes, then the
lowest literal cost (don't care 0, true 1, false 2), then the smallest prime
positions so the choice is deterministic.

Primes are referred to by their position in the list given to the method;
sums and products are frozensets of positions.
"""

from typing import FrozenSet, List, Sequence

from .row import Row
from utils.logger import get_logger


Term = FrozenSet[int]


def _terms_str(terms: Sequence[Term]) -> str:
    return " + ".join("*".join(f"p{i}" for i in sorted(term)) or "1" for term in terms)


def absorb(terms: Sequence[Term]) -> List[Term]:
    """Remove duplicate terms and every term that is a superset of another."""
    kept: List[Term] = []
    for term in sorted(set(terms), key=lambda t: (len(t), sorted(t))):
        if not any(other <= term for other in kept):
            kept.append(term)
    return kept


class PetricksMethod:
    """Selects a minimum cover of ``indices`` from ``primes``.

    Attributes:
        primes: Candidate prime implicants
        indices: Assignment indices that must be covered
    """

    def __init__(self, primes: Sequence[Row], indices: Sequence[int]):
        self.primes = list(primes)
        self.indices = list(indices)
        self.logger = get_logger()

    def product_of_sums(self) -> List[Term]:
        """Build the pruned product of sums, one sum per index.

        Sums that duplicate or absorb another sum are dropped, since
        ``(A + B) * A = A``.

        Raises:
            RuntimeError: Some index is covered by no prime
        """
        sums = []
        for index in self.indices:
            covering = frozenset(
                position for position, prime in enumerate(self.primes) if prime.covers(index)
            )
            if not covering:
                raise RuntimeError(f"Index {index} is not covered by any prime implicant")
            sums.append(covering)

        pruned = absorb(sums)
        rendered = " * ".join("(" + " + ".join(f"p{i}" for i in sorted(s)) + ")" for s in pruned)
        self.logger.petrick_step("product of sums", rendered)
        return pruned

    def sum_of_products(self) -> List[Term]:
        """Multiply out the product of sums with absorption at every step."""
        products: List[Term] = [frozenset()]

        for step, covering in enumerate(self.product_of_sums(), start=1):
            products = absorb([product | {position} for product in products for position in covering])
            self.logger.petrick_step(f"step {step}", _terms_str(products))

        return products

    def cost(self, product: Term) -> int:
        return sum(self.primes[position].literal_cost() for position in product)

    def select(self) -> List[Row]:
        """Return the chosen primes, in prime order."""
        if not self.indices:
            return []

        products = self.sum_of_products()
        best = min(products, key=lambda p: (len(p), self.cost(p), sorted(p)))

        self.logger.petrick_step("selected", _terms_str([best]))
        return [self.primes[position] for position in sorted(best)]
