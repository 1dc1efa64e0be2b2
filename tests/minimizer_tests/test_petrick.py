# tests/minimizer_tests/test_petrick.py
# This file is part of Boole - An RPN Boolean Formula Toolkit
#
# Test suite for Petrick's method

"""Test suite for minimum cover selection."""

import pytest
from minimizer import Bit, PetricksMethod, Row, absorb, prime_implicants


def rows_of(width, indices):
    return [Row.from_index(index, width) for index in indices]


class TestAbsorb:
    """Test cases for the absorption law on terms."""

    def test_supersets_absorbed(self):
        terms = [frozenset({0, 1}), frozenset({0}), frozenset({2, 3}), frozenset({0, 2})]
        assert absorb(terms) == [frozenset({0}), frozenset({2, 3})]

    def test_duplicates_removed(self):
        assert absorb([frozenset({1}), frozenset({1})]) == [frozenset({1})]


class TestPetricksMethod:
    """Test cases for product-of-sums expansion and selection."""

    def setup_method(self):
        self.indices = [0, 1, 3, 4, 6, 7]
        self.primes = prime_implicants(rows_of(3, self.indices))
        self.method = PetricksMethod(self.primes, self.indices)

    def test_product_of_sums_one_sum_per_index(self):
        sums = self.method.product_of_sums()

        assert len(sums) == 6
        assert all(len(s) == 2 for s in sums)

    def test_cyclic_cover_needs_three_primes(self):
        chosen = self.method.select()

        assert len(chosen) == 3
        covered = set()
        for row in chosen:
            covered.update(row.ids)
        assert covered == set(self.indices)

    def test_selection_is_deterministic(self):
        again = PetricksMethod(self.primes, self.indices).select()
        assert again == self.method.select()

    def test_sum_of_products_products_are_minimal(self):
        products = self.method.sum_of_products()

        for product in products:
            assert not any(other < product for other in products)

    def test_cost_breaks_ties(self):
        # Both primes cover index 3; the one with more don't cares is cheaper
        cheap = Row((Bit.DONT_CARE, Bit.TRUE), (1, 3))
        costly = Row((Bit.TRUE, Bit.TRUE), (3,))

        assert PetricksMethod([costly, cheap], [3]).select() == [cheap]

    def test_nothing_to_cover(self):
        assert PetricksMethod(self.primes, []).select() == []

    def test_uncoverable_index(self):
        with pytest.raises(RuntimeError):
            PetricksMethod(rows_of(2, [1]), [2]).product_of_sums()
