# tests/minimizer_tests/test_row.py
# This file is part of Boole - An RPN Boolean Formula Toolkit
#
# Test suite for Quine-McCluskey rows

"""Test suite for implicant rows: construction, masks, merging and cost."""

import pytest
from minimizer import Bit, Row


class TestRow:
    """Test cases for Row."""

    @pytest.mark.parametrize(
        "index, width, text",
        [(0, 1, "0"), (1, 1, "1"), (2, 3, "010"), (5, 3, "101"), (6, 3, "110"), (0, 0, "")],
    )
    def test_from_index_msb_first(self, index, width, text):
        row = Row.from_index(index, width)

        assert str(row) == text
        assert row.ids == (index,)

    def test_masks(self):
        row = Row((Bit.TRUE, Bit.DONT_CARE, Bit.FALSE), (4, 6))

        assert row.care_mask() == 0b101
        assert row.true_mask() == 0b100

    def test_can_merge_one_bit_difference(self):
        assert Row.from_index(2, 3).can_merge(Row.from_index(6, 3))
        assert not Row.from_index(1, 3).can_merge(Row.from_index(2, 3))
        assert not Row.from_index(2, 3).can_merge(Row.from_index(2, 3))

    def test_cannot_merge_different_care_masks(self):
        left = Row((Bit.DONT_CARE, Bit.TRUE), (1, 3))
        right = Row((Bit.TRUE, Bit.DONT_CARE), (2, 3))

        assert not left.can_merge(right)

    def test_merge(self):
        merged = Row.from_index(6, 3).merge(Row.from_index(2, 3))

        assert str(merged) == "-10"
        assert merged.ids == (2, 6)

    def test_second_level_merge(self):
        first = Row.from_index(0, 3).merge(Row.from_index(2, 3))
        second = Row.from_index(4, 3).merge(Row.from_index(6, 3))

        assert first.can_merge(second)
        merged = first.merge(second)
        assert str(merged) == "--0"
        assert merged.ids == (0, 2, 4, 6)

    def test_covers(self):
        row = Row((Bit.DONT_CARE, Bit.TRUE), (1, 3))

        assert row.covers(3)
        assert not row.covers(2)

    def test_literal_cost_and_count(self):
        row = Row((Bit.TRUE, Bit.DONT_CARE, Bit.FALSE), (4, 6))

        assert row.literal_cost() == 3
        assert row.literal_count() == 2
        assert Bit.DONT_CARE.cost == 0
