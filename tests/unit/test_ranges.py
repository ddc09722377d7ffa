"""
Leaf Range Unit Tests
Tests for mrkl/merkle/ranges.py

Tests:
- split sizes: left == right or left == right + 1, summing to n
- split parts are adjacent and disjoint
- singleton ranges cannot be split
- split_sequence agrees with split_range
"""
import pytest

from mrkl.merkle.ranges import LeafRange, split_point, split_range, split_sequence


class TestLeafRange:
    """Tests for the LeafRange value type."""

    def test_len(self):
        assert len(LeafRange(3, 8)) == 5

    def test_contains(self):
        r = LeafRange(2, 4)
        assert 2 in r
        assert 3 in r
        assert 4 not in r
        assert 1 not in r

    def test_is_leaf(self):
        assert LeafRange(4, 5).is_leaf()
        assert not LeafRange(4, 6).is_leaf()

    def test_hashable_and_equal_by_value(self):
        """Ranges key the hash cache, so equal ranges must hash equal."""
        d = {LeafRange(0, 3): "a"}
        assert d[LeafRange(0, 3)] == "a"

    def test_ordering(self):
        ranges = [LeafRange(3, 5), LeafRange(0, 5), LeafRange(0, 3)]
        assert sorted(ranges) == [LeafRange(0, 3), LeafRange(0, 5), LeafRange(3, 5)]

    def test_overlaps_and_covers(self):
        outer = LeafRange(0, 6)
        inner = LeafRange(2, 4)
        other = LeafRange(6, 8)

        assert outer.overlaps(inner)
        assert outer.covers(inner)
        assert not inner.covers(outer)
        assert not outer.overlaps(other)
        assert LeafRange(0, 3).overlaps(LeafRange(2, 5))

    def test_repr(self):
        assert repr(LeafRange(0, 5)) == "[0, 5)"


class TestSplitRange:
    """Tests for the left-heavy split rule."""

    def test_split_five(self):
        assert split_range(LeafRange(0, 5)) == (LeafRange(0, 3), LeafRange(3, 5))

    def test_split_two(self):
        assert split_range(LeafRange(4, 6)) == (LeafRange(4, 5), LeafRange(5, 6))

    def test_split_three_left_heavy(self):
        left, right = split_range(LeafRange(0, 3))
        assert len(left) == 2
        assert len(right) == 1

    def test_split_offset_range(self):
        assert split_range(LeafRange(10, 17)) == (LeafRange(10, 14), LeafRange(14, 17))

    @pytest.mark.parametrize("n", range(2, 200))
    def test_split_properties(self, n):
        """Lengths sum to n, left is equal or one longer, parts are adjacent."""
        whole = LeafRange(7, 7 + n)
        left, right = split_range(whole)

        assert len(left) + len(right) == n
        assert len(left) - len(right) in (0, 1)
        assert left.start == whole.start
        assert left.end == right.start
        assert right.end == whole.end
        assert not left.overlaps(right)

    def test_split_singleton_raises(self):
        with pytest.raises(ValueError, match="Cannot split"):
            split_range(LeafRange(3, 4))

    def test_split_empty_raises(self):
        with pytest.raises(ValueError):
            split_range(LeafRange(3, 3))

    def test_split_point(self):
        assert split_point(0, 5) == 3
        assert split_point(0, 4) == 2
        assert split_point(5, 6) == 6


class TestSplitSequence:
    """split_sequence must cut exactly where split_range does."""

    @pytest.mark.parametrize("n", [2, 3, 4, 5, 8, 13])
    def test_matches_split_range(self, n):
        items = list(range(n))
        left_items, right_items = split_sequence(items)
        left, right = split_range(LeafRange(0, n))

        assert left_items == items[left.start:left.end]
        assert right_items == items[right.start:right.end]
