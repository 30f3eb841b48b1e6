# Tests for index geometry in projective/geometry.py

import pytest
from projective.errors import InvalidDimsError
from projective.geometry import dimension_indices, hom_dimension_indices
from projective.vector import ProjectiveVector


class TestDimensionIndices:
    def test_three_blocks(self):
        assert dimension_indices((2, 1, 1)) == (slice(0, 3), slice(3, 5), slice(5, 7))

    def test_single_block_is_whole_buffer(self):
        assert dimension_indices((4,)) == (slice(0, 5),)

    def test_zero_dimensional_block(self):
        assert dimension_indices((0, 2)) == (slice(0, 1), slice(1, 4))

    def test_ranges_are_contiguous(self):
        dims = (3, 0, 5, 2)
        ranges = dimension_indices(dims)
        assert ranges[0].start == 0
        for a, b in zip(ranges, ranges[1:]):
            assert a.stop == b.start
        assert ranges[-1].stop == sum(dims) + len(dims)

    def test_accepts_vector(self):
        v = ProjectiveVector.from_parts([4, 5, 6], [2, 3], [1, 2])
        assert dimension_indices(v) == (slice(0, 3), slice(3, 5), slice(5, 7))

    def test_negative_dims_rejected(self):
        with pytest.raises(InvalidDimsError):
            dimension_indices((2, -1))


class TestHomDimensionIndices:
    def test_three_blocks(self):
        assert hom_dimension_indices((2, 1, 1)) == (
            (slice(0, 2), 2),
            (slice(3, 4), 4),
            (slice(5, 6), 6),
        )

    def test_single_block_matches_general_form(self):
        # The single block fast path splits off the homogenizing coordinate too.
        assert hom_dimension_indices((3,)) == ((slice(0, 3), 3),)

    def test_consistent_with_full_ranges(self):
        dims = (1, 4, 0, 2)
        for full, (aff, h) in zip(dimension_indices(dims), hom_dimension_indices(dims)):
            assert aff.start == full.start
            assert aff.stop == h
            assert h == full.stop - 1

    def test_negative_dims_rejected(self):
        with pytest.raises(InvalidDimsError):
            hom_dimension_indices((-3,))
