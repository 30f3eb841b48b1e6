# Projective: Products of Projective Spaces for PyTorch (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0

"""Index geometry of a product of projective spaces.

A vector in P^{d_1} x ... x P^{d_N} is stored as one flat buffer where
block i holds ``d_i`` affine coordinates followed by one homogenizing
coordinate. These helpers translate a dims tuple into slices of that
buffer. Results are memoized per dims tuple.
"""

from functools import lru_cache

from projective.validation import check_dims


def _as_dims(dims) -> tuple:
    # Accept a ProjectiveVector as well as a plain tuple.
    return tuple(getattr(dims, "dims", dims))


def dimension_indices(dims) -> tuple:
    """Slices covering each block in full.

    Args:
        dims: Block dims tuple, or a ``ProjectiveVector``.

    Returns:
        tuple: ``N`` slices, block i spanning ``dims[i] + 1`` positions.

    Example:
        >>> dimension_indices((2, 1, 1))
        (slice(0, 3, None), slice(3, 5, None), slice(5, 7, None))
    """
    return _dimension_indices(_as_dims(dims))


def hom_dimension_indices(dims) -> tuple:
    """Per block, the affine slice and the position of the homogenizing coordinate.

    Example:
        >>> hom_dimension_indices((2, 1, 1))
        ((slice(0, 2, None), 2), (slice(3, 4, None), 4), (slice(5, 6, None), 6))
    """
    return _hom_dimension_indices(_as_dims(dims))


@lru_cache(maxsize=None)
def _dimension_indices(dims: tuple) -> tuple:
    dims = check_dims(dims)
    if len(dims) == 1:
        return (slice(0, dims[0] + 1),)
    ranges = []
    k = 0
    for d in dims:
        ranges.append(slice(k, k + d + 1))
        k += d + 1
    return tuple(ranges)


@lru_cache(maxsize=None)
def _hom_dimension_indices(dims: tuple) -> tuple:
    dims = check_dims(dims)
    if len(dims) == 1:
        return ((slice(0, dims[0]), dims[0]),)
    ranges = []
    k = 0
    for d in dims:
        ranges.append((slice(k, k + d), k + d))
        k += d + 1
    return tuple(ranges)
