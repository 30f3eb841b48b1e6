# Projective: Products of Projective Spaces for PyTorch (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0

"""Lightweight contract checks for projective vectors.

The length invariant of a container is always enforced. The optional
checks (block-addressed bounds, agreement of block dims between two
operands) can be switched off globally with ``VALIDATE = False`` or per
call with ``check=False``.
"""

import math

import torch

from projective.errors import (
    BlockIndexError,
    DimensionMismatchError,
    InvalidDimsError,
    LocalIndexError,
    ShapeMismatchError,
    UnsupportedNormError,
)

VALIDATE = True


def check_dims(dims) -> tuple:
    """Return *dims* as a tuple of ints, raising on negative entries."""
    out = []
    for d in dims:
        if isinstance(d, bool) or int(d) != d:
            raise InvalidDimsError(f"dims must be integers, got {tuple(dims)}")
        if d < 0:
            raise InvalidDimsError(f"dims must be non-negative, got {tuple(dims)}")
        out.append(int(d))
    return tuple(out)


def check_shape(data: torch.Tensor, dims: tuple, name: str = "data") -> None:
    """Raise unless *data* is 1-D with ``len(data) == sum(dims) + len(dims)``."""
    if data.ndim != 1:
        raise ShapeMismatchError(
            f"{name}: expected a 1-D buffer, got shape {tuple(data.shape)}"
        )
    expected = sum(dims) + len(dims)
    if data.shape[0] != expected:
        raise ShapeMismatchError(
            f"{name}: length {data.shape[0]} does not match dims {dims} "
            f"(expected {expected})"
        )


def check_block_index(dims: tuple, i: int, j: int) -> None:
    """Raise if ``(i, j)`` does not address a coordinate of the product."""
    if not VALIDATE:
        return
    n = len(dims)
    if i < 0 or i >= n:
        raise BlockIndexError(
            f"Attempt to access product of {n} projective spaces at index {i}"
        )
    d = dims[i]
    if j < 0 or j > d:
        raise LocalIndexError(
            f"Attempt to access {d}-dimensional projective space at index {j}"
        )


def check_same_dims(v, w) -> None:
    """Raise if the block dims of *v* and *w* differ."""
    if not VALIDATE:
        return
    if v.dims != w.dims:
        raise DimensionMismatchError(
            f"Dimensions of the vector spaces don't agree: {v.dims} vs {w.dims}"
        )


def check_norm(p) -> None:
    """Raise unless *p* is 2 or infinity."""
    if p != 2 and p != math.inf:
        raise UnsupportedNormError(p)
