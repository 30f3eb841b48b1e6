# Projective: Products of Projective Spaces for PyTorch (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0

"""Exception types raised by the projective vector kernel.

Every failure is a contract violation by the caller and is raised
immediately; nothing here is retried.
"""


class ProjectiveError(Exception):
    """Base class for all errors raised by :mod:`projective`."""


class InvalidDimsError(ProjectiveError, ValueError):
    """A dims tuple contains negative or non-integral entries."""


class ShapeMismatchError(ProjectiveError, ValueError):
    """A buffer length does not agree with the declared block dimensions."""


class DimensionMismatchError(ProjectiveError, ValueError):
    """Two vectors (or a vector and a factor tuple) have different block dims."""


class UnsupportedNormError(ProjectiveError, ValueError):
    """Only the 2-norm and the infinity-norm are implemented."""

    def __init__(self, p):
        super().__init__(f"p={p} not supported, expected 2 or inf")
        self.p = p


class IndexOutOfRangeError(ProjectiveError, IndexError):
    """Block-addressed access outside the product structure."""


class BlockIndexError(IndexOutOfRangeError):
    """The block index is outside ``[0, N)``."""


class LocalIndexError(IndexOutOfRangeError):
    """The coordinate index is outside ``[0, dims[i]]`` for a valid block."""
