# Projective: Products of Projective Spaces for PyTorch (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0

"""Projective Vector Container Class.

Wraps a flat 1-D tensor together with the affine dimension of each
projective factor, so that per-block algebra can address the buffer
block by block.
"""

from functools import reduce

import torch

from projective.device import as_buffer
from projective.geometry import dimension_indices, hom_dimension_indices
from projective.validation import check_block_index, check_dims, check_shape


class ProjectiveVector:
    """A point in a product of ``N`` projective spaces P(T^{d_1}) x ... x P(T^{d_N}).

    Block i occupies ``dims[i] + 1`` consecutive entries of ``data``:
    ``dims[i]`` affine coordinates followed by the homogenizing coordinate.

    Attributes:
        data (torch.Tensor): The flat homogeneous buffer [sum(dims) + N].
        dims (tuple): Affine dimension of every block.
    """

    __hash__ = None

    def __init__(self, data, dims, config=None):
        """Initializes a ProjectiveVector.

        Args:
            data: Flat homogeneous coordinates. Tensors are used as is (no copy).
            dims: Affine dimension per block.
            config (BufferConfig, optional): Device/dtype for converting ``data``.

        Raises:
            InvalidDimsError: If ``dims`` has negative entries.
            ShapeMismatchError: If ``len(data) != sum(dims) + len(dims)``.
        """
        data = as_buffer(data, config)
        dims = check_dims(dims)
        check_shape(data, dims)
        self.data = data
        self.dims = dims

    @classmethod
    def from_parts(cls, *vectors, config=None):
        """Creates a ProjectiveVector from already homogeneous vectors.

        The vectors are promoted to a common dtype and concatenated; the
        dims are the vector lengths minus one.

        Example:
            >>> ProjectiveVector.from_parts([4, 5, 6], [2, 3], [1, 2]).dims
            (2, 1, 1)
        """
        parts = promote(*vectors, config=config)
        dims = tuple(part.shape[0] - 1 for part in parts)
        return cls(torch.cat(parts), dims)

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    @property
    def num_blocks(self) -> int:
        return len(self.dims)

    @property
    def dtype(self) -> torch.dtype:
        return self.data.dtype

    @property
    def device(self) -> torch.device:
        return self.data.device

    def dimension_indices(self) -> tuple:
        """Slices covering each block in full."""
        return dimension_indices(self.dims)

    def hom_dimension_indices(self) -> tuple:
        """``(affine_slice, hom_position)`` per block."""
        return hom_dimension_indices(self.dims)

    # ------------------------------------------------------------------
    # Indexing
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self.data.shape[0]

    def __getitem__(self, key):
        if isinstance(key, tuple) and len(key) == 2:
            return self.get(*key)
        return self.data[key]

    def __setitem__(self, key, value):
        self.data[key] = value

    def get(self, i: int, j: int, check: bool = True):
        """Returns coordinate ``j`` of block ``i``.

        Args:
            i (int): Block index in ``[0, N)``.
            j (int): Coordinate index in ``[0, dims[i]]``; ``dims[i]`` is
                the homogenizing coordinate.
            check (bool): Raise on out-of-range indices.

        Raises:
            BlockIndexError: Invalid block index.
            LocalIndexError: Invalid coordinate index inside a valid block.
        """
        if check:
            check_block_index(self.dims, i, j)
        k = 0
        for d in self.dims[:i]:
            k += d + 1
        return self.data[k + j]

    # ------------------------------------------------------------------
    # Copies and conversion
    # ------------------------------------------------------------------

    def copy(self) -> "ProjectiveVector":
        """Deep copy of the buffer with the same dims."""
        return ProjectiveVector(self.data.clone(), self.dims)

    def similar(self, dtype: torch.dtype = None) -> "ProjectiveVector":
        """Uninitialised vector of the same shape, optionally of another dtype."""
        return ProjectiveVector(torch.empty_like(self.data, dtype=dtype), self.dims)

    def to(self, dtype: torch.dtype) -> "ProjectiveVector":
        """Elementwise conversion into a fresh buffer."""
        return ProjectiveVector(self.data.to(dtype=dtype, copy=True), self.dims)

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, ProjectiveVector):
            return NotImplemented
        if self.dims != other.dims:
            return False
        return bool((self.data == other.data).all())

    def __str__(self):
        blocks = []
        for r in self.dimension_indices():
            coords = ", ".join(str(x) for x in self.data[r].tolist())
            blocks.append(f"[{coords}]")
        return " × ".join(blocks)

    def __repr__(self):
        dtype = str(self.dtype).replace("torch.", "")
        return f"ProjectiveVector{{{dtype}, {self.num_blocks}}}:\n {self}"


def unwrap(z):
    """The underlying tensor of *z*.

    For a :class:`ProjectiveVector` this is ``z.data``; any other vector is
    returned unchanged. Useful for passing a projective vector to code that
    does not know about the block structure.
    """
    if isinstance(z, ProjectiveVector):
        return z.data
    return z


def promote(*vectors, config=None) -> list:
    """Convert *vectors* to tensors sharing one promoted dtype."""
    parts = [as_buffer(v, config) for v in vectors]
    dtype = reduce(torch.promote_types, (part.dtype for part in parts))
    return [part.to(dtype) for part in parts]
