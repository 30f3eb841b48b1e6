# Projective: Products of Projective Spaces for PyTorch (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0

"""Vector-level operations on projective vectors.

Every operation works block by block and returns one value per block as
a tuple of 0-dim tensors, in block order. Functions ending in ``_``
mutate their first argument in place, following the PyTorch convention.
"""

import torch

from projective.device import as_buffer
from projective.errors import DimensionMismatchError, ShapeMismatchError
from projective.geometry import hom_dimension_indices
from projective.reductions import abs2, dot_range, norm_range, norm_range2, real_dtype
from projective.validation import check_dims, check_norm, check_same_dims
from projective.vector import ProjectiveVector, promote


def _is_inexact(dtype: torch.dtype) -> bool:
    return dtype.is_floating_point or dtype.is_complex


def _inexact_copy(z: ProjectiveVector) -> ProjectiveVector:
    # Integer buffers cannot hold normalized coordinates.
    if _is_inexact(z.dtype):
        return z.copy()
    return z.to(torch.get_default_dtype())


def norm(z: ProjectiveVector, p=2) -> tuple:
    """The ``p``-norm of every block, homogenizing coordinate included.

    Args:
        z (ProjectiveVector): Input vector.
        p: ``2`` or ``math.inf``.

    Returns:
        tuple: ``N`` real 0-dim tensors.

    Example:
        >>> norm(embed([1., 2., 3., 4., 5.], (2, 3)))
        (tensor(2.4495), tensor(7.1414))
    """
    x = z.data
    if z.num_blocks == 1:
        return (norm_range(x, slice(None), p),)
    return tuple(norm_range(x, r, p) for r in z.dimension_indices())


def dot(v: ProjectiveVector, w: ProjectiveVector, check: bool = True) -> tuple:
    """Block-wise inner product ``<v_i, w_i>``, conjugate-linear in ``v``.

    Args:
        v (ProjectiveVector): Left operand.
        w (ProjectiveVector): Right operand.
        check (bool): Verify that ``v.dims == w.dims``.

    Raises:
        DimensionMismatchError: If the block dims differ and ``check`` is set.
    """
    if check:
        check_same_dims(v, w)
    if v.num_blocks == 1:
        return (dot_range(v.data, w.data, slice(None)),)
    return tuple(dot_range(v.data, w.data, r) for r in v.dimension_indices())


def scale_(z: ProjectiveVector, lam) -> ProjectiveVector:
    """Multiplies block i of ``z`` by ``lam[i]`` in place.

    Args:
        z (ProjectiveVector): Vector to scale.
        lam: One factor per block, or a single scalar applied to every block.

    Returns:
        ProjectiveVector: ``z`` itself.
    """
    if isinstance(lam, torch.Tensor) and lam.ndim == 0:
        z.data.mul_(lam)
        return z
    if not isinstance(lam, (tuple, list, torch.Tensor)):
        z.data.mul_(lam)
        return z
    if len(lam) != z.num_blocks:
        raise DimensionMismatchError(
            f"Expected {z.num_blocks} scaling factors, got {len(lam)}"
        )
    if z.num_blocks == 1:
        z.data.mul_(lam[0])
        return z
    for r, lam_i in zip(z.dimension_indices(), lam):
        z.data[r].mul_(lam_i)
    return z


def normalize_(z: ProjectiveVector, p=2) -> ProjectiveVector:
    """Scales every block of ``z`` to unit ``p``-norm in place.

    A block of norm zero is multiplied by ``1/0`` and ends up holding
    infinities or NaNs.

    Raises:
        TypeError: For integer buffers; use :func:`normalize` instead.
    """
    if not _is_inexact(z.dtype):
        raise TypeError(
            f"cannot normalize a {z.dtype} buffer in place, use normalize()"
        )
    return scale_(z, tuple(torch.reciprocal(n) for n in norm(z, p)))


def normalize(z: ProjectiveVector, p=2) -> ProjectiveVector:
    """Normalized copy of ``z``. Integer buffers become floating point."""
    return normalize_(_inexact_copy(z), p)


def embed(x, dims=None, normalize=False, config=None) -> ProjectiveVector:
    """Embeds an affine vector by the map x_i -> [x_i; 1] for every block.

    Args:
        x: Affine coordinates, ``sum(dims)`` entries.
        dims: Affine dimension per block. ``None`` means a single block.
        normalize (bool): Normalize every block (2-norm) afterwards.
        config (BufferConfig, optional): Device/dtype for converting ``x``.

    Raises:
        ShapeMismatchError: If ``sum(dims) != len(x)``.

    Example:
        >>> embed([2.0, 3, 4, 5, 6, 7], (2, 3, 1))
        ProjectiveVector{float32, 3}:
         [2.0, 3.0, 1.0] × [4.0, 5.0, 6.0, 1.0] × [7.0, 1.0]
    """
    x = as_buffer(x, config)
    if x.ndim != 1:
        raise ShapeMismatchError(f"Cannot embed a tensor of shape {tuple(x.shape)}")
    n = x.shape[0]
    dims = (n,) if dims is None else check_dims(dims)
    if sum(dims) != n:
        raise ShapeMismatchError(
            f"Cannot embed x since dims {dims} are invalid for a vector of length {n}"
        )

    data = x.new_empty(n + len(dims))
    j = 0
    for r, h in hom_dimension_indices(dims):
        d = r.stop - r.start
        data[r] = x[j:j + d]
        data[h] = 1
        j += d

    v = ProjectiveVector(data, dims)
    if normalize:
        v = normalize_(v if _is_inexact(v.dtype) else _inexact_copy(v))
    return v


def embed_vectors(*vectors, normalize=False, config=None) -> ProjectiveVector:
    """Embeds several affine vectors, one block each.

    Example:
        >>> embed_vectors([2, 3], [4, 5, 6])
        ProjectiveVector{int64, 2}:
         [2, 3, 1] × [4, 5, 6, 1]
    """
    parts = promote(*vectors, config=config)
    dims = tuple(part.shape[0] for part in parts)
    return embed(torch.cat(parts), dims, normalize=normalize)


def affine_chart(z: ProjectiveVector) -> torch.Tensor:
    """Affine coordinates of ``z``, the inverse of :func:`embed`.

    Integer buffers produce a tensor of the default floating dtype.
    """
    dtype = z.dtype if _is_inexact(z.dtype) else torch.get_default_dtype()
    out = torch.empty(sum(z.dims), dtype=dtype, device=z.device)
    return affine_chart_(out, z)


def affine_chart_(out: torch.Tensor, z: ProjectiveVector) -> torch.Tensor:
    """In-place variant of :func:`affine_chart` writing into ``out``.

    Raises:
        ShapeMismatchError: If ``out`` does not have ``sum(z.dims)`` entries.
    """
    n = sum(z.dims)
    if out.ndim != 1 or out.shape[0] != n:
        raise ShapeMismatchError(
            f"out: expected {n} entries for dims {z.dims}, got shape {tuple(out.shape)}"
        )
    x = z.data
    if z.num_blocks == 1:
        out.copy_(x[:n] * torch.reciprocal(x[n]))
        return out
    k = 0
    for r, h in z.hom_dimension_indices():
        d = r.stop - r.start
        out[k:k + d] = x[r] * torch.reciprocal(x[h])
        k += d
    return out


def norm_affine_chart(z: ProjectiveVector, p=2) -> torch.Tensor:
    """The ``p``-norm of :func:`affine_chart` of ``z`` without building it.

    Uses ``||h^-1 x|| = |h|^-1 ||x||`` per block.

    Returns:
        torch.Tensor: Real 0-dim tensor.
    """
    check_norm(p)
    x = z.data
    acc = torch.zeros((), dtype=real_dtype(x.dtype), device=x.device)
    if p == 2:
        for r, h in z.hom_dimension_indices():
            acc = acc + norm_range2(x, r, p) / abs2(x[h])
        return torch.sqrt(acc)
    if x.is_complex():
        for r, h in z.hom_dimension_indices():
            acc = torch.maximum(acc, norm_range2(x, r, p) / abs2(x[h]))
        return torch.sqrt(acc)
    for r, h in z.hom_dimension_indices():
        acc = torch.maximum(acc, norm_range(x, r, p) / x[h].abs())
    return acc


def fubini_study(v: ProjectiveVector, w: ProjectiveVector, check: bool = True) -> tuple:
    """Fubini-Study distance ``arccos(|<v_i, w_i>| / (||v_i|| ||w_i||))`` per block.

    The ratio under the square root is clipped at 1, so every component
    lies in ``[0, pi/2]``.

    Raises:
        DimensionMismatchError: If the block dims differ and ``check`` is set.
    """
    if check:
        check_same_dims(v, w)
    out = []
    for r in v.dimension_indices():
        ratio = abs2(dot_range(v.data, w.data, r)) / (
            norm_range2(v.data, r, 2) * norm_range2(w.data, r, 2)
        )
        out.append(torch.acos(torch.sqrt(ratio.clamp(max=1))))
    return tuple(out)
