# Projective: Products of Projective Spaces for PyTorch (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0

"""Per-block reductions over one index range of a flat buffer.

Real and complex buffers take separate paths: the complex path works on
squared magnitudes ``re^2 + im^2`` and conjugates the left operand of an
inner product, the real path uses signed values directly.
"""

import torch

from projective.validation import check_norm

_REAL_DTYPES = {
    torch.complex32: torch.float16,
    torch.complex64: torch.float32,
    torch.complex128: torch.float64,
}


def real_dtype(dtype: torch.dtype) -> torch.dtype:
    """Real counterpart of *dtype* (the identity for real dtypes)."""
    return _REAL_DTYPES.get(dtype, dtype)


def abs2(x: torch.Tensor) -> torch.Tensor:
    """Squared magnitude, elementwise. Real dtype for complex input."""
    if x.is_complex():
        return x.real * x.real + x.imag * x.imag
    return x * x


def norm_range(x: torch.Tensor, r, p=2) -> torch.Tensor:
    """The ``p``-norm of ``x[r]``.

    Args:
        x (torch.Tensor): Flat buffer.
        r (slice): Index range of one block (or part of it).
        p: ``2`` or ``math.inf``.

    Returns:
        torch.Tensor: 0-dim tensor of the real dtype of ``x``.
    """
    if x.is_complex():
        return torch.sqrt(norm_range2(x, r, p))
    check_norm(p)
    block = x[r]
    if p == 2:
        return torch.sqrt((block * block).sum())
    # No NaN propagation guarantees beyond plain max.
    if block.numel() == 0:
        return torch.zeros((), dtype=x.dtype, device=x.device)
    return block.abs().max()


def norm_range2(x: torch.Tensor, r, p=2) -> torch.Tensor:
    """Squared ``p``-norm of ``x[r]``.

    For ``p = inf`` this is the largest squared magnitude, which lets
    callers compare magnitudes without taking square roots.
    """
    check_norm(p)
    sq = abs2(x[r])
    if p == 2:
        return sq.sum()
    if sq.numel() == 0:
        return torch.zeros((), dtype=real_dtype(x.dtype), device=x.device)
    return sq.max()


def dot_range(v: torch.Tensor, w: torch.Tensor, r) -> torch.Tensor:
    """Inner product ``sum(conj(v[k]) * w[k])`` over ``r``.

    Accumulates in ``torch.promote_types(v.dtype, w.dtype)``.
    """
    dtype = torch.promote_types(v.dtype, w.dtype)
    a = v[r].to(dtype)
    b = w[r].to(dtype)
    if a.is_complex():
        a = a.conj()
    return (a * b).sum()
