# Projective: Products of Projective Spaces for PyTorch (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0

"""Device and dtype configuration for projective buffers.

Centralises how raw vector-likes (lists, numpy arrays, tensors) become
the 1-D tensors that back a :class:`~projective.vector.ProjectiveVector`.
"""

from __future__ import annotations

from dataclasses import dataclass

import torch

from log import get_logger

logger = get_logger(__name__)


def resolve_device(device: str = "auto") -> str:
    """Resolve ``'auto'`` to the best available accelerator.

    Priority: cuda > mps > cpu.
    """
    if device != "auto":
        return device
    if torch.cuda.is_available():
        resolved = "cuda"
    elif hasattr(torch.backends, "mps") and torch.backends.mps.is_available():
        resolved = "mps"
    else:
        resolved = "cpu"
    logger.debug("resolved device 'auto' -> %s", resolved)
    return resolved


@dataclass
class BufferConfig:
    """Where new buffers live and which dtype they get.

    Attributes:
        device: Device string (``cpu``, ``cuda``, ``mps``) or ``auto``.
        dtype: Target dtype. ``None`` keeps the dtype inferred by
            :func:`torch.as_tensor`.
    """

    device: str = "cpu"
    dtype: torch.dtype | None = None

    def __post_init__(self) -> None:
        self.device = resolve_device(self.device)

    def as_buffer(self, values) -> torch.Tensor:
        """Convert *values* to a tensor on the configured device and dtype."""
        return torch.as_tensor(values, dtype=self.dtype, device=self.device)


DEFAULT_CONFIG = BufferConfig()


def as_buffer(values, config: BufferConfig | None = None) -> torch.Tensor:
    """Tensor view of *values*.

    Tensors pass through untouched unless an explicit *config* is given;
    everything else is converted with :data:`DEFAULT_CONFIG`.
    """
    if config is not None:
        return config.as_buffer(values)
    if isinstance(values, torch.Tensor):
        return values
    return DEFAULT_CONFIG.as_buffer(values)
