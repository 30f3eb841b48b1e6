# Projective: Products of Projective Spaces for PyTorch (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0

"""Projective vectors for PyTorch.

Points in a product of projective spaces stored as one flat homogeneous
buffer, with the per-block algebra used by homotopy continuation and
other polynomial system solvers: norms, inner products, scaling,
normalization, affine charts and the Fubini-Study distance.
"""

__version__ = "0.1.0"

from .errors import (
    ProjectiveError,
    InvalidDimsError,
    ShapeMismatchError,
    DimensionMismatchError,
    UnsupportedNormError,
    IndexOutOfRangeError,
    BlockIndexError,
    LocalIndexError,
)
from .device import BufferConfig, DEFAULT_CONFIG, resolve_device
from .geometry import dimension_indices, hom_dimension_indices
from .vector import ProjectiveVector, unwrap
from .reductions import abs2, norm_range, norm_range2, dot_range
from .ops import (
    norm,
    dot,
    scale_,
    normalize,
    normalize_,
    embed,
    embed_vectors,
    affine_chart,
    affine_chart_,
    norm_affine_chart,
    fubini_study,
)

__all__ = [
    "__version__",
    # container
    "ProjectiveVector",
    "unwrap",
    # geometry
    "dimension_indices",
    "hom_dimension_indices",
    # reductions
    "abs2",
    "norm_range",
    "norm_range2",
    "dot_range",
    # operations
    "norm",
    "dot",
    "scale_",
    "normalize",
    "normalize_",
    "embed",
    "embed_vectors",
    "affine_chart",
    "affine_chart_",
    "norm_affine_chart",
    "fubini_study",
    # configuration
    "BufferConfig",
    "DEFAULT_CONFIG",
    "resolve_device",
    # errors
    "ProjectiveError",
    "InvalidDimsError",
    "ShapeMismatchError",
    "DimensionMismatchError",
    "UnsupportedNormError",
    "IndexOutOfRangeError",
    "BlockIndexError",
    "LocalIndexError",
]
