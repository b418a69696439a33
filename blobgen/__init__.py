"""blobgen: synthetic blob datasets for exercising clustering algorithms.

Points are scattered around caller-supplied centroids with noise from a
pluggable distribution. All randomness comes from a ``torch.Generator`` passed
explicitly by the caller; no module touches global RNG state at import time.
"""

from .core.errors import InvalidShapeError, InvalidSizeError
from .distributions import (
    DISTRIBUTION_REGISTRY,
    CallableDistribution,
    Distribution,
    Laplace,
    Normal,
    StandardNormal,
    Uniform,
)
from .generate import (
    blob_labels,
    generate_blobs,
    generate_blobs_with_distribution,
    make_blob,
)
from .utils.seed import make_generator

__all__ = [
    "InvalidShapeError",
    "InvalidSizeError",
    "DISTRIBUTION_REGISTRY",
    "CallableDistribution",
    "Distribution",
    "Laplace",
    "Normal",
    "StandardNormal",
    "Uniform",
    "blob_labels",
    "generate_blobs",
    "generate_blobs_with_distribution",
    "make_blob",
    "make_generator",
]
