"""Noise distributions used to scatter points around centroids."""

from .base import Distribution
from .continuous import Laplace, Normal, StandardNormal, Uniform
from .custom import CallableDistribution
from .registry import DistributionRegistry

# Population is explicit; external code may add entries with
# ``DISTRIBUTION_REGISTRY.register``.
DISTRIBUTION_REGISTRY = DistributionRegistry()
DISTRIBUTION_REGISTRY.register("standard-normal", StandardNormal)
DISTRIBUTION_REGISTRY.register("normal", Normal)
DISTRIBUTION_REGISTRY.register("uniform", Uniform)
DISTRIBUTION_REGISTRY.register("laplace", Laplace)

__all__ = [
    "Distribution",
    "StandardNormal",
    "Normal",
    "Uniform",
    "Laplace",
    "CallableDistribution",
    "DistributionRegistry",
    "DISTRIBUTION_REGISTRY",
]
