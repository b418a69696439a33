"""Builders turning a :class:`BlobsConfig` into distributions and datasets."""

from __future__ import annotations

import logging
from typing import Tuple

import torch

from .config import DTYPES, BlobsConfig, DistributionConfig, validate
from blobgen.distributions import DISTRIBUTION_REGISTRY, Distribution
from blobgen.generate.blobs import blob_labels, generate_blobs_with_distribution
from blobgen.utils.seed import make_generator


LOGGER = logging.getLogger(__name__)


def build_distribution(cfg: DistributionConfig) -> Distribution:
    """Instantiate the registered distribution named by ``cfg.name``.

    Raises:
        KeyError: If the name is not registered.
        ValueError: If ``cfg.params`` are rejected by the constructor.
    """
    return DISTRIBUTION_REGISTRY.build(cfg.name, cfg.params)


def build_blobs(
    cfg: BlobsConfig, generator: torch.Generator | None = None
) -> Tuple[torch.Tensor, torch.Tensor]:
    """Generate the dataset described by ``cfg`` and its per-row labels.

    Args:
        cfg: Validated blob configuration.
        generator: Optional caller-owned generator. When omitted a fresh CPU
            generator seeded with ``cfg.seed`` is used.

    Returns:
        ``(data, labels)`` where ``labels[j]`` is the centroid index of row ``j``.
    """
    validate(cfg)
    dtype = DTYPES[cfg.dtype]
    if dtype != torch.float64:
        LOGGER.warning("Centroids are specified in float64; generating in %s", cfg.dtype)
    if generator is None:
        generator = make_generator(cfg.seed)

    centroids = torch.tensor(cfg.centroids, dtype=dtype)
    distribution = build_distribution(cfg.distribution)
    data = generate_blobs_with_distribution(
        cfg.blob_size,
        centroids,
        distribution,
        generator,
        n_features=cfg.n_features,
        dtype=dtype,
    )
    labels = blob_labels(cfg.blob_size, len(cfg.centroids), device=data.device)
    return data, labels


__all__ = ["build_distribution", "build_blobs"]
