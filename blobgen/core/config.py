"""Typed configuration dataclasses and OmegaConf glue.

A :class:`BlobsConfig` fully describes one generated dataset: centroids, points
per centroid, noise distribution, seed and dtype. Configs are plain
dataclasses; :func:`to_omegaconf` and :func:`from_omegaconf` convert to and
from OmegaConf trees so they can be merged with YAML or CLI overrides.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, List

import torch
from omegaconf import DictConfig, ListConfig, OmegaConf


DTYPES: Dict[str, torch.dtype] = {
    "float64": torch.float64,
    "float32": torch.float32,
    "float16": torch.float16,
    "bfloat16": torch.bfloat16,
}


@dataclass
class DistributionConfig:
    """Registry key and constructor keyword arguments of a distribution."""

    name: str = "standard-normal"
    params: Dict[str, Any] = field(default_factory=dict)


@dataclass
class BlobsConfig:
    """Blob dataset options.

    Note:
        ``n_features`` is optional. When set it must equal the centroid width,
        and it is required to describe an empty centroid list.
    """

    blob_size: int = 100
    centroids: List[List[float]] = field(default_factory=lambda: [[0.0, 0.0]])
    n_features: int | None = None
    seed: int = 0
    dtype: str = "float64"
    distribution: DistributionConfig = field(default_factory=DistributionConfig)


def validate(cfg: BlobsConfig) -> None:
    """Validate a configuration object for logical consistency.

    Raises:
        ValueError: If any constraint is violated. Messages name the offending
            field.
    """
    if isinstance(cfg.blob_size, bool) or not isinstance(cfg.blob_size, int):
        raise ValueError("blob_size must be an integer")
    if cfg.blob_size < 0:
        raise ValueError("blob_size must be >= 0")
    if cfg.seed < 0:
        raise ValueError("seed must be >= 0")
    if cfg.dtype not in DTYPES:
        raise ValueError(f"dtype must be one of {'|'.join(DTYPES)}")

    widths = {len(row) for row in cfg.centroids}
    if len(widths) > 1:
        raise ValueError("centroids must all have the same number of features")
    if 0 in widths:
        raise ValueError("centroids must have at least one feature")
    if cfg.n_features is not None:
        if cfg.n_features <= 0:
            raise ValueError("n_features must be > 0 when set")
        if widths and widths != {cfg.n_features}:
            raise ValueError("n_features must match the width of centroids")
    elif not cfg.centroids:
        raise ValueError("n_features must be set when centroids is empty")

    dist_cfg = cfg.distribution
    if not isinstance(dist_cfg.name, str) or not dist_cfg.name:
        raise ValueError("distribution.name must be a non-empty string")
    if not isinstance(dist_cfg.params, Mapping):
        raise ValueError("distribution.params must be a mapping")


def to_omegaconf(cfg: BlobsConfig) -> DictConfig:
    """Convert a dataclass config to an OmegaConf tree."""
    try:
        return OmegaConf.create(asdict(cfg))
    except Exception as exc:
        raise RuntimeError(
            "OmegaConf.create failed while converting BlobsConfig: "
            f"{exc.__class__.__name__}: {exc}"
        ) from exc


def _to_plain_dict(oc: Any) -> Dict[str, Any]:
    if isinstance(oc, (DictConfig, ListConfig)):
        return OmegaConf.to_container(oc, resolve=True)  # type: ignore[return-value]
    if isinstance(oc, Mapping):
        return dict(oc)
    raise TypeError(
        f"from_omegaconf expects a mapping-like object, got {type(oc).__name__}"
    )


def _reject_unknown(section: str, keys: Any, cls: type) -> None:
    unknown = sorted(set(keys) - {f.name for f in fields(cls)})
    if unknown:
        raise ValueError(f"Unknown {section} keys: {', '.join(map(str, unknown))}")


def from_omegaconf(oc: Any) -> BlobsConfig:
    """Convert an OmegaConf tree or mapping back to a validated :class:`BlobsConfig`.

    Raises:
        ValueError: If a section has the wrong type, contains unknown keys, or
            validation fails.
    """
    d = dict(_to_plain_dict(oc))
    _reject_unknown("config", d, BlobsConfig)
    dist_dict = d.pop("distribution", None)
    if dist_dict is None:
        dist_cfg = DistributionConfig()
    else:
        if not isinstance(dist_dict, Mapping):
            raise ValueError("distribution must be a mapping when provided")
        dist_dict = dict(dist_dict)
        _reject_unknown("distribution", dist_dict, DistributionConfig)
        if dist_dict.get("params") is None:
            dist_dict["params"] = {}
        dist_cfg = DistributionConfig(**dist_dict)

    centroids = d.pop("centroids", None)
    if centroids is not None:
        d["centroids"] = [[float(v) for v in row] for row in centroids]

    cfg = BlobsConfig(distribution=dist_cfg, **d)
    validate(cfg)
    return cfg


__all__ = [
    "DTYPES",
    "DistributionConfig",
    "BlobsConfig",
    "validate",
    "to_omegaconf",
    "from_omegaconf",
]
