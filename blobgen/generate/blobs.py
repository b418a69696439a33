"""Blob datasets: noisy points scattered around a set of centroids.

A dataset is built one centroid at a time. Block ``i`` of the output, rows
``[i * blob_size, (i + 1) * blob_size)``, holds the points of centroid ``i``.
Every value consumes draws from the caller's generator in centroid-ascending,
row-major order, so two identically seeded generators always produce the same
dataset.
"""

from __future__ import annotations

import logging
import operator
from typing import Any

import numpy as np
import torch

from blobgen.core.errors import InvalidShapeError, InvalidSizeError
from blobgen.distributions import Distribution, StandardNormal


LOGGER = logging.getLogger(__name__)

_INT64_MAX = torch.iinfo(torch.int64).max


def _check_count(value: Any, field: str) -> int:
    """Return ``value`` as a non-negative Python int."""

    if isinstance(value, bool):
        raise InvalidSizeError(field, f"{field} must be an integer, got bool")
    try:
        count = operator.index(value)
    except TypeError as exc:
        raise InvalidSizeError(
            field, f"{field} must be an integer, got {type(value).__name__}"
        ) from exc
    if count < 0:
        raise InvalidSizeError(field, f"{field} must be >= 0, got {count}")
    return count


def _check_capacity(blob_size: int, n_centroids: int, n_features: int) -> None:
    rows = blob_size * n_centroids
    if rows > _INT64_MAX:
        raise InvalidSizeError(
            "blob_size",
            f"blob_size * n_centroids = {rows} overflows the int64 row count",
        )
    if rows * n_features > _INT64_MAX:
        raise InvalidSizeError(
            "blob_size",
            f"dataset of {rows} x {n_features} values overflows the int64 element count",
        )


def _as_float_tensor(values: Any, dtype: torch.dtype | None) -> torch.Tensor:
    """Coerce tensors, arrays and nested sequences to a floating tensor."""

    if torch.is_tensor(values):
        t = values.detach()
    else:
        t = torch.as_tensor(np.asarray(values))
    if dtype is not None:
        return t.to(dtype)
    if not t.is_floating_point():
        return t.to(torch.float64)
    return t


def _check_dtype(dtype: torch.dtype | None) -> None:
    if dtype is None:
        return
    if not isinstance(dtype, torch.dtype) or not dtype.is_floating_point:
        raise TypeError(f"dtype must be a floating torch dtype, got {dtype!r}")


def _check_device(generator: torch.Generator, device: torch.device) -> None:
    gen_device = torch.device(generator.device)
    if gen_device.type != device.type:
        raise ValueError(
            f"generator device {gen_device} must match centroid device {device}"
        )
    if gen_device.index is not None and device.index is not None and gen_device.index != device.index:
        raise ValueError(
            f"generator device {gen_device} must match centroid device {device}"
        )


def make_blob(
    blob_size: int,
    centroid: Any,
    distribution: Distribution,
    generator: torch.Generator,
) -> torch.Tensor:
    """Draw ``blob_size`` points around a single ``centroid``.

    Args:
        blob_size: Number of points; ``0`` yields an empty ``(0, n_features)`` blob.
        centroid: 1D vector of length ``n_features >= 1``.
        distribution: Noise added independently to every coordinate.
        generator: Source of all random draws. Advanced in row-major order.

    Returns:
        Tensor of shape ``(blob_size, n_features)`` with the centroid's dtype.

    Raises:
        InvalidShapeError: If ``centroid`` is not a non-empty 1D vector.
        InvalidSizeError: If ``blob_size`` is negative or not an integer.
    """
    size = _check_count(blob_size, "blob_size")
    center = _as_float_tensor(centroid, None)
    if center.ndim != 1 or center.shape[0] < 1:
        raise InvalidShapeError(
            "centroid",
            f"centroid must be a 1D vector with at least one feature, got shape {tuple(center.shape)}",
        )
    _check_capacity(size, 1, center.shape[0])
    noise = distribution.sample(
        (size, center.shape[0]),
        generator=generator,
        dtype=center.dtype,
        device=center.device,
    )
    return noise + center


def generate_blobs_with_distribution(
    blob_size: int,
    centroid_matrix: Any,
    distribution: Distribution,
    generator: torch.Generator,
    *,
    n_features: int | None = None,
    dtype: torch.dtype | None = None,
) -> torch.Tensor:
    """Generate ``blob_size`` points around each row of ``centroid_matrix``.

    Each blob is formed by ``blob_size`` samples of ``distribution`` shifted
    onto its centroid. The distribution is cloned for every centroid, so
    stateful implementations never share a cursor between blobs.

    Args:
        blob_size: Points per centroid.
        centroid_matrix: Array-like of shape ``(n_centroids, n_features)``.
        distribution: Noise distribution.
        generator: Caller-owned generator; advanced by exactly the draws needed
            for ``n_centroids * blob_size * n_features`` values.
        n_features: Optional explicit feature count. It must match the matrix
            columns, and it gives an empty centroid list (``[]``) its width.
        dtype: Floating dtype of the output. Defaults to the dtype of floating
            tensors and NumPy arrays, and to ``torch.float64`` for integer
            input and nested sequences.

    Returns:
        Tensor of shape ``(n_centroids * blob_size, n_features)``.

    Raises:
        InvalidShapeError: Non-2D matrix, zero feature columns or an
            ``n_features`` mismatch.
        InvalidSizeError: Negative ``blob_size`` or a row count beyond int64.
        ValueError: If the generator lives on another device.
        TypeError: If ``dtype`` is not a floating torch dtype.
    """
    if not isinstance(distribution, Distribution):
        raise TypeError(
            f"distribution must be a blobgen Distribution, got {type(distribution).__name__}"
        )
    _check_dtype(dtype)
    size = _check_count(blob_size, "blob_size")
    centroids = _as_float_tensor(centroid_matrix, dtype)
    if n_features is not None:
        n_features = _check_count(n_features, "n_features")
        if centroids.ndim == 1 and centroids.numel() == 0:
            centroids = centroids.reshape(0, n_features)
    if centroids.ndim != 2:
        raise InvalidShapeError(
            "centroid_matrix",
            f"centroid_matrix must be 2D (n_centroids, n_features), got shape {tuple(centroids.shape)}",
        )
    n_centroids, cols = centroids.shape
    if cols == 0:
        raise InvalidShapeError("centroid_matrix", "centroid_matrix must have at least one feature column")
    if n_features is not None and n_features != cols:
        raise InvalidShapeError(
            "n_features",
            f"n_features={n_features} does not match centroid_matrix with {cols} columns",
        )
    _check_capacity(size, n_centroids, cols)
    _check_device(generator, centroids.device)

    blobs = torch.empty(
        (n_centroids * size, cols), dtype=centroids.dtype, device=centroids.device
    )
    for index, centroid in enumerate(centroids):
        blob = make_blob(size, centroid, distribution.clone(), generator)
        blobs[index * size : (index + 1) * size] = blob

    LOGGER.debug(
        "Generated %d blobs of %d points (%d features) with %s",
        n_centroids,
        size,
        cols,
        distribution.name,
    )
    return blobs


def generate_blobs(
    blob_size: int,
    centroid_matrix: Any,
    generator: torch.Generator,
    *,
    n_features: int | None = None,
    dtype: torch.dtype | None = None,
) -> torch.Tensor:
    """Special case of :func:`generate_blobs_with_distribution` with standard normal noise."""
    return generate_blobs_with_distribution(
        blob_size,
        centroid_matrix,
        StandardNormal(),
        generator,
        n_features=n_features,
        dtype=dtype,
    )


def blob_labels(
    blob_size: int,
    n_centroids: int,
    *,
    device: torch.device | str | None = None,
) -> torch.Tensor:
    """Return the centroid index of every row of a generated dataset."""

    size = _check_count(blob_size, "blob_size")
    count = _check_count(n_centroids, "n_centroids")
    _check_capacity(size, count, 1)
    return torch.arange(count, dtype=torch.long, device=device).repeat_interleave(size)


__all__ = [
    "make_blob",
    "generate_blobs_with_distribution",
    "generate_blobs",
    "blob_labels",
]
