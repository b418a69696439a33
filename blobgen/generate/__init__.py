"""Blob dataset generators."""

from .blobs import (
    blob_labels,
    generate_blobs,
    generate_blobs_with_distribution,
    make_blob,
)

__all__ = [
    "blob_labels",
    "generate_blobs",
    "generate_blobs_with_distribution",
    "make_blob",
]
