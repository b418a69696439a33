"""Configuration, factories and error types for blobgen."""

from .errors import InvalidShapeError, InvalidSizeError

__all__ = [
    "InvalidShapeError",
    "InvalidSizeError",
]
