"""Precondition errors raised before any dataset is allocated."""

from __future__ import annotations


class InvalidShapeError(ValueError):
    """Raised when centroid or sample shapes are inconsistent."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class InvalidSizeError(ValueError):
    """Raised when a requested size is negative or overflows the row count."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


__all__ = ["InvalidShapeError", "InvalidSizeError"]
