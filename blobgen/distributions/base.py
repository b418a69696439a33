"""Sampling interface shared by every noise distribution."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import Sequence

import torch


class Distribution(ABC):
    """Source of real-valued noise drawn from an explicit generator.

    Implementations must consume draws only from ``generator`` and fill the
    result in row-major order. :meth:`clone` returns an independent copy so the
    same distribution can be reused for several blobs without sharing state.
    """

    name: str = "distribution"

    @abstractmethod
    def sample(
        self,
        shape: Sequence[int],
        *,
        generator: torch.Generator,
        dtype: torch.dtype = torch.float64,
        device: torch.device | str | None = None,
    ) -> torch.Tensor:
        """Return a tensor of ``shape`` filled with independent samples."""

    def clone(self) -> "Distribution":
        return copy.deepcopy(self)

    def __repr__(self) -> str:
        params = ", ".join(f"{k}={v!r}" for k, v in sorted(vars(self).items()))
        return f"{type(self).__name__}({params})"


def _resolve_device(
    generator: torch.Generator, device: torch.device | str | None
) -> torch.device:
    """Use the generator's device when none is requested."""

    if device is None:
        return generator.device
    return torch.device(device)


__all__ = ["Distribution"]
