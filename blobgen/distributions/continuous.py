"""Closed-form continuous noise distributions."""

from __future__ import annotations

from typing import Sequence

import torch

from .base import Distribution, _resolve_device


class StandardNormal(Distribution):
    """Normal noise with mean 0 and variance 1."""

    name = "standard-normal"

    def sample(
        self,
        shape: Sequence[int],
        *,
        generator: torch.Generator,
        dtype: torch.dtype = torch.float64,
        device: torch.device | str | None = None,
    ) -> torch.Tensor:
        return torch.randn(
            tuple(shape),
            generator=generator,
            dtype=dtype,
            device=_resolve_device(generator, device),
        )


class Normal(Distribution):
    """Normal noise with configurable ``mean`` and standard deviation ``std``."""

    name = "normal"

    def __init__(self, mean: float = 0.0, std: float = 1.0) -> None:
        if std <= 0:
            raise ValueError("std must be > 0")
        self.mean = float(mean)
        self.std = float(std)

    def sample(
        self,
        shape: Sequence[int],
        *,
        generator: torch.Generator,
        dtype: torch.dtype = torch.float64,
        device: torch.device | str | None = None,
    ) -> torch.Tensor:
        z = torch.randn(
            tuple(shape),
            generator=generator,
            dtype=dtype,
            device=_resolve_device(generator, device),
        )
        return z * self.std + self.mean


class Uniform(Distribution):
    """Uniform noise on the half-open interval ``[low, high)``."""

    name = "uniform"

    def __init__(self, low: float = -1.0, high: float = 1.0) -> None:
        if not low < high:
            raise ValueError("low must be < high")
        self.low = float(low)
        self.high = float(high)

    def sample(
        self,
        shape: Sequence[int],
        *,
        generator: torch.Generator,
        dtype: torch.dtype = torch.float64,
        device: torch.device | str | None = None,
    ) -> torch.Tensor:
        u = torch.rand(
            tuple(shape),
            generator=generator,
            dtype=dtype,
            device=_resolve_device(generator, device),
        )
        return u * (self.high - self.low) + self.low


class Laplace(Distribution):
    """Laplace noise centered at ``loc`` with diversity ``scale``.

    Samples use the inverse CDF of one uniform draw per value, which keeps the
    one-draw-per-entry ordering of the other distributions.
    """

    name = "laplace"

    def __init__(self, loc: float = 0.0, scale: float = 1.0) -> None:
        if scale <= 0:
            raise ValueError("scale must be > 0")
        self.loc = float(loc)
        self.scale = float(scale)

    def sample(
        self,
        shape: Sequence[int],
        *,
        generator: torch.Generator,
        dtype: torch.dtype = torch.float64,
        device: torch.device | str | None = None,
    ) -> torch.Tensor:
        u = torch.rand(
            tuple(shape),
            generator=generator,
            dtype=dtype,
            device=_resolve_device(generator, device),
        )
        # Map to (-0.5, 0.5) and keep log1p away from -1.
        eps = torch.finfo(dtype).eps
        centered = (u - 0.5).clamp(min=-0.5 + eps, max=0.5 - eps)
        return self.loc - self.scale * centered.sign() * torch.log1p(-2.0 * centered.abs())


__all__ = ["StandardNormal", "Normal", "Uniform", "Laplace"]
