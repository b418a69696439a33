"""Adapter turning a plain sampling function into a :class:`Distribution`."""

from __future__ import annotations

from typing import Callable, Sequence

import torch

from blobgen.core.errors import InvalidShapeError

from .base import Distribution, _resolve_device


SampleFn = Callable[..., torch.Tensor]


class CallableDistribution(Distribution):
    """Wrap ``fn(shape, generator, dtype, device) -> Tensor`` as a distribution.

    ``fn`` must draw exclusively from the generator it is given. Its output is
    checked against the requested shape and cast to ``dtype``. Clones deep-copy
    ``fn``: plain functions are shared, callable objects get their own state.
    """

    name = "custom"

    def __init__(self, fn: SampleFn, *, name: str | None = None) -> None:
        if not callable(fn):
            raise TypeError("fn must be callable")
        self.fn = fn
        if name is not None:
            self.name = name

    def sample(
        self,
        shape: Sequence[int],
        *,
        generator: torch.Generator,
        dtype: torch.dtype = torch.float64,
        device: torch.device | str | None = None,
    ) -> torch.Tensor:
        shape = tuple(shape)
        target = _resolve_device(generator, device)
        out = self.fn(shape, generator, dtype, target)
        if not torch.is_tensor(out):
            raise TypeError(
                f"custom distribution '{self.name}' must return a torch.Tensor, "
                f"got {type(out).__name__}"
            )
        if tuple(out.shape) != shape:
            raise InvalidShapeError(
                "sample",
                f"custom distribution '{self.name}' returned shape {tuple(out.shape)}, "
                f"expected {shape}",
            )
        return out.to(dtype=dtype, device=target)


__all__ = ["CallableDistribution", "SampleFn"]
