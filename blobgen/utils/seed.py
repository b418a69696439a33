"""Generator construction and seeding helpers.

Blob generation never touches the global torch RNG; callers create a
``torch.Generator`` with :func:`make_generator` and thread it through every
call. :func:`set_seed` exists for test harnesses that also want Python,
NumPy and torch global state pinned.
"""

from __future__ import annotations

import random

import numpy as np
import torch


def make_generator(seed: int, device: str | torch.device = "cpu") -> torch.Generator:
    """Return a fresh ``torch.Generator`` on ``device`` seeded with ``seed``.

    Raises:
        ValueError: If ``seed`` is negative.
    """
    if seed < 0:
        raise ValueError("seed must be non-negative")
    generator = torch.Generator(device=device)
    generator.manual_seed(int(seed))
    return generator


def set_seed(seed: int, deterministic: bool = True) -> None:
    """Seed Python's ``random``, NumPy's legacy RNG and torch's default RNG.

    Args:
        seed: Non-negative integer seed.
        deterministic: Request deterministic torch algorithms where available.

    Raises:
        ValueError: If ``seed`` is negative.
    """
    if seed < 0:
        raise ValueError("seed must be non-negative")

    random.seed(seed)
    np.random.seed(seed)
    torch.manual_seed(seed)
    if torch.cuda.is_available():
        torch.cuda.manual_seed_all(seed)
    if deterministic:
        # Kernels without a deterministic variant only warn.
        torch.use_deterministic_algorithms(True, warn_only=True)


__all__ = ["make_generator", "set_seed"]
