"""Name-to-constructor lookup for noise distributions.

Entries are added explicitly with :meth:`DistributionRegistry.register`;
config files refer to distributions by these names (``"standard-normal"``,
``"uniform"``, ...).
"""

from __future__ import annotations

import re
from typing import Any, Callable, Dict, List, Mapping

from .base import Distribution


DistributionFactory = Callable[..., Distribution]

_NAME = re.compile(r"^[a-z][a-z0-9]*(-[a-z0-9]+)*$")


class DistributionRegistry:
    """Builds :class:`Distribution` instances from a name and keyword params.

    Names are dash-separated lowercase words, e.g. ``"standard-normal"``.
    """

    def __init__(self) -> None:
        self._factories: Dict[str, DistributionFactory] = {}

    def register(
        self, name: str, factory: DistributionFactory, *, replace: bool = False
    ) -> None:
        """Make ``factory`` available under ``name``.

        Raises:
            ValueError: If ``name`` is not a dash-separated lowercase word.
            TypeError: If ``factory`` is not callable.
            KeyError: If ``name`` is taken and ``replace`` is ``False``.
        """
        if not isinstance(name, str) or not _NAME.match(name):
            raise ValueError(
                f"distribution name {name!r} must be dash-separated lowercase words"
            )
        if not callable(factory):
            raise TypeError(f"factory for distribution '{name}' must be callable")
        if name in self._factories and not replace:
            raise KeyError(
                f"distribution '{name}' is already registered; pass replace=True"
            )
        self._factories[name] = factory

    def build(self, name: str, params: Mapping[str, Any] | None = None) -> Distribution:
        """Construct the distribution registered as ``name`` with ``params``.

        Raises:
            KeyError: If ``name`` is unknown; the message lists known names.
            ValueError: If the constructor rejects ``params``.
            TypeError: If the factory does not return a :class:`Distribution`.
        """
        if name not in self._factories:
            raise KeyError(
                f"unknown distribution '{name}'; known: {', '.join(self.names()) or '<none>'}"
            )
        kwargs = dict(params or {})
        try:
            dist = self._factories[name](**kwargs)
        except TypeError as exc:
            raise ValueError(
                f"distribution.params {kwargs!r} are invalid for '{name}': {exc}"
            ) from exc
        if not isinstance(dist, Distribution):
            raise TypeError(
                f"factory for '{name}' returned {type(dist).__name__}, not a Distribution"
            )
        return dist

    def names(self) -> List[str]:
        return sorted(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __len__(self) -> int:
        return len(self._factories)


__all__ = ["DistributionRegistry", "DistributionFactory"]
