"""Injectable random source for the genetic operators."""

from __future__ import annotations

from typing import Any, Protocol

import numpy as np


class RandomSource(Protocol):
    """The slice of ``numpy.random.Generator`` the operators draw from."""

    def random(self, size: int | None = None) -> Any:
        """Uniform float(s) in [0, 1)."""
        ...

    def integers(
        self,
        low: int,
        high: int | None = None,
        size: int | None = None,
        dtype: Any = np.int64,
        endpoint: bool = False,
    ) -> Any:
        """Uniform integer(s) in [low, high), or [low, high] with ``endpoint``."""
        ...


_rng: RandomSource = np.random.default_rng()


def get_rng() -> RandomSource:
    return _rng


def seed_rng(seed: int | None = None) -> RandomSource:
    """Replace the process default generator with a freshly seeded one."""
    global _rng
    _rng = np.random.default_rng(seed)
    return _rng
