"""Seeded pseudo-random number source used by the wiggle and scatter
operations.

Every operation that needs randomness takes an explicit ``seed``.  When
the caller passes ``None`` a seed is drawn from the process-wide seed
source, which makes the result non-reproducible; pass a seed whenever
the output has to be stable (tests always should).
"""

from __future__ import annotations

import random
from typing import Callable, Optional

_seed_source = random.Random()


def set_seed_source(source: random.Random) -> None:
    """Replace the process-wide source used to draw missing seeds."""

    global _seed_source
    _seed_source = source


def resolve_seed(seed: Optional[float] = None) -> float:
    """Return ``seed`` unchanged, or draw one if it is ``None``."""

    if seed is None:
        return _seed_source.random()
    return seed


def generator(seed: Optional[float] = None) -> Callable[..., float]:
    """Return ``rand(lo=0, hi=1)`` drawing uniformly from ``[lo, hi)``.

    Two generators built from the same seed produce the same sequence.
    """

    rng = random.Random(resolve_seed(seed))

    def rand(lo: float = 0.0, hi: float = 1.0) -> float:
        return lo + rng.random() * (hi - lo)

    return rand
