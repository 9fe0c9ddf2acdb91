"""Random number helper."""

from __future__ import annotations

import random

_rng = random.Random()


def roll(low: int, high: int) -> int:
    """Return a random integer in ``low..high`` inclusive."""
    if low > high:
        raise ValueError(f"empty range: {low}..{high}")
    return _rng.randint(low, high)