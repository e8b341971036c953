"""Random source used by every randomized generator.

Each generator owns its own RandomSource instance so two generators draw
independently and a seeded source replays the same sequence.
"""

import math
import random
from datetime import date, datetime, timedelta
from typing import Any


class RandomSource:
    """Seedable supplier of booleans, range samples and indices."""

    def __init__(self, seed: int | None = None):
        """Initialize the source.

        Args:
            seed: Optional random seed for deterministic sequences
        """
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def seed(self) -> int | None:
        return self._seed

    def reseed(self, seed: int | None) -> None:
        """Reset the internal state (None -> fresh non-deterministic state)."""
        self._seed = seed
        self._rng = random.Random(seed)

    def gen_bool(self, p: float) -> bool:
        """Return True with probability p.

        Args:
            p: Probability of True, within [0, 1]

        Returns:
            The drawn boolean
        """
        if not 0.0 <= p <= 1.0:
            raise ValueError(f"Probability must be within [0, 1], got {p}")
        return self._rng.random() < p

    def gen_range(self, lb: Any, ub: Any) -> Any:
        """Draw a value uniformly from the half-open interval [lb, ub).

        Supports int, float, datetime and date bounds.

        Args:
            lb: Inclusive lower bound
            ub: Exclusive upper bound

        Returns:
            A value x with lb <= x < ub
        """
        if not lb < ub:
            raise ValueError(f"Empty range [{lb!r}, {ub!r})")

        if isinstance(lb, int) and isinstance(ub, int):
            return self._rng.randrange(lb, ub)

        if isinstance(lb, (int, float)) and isinstance(ub, (int, float)):
            if not (math.isfinite(lb) and math.isfinite(ub)):
                raise ValueError(f"Non-finite range [{lb!r}, {ub!r})")
            # Interpolate without ub - lb, which overflows for wide ranges
            r = self._rng.random()
            value = lb * (1.0 - r) + ub * r
            if value >= ub:
                value = math.nextafter(ub, lb)
            elif value < lb:
                value = float(lb)
            return value

        if isinstance(lb, datetime) and isinstance(ub, datetime):
            span = ub - lb
            offset = self._rng.randrange(span // timedelta(microseconds=1))
            return lb + timedelta(microseconds=offset)

        if isinstance(lb, date) and isinstance(ub, date):
            return lb + timedelta(days=self._rng.randrange((ub - lb).days))

        raise TypeError(
            f"Cannot sample uniformly between {type(lb).__name__} and {type(ub).__name__}"
        )

    def gen_index(self, n: int) -> int:
        """Return a uniform index in [0, n)."""
        if n <= 0:
            raise ValueError(f"Cannot draw an index from an empty range (n={n})")
        return self._rng.randrange(n)

    def random(self) -> float:
        return self._rng.random()

    def getstate(self) -> Any:
        """Return internal state (for advanced test assertions)."""
        return self._rng.getstate()

    def setstate(self, state: Any) -> None:
        self._rng.setstate(state)

    def __repr__(self) -> str:
        return f"RandomSource(seed={self._seed!r})"
