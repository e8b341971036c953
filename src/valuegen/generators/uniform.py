"""Uniform generators: half-open ranges and value pools."""

import copy
import logging
import math
from typing import Any, Iterable, TypeVar

from valuegen.generators.base import RandomGenerator, Range, Resource
from valuegen.random_source import RandomSource

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _is_finite(value: Any) -> bool:
    return not isinstance(value, float) or math.isfinite(value)


class UniformRange(RandomGenerator[T], Range[T]):
    """Generator drawing uniformly from [lb, ub).

    The lower bound is inclusive and the upper bound exclusive. Equal or
    inverted bounds are not an error: generation simply reports no value
    until the range is fixed with set_range(). The same holds for infinite
    or NaN float bounds.
    """

    def __init__(
        self,
        lb: T,
        ub: T,
        seed: int | None = None,
        source: RandomSource | None = None,
    ):
        super().__init__(seed=seed, source=source)
        self._lb = lb
        self._ub = ub

    @property
    def bounds(self) -> tuple[T, T]:
        return self._lb, self._ub

    def set_range(self, lb: T, ub: T) -> None:
        self._lb, self._ub = lb, ub

    def try_generate(self) -> T | None:
        if not self._lb < self._ub:
            logger.debug("Degenerate range [%r, %r)", self._lb, self._ub)
            return None
        if not (_is_finite(self._lb) and _is_finite(self._ub)):
            logger.debug("Non-finite range [%r, %r)", self._lb, self._ub)
            return None
        return self._source.gen_range(self._lb, self._ub)

    def __repr__(self) -> str:
        return f"UniformRange({self._lb!r}, {self._ub!r})"


class UniformCollection(RandomGenerator[T], Resource[T]):
    """Generator sampling uniformly, with replacement, from a pool of values.

    The pool keeps duplicates and can be grown with add() or shrunk with
    consume(). Generation never modifies the pool.
    """

    def __init__(
        self,
        values: Iterable[T] = (),
        seed: int | None = None,
        source: RandomSource | None = None,
    ):
        """Initialize the generator.

        Args:
            values: Initial pool contents
            seed: Optional random seed for deterministic generation
            source: Optional random source to draw from
        """
        super().__init__(seed=seed, source=source)
        self._values: list[T] = list(values)

    @property
    def values(self) -> list[T]:
        """Snapshot of the pool."""
        return list(self._values)

    def is_empty(self) -> bool:
        return not self._values

    def add(self, value: T) -> None:
        self._values.append(value)

    def extend(self, values: Iterable[T]) -> None:
        """Add several values to the pool."""
        self._values.extend(values)

    def consume(self, value: T) -> None:
        """Remove the first element equal to value.

        Missing values are ignored.
        """
        try:
            self._values.remove(value)
        except ValueError:
            logger.debug("Value %r not in pool, nothing consumed", value)

    def try_generate(self) -> T | None:
        if not self._values:
            logger.debug("Pool is empty")
            return None
        index = self._source.gen_index(len(self._values))
        return copy.copy(self._values[index])

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, value: Any) -> bool:
        return value in self._values

    def __repr__(self) -> str:
        return f"UniformCollection({self._values!r})"


UniformResource = UniformCollection
