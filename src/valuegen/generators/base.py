"""Base classes for Generators.

A generator is anything that can produce a value of type T on demand:
- try_generate() reports "no value available" by returning None
- generate() treats that case as fatal and raises GenerationError

Combinators choose which of the two they forward, so failure either
propagates (Switch) or is absorbed (DefaultOr).
"""

import logging
import math
from abc import ABC, abstractmethod
from typing import Generic, Iterator, TypeVar

from valuegen.errors import GenerationError
from valuegen.random_source import RandomSource

logger = logging.getLogger(__name__)

T = TypeVar("T")


def clamp_probability(prob: float) -> float:
    """Clamp a probability into [0, 1]; NaN becomes 0.0."""
    if math.isnan(prob) or prob < 0.0:
        logger.debug("Probability %s clamped to 0.0", prob)
        return 0.0
    if prob > 1.0:
        logger.debug("Probability %s clamped to 1.0", prob)
        return 1.0
    return prob


class Generator(ABC, Generic[T]):
    """Abstract base class for all value generators."""

    @abstractmethod
    def try_generate(self) -> T | None:
        """Attempt to produce a value.

        A failed attempt must leave the generator usable: a later call may
        succeed once its state changes.

        Returns:
            The generated value, or None if no value is currently available
        """
        pass

    def generate(self) -> T:
        """Produce a value, raising if none is available.

        Returns:
            The generated value

        Raises:
            GenerationError: If try_generate() produced nothing
        """
        value = self.try_generate()
        if value is None:
            logger.error("Generator %r produced no value", self)
            raise GenerationError(self)
        return value

    def stream(self, count: int | None = None) -> Iterator[T]:
        """Stream generated values one at a time.

        Args:
            count: Optional limit on values (None for infinite)

        Yields:
            Generated values
        """
        produced = 0
        while count is None or produced < count:
            yield self.generate()
            produced += 1

    def take(self, count: int) -> list[T]:
        """Generate a list of count values."""
        return list(self.stream(count))


class Range(ABC, Generic[T]):
    """Capability of generators drawing from a bounded interval."""

    @abstractmethod
    def set_range(self, lb: T, ub: T) -> None:
        """Replace both bounds of the interval."""
        pass


class Resource(ABC, Generic[T]):
    """Capability of generators backed by a mutable pool of values."""

    @abstractmethod
    def is_empty(self) -> bool:
        pass

    @abstractmethod
    def add(self, value: T) -> None:
        """Add a value to the pool."""
        pass

    @abstractmethod
    def consume(self, value: T) -> None:
        """Remove the first occurrence of value from the pool, if any."""
        pass

    def remove(self, value: T) -> None:
        self.consume(value)


class RandomGenerator(Generator[T]):
    """Generator that owns its own random source.

    Either a seed or an already constructed source can be supplied; a source
    is never shared implicitly between generators.
    """

    def __init__(self, seed: int | None = None, source: RandomSource | None = None):
        """Initialize the generator.

        Args:
            seed: Optional random seed for deterministic generation
            source: Optional random source to draw from instead of a new one
        """
        if source is not None and seed is not None:
            raise ValueError("Pass either seed or source, not both")
        self._source = source if source is not None else RandomSource(seed)

    @property
    def source(self) -> RandomSource:
        return self._source

    @property
    def seed(self) -> int | None:
        return self._source.seed

    @seed.setter
    def seed(self, value: int | None) -> None:
        self._source.reseed(value)
