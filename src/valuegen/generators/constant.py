"""Constant and default-or generators."""

import copy
import logging
from typing import TypeVar

from valuegen.generators.base import Generator

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Constant(Generator[T]):
    """Generator that always returns a copy of one stored value."""

    def __init__(self, value: T):
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        """Replace the stored value; takes effect on the next call."""
        self._value = value

    def try_generate(self) -> T:
        return copy.copy(self._value)

    def __repr__(self) -> str:
        return f"Constant({self._value!r})"


class DefaultOr(Generator[T]):
    """Generator that falls back to a default when the wrapped one fails.

    The wrapped generator is consulted first on every call; the default is
    only used when it reports no value.
    """

    def __init__(self, default: T, generator: Generator[T]):
        """Initialize the generator.

        Args:
            default: Value returned when the wrapped generator fails
            generator: The wrapped generator
        """
        self._default = default
        self._generator = generator

    @property
    def default(self) -> T:
        return self._default

    @property
    def inner(self) -> Generator[T]:
        return self._generator

    def set_default(self, default: T) -> None:
        self._default = default

    def try_generate(self) -> T:
        value = self._generator.try_generate()
        if value is None:
            logger.debug("%r failed, using default %r", self._generator, self._default)
            return copy.copy(self._default)
        return value

    def __repr__(self) -> str:
        return f"DefaultOr({self._default!r}, {self._generator!r})"
