"""Probabilistic switch between two generators."""

from typing import TypeVar

from valuegen.generators.base import Generator, RandomGenerator, clamp_probability
from valuegen.generators.constant import Constant
from valuegen.random_source import RandomSource

T = TypeVar("T")


class Switch(RandomGenerator[T]):
    """Generator that picks one of two generators on each call.

    The first generator is selected with probability prob, the second
    otherwise. Only the selected generator is consulted, so its failure is
    the switch's failure.
    """

    def __init__(
        self,
        gen1: Generator[T],
        gen2: Generator[T],
        prob: float = 0.5,
        seed: int | None = None,
        source: RandomSource | None = None,
    ):
        """Initialize the switch.

        Args:
            gen1: Generator selected with probability prob
            gen2: Generator selected otherwise
            prob: Probability of selecting gen1, clamped into [0, 1]
            seed: Optional random seed for deterministic selection
            source: Optional random source to draw from
        """
        super().__init__(seed=seed, source=source)
        self._gen1 = gen1
        self._gen2 = gen2
        self._prob = clamp_probability(prob)

    @property
    def prob(self) -> float:
        return self._prob

    @property
    def gen1(self) -> Generator[T]:
        return self._gen1

    @property
    def gen2(self) -> Generator[T]:
        return self._gen2

    def set_g1_prob(self, prob: float) -> None:
        """Set the probability of selecting the first generator."""
        self._prob = clamp_probability(prob)

    def _select(self) -> Generator[T]:
        if self._source.gen_bool(self._prob):
            return self._gen1
        return self._gen2

    def try_generate(self) -> T | None:
        return self._select().try_generate()

    def generate(self) -> T:
        return self._select().generate()

    def __repr__(self) -> str:
        return f"Switch({self._gen1!r}, {self._gen2!r}, prob={self._prob})"


class ConstOr(Switch[T]):
    """Switch whose first branch is a fixed value.

    Returns value with probability prob and draws from generator otherwise.
    """

    def __init__(
        self,
        value: T,
        generator: Generator[T],
        prob: float = 0.5,
        seed: int | None = None,
        source: RandomSource | None = None,
    ):
        super().__init__(Constant(value), generator, prob=prob, seed=seed, source=source)

    def set_constant(self, value: T) -> None:
        self._gen1.set(value)
