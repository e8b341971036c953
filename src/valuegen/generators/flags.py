"""Random bit-flag generator.

Builds a composite flag value in a single pass:
1. Each known flag is set independently with probability prob
2. Implication constraints are applied once, in registration order
3. Bits in the exclusion mask are cleared
4. Bits in the inclusion mask are set

Inclusion runs last, so a bit present in both masks is always set.
"""

import enum
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from valuegen.generators.base import RandomGenerator, clamp_probability
from valuegen.random_source import RandomSource

F = TypeVar("F", bound=enum.Flag)


class FlagConstraint(BaseModel):
    """Rule: if antecedent is present, consequent must be present too."""

    model_config = ConfigDict(frozen=True)

    antecedent: Any = Field(..., description="Flag(s) that trigger the rule")
    consequent: Any = Field(..., description="Flag(s) forced when triggered")

    @field_validator("antecedent", "consequent")
    @classmethod
    def _check_flag(cls, value: Any) -> Any:
        if not isinstance(value, enum.Flag):
            raise ValueError(f"Expected a Flag member, got {type(value).__name__}")
        return value

    def applies_to(self, value: enum.Flag) -> bool:
        return (value & self.antecedent) == self.antecedent

    def __str__(self) -> str:
        return f"{self.antecedent} => {self.consequent}"


def single_bit_flags(flag_type: type[F]) -> list[F]:
    """List the single-bit members of a Flag type, in definition order.

    Aliases and multi-bit combinations are skipped.
    """
    flags = []
    seen = set()
    for member in flag_type.__members__.values():
        bits = member.value
        if bits and bits & (bits - 1) == 0 and bits not in seen:
            seen.add(bits)
            flags.append(member)
    return flags


class RandomFlags(RandomGenerator[F]):
    """Generator of random flag combinations.

    Example:
        gen = (
            RandomFlags(Permission, prob=0.3, seed=7)
            .constraint(Permission.WRITE, Permission.READ)
            .exclude(Permission.ADMIN)
        )
    """

    def __init__(
        self,
        flag_type: type[F],
        prob: float = 0.5,
        seed: int | None = None,
        source: RandomSource | None = None,
    ):
        """Initialize the generator.

        Args:
            flag_type: The enum.Flag (or IntFlag) type to generate
            prob: Per-flag inclusion probability, clamped into [0, 1]
            seed: Optional random seed for deterministic generation
            source: Optional random source to draw from
        """
        super().__init__(seed=seed, source=source)
        self._flag_type = flag_type
        self._flags = single_bit_flags(flag_type)
        self._prob = clamp_probability(prob)
        self._include = flag_type(0)
        self._exclude = flag_type(0)
        self._constraints: list[FlagConstraint] = []

    @property
    def flag_type(self) -> type[F]:
        return self._flag_type

    @property
    def flags(self) -> list[F]:
        return list(self._flags)

    @property
    def prob(self) -> float:
        return self._prob

    @property
    def included(self) -> F:
        return self._include

    @property
    def excluded(self) -> F:
        return self._exclude

    @property
    def constraints(self) -> list[FlagConstraint]:
        return list(self._constraints)

    def set_prob(self, prob: float) -> "RandomFlags[F]":
        self._prob = clamp_probability(prob)
        return self

    def include(self, flags: F) -> "RandomFlags[F]":
        """Always set these flags; accumulates with earlier calls."""
        self._include |= self._coerce(flags)
        return self

    def exclude(self, flags: F) -> "RandomFlags[F]":
        """Always clear these flags unless also included; accumulates."""
        self._exclude |= self._coerce(flags)
        return self

    def constraint(self, flag1: F, flag2: F) -> "RandomFlags[F]":
        """Register the rule "flag1 implies flag2"."""
        self._constraints.append(
            FlagConstraint(antecedent=self._coerce(flag1), consequent=self._coerce(flag2))
        )
        return self

    def _coerce(self, flags: Any) -> F:
        if not isinstance(flags, self._flag_type):
            raise TypeError(
                f"Expected {self._flag_type.__name__}, got {type(flags).__name__}"
            )
        return flags

    def try_generate(self) -> F:
        value = self._flag_type(0)
        for flag in self._flags:
            if self._source.gen_bool(self._prob):
                value |= flag

        for rule in self._constraints:
            if rule.applies_to(value):
                value |= rule.consequent

        value &= ~self._exclude
        value |= self._include
        return value

    def __repr__(self) -> str:
        return f"RandomFlags({self._flag_type.__name__}, prob={self._prob})"
