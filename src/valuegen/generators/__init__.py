"""Generators module - building blocks and combinators.

Leaves:
- Constant
- UniformRange
- UniformCollection
- RandomFlags
- FakerProvider

Combinators:
- DefaultOr
- Switch / ConstOr
"""

from valuegen.generators.base import Generator, RandomGenerator, Range, Resource
from valuegen.generators.constant import Constant, DefaultOr
from valuegen.generators.uniform import UniformRange, UniformCollection, UniformResource
from valuegen.generators.switch import Switch, ConstOr
from valuegen.generators.flags import RandomFlags, FlagConstraint
from valuegen.generators.provider import FakerProvider

__all__ = [
    "Generator",
    "RandomGenerator",
    "Range",
    "Resource",
    "Constant",
    "DefaultOr",
    "UniformRange",
    "UniformCollection",
    "UniformResource",
    "Switch",
    "ConstOr",
    "RandomFlags",
    "FlagConstraint",
    "FakerProvider",
]
