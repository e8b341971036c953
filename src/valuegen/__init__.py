"""
Valuegen - Composable value generators for test fixtures and fuzz-style inputs.

Small building blocks (constants, ranges, pools, switches, flag sets) that
produce randomized or fixed values and compose into richer generators.
"""

import logging

__version__ = "0.1.0"

from valuegen.errors import ValueGenError, GenerationError
from valuegen.random_source import RandomSource
from valuegen.generators.base import Generator, RandomGenerator, Range, Resource
from valuegen.generators.constant import Constant, DefaultOr
from valuegen.generators.uniform import UniformRange, UniformCollection, UniformResource
from valuegen.generators.switch import Switch, ConstOr
from valuegen.generators.flags import RandomFlags, FlagConstraint
from valuegen.generators.provider import FakerProvider

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ValueGenError",
    "GenerationError",
    "RandomSource",
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
