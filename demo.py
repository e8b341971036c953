#!/usr/bin/env python3
"""
Demo script showing basic usage of valuegen.

Run this script after installing the package:
    pip install -e .
    python demo.py
"""

from enum import IntFlag

from valuegen import (
    ConstOr,
    Constant,
    DefaultOr,
    FakerProvider,
    RandomFlags,
    Switch,
    UniformCollection,
    UniformRange,
)


class Permission(IntFlag):
    READ = 1
    WRITE = 2
    EXECUTE = 4
    ADMIN = 8


def demo_leaves():
    """Demonstrate the leaf generators."""
    print("=" * 60)
    print("1. LEAF GENERATORS")
    print("=" * 60)

    print(f"Constant:      {Constant('fixed').take(3)}")
    print(f"UniformRange:  {UniformRange(0, 100, seed=42).take(5)}")
    print(f"Float range:   {[round(x, 3) for x in UniformRange(0.0, 1.0, seed=42).take(3)]}")
    print(f"FakerProvider: {FakerProvider('email', seed=42).take(2)}")
    print()


def demo_pool():
    """Demonstrate pool mutation."""
    print("=" * 60)
    print("2. UNIFORM COLLECTION")
    print("=" * 60)

    users = UniformCollection(["alice", "bob", "carol"], seed=7)
    print(f"Pool:            {users.values}")
    print(f"Samples:         {users.take(5)}")

    users.consume("bob")
    users.add("dave")
    print(f"After consume/add: {users.values}")

    fallback = DefaultOr("anonymous", UniformCollection(seed=7))
    print(f"Empty pool with default: {fallback.generate()}")
    print()


def demo_switch():
    """Demonstrate probabilistic switching."""
    print("=" * 60)
    print("3. SWITCH / CONST-OR")
    print("=" * 60)

    status = Switch(Constant(200), UniformRange(400, 600, seed=1), prob=0.8, seed=1)
    print(f"Status codes: {status.take(10)}")

    names = ConstOr("", FakerProvider("first_name", seed=3), prob=0.2, seed=3)
    print(f"Names (20% empty): {names.take(6)}")
    print()


def demo_flags():
    """Demonstrate random flag combinations."""
    print("=" * 60)
    print("4. RANDOM FLAGS")
    print("=" * 60)

    permissions = (
        RandomFlags(Permission, prob=0.4, seed=5)
        .constraint(Permission.WRITE, Permission.READ)
        .exclude(Permission.ADMIN)
    )
    for value in permissions.take(5):
        print(f"  {value!r}")
    print()


if __name__ == "__main__":
    demo_leaves()
    demo_pool()
    demo_switch()
    demo_flags()
