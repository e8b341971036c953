"""Faker-backed leaf generator."""

from typing import Any

from faker import Faker

from valuegen.generators.base import Generator


class FakerProvider(Generator[Any]):
    """Generator drawing values from a named Faker provider method.

    A provider that returns None (e.g. "null_boolean") reports that draw as
    a failed generation, so generate() raises GenerationError. Wrap such
    providers in DefaultOr to substitute a value, or call try_generate()
    directly to observe the None draws.

    Example:
        FakerProvider("email").generate()
        FakerProvider("pyint", min_value=0, max_value=9, seed=42)
    """

    def __init__(
        self,
        method: str,
        *args: Any,
        locale: str | None = None,
        seed: int | None = None,
        **kwargs: Any,
    ):
        """Initialize the generator.

        Args:
            method: Name of the Faker provider method, e.g. "name" or "email"
            *args: Positional arguments passed to the provider method
            locale: Optional Faker locale
            seed: Optional random seed for deterministic generation
            **kwargs: Keyword arguments passed to the provider method
        """
        self._faker = Faker(locale)
        if seed is not None:
            self._faker.seed_instance(seed)

        provider = getattr(self._faker, method, None)
        if method.startswith("_") or not callable(provider):
            raise ValueError(f"Unknown Faker provider '{method}'")

        self._method = method
        self._provider = provider
        self._args = args
        self._kwargs = kwargs

    @property
    def method(self) -> str:
        return self._method

    def try_generate(self) -> Any:
        return self._provider(*self._args, **self._kwargs)

    def __repr__(self) -> str:
        return f"FakerProvider({self._method!r})"
