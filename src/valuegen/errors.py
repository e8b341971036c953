"""Exceptions raised by valuegen."""


class ValueGenError(Exception):
    """Base class for all valuegen errors."""


class GenerationError(ValueGenError, RuntimeError):
    """Raised when an infallible generate() call finds no value available."""

    def __init__(self, generator: object):
        self.generator = generator
        super().__init__(f"Failed to generate value from {generator!r}")
