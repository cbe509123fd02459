"""Exceptions raised by the spatial pooler."""


class PoolerError(Exception):
    """Base class for all pooler errors."""


class ConfigError(PoolerError, ValueError):
    """A configuration constraint was violated at construction time."""

    def __init__(self, constraint: str, message: str = ""):
        self.constraint = constraint
        super().__init__(message or f"config constraint violated: {constraint}")


class PoolerRuntimeError(PoolerError, RuntimeError):
    """A single compute call was rejected."""


class InputLengthMismatch(PoolerRuntimeError):
    """Input vector length differs from the configured ``input_length``."""

    def __init__(self, expected: int, actual):
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected input of length {expected}, got {actual}")
