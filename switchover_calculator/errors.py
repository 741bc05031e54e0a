"""Exceptions raised by the switchover calculator."""


class SwitchoverError(Exception):
    """Base class for all switchover calculation failures."""


class InvalidInputError(SwitchoverError, ValueError):
    """Raised when an input is outside its physically meaningful domain."""


class NoSolutionError(SwitchoverError):
    """Raised when the COP line never crosses the break-even threshold.

    This happens when one fuel always dominates, e.g. a flat COP curve that
    sits entirely above or below the threshold.
    """


class ConfigError(InvalidInputError):
    """Raised when calculator inputs cannot be resolved from configuration."""
