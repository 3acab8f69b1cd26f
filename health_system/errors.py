"""Exceptions raised on misuse of health values.

Both concrete errors subclass :class:`ValueError` so callers that already
guard component values with ``except ValueError`` keep working.
"""


class HealthSystemError(Exception):
    """Public umbrella exception for health system misuse."""


class InvalidConfiguration(HealthSystemError, ValueError):
    """A health value or config was built with an unusable maximum."""


class InvalidArgument(HealthSystemError, ValueError):
    """An operation received a negative or non-numeric amount."""
