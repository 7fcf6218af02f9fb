"""Exceptions for fatal, run-aborting conditions.

Per-repository failures are not exceptions; they are recorded as outcomes.
"""


class DevUtilsError(Exception):
    """Base class for errors the CLI reports and turns into exit code 1."""


class UsageError(DevUtilsError):
    """A required argument is missing or invalid."""

    def __init__(self, message: str, usage: str = ""):
        super().__init__(message)
        self.usage = usage


class PreconditionError(DevUtilsError):
    """A required tool, login or directory is unavailable."""


class InventoryError(DevUtilsError):
    """Fetching the repository list failed."""


class CommandError(DevUtilsError):
    """A workflow step (checkout, pull, commit, ...) failed."""
