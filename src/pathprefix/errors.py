"""Error taxonomy for path prefix operations."""

from enum import Enum


class ErrorKind(Enum):
    """Reason an argument was rejected."""

    MISSING_PARAMETER = "missing-required-parameter"
    NOT_TEXT = "not-text"


class PathPrefixError(Exception):
    """Base error for path prefix failures."""


class InvalidArgumentError(PathPrefixError, TypeError):
    """Argument is absent or cannot be converted to text.

    Subclasses TypeError so callers handling plain type errors keep working.
    """

    def __init__(
        self,
        message: str,
        *,
        kind: ErrorKind,
        parameter: str | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.parameter = parameter
