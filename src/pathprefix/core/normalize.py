"""Separator normalization for joined paths.

Purely textual: no filesystem access and no handling of "." or ".."
segments. A run of separators directly after a colon is left alone so
that scheme markers such as "http://" survive joining.
"""

import os
import re
from functools import lru_cache

from pathprefix.core.types import TextLike
from pathprefix.errors import ErrorKind, InvalidArgumentError


def to_text(value: TextLike | None, *, parameter: str = "token") -> str:
    """Convert a value to text.

    Args:
        value: Value to convert (str, os.PathLike, or anything with __str__)
        parameter: Argument name used in error messages

    Returns:
        Text representation of the value

    Raises:
        InvalidArgumentError: If the value is None, bytes, or its
            conversion fails
    """
    if isinstance(value, str):
        return value
    if value is None or isinstance(value, (bytes, bytearray)):
        raise InvalidArgumentError(
            f"{parameter} can't be treated as text: {value!r}",
            kind=ErrorKind.NOT_TEXT,
            parameter=parameter,
        )
    if isinstance(value, os.PathLike):
        value = os.fspath(value)
        if isinstance(value, str):
            return value
        raise InvalidArgumentError(
            f"{parameter} is a bytes path: {value!r}",
            kind=ErrorKind.NOT_TEXT,
            parameter=parameter,
        )
    try:
        return str(value)
    except Exception as e:
        raise InvalidArgumentError(
            f"{parameter} can't be treated as text: {e}",
            kind=ErrorKind.NOT_TEXT,
            parameter=parameter,
        ) from e


def flatten_tokens(tokens: object) -> list[str]:
    """Flatten a token or nested list/tuple of tokens into text tokens.

    None tokens become empty segments.
    """
    if tokens is None:
        return [""]
    if isinstance(tokens, (list, tuple)):
        result: list[str] = []
        for token in tokens:
            result.extend(flatten_tokens(token))
        return result
    return [to_text(tokens)]


def collapse_separators(text: str, separator: str) -> str:
    """Collapse runs of two or more separators into one.

    A run whose first separator directly follows a colon is not collapsed
    at that position. Only the colon-adjacent position is protected; any
    run starting after it is still collapsed ("http:///x" -> "http://x").
    """
    if not separator:
        return text
    pattern = _collapse_pattern(separator)
    return pattern.sub(lambda _: separator, text)


def strip_leading(text: str, separator: str) -> str:
    """Remove all leading separators."""
    if not separator:
        return text
    while text.startswith(separator):
        text = text[len(separator) :]
    return text


def is_absolute(text: str, separator: str) -> bool:
    """Check whether text starts with the separator."""
    return text.startswith(separator)


def absolutize(text: str, separator: str) -> str:
    """Prepend the separator unless text already starts with it."""
    if is_absolute(text, separator):
        return text
    return f"{separator}{text}"


def relativize(text: str, separator: str) -> str:
    """Collapse separator runs, then strip leading separators."""
    return strip_leading(collapse_separators(text, separator), separator)


@lru_cache(maxsize=32)
def _collapse_pattern(separator: str) -> re.Pattern[str]:
    escaped = re.escape(separator)
    return re.compile(f"(?<!:)(?:{escaped}){{2,}}")
