"""Core type definitions."""

from typing import NewType, Protocol

# Absolute joined path (e.g., "/posts/new")
# Distinct from filesystem Path to catch type mismatches
URLPath = NewType("URLPath", str)


class TextLike(Protocol):
    """Anything with an explicit text conversion."""

    def __str__(self) -> str: ...
