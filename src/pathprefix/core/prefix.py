"""Path prefix value type.

Wraps a base segment (a URL mount point or filesystem root) and joins
tokens onto it with a configurable separator, cleaning up separator
repetitions along the way.
"""

from pathprefix.core.normalize import (
    absolutize,
    flatten_tokens,
    relativize,
    to_text,
)
from pathprefix.core.types import TextLike, URLPath
from pathprefix.errors import ErrorKind, InvalidArgumentError

DEFAULT_SEPARATOR = "/"

_UNSET = object()


class PathPrefix:
    """Prefixed path segment.

    Instances are immutable. Equality and hashing use only the raw base,
    so a PathPrefix compares equal to the plain string it wraps:

        >>> PathPrefix("posts") == "posts"
        True
        >>> PathPrefix("/posts").join("new")
        '/posts/new'
        >>> PathPrefix("posts").relative_join("new", "_")
        'posts_new'
    """

    __slots__ = ("_base", "_separator")

    _base: str
    _separator: str

    def __init__(
        self,
        base: TextLike | None = "",
        separator: str = DEFAULT_SEPARATOR,
    ) -> None:
        """Initialize the path prefix.

        Args:
            base: Prefix value, converted to text (None becomes "")
            separator: Separator used between tokens, not validated here

        Raises:
            InvalidArgumentError: If base can't be converted to text
        """
        text = "" if base is None else to_text(base, parameter="base")
        object.__setattr__(self, "_base", text)
        object.__setattr__(self, "_separator", separator)

    @property
    def base(self) -> str:
        """Raw prefix text, never normalized."""
        return self._base

    @property
    def separator(self) -> str:
        """Separator used between tokens."""
        return self._separator

    def join(self, *tokens: TextLike) -> URLPath:
        """Join tokens onto the prefix, producing an absolute path.

        Separator repetitions are collapsed and the result always starts
        with exactly one separator. Trailing separators are kept as given.

        Args:
            tokens: Tokens to append after the prefix, in order

        Returns:
            Joined path, e.g. PathPrefix("myapp").join("/assets", "app.js")
            gives "/myapp/assets/app.js"

        Raises:
            InvalidArgumentError: If a token can't be converted to text
        """
        return URLPath(absolutize(self.relative_join(tokens), self._separator))

    def relative_join(self, tokens: object, separator: object = _UNSET) -> str:
        """Join tokens onto the prefix without forcing a leading separator.

        Separator repetitions are collapsed and leading separators stripped.

        Args:
            tokens: A single token, or a (possibly nested) list/tuple of tokens
            separator: Separator for this call only (default: stored separator)

        Returns:
            Joined relative path

        Raises:
            InvalidArgumentError: If separator is None or a token can't be
                converted to text
        """
        if separator is _UNSET:
            separator = self._separator
        if separator is None:
            raise InvalidArgumentError(
                "separator is required",
                kind=ErrorKind.MISSING_PARAMETER,
                parameter="separator",
            )
        separator = to_text(separator, parameter="separator")
        parts = [self._base, *flatten_tokens(tokens)]
        return relativize(separator.join(parts), separator)

    def __str__(self) -> str:
        return self._base

    def __fspath__(self) -> str:
        return self._base

    def __repr__(self) -> str:
        return f"PathPrefix({self._base!r}, separator={self._separator!r})"

    def __eq__(self, other: object) -> bool:
        """Compare the raw base against a string or another prefix.

        The separator is ignored and joined output is never compared:
        PathPrefix("posts", "_") == PathPrefix("posts") is True, and
        PathPrefix("posts") == "/posts" is False.
        """
        if isinstance(other, PathPrefix):
            return self._base == other._base
        if isinstance(other, str):
            return self._base == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._base)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type["PathPrefix"], tuple[str, str]]:
        return (type(self), (self._base, self._separator))


def coerce_prefix(value: object, separator: str = DEFAULT_SEPARATOR) -> PathPrefix:
    """Return value as a PathPrefix, wrapping plain text if needed."""
    if isinstance(value, PathPrefix):
        return value
    return PathPrefix(value, separator)

