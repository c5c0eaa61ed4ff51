"""Path prefixes with separator-clean joining.

    >>> from pathprefix import PathPrefix
    >>> PathPrefix("myapp").join("/assets", "application.js")
    '/myapp/assets/application.js'
"""

from pathprefix.core.prefix import DEFAULT_SEPARATOR, PathPrefix, coerce_prefix
from pathprefix.core.types import URLPath
from pathprefix.errors import ErrorKind, InvalidArgumentError, PathPrefixError

__all__ = [
    "DEFAULT_SEPARATOR",
    "ErrorKind",
    "InvalidArgumentError",
    "PathPrefix",
    "PathPrefixError",
    "URLPath",
    "coerce_prefix",
]
