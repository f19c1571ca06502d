"""Shell argument escaping utilities."""

from collections.abc import Iterable

# Characters that are backslash-escaped inside the surrounding double quotes
ESCAPED_CHARS = frozenset('"\\$` ;&|')

_QUOTE = '"'


def escaped_string(s: str) -> str:
    """Quote and escape a string for use as one shell argument.

    The result is wrapped in double quotes and every character in
    ``ESCAPED_CHARS`` is prefixed with a backslash. Everything else is
    copied through unchanged.

    Args:
        s: Raw argument value

    Returns:
        Double-quoted, escaped argument
    """
    parts = [_QUOTE]
    for c in s:
        if c in ESCAPED_CHARS:
            parts.append("\\")
        parts.append(c)
    parts.append(_QUOTE)
    return "".join(parts)


def escape_args(args: Iterable[str]) -> str:
    """Escape each argument and join them into a command line fragment.

    Args:
        args: Raw argument values

    Returns:
        Space-separated escaped arguments ("" for no arguments)
    """
    return " ".join(escaped_string(arg) for arg in args)
