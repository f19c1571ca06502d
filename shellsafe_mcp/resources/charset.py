"""Charset resource describing which characters get escaped."""

from shellsafe_mcp.utils.shell import ESCAPED_CHARS, escaped_string

CHAR_NAMES = {
    '"': "double quote",
    "\\": "backslash",
    "$": "dollar sign (variable expansion)",
    "`": "backtick (command substitution)",
    " ": "space (field separation)",
    ";": "semicolon (command separator)",
    "&": "ampersand (background / AND list)",
    "|": "pipe (pipeline / OR list)",
}

_EXAMPLE = "report $(date).txt; rm -rf ~ && echo `id` | tee \"log\""


async def charset_resource() -> str:
    """List the characters escaped inside the double-quoted output.

    Returns:
        Plain-text table of escaped characters with a worked example.
    """
    lines = ["Escaped Characters", "=" * 40, ""]

    for char in sorted(ESCAPED_CHARS):
        lines.append(f"  {char!r:6} -> \\{char}   {CHAR_NAMES[char]}")

    lines.append("")
    lines.append("All other characters are passed through unchanged.")
    lines.append("")
    lines.append("Example:")
    lines.append("-" * 40)
    lines.append(f"  input:  {_EXAMPLE}")
    lines.append(f"  output: {escaped_string(_EXAMPLE)}")

    return "\n".join(lines)
