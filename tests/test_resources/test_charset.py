"""Tests for the charset resource."""

import pytest

from shellsafe_mcp.resources.charset import CHAR_NAMES, charset_resource
from shellsafe_mcp.utils.shell import ESCAPED_CHARS


def test_every_escaped_char_has_a_name() -> None:
    """The name table covers exactly the escaped characters."""
    assert set(CHAR_NAMES) == ESCAPED_CHARS


@pytest.mark.asyncio
async def test_lists_every_escaped_char() -> None:
    """Each escaped character appears with its backslash form."""
    text = await charset_resource()

    assert text.startswith("Escaped Characters")
    for char, name in CHAR_NAMES.items():
        assert f"\\{char}" in text
        assert name in text


@pytest.mark.asyncio
async def test_includes_worked_example() -> None:
    """The example shows both the raw and escaped form."""
    text = await charset_resource()

    assert "input:  report $(date).txt" in text
    assert 'output: "report\\ \\$(date).txt\\;' in text
