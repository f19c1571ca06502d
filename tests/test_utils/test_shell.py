"""Tests for shell argument escaping."""

import pytest

from shellsafe_mcp.utils.shell import ESCAPED_CHARS, escape_args, escaped_string


class TestEscapedString:
    """Test escaped_string against known inputs."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("script.sh", '"script.sh"'),
            ("", '""'),
            ("script${var}.sh", '"script\\${var}.sh"'),
            ("script`command`.sh", '"script\\`command\\`.sh"'),
            ('script".sh', '"script\\".sh"'),
            ("script.sh\\", '"script.sh\\\\"'),
            ("script with spaces.sh", '"script\\ with\\ spaces.sh"'),
            ("script.sh;command", '"script.sh\\;command"'),
            ("script.sh&&command", '"script.sh\\&\\&command"'),
            ("script.sh||command", '"script.sh\\|\\|command"'),
        ],
    )
    def test_known_inputs(self, raw: str, expected: str) -> None:
        """Escaped output matches the expected quoting."""
        assert escaped_string(raw) == expected

    def test_empty_string(self) -> None:
        """Empty input gives just the two quotes."""
        assert escaped_string("") == '""'

    @pytest.mark.parametrize(
        "raw",
        ["plain", "/usr/local/bin/tool", "a(b)<c>*~!#'", "日本語", "tab\there", "line\nbreak"],
    )
    def test_plain_text_is_only_wrapped(self, raw: str) -> None:
        """Text without escaped characters is wrapped, not changed."""
        assert escaped_string(raw) == f'"{raw}"'

    @pytest.mark.parametrize("char", sorted(ESCAPED_CHARS))
    def test_each_special_char_is_escaped(self, char: str) -> None:
        """Every escaped character gets exactly one backslash in front."""
        assert escaped_string(f"pre{char}post") == f'"pre\\{char}post"'

    def test_escaped_char_set(self) -> None:
        """Only the eight shell hazards are escaped."""
        assert ESCAPED_CHARS == frozenset({'"', "\\", "$", "`", " ", ";", "&", "|"})

    def test_adjacent_specials_escaped_independently(self) -> None:
        """Repeated specials are escaped one by one."""
        assert escaped_string("&&") == '"\\&\\&"'
        assert escaped_string("\\\\") == '"\\\\\\\\"'

    def test_existing_backslash_escape_not_collapsed(self) -> None:
        """An already escaped character is escaped again, never merged."""
        assert escaped_string("\\$") == '"\\\\\\$"'

    @pytest.mark.parametrize("raw", ["", "x", " ", "a b;c&d|e", '"$`\\'])
    def test_output_is_wrapped_in_quotes(self, raw: str) -> None:
        """Output always starts and ends with a double quote."""
        result = escaped_string(raw)
        assert len(result) >= 2
        assert result.startswith('"')
        assert result.endswith('"')

    def test_input_not_mutated(self) -> None:
        """The input string is left as is."""
        raw = "a b"
        escaped_string(raw)
        assert raw == "a b"


class TestEscapeArgs:
    """Test escape_args."""

    def test_joins_escaped_arguments(self) -> None:
        """Each argument becomes one quoted word."""
        assert escape_args(["grep", "a|b", "my log.txt"]) == (
            '"grep" "a\\|b" "my\\ log.txt"'
        )

    def test_empty_argument_kept(self) -> None:
        """Empty arguments stay as a quoted empty word."""
        assert escape_args(["echo", ""]) == '"echo" ""'

    def test_no_arguments(self) -> None:
        """No arguments give an empty string."""
        assert escape_args([]) == ""

    def test_accepts_generator(self) -> None:
        """Any iterable of strings is accepted."""
        assert escape_args(s for s in ("a", "b")) == '"a" "b"'
