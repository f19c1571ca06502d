"""Utilities for shellsafe_mcp."""

from shellsafe_mcp.utils.console import ColorfulFormatter, MCPRequestFormatter
from shellsafe_mcp.utils.output import (
    clean_input_stream,
    gcd,
    is_valid_output,
    last_line,
    on_main_thread,
)
from shellsafe_mcp.utils.shell import ESCAPED_CHARS, escape_args, escaped_string

__all__ = [
    "clean_input_stream",
    "ColorfulFormatter",
    "ESCAPED_CHARS",
    "escape_args",
    "escaped_string",
    "gcd",
    "is_valid_output",
    "last_line",
    "MCPRequestFormatter",
    "on_main_thread",
]
