"""MCP resources for shellsafe_mcp."""

from shellsafe_mcp.resources.charset import charset_resource

__all__ = ["charset_resource"]
