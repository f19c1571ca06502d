"""MCP tools for shellsafe_mcp."""

from shellsafe_mcp.tools.escape import escape

__all__ = ["escape"]
