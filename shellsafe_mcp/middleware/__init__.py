"""shellsafe_mcp middleware components."""

from shellsafe_mcp.middleware.base import ShellSafeMiddleware
from shellsafe_mcp.middleware.errors import ErrorHandlingMiddleware
from shellsafe_mcp.middleware.logging import LoggingMiddleware

__all__ = [
    "ErrorHandlingMiddleware",
    "LoggingMiddleware",
    "ShellSafeMiddleware",
]
