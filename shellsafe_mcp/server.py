"""shellsafe_mcp FastMCP server.

This is a thin wrapper that wires the escaping tool and resources into an
MCP server. All escaping logic lives in utils/shell.py.
"""

import logging
import sys

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from shellsafe_mcp.config import Settings, get_settings
from shellsafe_mcp.middleware import ErrorHandlingMiddleware, LoggingMiddleware
from shellsafe_mcp.resources import charset_resource
from shellsafe_mcp.tools import escape
from shellsafe_mcp.utils.console import MCPRequestFormatter

NOISY_LOGGERS = (
    "uvicorn",
    "uvicorn.access",
    "uvicorn.error",
    "httpx",
    "httpcore",
    "fastmcp",
    "starlette",
    "anyio",
)


def _configure_logging(settings: Settings) -> None:
    """Configure colorful logging for the shellsafe_mcp package.

    Called at module load time so loggers are ready however the server
    is started.
    """
    use_colors = settings.log_colors and sys.stderr.isatty()

    package_logger = logging.getLogger("shellsafe_mcp")
    package_logger.setLevel(settings.log_level)

    # Only add handler if not already configured
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            MCPRequestFormatter(use_colors=use_colors, timezone=settings.log_timezone)
        )
        package_logger.addHandler(handler)
        package_logger.propagate = False

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


_configure_logging(get_settings())

logger = logging.getLogger(__name__)


def configure_middleware(server: FastMCP, settings: Settings) -> None:
    """Configure middleware stack for the server.

    First added is innermost: errors are logged and counted before the
    logging middleware records the failed request.

    Args:
        server: The FastMCP server to configure.
        settings: Settings holding payload/traceback/slow-request options.
    """
    server.add_middleware(
        ErrorHandlingMiddleware(include_traceback=settings.include_traceback)
    )
    server.add_middleware(
        LoggingMiddleware(
            include_payloads=settings.log_payloads,
            slow_threshold_ms=float(settings.slow_threshold_ms),
        )
    )


def create_server() -> FastMCP:
    """Create and configure the MCP server with middleware, tools and resources.

    Returns:
        Configured FastMCP server instance
    """
    settings = get_settings()
    server = FastMCP("shellsafe_mcp")

    configure_middleware(server, settings)

    server.tool(output_schema=None)(escape)
    server.resource(
        "shellsafe://charset",
        name="escaped characters",
        description="Characters backslash-escaped by the escape tool",
        mime_type="text/plain",
    )(charset_resource)

    @server.custom_route("/health", methods=["GET"])
    async def health_check(request: Request) -> PlainTextResponse:
        """Health check endpoint."""
        client_host = request.client.host if request.client else "unknown"
        logger.debug("Health check from %s", client_host)
        return PlainTextResponse("OK")

    logger.debug("Server created (transport=%s)", settings.transport)
    return server


# Default server instance
mcp = create_server()
