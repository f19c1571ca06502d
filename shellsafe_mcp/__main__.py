"""Entry point for shellsafe_mcp server."""

import logging

from shellsafe_mcp.config import get_settings
from shellsafe_mcp.server import NOISY_LOGGERS, mcp  # Importing server configures logging

logger = logging.getLogger(__name__)


def _quiet_third_party_loggers() -> None:
    """Reduce noise from third-party libraries."""
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def run_server() -> None:
    """Run the MCP server with configured transport."""
    settings = get_settings()
    _quiet_third_party_loggers()

    if settings.transport == "stdio":
        logger.info("Starting shellsafe_mcp server (transport=stdio)")
        mcp.run(transport="stdio")
    else:
        logger.info(
            "Starting shellsafe_mcp server (transport=http, host=%s, port=%d)",
            settings.http_host,
            settings.http_port,
        )
        mcp.run(
            transport="http",
            host=settings.http_host,
            port=settings.http_port,
        )


if __name__ == "__main__":
    run_server()
