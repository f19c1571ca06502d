"""End-to-end tests through an in-memory MCP client."""

import logging

import pytest
from fastmcp import Client
from fastmcp.exceptions import ToolError

from shellsafe_mcp.middleware import ErrorHandlingMiddleware, LoggingMiddleware
from shellsafe_mcp.server import create_server
from shellsafe_mcp.utils.console import MCPRequestFormatter


@pytest.fixture
def server():
    """Create a fresh server instance."""
    return create_server()


def test_middleware_order(server) -> None:
    """Error handling is added before logging."""
    kinds = [type(m) for m in server.middleware]
    assert kinds.index(ErrorHandlingMiddleware) < kinds.index(LoggingMiddleware)


@pytest.mark.asyncio
async def test_escape_tool_listed(server) -> None:
    """The escape tool is exposed."""
    async with Client(server) as client:
        tools = await client.list_tools()

    assert [t.name for t in tools] == ["escape"]
    assert set(tools[0].inputSchema["properties"]) == {"arg", "args"}


@pytest.mark.asyncio
async def test_call_escape_tool(server) -> None:
    """Calling the tool returns the escaped text."""
    async with Client(server) as client:
        result = await client.call_tool("escape", {"arg": "script.sh&&command"})

    assert result.content[0].text == '"script.sh\\&\\&command"'


@pytest.mark.asyncio
async def test_call_escape_tool_with_list(server) -> None:
    """Lists of arguments are joined into one fragment."""
    async with Client(server) as client:
        result = await client.call_tool("escape", {"args": ["echo", "$HOME"]})

    assert result.content[0].text == '"echo" "\\$HOME"'


@pytest.mark.asyncio
async def test_call_escape_tool_without_arguments(server) -> None:
    """Missing input is reported as text, not as a protocol error."""
    async with Client(server) as client:
        result = await client.call_tool("escape", {})

    assert result.content[0].text.startswith("Error:")


@pytest.mark.asyncio
async def test_invalid_argument_type_raises(server) -> None:
    """Arguments of the wrong type are rejected by the server."""
    async with Client(server) as client:
        with pytest.raises(ToolError):
            await client.call_tool("escape", {"args": {"not": "a list"}})


@pytest.mark.asyncio
async def test_read_charset_resource(server) -> None:
    """The charset resource is readable."""
    async with Client(server) as client:
        contents = await client.read_resource("shellsafe://charset")

    assert "Escaped Characters" in contents[0].text


def test_package_logger_configured() -> None:
    """The package logger has one stderr handler and does not propagate."""
    package_logger = logging.getLogger("shellsafe_mcp")

    assert len(package_logger.handlers) == 1
    assert isinstance(package_logger.handlers[0].formatter, MCPRequestFormatter)
    assert package_logger.propagate is False


def test_create_server_does_not_add_handlers() -> None:
    """Building more servers keeps a single handler."""
    create_server()
    create_server()
    assert len(logging.getLogger("shellsafe_mcp").handlers) == 1
