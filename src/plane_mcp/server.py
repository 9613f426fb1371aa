"""Plane MCP Server - Expose Plane projects and issues to AI assistants."""
import os
import sys
import asyncio
import logging
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, Tool

from . import __version__
from . import tools
from .config import ConfigurationError, get_settings
from .dispatcher import Dispatcher


# Configure logging to stderr (stdout carries the MCP protocol)
logging.basicConfig(
    level=os.getenv("PLANE_MCP_LOG_LEVEL", "INFO").upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    stream=sys.stderr,
    force=True
)
logger = logging.getLogger("plane-mcp")

SERVER_NAME = "plane-mcp-server"


def create_server(dispatcher: Dispatcher) -> Server:
    """Build the MCP server with list-tools and call-tool handlers."""
    app = Server(SERVER_NAME, version=__version__)

    @app.list_tools()
    async def list_tools() -> list[Tool]:
        """List available MCP tools for Plane."""
        return tools.get_tools()

    # Arguments reach the dispatcher unvalidated so malformed assignees can be normalized
    @app.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> CallToolResult:
        """Handle MCP tool calls by delegating to the dispatcher."""
        return await dispatcher.invoke(name, arguments)

    return app


async def main():
    """Run the MCP server."""
    try:
        settings = get_settings()
    except ConfigurationError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)

    logger.info(f"MCP Server starting with base URL: {settings.base_url}")
    app = create_server(Dispatcher(settings))

    async with stdio_server() as (read_stream, write_stream):
        logger.info("Plane MCP Server running on stdio")
        await app.run(read_stream, write_stream, app.create_initialization_options())


def run():
    """Console script entry point."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
    except Exception:
        logger.exception("Fatal error running server")
        sys.exit(1)


if __name__ == "__main__":
    run()
