"""Plane MCP Server - Model Context Protocol integration for Plane.

This package exposes Plane projects and issues to AI assistants over MCP.

Modules:
- server: stdio MCP server implementation
- dispatcher: tool-name lookup and uniform result wrapping
- tools: MCP tool definitions
- handlers: Tool implementation handlers
- formatters: Response formatting utilities
"""

__version__ = "1.0.0"

from . import formatters
from . import tools
from . import handlers

__all__ = ["formatters", "tools", "handlers", "__version__"]
