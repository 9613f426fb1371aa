"""Shared formatting functions for MCP responses."""
import json
from typing import Any

from mcp.types import CallToolResult, TextContent


def format_json(data: Any) -> str:
    """Pretty-print decoded JSON for display."""
    return json.dumps(data, indent=2, ensure_ascii=False)


def format_success(data: Any) -> CallToolResult:
    """Wrap a Plane response as a successful tool result."""
    return CallToolResult(
        content=[TextContent(type="text", text=format_json(data))],
        isError=False,
    )


def format_error(message: str) -> CallToolResult:
    """Wrap a failure message as an error tool result."""
    return CallToolResult(
        content=[TextContent(type="text", text=f"Error: {message}")],
        isError=True,
    )


def format_unknown_tool(name: str) -> CallToolResult:
    return CallToolResult(
        content=[TextContent(type="text", text=f"Unknown tool: {name}")],
        isError=True,
    )
