"""Route tool calls to handlers and wrap every outcome as a tool result."""
from typing import Any, Awaitable, Callable, Optional
import logging
import traceback

import httpx
from mcp.types import CallToolResult

from . import formatters
from . import handlers
from .api import PlaneAPIError, PlaneTransportError, create_client
from .config import Settings
from .schemas import ToolValidationError
from .tools import normalize_tool_name

logger = logging.getLogger("plane-mcp.dispatcher")

Handler = Callable[[dict, httpx.AsyncClient], Awaitable[Any]]

# Map tool names to handler functions
HANDLERS: dict[str, Handler] = {
    # Project handlers
    "list-projects": handlers.handle_list_projects,
    "get-project": handlers.handle_get_project,
    # Issue handlers
    "create-issue": handlers.handle_create_issue,
    "list-issues": handlers.handle_list_issues,
    "get-issue": handlers.handle_get_issue,
    "update-issue": handlers.handle_update_issue,
}


class Dispatcher:
    """Invoke Plane tools by name.

    Holds nothing but the frozen settings (and, in tests, a substitute
    transport), so concurrent invocations share no mutable state.
    """

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self.transport = transport

    async def invoke(self, name: str, arguments: Optional[dict] = None) -> CallToolResult:
        """Run one tool call and return its result; never raises."""
        tool_name = normalize_tool_name(name)
        arguments = dict(arguments or {})

        logger.info(f"Tool call: {tool_name} with arguments: {arguments}")

        handler = HANDLERS.get(tool_name)
        if handler is None:
            logger.warning(f"Unknown tool requested: {name}")
            return formatters.format_unknown_tool(tool_name)

        try:
            async with create_client(self.settings, self.transport) as client:
                result = await handler(arguments, client)
            return formatters.format_success(result)

        except ToolValidationError as e:
            logger.warning(f"Invalid arguments for {tool_name}: {str(e)}")
            return formatters.format_error(str(e))

        except PlaneAPIError as e:
            logger.error(f"Plane API error during {tool_name} call: {e.status_code} {e.reason}")
            return formatters.format_error(str(e))

        except PlaneTransportError as e:
            logger.error(f"Request error during {tool_name} call: {str(e)}")
            return formatters.format_error(str(e))

        except Exception as e:
            # Catch-all for unexpected errors
            logger.error(f"Unexpected error during {tool_name} call:")
            logger.error(f"  Error type: {type(e).__name__}")
            logger.error(f"  Error message: {str(e)}")
            logger.error(f"  Traceback:\n{traceback.format_exc()}")
            return formatters.format_error(f"{type(e).__name__}: {str(e)}")
