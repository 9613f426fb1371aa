"""MCP tool definitions for Plane.

This module provides the definitive list of MCP tools exposed by the server.
Tool names are hyphenated; callers using underscores are resolved through
normalize_tool_name().
"""

from mcp.types import Tool

PRIORITIES = ("urgent", "high", "medium", "low", "none")


def normalize_tool_name(name: str) -> str:
    """Treat underscores as hyphens so create_issue resolves to create-issue."""
    return name.replace("_", "-")


def get_tools() -> list[Tool]:
    """Get the list of all MCP tools for Plane project and issue management."""
    return [
        # ============================================================================
        # Project Tools
        # ============================================================================
        Tool(
            name="list-projects",
            description="List all projects in the workspace",
            inputSchema={
                "type": "object",
                "properties": {},
                "required": []
            }
        ),
        Tool(
            name="get-project",
            description="Get detailed information about a specific project",
            inputSchema={
                "type": "object",
                "properties": {
                    "project_id": {
                        "type": "string",
                        "description": "ID of the project to retrieve"
                    }
                },
                "required": ["project_id"]
            }
        ),
        # ============================================================================
        # Issue Tools
        # ============================================================================
        Tool(
            name="create-issue",
            description="Create a new issue in a project",
            inputSchema={
                "type": "object",
                "properties": {
                    "project_id": {
                        "type": "string",
                        "description": "ID of the project where the issue should be created"
                    },
                    "name": {
                        "type": "string",
                        "description": "Title of the issue"
                    },
                    "description_html": {
                        "type": "string",
                        "description": "HTML description of the issue (required by Plane API)"
                    },
                    "priority": {
                        "type": "string",
                        "description": "Priority of the issue (urgent, high, medium, low, none)",
                        "enum": list(PRIORITIES)
                    },
                    "state_id": {
                        "type": "string",
                        "description": "ID of the state for this issue (optional)"
                    },
                    "assignees": {
                        "type": "array",
                        "items": {"type": "string"},
                        "description": "Array of user IDs to assign to this issue (optional)"
                    }
                },
                "required": ["project_id", "name"]
            }
        ),
        Tool(
            name="list-issues",
            description="List issues from a project",
            inputSchema={
                "type": "object",
                "properties": {
                    "project_id": {
                        "type": "string",
                        "description": "ID of the project to get issues from"
                    },
                    "state_id": {
                        "type": "string",
                        "description": "Filter by state ID (optional)"
                    },
                    "priority": {
                        "type": "string",
                        "description": "Filter by priority (optional)",
                        "enum": list(PRIORITIES)
                    },
                    "assignee_id": {
                        "type": "string",
                        "description": "Filter by assignee ID (optional)"
                    },
                    "limit": {
                        "type": "number",
                        "description": "Maximum number of issues to return (default: 50)"
                    }
                },
                "required": ["project_id"]
            }
        ),
        Tool(
            name="get-issue",
            description="Get detailed information about a specific issue",
            inputSchema={
                "type": "object",
                "properties": {
                    "project_id": {
                        "type": "string",
                        "description": "ID of the project containing the issue"
                    },
                    "issue_id": {
                        "type": "string",
                        "description": "ID of the issue to retrieve"
                    }
                },
                "required": ["project_id", "issue_id"]
            }
        ),
        Tool(
            name="update-issue",
            description="Update an existing issue in a project. "
                       "To delete an issue, update its title with 'delete' or 'remove'.",
            inputSchema={
                "type": "object",
                "properties": {
                    "project_id": {
                        "type": "string",
                        "description": "ID of the project containing the issue"
                    },
                    "issue_id": {
                        "type": "string",
                        "description": "ID of the issue to update"
                    },
                    "name": {
                        "type": "string",
                        "description": "Updated title of the issue (optional)"
                    },
                    "description_html": {
                        "type": "string",
                        "description": "HTML description of the issue (required by Plane API)"
                    },
                    "priority": {
                        "type": "string",
                        "description": "Updated priority of the issue (optional)",
                        "enum": list(PRIORITIES)
                    },
                    "state_id": {
                        "type": "string",
                        "description": "Updated state ID of the issue (optional)"
                    },
                    "assignees": {
                        "type": "array",
                        "items": {"type": "string"},
                        "description": "Updated array of user IDs to assign to this issue (optional)"
                    }
                },
                "required": ["project_id", "issue_id"]
            }
        ),
    ]
