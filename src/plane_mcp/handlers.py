"""MCP tool handlers for Plane projects and issues.

All handlers follow a consistent pattern:
- Accept: arguments dict and an httpx.AsyncClient scoped to the workspace
- Validate required path arguments before any request is made
- Return: the decoded JSON from Plane (formatting is the dispatcher's job)
- Log all operations for debugging
"""
from typing import Any
import logging

import httpx

from .api import call_plane_api
from .payloads import build_query_string, normalize_assignees
from .schemas import (
    CreateIssueArgs,
    IssueArgs,
    ProjectArgs,
    passthrough,
    validate_arguments,
)

logger = logging.getLogger("plane-mcp.handlers")


# ============================================================================
# Project Handlers
# ============================================================================

async def handle_list_projects(arguments: dict, client: httpx.AsyncClient) -> Any:
    """List all projects in the workspace."""
    result = await call_plane_api(client, "/projects/", "GET")
    logger.info("Successfully listed projects")
    return result


async def handle_get_project(arguments: dict, client: httpx.AsyncClient) -> Any:
    """Get detailed information about a specific project."""
    args = validate_arguments(ProjectArgs, arguments)
    result = await call_plane_api(client, f"/projects/{args.project_id}/", "GET")
    logger.info(f"Successfully retrieved project {args.project_id}")
    return result


# ============================================================================
# Issue Handlers
# ============================================================================

async def handle_create_issue(arguments: dict, client: httpx.AsyncClient) -> Any:
    """Create a new issue in a project.

    Everything except project_id goes into the request body; assignees is
    coerced into a list of user IDs first.
    """
    args = validate_arguments(CreateIssueArgs, arguments)
    issue_data = normalize_assignees(passthrough(arguments, exclude=["project_id"]))

    result = await call_plane_api(
        client, f"/projects/{args.project_id}/issues/", "POST", issue_data
    )
    logger.info(f"Successfully created issue in project {args.project_id}: {args.name}")
    return result


async def handle_list_issues(arguments: dict, client: httpx.AsyncClient) -> Any:
    """List issues from a project.

    Remaining arguments (state_id, priority, assignee_id, limit, ...) are
    forwarded as query parameters in the order the caller gave them.
    """
    args = validate_arguments(ProjectArgs, arguments)
    query_string = build_query_string(passthrough(arguments, exclude=["project_id"]))

    endpoint = f"/projects/{args.project_id}/issues/"
    if query_string:
        endpoint = f"{endpoint}?{query_string}"

    result = await call_plane_api(client, endpoint, "GET")
    logger.info(f"Successfully listed issues for project {args.project_id}")
    return result


async def handle_get_issue(arguments: dict, client: httpx.AsyncClient) -> Any:
    """Get detailed information about a specific issue."""
    args = validate_arguments(IssueArgs, arguments)
    result = await call_plane_api(
        client, f"/projects/{args.project_id}/issues/{args.issue_id}/", "GET"
    )
    logger.info(f"Successfully retrieved issue {args.issue_id}")
    return result


async def handle_update_issue(arguments: dict, client: httpx.AsyncClient) -> Any:
    """Update an existing issue in a project."""
    args = validate_arguments(IssueArgs, arguments)
    update_data = normalize_assignees(
        passthrough(arguments, exclude=["project_id", "issue_id"])
    )

    result = await call_plane_api(
        client, f"/projects/{args.project_id}/issues/{args.issue_id}/", "PATCH", update_data
    )
    logger.info(f"Successfully updated issue {args.issue_id}")
    return result
