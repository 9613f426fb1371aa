"""Single-shot calls against the Plane REST API.

Every tool invocation opens a client scoped to the configured workspace,
issues exactly one request and closes it again. Failures are re-raised as
PlaneAPIError (non-2xx response) or PlaneTransportError (the request never
completed) so callers never see httpx exception types.
"""
from typing import Any, Optional
import logging

import httpx

from .config import Settings

logger = logging.getLogger("plane-mcp.api")

UNREADABLE_BODY = "Unable to parse error response"


class PlaneAPIError(Exception):
    """Plane answered with a non-success status."""

    def __init__(self, status_code: int, reason: str, body: str):
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(f"Plane API error: {status_code} {reason}\n{body}")


class PlaneTransportError(Exception):
    """The request could not be completed (DNS, connect, timeout, reset)."""

    def __init__(self, message: str):
        super().__init__(f"Error calling Plane API: {message}")


def create_client(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> httpx.AsyncClient:
    """Create an async client scoped to the workspace and carrying the API key."""
    headers = {
        "Content-Type": "application/json",
        "X-API-Key": settings.api_key,
    }
    return httpx.AsyncClient(base_url=settings.base_url, headers=headers, transport=transport)


async def call_plane_api(
    client: httpx.AsyncClient,
    endpoint: str,
    method: str,
    body: Optional[dict] = None
) -> Any:
    """Call the Plane API and return the decoded JSON response.

    Args:
        client: Client created by create_client()
        endpoint: Path relative to the workspace, e.g. "/projects/"
        method: HTTP method (GET, POST, PATCH, DELETE)
        body: Optional request body, sent only for POST/PATCH

    Returns:
        Decoded JSON, or {"success": True} for 204 No Content

    Raises:
        PlaneAPIError: Plane returned a non-2xx status
        PlaneTransportError: The request failed before a response arrived
    """
    json_body = body if body is not None and method in ("POST", "PATCH") else None

    try:
        response = await client.request(method, endpoint, json=json_body)
    except httpx.RequestError as e:
        logger.error(f"Request error calling {method} {endpoint}:")
        logger.error(f"  Error type: {type(e).__name__}")
        logger.error(f"  Error message: {str(e)}")
        raise PlaneTransportError(str(e) or type(e).__name__) from e

    if not response.is_success:
        try:
            error_text = response.text
        except Exception:
            error_text = UNREADABLE_BODY
        logger.error(f"HTTP error calling {method} {endpoint}:")
        logger.error(f"  Status: {response.status_code}")
        logger.error(f"  URL: {response.request.url}")
        logger.error(f"  Response text: {error_text}")
        raise PlaneAPIError(response.status_code, response.reason_phrase, error_text)

    if response.status_code == 204:
        return {"success": True}

    try:
        return response.json()
    except ValueError as e:
        logger.error(f"Invalid JSON from {method} {endpoint}: {str(e)}")
        raise PlaneTransportError(f"invalid JSON in response: {str(e)}") from e
