"""Shared fixtures: settings and a recording stand-in for the Plane API."""
import json

import httpx
import pytest

from plane_mcp.config import Settings
from plane_mcp.dispatcher import Dispatcher

API_URL = "https://plane.test/api/v1/workspaces"
WORKSPACE = "acme"
BASE_URL = f"{API_URL}/{WORKSPACE}"


class PlaneStub:
    """Records outbound requests and answers with a configurable response."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.payload = {"id": "ok"}
        self.text = None
        self.error = None

    def respond(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self.payload = payload
        self.text = text

    def fail_with(self, error):
        self.error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error(f"simulated {self.error.__name__}", request=request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        if self.payload is None:
            return httpx.Response(self.status_code)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_body(self):
        return json.loads(self.last.content) if self.last.content else None


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key="test-key", workspace_slug=WORKSPACE, api_url=API_URL, _env_file=None)


@pytest.fixture
def plane() -> PlaneStub:
    return PlaneStub()


@pytest.fixture
def dispatcher(settings: Settings, plane: PlaneStub) -> Dispatcher:
    return Dispatcher(settings, transport=httpx.MockTransport(plane.handler))
