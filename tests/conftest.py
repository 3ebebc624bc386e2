import json
from typing import Callable, List

import httpx
import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from utility.config import Settings


class FakeUpstream:
    """Stands in for the generativelanguage API and records what it was sent."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.respond: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(
            200, json={"candidates": [{"content": {"parts": [{"text": "ok"}]}}]}
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)

    def reply_json(self, body, status_code: int = 200):
        self.respond = lambda request: httpx.Response(status_code, json=body)

    def reply_text(self, body: str, status_code: int = 200):
        self.respond = lambda request: httpx.Response(status_code, text=body)

    @property
    def calls(self) -> int:
        return len(self.requests)

    def last_payload(self) -> dict:
        return json.loads(self.requests[-1].content)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def settings():
    return Settings(api_key="test-key", api_base="https://upstream.test/v1beta")


@pytest.fixture
def client(settings, upstream):
    app = create_app(settings, transport=upstream.transport)
    return TestClient(app)


@pytest.fixture
def unconfigured_client(upstream):
    app = create_app(Settings(api_key=None), transport=upstream.transport)
    return TestClient(app)
