"""Shared fixtures: a fake Loco API built on httpx.MockTransport."""

import json

import httpx
import pytest

from loco_mcp.core import loco_client
from loco_mcp.core.loco_client import LocoClient

API_KEY = "test-key"
BASE_URL = "https://localise.biz/api"


class FakeLoco:
    """Records every request and answers with a canned response."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body = "{}"
        self.error: Exception | None = None

    def respond(self, status_code: int = 200, body=None):
        self.status_code = status_code
        self.body = body if isinstance(body, str) else json.dumps(body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, text=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def client(self, api_key: str = API_KEY) -> LocoClient:
        return LocoClient(api_key, base_url=BASE_URL, transport=httpx.MockTransport(self.handler))


@pytest.fixture
def fake_loco():
    return FakeLoco()


@pytest.fixture
def client(fake_loco):
    return fake_loco.client()


@pytest.fixture
def patched_client(fake_loco, monkeypatch):
    """Route every tool call through the fake API, keeping the api_key each tool received."""
    keys = []

    def _get_client(api_key):
        keys.append(api_key)
        return fake_loco.client(api_key)

    monkeypatch.setattr(loco_client, "get_client", _get_client)
    return keys
