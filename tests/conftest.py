import os
import sys

import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import httpx

from tools import registry as tool_registry


class DummyResponse:
    def __init__(self, status_code=200, text="", json_data=None, headers=None):
        self.status_code = status_code
        self.text = text
        self._json = json_data or {}
        self.headers = headers or {}

    def raise_for_status(self):
        if self.status_code >= 400:
            raise httpx.HTTPStatusError("err", request=None, response=self)

    def json(self):
        return self._json


class DummyClient:
    """Stands in for ``httpx.AsyncClient``; replays queued responses and records calls."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False

    def _next(self):
        if len(self.responses) > 1:
            return self.responses.pop(0)
        return self.responses[0]

    async def get(self, url, params=None, headers=None):
        self.calls.append(("GET", url, params, headers))
        return self._next()

    async def post(self, url, json=None, headers=None):
        self.calls.append(("POST", url, json, headers))
        return self._next()


@pytest.fixture
def http(monkeypatch):
    """Install a DummyClient for ``httpx.AsyncClient``; call it with the responses to replay."""

    def install(*responses):
        client = DummyClient(*responses)
        monkeypatch.setattr(httpx, "AsyncClient", lambda timeout: client)
        return client

    return install


@pytest.fixture(autouse=True)
def fresh_registry(monkeypatch):
    monkeypatch.setattr(tool_registry, "_registry", None)
    yield
