"""
Shared pytest fixtures for the counter_action tests.

HTTP is never performed: tests patch ``src.counter_action.retry.requests.request``
and feed it real ``requests.Response`` objects built by :func:`make_response`.
Waits are patched at ``src.counter_action.retry.wait_milliseconds`` so the
retry schedule can be asserted without sleeping.
"""

from __future__ import annotations

import json

import pytest
import requests
from requests.structures import CaseInsensitiveDict

ORIGIN = "https://abacus.jasoncameron.dev"


# ---------------------------------------------------------------------------
# Response builder
# ---------------------------------------------------------------------------

def make_response(
    status_code: int = 200,
    body: str | dict | None = None,
    headers: dict[str, str] | None = None,
) -> requests.Response:
    """Build a fully-read ``requests.Response`` with the given status and body."""
    if isinstance(body, dict):
        body = json.dumps(body)
    response = requests.Response()
    response.status_code = status_code
    response._content = (body or "").encode("utf-8")
    response._content_consumed = True
    response.encoding = "utf-8"
    response.headers = CaseInsensitiveDict(headers or {})
    return response


# ---------------------------------------------------------------------------
# Fake host
# ---------------------------------------------------------------------------

class FakeHost:
    """In-memory ActionHost that records every call in order."""

    def __init__(self, **inputs: str) -> None:
        self.inputs = inputs
        self.outputs: dict[str, str] = {}
        self.secrets: list[str] = []
        self.events: list[tuple[str, ...]] = []
        self.failure: str | None = None

    def get_input(self, name: str) -> str:
        return self.inputs.get(name, "")

    def set_output(self, name: str, value: str) -> None:
        self.outputs[name] = value
        self.events.append(("output", name, value))

    def set_secret(self, value: str) -> None:
        self.secrets.append(value)
        self.events.append(("secret", value))

    def set_failed(self, message: str) -> None:
        self.failure = message
        self.events.append(("failed", message))


@pytest.fixture(autouse=True)
def _default_origin(monkeypatch):
    """Pin the service origin regardless of the developer's environment."""
    monkeypatch.delenv("ABACUS_BASE_URL", raising=False)


@pytest.fixture
def fake_host():
    """Factory: ``fake_host(namespace='ns1', key='mykey', ...)``."""
    return FakeHost
