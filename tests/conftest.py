"""Shared fixtures: a RetoolClient wired to an in-process fake Retool."""

import json

import httpx
import pytest

from core.client import RetoolClient

BASE_URL = "https://retool.test"
API_KEY = "test-key"


class FakeRetool:
    """Records every request and answers with a canned response."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.payload = {"ok": True}
        self.text = None
        self.error = None
        self.client = RetoolClient(
            BASE_URL, API_KEY, transport=httpx.MockTransport(self._handle)
        )

    def respond(self, status_code=200, body=None, text=None):
        self.status_code = status_code
        self.payload = body
        self.text = text

    def fail_with(self, error_cls):
        self.error = error_cls

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error("connection refused", request=request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        if self.payload is None:
            return httpx.Response(self.status_code, content=b"")
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_body(self):
        content = self.last.content
        return json.loads(content) if content else None


@pytest.fixture
def retool():
    fake = FakeRetool()
    yield fake
    fake.client.close()
