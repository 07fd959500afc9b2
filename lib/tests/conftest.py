from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from wealthsimple_client import ClientConfig, WealthsimpleClient

CREDS = {
    "client_id": "cid",
    "client_secret": "shh",
    "redirect_uri": "https://app.example.test/cb",
}


class Recorder:
    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.response: Callable[[httpx.Request], httpx.Response] = lambda _req: httpx.Response(200, json={"ok": True})

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def make_client(recorder):
    def _make(**overrides) -> WealthsimpleClient:
        cfg = ClientConfig(transport=httpx.MockTransport(recorder.handler), **overrides)
        return WealthsimpleClient(CREDS, cfg)

    return _make


@pytest.fixture
def creds() -> dict[str, str]:
    return dict(CREDS)
