from __future__ import annotations

import functools

import httpx
import pytest

from wealthsimple_client import ClientConfig

from wealthsimple_cli import config, http


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    def _config_dir(_: str) -> str:
        return str(tmp_path)

    monkeypatch.setattr(config, "user_config_dir", _config_dir)
    for name in (
        config.ENV_BASE_URL,
        config.ENV_CLIENT_ID,
        config.ENV_CLIENT_SECRET,
        config.ENV_REDIRECT_URI,
        config.ENV_TOKEN,
    ):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


@pytest.fixture
def env_credentials(config_dir, monkeypatch):
    monkeypatch.setenv(config.ENV_CLIENT_ID, "cid")
    monkeypatch.setenv(config.ENV_CLIENT_SECRET, "shh")
    monkeypatch.setenv(config.ENV_REDIRECT_URI, "https://app.example.test/cb")
    return config_dir


@pytest.fixture
def mock_api(monkeypatch):
    """Route every client built by the CLI through an httpx.MockTransport."""
    state: dict = {"requests": [], "response": lambda _req: httpx.Response(200, json={"ok": True})}

    def _handler(request: httpx.Request) -> httpx.Response:
        state["requests"].append(request)
        return state["response"](request)

    monkeypatch.setattr(http, "ClientConfig", functools.partial(ClientConfig, transport=httpx.MockTransport(_handler)))
    return state
