from __future__ import annotations

import json

import httpx
from typer.testing import CliRunner

from wealthsimple_cli import config, main

runner = CliRunner()


def test_help_lists_command_groups() -> None:
    result = runner.invoke(main.app, ["--help"])
    assert result.exit_code == 0
    for name in ("settings", "health", "auth", "users", "people", "accounts", "deposits", "bank-accounts"):
        assert name in result.output


def test_settings_set_and_show_hides_secret(config_dir) -> None:
    result = runner.invoke(
        main.app,
        [
            "settings",
            "set",
            "--client-id",
            "cid",
            "--client-secret",
            "very-secret",
            "--redirect-uri",
            "https://cb.example.test",
            "--legacy-wire",
        ],
    )
    assert result.exit_code == 0, result.output

    cfg = config.load_file_config()
    assert cfg.credentials.client_secret == "very-secret"
    assert cfg.legacy_wire is True

    result = runner.invoke(main.app, ["settings", "show"])
    assert result.exit_code == 0
    assert "client_id=cid" in result.output
    assert "client_secret=(set)" in result.output
    assert "very-secret" not in result.output
    assert "legacy_wire=true" in result.output


def test_settings_init_refuses_to_overwrite(config_dir) -> None:
    args = ["settings", "init", "--client-id", "a", "--client-secret", "b", "--redirect-uri", "c"]
    assert runner.invoke(main.app, args).exit_code == 0
    result = runner.invoke(main.app, [*args[:3], "changed", *args[4:]])
    assert result.exit_code == 0
    assert config.load_file_config().credentials.client_id == "a"


def test_users_get_prints_json(env_credentials, mock_api) -> None:
    mock_api["response"] = lambda _req: httpx.Response(200, json={"id": "user-1", "object": "user"})

    result = runner.invoke(main.app, ["users", "get", "user-1", "--token", "tok"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {"id": "user-1", "object": "user"}
    req = mock_api["requests"][0]
    assert req.method == "GET"
    assert req.url.path == "/v1/users/user-1"
    assert req.headers["authorization"] == "Bearer tok"


def test_token_read_from_environment(env_credentials, mock_api, monkeypatch) -> None:
    monkeypatch.setenv(config.ENV_TOKEN, "env-tok")
    result = runner.invoke(main.app, ["accounts", "list", "-p", "limit=5"])
    assert result.exit_code == 0, result.output
    req = mock_api["requests"][0]
    assert req.headers["authorization"] == "Bearer env-tok"
    assert req.url.params["limit"] == "5"


def test_missing_token_exits(env_credentials, mock_api) -> None:
    result = runner.invoke(main.app, ["people", "list"])
    assert result.exit_code == 2
    assert mock_api["requests"] == []


def test_auth_exchange_posts_code(env_credentials, mock_api) -> None:
    mock_api["response"] = lambda _req: httpx.Response(200, json={"access_token": "a", "refresh_token": "r"})
    result = runner.invoke(main.app, ["auth", "exchange", "abc123"])
    assert result.exit_code == 0, result.output
    req = mock_api["requests"][0]
    assert req.method == "POST"
    assert json.loads(req.content) == {"grant_type": "authorization_code", "code": "abc123"}


def test_people_update_sends_body(env_credentials, mock_api) -> None:
    result = runner.invoke(
        main.app,
        ["people", "update", "person-1", "--token", "tok", "--body", '{"full_legal_name": null}'],
    )
    assert result.exit_code == 0, result.output
    req = mock_api["requests"][0]
    assert req.method == "PATCH"
    assert json.loads(req.content) == {"full_legal_name": None}


def test_deposits_get_with_params(env_credentials, mock_api) -> None:
    result = runner.invoke(main.app, ["deposits", "get", "funds_transfer-1", "--token", "tok", "-p", "expand=x"])
    assert result.exit_code == 0, result.output
    req = mock_api["requests"][0]
    assert req.url.path == "/v1/deposits/funds_transfer-1"
    assert req.url.params["expand"] == "x"


def test_daily_values_and_projections(env_credentials, mock_api) -> None:
    assert runner.invoke(main.app, ["daily-values", "--token", "tok"]).exit_code == 0
    assert runner.invoke(main.app, ["projections", "--token", "tok"]).exit_code == 0
    assert [r.url.path for r in mock_api["requests"]] == ["/v1/daily_values/", "/v1/projections"]


def test_strict_mode_reports_error(env_credentials, mock_api) -> None:
    mock_api["response"] = lambda _req: httpx.Response(401, json={"error": "invalid_token"})
    result = runner.invoke(main.app, ["bank-accounts", "list", "--token", "bad", "--strict"])
    assert result.exit_code == 2
    assert "invalid_token" in result.output


def test_health_without_credentials(config_dir, mock_api) -> None:
    result = runner.invoke(main.app, ["health"])
    assert result.exit_code == 0, result.output
    assert "authorization" not in mock_api["requests"][0].headers
