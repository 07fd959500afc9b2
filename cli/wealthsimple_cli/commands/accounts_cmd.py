from __future__ import annotations

import typer

from ..config import load_config
from ..http import require_token, run_operation
from ..options import base_url_option, body_option, params_option, strict_option, token_option
from ..params import parse_body, parse_params

app = typer.Typer(help="Accounts commands.")


@app.command("create")
def create_account(
        body: str | None = body_option(),
        token: str | None = token_option(),
        base_url: str | None = base_url_option(),
        strict: bool = strict_option(),
):
    run_operation(
        load_config(), "create_account", require_token(token), parse_body(body), base_url=base_url, strict=strict
    )


@app.command("list")
def list_accounts(
        params: list[str] | None = params_option(),
        token: str | None = token_option(),
        base_url: str | None = base_url_option(),
        strict: bool = strict_option(),
):
    run_operation(
        load_config(), "list_accounts", require_token(token), parse_params(params), base_url=base_url, strict=strict
    )


@app.command("get")
def get_account(
        account_id: str = typer.Argument(..., help="Account ID."),
        token: str | None = token_option(),
        base_url: str | None = base_url_option(),
        strict: bool = strict_option(),
):
    run_operation(load_config(), "get_account", require_token(token), account_id, base_url=base_url, strict=strict)


@app.command("types")
def account_types(
        params: list[str] | None = params_option(),
        token: str | None = token_option(),
        base_url: str | None = base_url_option(),
        strict: bool = strict_option(),
):
    run_operation(
        load_config(),
        "get_account_types",
        require_token(token),
        parse_params(params),
        base_url=base_url,
        strict=strict,
    )
