from __future__ import annotations

import typer

from ..config import load_config
from ..http import require_token, run_operation
from ..options import base_url_option, body_option, params_option, strict_option, token_option
from ..params import parse_body, parse_params

app = typer.Typer(help="Users commands.")


@app.command("create")
def create_user(
        body: str | None = body_option(),
        base_url: str | None = base_url_option(),
        strict: bool = strict_option(),
):
    run_operation(load_config(), "create_user", parse_body(body), base_url=base_url, strict=strict)


@app.command("list")
def list_users(
        params: list[str] | None = params_option(),
        token: str | None = token_option(),
        base_url: str | None = base_url_option(),
        strict: bool = strict_option(),
):
    """List users, e.g. -p limit=25 -p offset=50 -p created_before=2017-06-21."""
    run_operation(
        load_config(), "list_users", require_token(token), parse_params(params), base_url=base_url, strict=strict
    )


@app.command("get")
def get_user(
        user_id: str = typer.Argument(..., help="User ID, e.g. user-12398ud."),
        token: str | None = token_option(),
        base_url: str | None = base_url_option(),
        strict: bool = strict_option(),
):
    run_operation(load_config(), "get_user", require_token(token), user_id, base_url=base_url, strict=strict)
