from __future__ import annotations

import typer

from ..config import load_config
from ..http import require_token, run_operation
from ..options import base_url_option, body_option, params_option, strict_option, token_option
from ..params import parse_body, parse_params

bank_accounts_app = typer.Typer(help="Linked bank accounts.")
deposits_app = typer.Typer(help="Deposits commands.")


@bank_accounts_app.command("list")
def list_bank_accounts(
        params: list[str] | None = params_option(),
        token: str | None = token_option(),
        base_url: str | None = base_url_option(),
        strict: bool = strict_option(),
):
    run_operation(
        load_config(),
        "list_bank_accounts",
        require_token(token),
        parse_params(params),
        base_url=base_url,
        strict=strict,
    )


@deposits_app.command("create")
def create_deposit(
        body: str | None = body_option(),
        token: str | None = token_option(),
        base_url: str | None = base_url_option(),
        strict: bool = strict_option(),
):
    run_operation(
        load_config(), "create_deposit", require_token(token), parse_body(body), base_url=base_url, strict=strict
    )


@deposits_app.command("list")
def list_deposits(
        params: list[str] | None = params_option(),
        token: str | None = token_option(),
        base_url: str | None = base_url_option(),
        strict: bool = strict_option(),
):
    run_operation(
        load_config(), "list_deposits", require_token(token), parse_params(params), base_url=base_url, strict=strict
    )


@deposits_app.command("get")
def get_deposit(
        deposit_id: str = typer.Argument(..., help="Deposit ID."),
        params: list[str] | None = params_option(),
        token: str | None = token_option(),
        base_url: str | None = base_url_option(),
        strict: bool = strict_option(),
):
    run_operation(
        load_config(),
        "get_deposit",
        require_token(token),
        deposit_id,
        parse_params(params),
        base_url=base_url,
        strict=strict,
    )
