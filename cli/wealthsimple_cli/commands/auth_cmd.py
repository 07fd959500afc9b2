from __future__ import annotations

import typer

from ..config import load_config
from ..http import run_operation
from ..options import base_url_option, strict_option

app = typer.Typer(help="OAuth2 token commands. Tokens are printed, never stored.")


@app.command("exchange")
def exchange(
        code: str = typer.Argument(..., help="Auth code from the OAuth redirect."),
        base_url: str | None = base_url_option(),
        strict: bool = strict_option(),
):
    run_operation(load_config(), "token_exchange", code, base_url=base_url, strict=strict)


@app.command("refresh")
def refresh(
        refresh_token: str = typer.Argument(..., help="Refresh token."),
        base_url: str | None = base_url_option(),
        strict: bool = strict_option(),
):
    run_operation(load_config(), "token_refresh", refresh_token, base_url=base_url, strict=strict)
