from __future__ import annotations

import asyncio
from typing import Any

import typer
from wealthsimple_client import (
    ApiError,
    ClientConfig,
    InvalidCredentialsError,
    NetworkError,
    ResponseParseError,
    WealthsimpleClient,
)

from . import console
from .config import AppConfig, normalize_base_url


def make_client(
    cfg: AppConfig,
    *,
    base_url_override: str | None = None,
    strict: bool = False,
) -> WealthsimpleClient:
    base_url = normalize_base_url(base_url_override or cfg.base_url, warn=True)
    return WealthsimpleClient(
        cfg.credentials.as_mapping(),
        ClientConfig(
            base_url=base_url,
            legacy_wire=cfg.legacy_wire,
            raise_for_status=strict,
        ),
    )


def require_token(token: str | None) -> str:
    value = (token or "").strip()
    if not value:
        console.err("Access token required. Pass --token or set WEALTHSIMPLE_TOKEN.")
        raise typer.Exit(code=2)
    return value


def run_operation(
    cfg: AppConfig,
    operation: str,
    *args: Any,
    base_url: str | None = None,
    strict: bool = False,
) -> Any:
    """Run one client operation to completion and print its JSON result."""
    if operation != "health_check" and not cfg.credentials.is_complete():
        console.err("App credentials are not configured. Run `wealthsimple settings set` first.")
        raise typer.Exit(code=2)
    try:
        client = make_client(cfg, base_url_override=base_url, strict=strict)
    except InvalidCredentialsError as e:
        console.err(f"{e}. Run `wealthsimple settings set` first.")
        raise typer.Exit(code=2)

    async def _run() -> Any:
        async with client:
            return await getattr(client, operation)(*args)

    try:
        data = asyncio.run(_run())
    except ApiError as e:
        console.err(f"{operation} failed ({e.status_code}): {e}")
        if e.details:
            console.err(e.details)
        raise typer.Exit(code=2)
    except ResponseParseError as e:
        console.err(f"{operation} failed: {e}")
        raise typer.Exit(code=2)
    except NetworkError as e:
        console.err(f"{operation} failed: network error: {e}")
        raise typer.Exit(code=2)

    console.print_json(data)
    return data
