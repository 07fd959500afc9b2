from __future__ import annotations

import os

import typer

from .. import console
from ..config import config_path, default_config, load_config, load_file_config, normalize_base_url, save_config

app = typer.Typer(help="Manage local CLI settings (~/.config/wealthsimple/config.toml).")


@app.command("init")
def init_settings(
        force: bool = typer.Option(False, "--force", help="Overwrite existing config."),
        client_id: str = typer.Option(..., "--client-id", prompt="Client ID", help="OAuth application client ID."),
        client_secret: str = typer.Option(
            ...,
            "--client-secret",
            prompt="Client secret",
            hide_input=True,
            help="OAuth application client secret.",
        ),
        redirect_uri: str = typer.Option(..., "--redirect-uri", prompt="Redirect URI", help="OAuth redirect URI."),
):
    path = config_path()
    if os.path.exists(path) and not force:
        console.info(f"Config already exists: {path}")
        console.info("Use --force to overwrite.")
        return

    cfg = default_config()
    cfg.credentials.client_id = client_id.strip()
    cfg.credentials.client_secret = client_secret.strip()
    cfg.credentials.redirect_uri = redirect_uri.strip()
    if not cfg.credentials.is_complete():
        console.err("Client ID, client secret and redirect URI cannot be empty.")
        raise typer.Exit(code=2)
    saved = save_config(cfg)
    console.ok(f"Config written: {saved}")


@app.command("show")
def show_settings():
    cfg = load_config()
    creds = cfg.credentials
    secret_state = "(set)" if creds.client_secret else "(empty)"
    console.console.print(
        f"base_url={cfg.base_url} client_id={creds.client_id or '(empty)'} client_secret={secret_state} "
        f"redirect_uri={creds.redirect_uri or '(empty)'} legacy_wire={str(cfg.legacy_wire).lower()}",
        soft_wrap=True,
    )


@app.command("path")
def show_path():
    console.console.print(config_path(), soft_wrap=True)


@app.command("set")
def set_setting(
        base_url: str | None = typer.Option(None, "--base-url", help="Set API base URL."),
        client_id: str | None = typer.Option(None, "--client-id", help="Set OAuth client ID."),
        client_secret: str | None = typer.Option(None, "--client-secret", help="Set OAuth client secret."),
        redirect_uri: str | None = typer.Option(None, "--redirect-uri", help="Set OAuth redirect URI."),
        legacy_wire: bool | None = typer.Option(
            None,
            "--legacy-wire/--no-legacy-wire",
            help="Use the historical wire format (unencoded query, POST for people get).",
        ),
):
    cfg = load_file_config()
    if base_url is not None:
        cfg.base_url = normalize_base_url(base_url, warn=True)
        if not cfg.base_url:
            console.err("Base URL cannot be empty.")
            raise typer.Exit(code=2)
    if client_id is not None:
        cfg.credentials.client_id = client_id.strip()
    if client_secret is not None:
        cfg.credentials.client_secret = client_secret.strip()
    if redirect_uri is not None:
        cfg.credentials.redirect_uri = redirect_uri.strip()
    if legacy_wire is not None:
        cfg.legacy_wire = legacy_wire
    saved = save_config(cfg)
    console.ok(f"Settings updated: {saved}")
