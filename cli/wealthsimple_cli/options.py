from __future__ import annotations

import typer

from .config import ENV_TOKEN


def token_option():
    return typer.Option(None, "--token", envvar=ENV_TOKEN, help="OAuth access token for the user.")


def base_url_option():
    return typer.Option(None, "--base-url", help="Override base URL.")


def strict_option():
    return typer.Option(False, "--strict", help="Fail on HTTP error statuses instead of printing the body.")


def params_option():
    return typer.Option(None, "--param", "-p", help="Query parameter as key=value (repeatable).")


def body_option():
    return typer.Option(None, "--body", "-b", help="JSON request body, inline or @file.json.")
