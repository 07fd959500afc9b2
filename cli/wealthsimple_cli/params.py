from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import typer

from . import console


def parse_params(items: list[str] | None) -> dict[str, str] | None:
    """Turn repeated ``--param key=value`` options into a query map."""
    if not items:
        return None
    params: dict[str, str] = {}
    for item in items:
        key, sep, value = item.partition("=")
        key = key.strip()
        if not sep or not key:
            console.err(f"Invalid --param {item!r}, expected key=value.")
            raise typer.Exit(code=2)
        params[key] = value
    return params


def parse_body(raw: str | None) -> dict[str, Any]:
    """Parse ``--body`` given inline or as ``@path/to/file.json``."""
    if raw is None or not raw.strip():
        console.err("Request body required. Pass --body '{...}' or --body @file.json.")
        raise typer.Exit(code=2)

    text = raw.strip()
    if text.startswith("@"):
        path = Path(text[1:]).expanduser()
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            console.err(f"Cannot read body file {path}: {e}")
            raise typer.Exit(code=2)

    try:
        body = json.loads(text)
    except json.JSONDecodeError as e:
        console.err(f"Invalid JSON body: {e}")
        raise typer.Exit(code=2)
    if not isinstance(body, dict):
        console.err("Request body must be a JSON object.")
        raise typer.Exit(code=2)
    return body
