from __future__ import annotations

import typer

from ..config import load_config
from ..http import require_token, run_operation
from ..options import base_url_option, body_option, params_option, strict_option, token_option
from ..params import parse_body, parse_params

app = typer.Typer(help="People commands.")


@app.command("create")
def create_person(
        body: str | None = body_option(),
        token: str | None = token_option(),
        base_url: str | None = base_url_option(),
        strict: bool = strict_option(),
):
    run_operation(
        load_config(), "create_person", require_token(token), parse_body(body), base_url=base_url, strict=strict
    )


@app.command("list")
def list_people(
        params: list[str] | None = params_option(),
        token: str | None = token_option(),
        base_url: str | None = base_url_option(),
        strict: bool = strict_option(),
):
    run_operation(
        load_config(), "list_people", require_token(token), parse_params(params), base_url=base_url, strict=strict
    )


@app.command("get")
def get_person(
        person_id: str = typer.Argument(..., help="Person ID, e.g. person-12398ud."),
        token: str | None = token_option(),
        base_url: str | None = base_url_option(),
        strict: bool = strict_option(),
):
    run_operation(load_config(), "get_person", require_token(token), person_id, base_url=base_url, strict=strict)


@app.command("update")
def update_person(
        person_id: str = typer.Argument(..., help="Person ID."),
        body: str | None = body_option(),
        token: str | None = token_option(),
        base_url: str | None = base_url_option(),
        strict: bool = strict_option(),
):
    """Update a person. Set an attribute to null to remove it."""
    run_operation(
        load_config(),
        "update_person",
        require_token(token),
        person_id,
        parse_body(body),
        base_url=base_url,
        strict=strict,
    )
