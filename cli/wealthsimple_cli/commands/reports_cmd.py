from __future__ import annotations

from ..config import load_config
from ..http import require_token, run_operation
from ..options import base_url_option, params_option, strict_option, token_option
from ..params import parse_params


def daily_values(
        params: list[str] | None = params_option(),
        token: str | None = token_option(),
        base_url: str | None = base_url_option(),
        strict: bool = strict_option(),
) -> None:
    """Daily account values, e.g. -p account_id=... -p start_date=2018-01-01."""
    run_operation(
        load_config(), "get_daily_values", require_token(token), parse_params(params), base_url=base_url, strict=strict
    )


def projections(
        params: list[str] | None = params_option(),
        token: str | None = token_option(),
        base_url: str | None = base_url_option(),
        strict: bool = strict_option(),
) -> None:
    """Projected account growth."""
    run_operation(
        load_config(), "get_projection", require_token(token), parse_params(params), base_url=base_url, strict=strict
    )
