from __future__ import annotations

from ..config import load_config
from ..http import run_operation
from ..options import base_url_option, strict_option


def health(
        base_url: str | None = base_url_option(),
        strict: bool = strict_option(),
) -> None:
    """Check that the API is reachable (no credentials or token sent)."""
    run_operation(load_config(), "health_check", base_url=base_url, strict=strict)
