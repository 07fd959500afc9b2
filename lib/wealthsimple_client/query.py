from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote, urlencode


def _legacy_value(value: Any) -> str:
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return "null"
    return str(value)


def merge_params(*maps: Mapping[str, Any] | None) -> dict[str, Any]:
    """Merge query maps left to right; later keys override earlier ones."""
    merged: dict[str, Any] = {}
    for m in maps:
        if m:
            merged.update(m)
    return merged


def build_query(params: Mapping[str, Any] | None, *, legacy: bool = False) -> str:
    """Render ``params`` as a query string including the leading ``?``.

    Legacy mode keeps the historical wire format: unencoded ``key=value``
    pairs, each followed by ``&``, so ``{}`` yields ``"?"`` and
    ``{"a": 1}`` yields ``"?a=1&"``. Otherwise pairs with a ``None`` value are
    dropped, the rest are percent-encoded, and an empty result is ``""``.
    """
    params = params or {}
    if legacy:
        return "?" + "".join(f"{k}={_legacy_value(v)}&" for k, v in params.items())

    pairs = {k: (str(v).lower() if isinstance(v, bool) else v) for k, v in params.items() if v is not None}
    query = urlencode(pairs) if pairs else ""
    return f"?{query}" if query else ""


def render_path(template: str, values: Mapping[str, Any], *, legacy: bool = False) -> str:
    if legacy:
        return template.format(**{k: str(v) for k, v in values.items()})
    return template.format(**{k: quote(str(v), safe="") for k, v in values.items()})
