from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from .config_types import ClientConfig
from .credentials import AppCredentials
from .endpoints import ENDPOINTS, Endpoint
from .query import merge_params, render_path
from .transport import Transport


def _bind(endpoint: Endpoint):
    sig = endpoint.signature()

    async def call(self, *args, **kwargs):
        bound = sig.bind(self, *args, **kwargs)
        bound.apply_defaults()
        arguments = dict(bound.arguments)
        arguments.pop("self")
        return await self._call(endpoint, **arguments)

    call.__name__ = endpoint.name
    call.__qualname__ = f"WealthsimpleClient.{endpoint.name}"
    call.__doc__ = f"{endpoint.summary}\n\n{endpoint.method} {endpoint.path}"
    call.__signature__ = sig
    return call


class WealthsimpleClient:
    """Async client bound to one set of application credentials.

    Credentials are validated here, so a bad credentials object fails before
    any transport exists. Every API operation is a coroutine method generated
    from ``ENDPOINTS``; it resolves with the parsed JSON body whatever the HTTP
    status, unless ``ClientConfig.raise_for_status`` is set.
    """

    def __init__(self, credentials: AppCredentials | Mapping[str, Any], cfg: ClientConfig | None = None):
        self._credentials = AppCredentials.from_mapping(credentials)
        self._cfg = cfg or ClientConfig()
        self._t = Transport(self._cfg)

    @property
    def credentials(self) -> AppCredentials:
        return self._credentials

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    @staticmethod
    def operations() -> tuple[str, ...]:
        return tuple(sorted(ENDPOINTS))

    async def aclose(self) -> None:
        await self._t.aclose()

    async def __aenter__(self) -> WealthsimpleClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def _call(self, endpoint: Endpoint, *, token: str = "", **arguments: Any) -> Any:
        """Dispatch one request for ``endpoint`` with already-named arguments."""
        legacy = self._cfg.legacy_wire
        path = render_path(endpoint.path, {name: arguments[name] for name in endpoint.path_args}, legacy=legacy)
        params = arguments.get("params")
        body = arguments.get("body")

        if endpoint.body_args or endpoint.body_defaults:
            fields = dict(endpoint.body_defaults)
            fields.update({name: arguments[name] for name in endpoint.body_args})
            body = {**(body or {}), **fields}

        if legacy and endpoint.legacy_body_in_query:
            params = merge_params(params, body)
            body = None

        query = merge_params(self._credentials.as_params() if endpoint.with_credentials else None, params)
        return await self._t.request(
            endpoint.wire_method(legacy=legacy),
            path,
            token=token or "",
            params=query,
            body=body,
        )


for _name, _endpoint in ENDPOINTS.items():
    setattr(WealthsimpleClient, _name, _bind(_endpoint))
del _name, _endpoint


def app_id(credentials: AppCredentials | Mapping[str, Any], **overrides: Any) -> WealthsimpleClient:
    """Validate ``credentials`` and return a bound client.

    Keyword arguments override ``ClientConfig`` fields, e.g.
    ``app_id(creds, base_url="https://api.wealthsimple.com/v1")``.
    """
    cfg = dataclasses.replace(ClientConfig(), **overrides)
    return WealthsimpleClient(credentials, cfg)
