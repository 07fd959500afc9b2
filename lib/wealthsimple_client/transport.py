from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

import httpx

from .config_types import ClientConfig
from .errors import ApiError, AuthError, NetworkError, ResponseParseError
from .query import build_query

logger = logging.getLogger(__name__)

_ERROR_KEYS = ("error", "message", "detail")


class Transport:
    def __init__(self, cfg: ClientConfig):
        self._cfg = cfg
        self._base_url = cfg.base_url.rstrip("/")
        headers = {
            "User-Agent": cfg.user_agent,
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        kwargs: dict[str, Any] = {}
        if cfg.timeout_s is not None:
            kwargs["timeout"] = cfg.timeout_s
        if cfg.transport is not None:
            kwargs["transport"] = cfg.transport

        self._client = httpx.AsyncClient(headers=headers, **kwargs)

    @property
    def base_url(self) -> str:
        return self._base_url

    async def aclose(self) -> None:
        await self._client.aclose()

    async def request(
            self,
            method: str,
            path: str,
            *,
            token: str = "",
            params: Mapping[str, Any] | None = None,
            body: Any | None = None,
    ) -> Any:
        legacy = self._cfg.legacy_wire
        url = self._base_url + path + build_query(params, legacy=legacy)

        headers: dict[str, str] = {}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        elif legacy:
            # h11 rejects header values with trailing whitespace, so no "Bearer "
            headers["Authorization"] = "Bearer"
        content = None
        if body is not None or legacy:
            content = json.dumps(body)

        try:
            r = await self._client.request(method, url, headers=headers, content=content)
        except httpx.RequestError as e:
            raise NetworkError(str(e)) from e

        # query strings carry app credentials, only the path is logged
        logger.debug("%s %s -> %s", method, path, r.status_code)

        data: Any = None
        parse_error: ValueError | None = None
        try:
            data = r.json()
        except ValueError as e:
            parse_error = e

        if self._cfg.raise_for_status and r.status_code >= 400:
            self._raise_for_status(method, path, r, data, parse_error is None)

        if parse_error is not None:
            raise ResponseParseError(
                r.status_code,
                f"{method} {path} returned a non-JSON body (status {r.status_code})",
                r.text[:1000],
            ) from parse_error
        return data

    @staticmethod
    def _raise_for_status(method: str, path: str, r: httpx.Response, data: Any, parsed: bool) -> None:
        msg = f"{method} {path} failed with {r.status_code}"
        details = None

        if parsed and isinstance(data, dict):
            details = json.dumps(data, ensure_ascii=False)
            for key in _ERROR_KEYS:
                if data.get(key):
                    msg = str(data[key])
                    break
        elif r.text:
            details = r.text[:1000]

        if r.status_code in (401, 403):
            raise AuthError(r.status_code, msg, details)
        raise ApiError(r.status_code, msg, details)
