from __future__ import annotations
from dataclasses import dataclass

import httpx

SANDBOX_URL = "https://api.sandbox.wealthsimple.com/v1"


@dataclass(frozen=True)
class ClientConfig:
    base_url: str = SANDBOX_URL
    # None keeps the httpx default timeout
    timeout_s: float | None = None
    legacy_wire: bool = False
    raise_for_status: bool = False
    user_agent: str = "wealthsimple-client/0.1.0"
    transport: httpx.AsyncBaseTransport | None = None
