from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from typing import Any

import tomli_w
from platformdirs import user_config_dir
from wealthsimple_client import SANDBOX_URL

from . import console

APP_NAME = "wealthsimple"
CONFIG_FILENAME = "config.toml"

ENV_BASE_URL = "WEALTHSIMPLE_BASE_URL"
ENV_CLIENT_ID = "WEALTHSIMPLE_CLIENT_ID"
ENV_CLIENT_SECRET = "WEALTHSIMPLE_CLIENT_SECRET"
ENV_REDIRECT_URI = "WEALTHSIMPLE_REDIRECT_URI"
ENV_TOKEN = "WEALTHSIMPLE_TOKEN"

_WARNED_BASE_URL_SCHEME = False


@dataclass
class CredentialsConfig:
    client_id: str = ""
    client_secret: str = ""
    redirect_uri: str = ""

    def is_complete(self) -> bool:
        return bool(self.client_id and self.client_secret and self.redirect_uri)

    def as_mapping(self) -> dict[str, str]:
        return {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "redirect_uri": self.redirect_uri,
        }


@dataclass
class AppConfig:
    base_url: str = SANDBOX_URL
    credentials: CredentialsConfig = field(default_factory=CredentialsConfig)
    legacy_wire: bool = False


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig(base_url=SANDBOX_URL, credentials=CredentialsConfig(), legacy_wire=False)


def normalize_base_url(raw: str | None, *, warn: bool = False) -> str:
    value = (raw or "").strip()
    if not value:
        return ""
    value = value.rstrip("/")
    lowered = value.lower()
    if lowered.startswith("http://") or lowered.startswith("https://"):
        return value

    host = value.split("/", 1)[0]
    host = host.split(":", 1)[0].lower()
    if host in {"localhost", "127.0.0.1", "0.0.0.0"}:
        scheme = "http://"
    else:
        scheme = "https://"

    normalized = f"{scheme}{value}"
    if warn:
        _warn_missing_scheme(normalized)
    return normalized


def _warn_missing_scheme(normalized: str) -> None:
    global _WARNED_BASE_URL_SCHEME
    if _WARNED_BASE_URL_SCHEME:
        return
    if not _is_interactive():
        return
    console.warn(f"base_url missing scheme, assuming {normalized}")
    _WARNED_BASE_URL_SCHEME = True


def _is_interactive() -> bool:
    import sys
    return bool(sys.stderr.isatty() or sys.stdout.isatty())


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    return {
        "base_url": cfg.base_url,
        "legacy_wire": cfg.legacy_wire,
        "credentials": cfg.credentials.as_mapping(),
    }


def from_toml(data: dict[str, Any]) -> AppConfig:
    base_url = normalize_base_url(str(data.get("base_url") or ""), warn=True)
    legacy_wire = data.get("legacy_wire")
    creds_raw = data.get("credentials") or {}
    creds = CredentialsConfig()
    if isinstance(creds_raw, dict):
        creds = CredentialsConfig(
            client_id=str(creds_raw.get("client_id") or ""),
            client_secret=str(creds_raw.get("client_secret") or ""),
            redirect_uri=str(creds_raw.get("redirect_uri") or ""),
        )
    return AppConfig(
        base_url=base_url or SANDBOX_URL,
        credentials=creds,
        legacy_wire=legacy_wire if isinstance(legacy_wire, bool) else False,
    )


def apply_env(cfg: AppConfig) -> AppConfig:
    """Environment variables win over the config file."""
    base_url = normalize_base_url(os.getenv(ENV_BASE_URL, ""), warn=True)
    creds = cfg.credentials
    return AppConfig(
        base_url=base_url or cfg.base_url,
        credentials=CredentialsConfig(
            client_id=os.getenv(ENV_CLIENT_ID, "").strip() or creds.client_id,
            client_secret=os.getenv(ENV_CLIENT_SECRET, "").strip() or creds.client_secret,
            redirect_uri=os.getenv(ENV_REDIRECT_URI, "").strip() or creds.redirect_uri,
        ),
        legacy_wire=cfg.legacy_wire,
    )


def load_file_config() -> AppConfig:
    """Config file only, without environment overrides; used before saving."""
    try:
        with open(config_path(), "rb") as f:
            data = tomllib.load(f)
        return from_toml(data)
    except FileNotFoundError:
        return default_config()


def load_config() -> AppConfig:
    return apply_env(load_file_config())


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    ensure_parent_dir(path)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path
