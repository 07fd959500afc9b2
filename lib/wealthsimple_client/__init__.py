from .client import WealthsimpleClient, app_id
from .config_types import SANDBOX_URL, ClientConfig
from .credentials import AppCredentials
from .errors import (
    ApiError,
    AuthError,
    InvalidCredentialsError,
    NetworkError,
    ResponseParseError,
    WealthsimpleClientError,
)

__all__ = [
    "WealthsimpleClient",
    "app_id",
    "ClientConfig",
    "SANDBOX_URL",
    "AppCredentials",
    "ApiError",
    "AuthError",
    "InvalidCredentialsError",
    "NetworkError",
    "ResponseParseError",
    "WealthsimpleClientError",
]
