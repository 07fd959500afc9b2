from __future__ import annotations


class WealthsimpleClientError(Exception):
    """Base client error."""


class InvalidCredentialsError(WealthsimpleClientError, ValueError):
    def __init__(self, fields: list[str]):
        super().__init__(f"Invalid Wealthsimple app credentials: {', '.join(fields)}")
        self.fields = fields


class NetworkError(WealthsimpleClientError):
    """Transport/network layer error."""


class ResponseParseError(WealthsimpleClientError, ValueError):
    def __init__(self, status_code: int, message: str, text: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.text = text


class ApiError(WealthsimpleClientError):
    def __init__(self, status_code: int, message: str, details: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class AuthError(ApiError):
    """Auth-related API error."""
