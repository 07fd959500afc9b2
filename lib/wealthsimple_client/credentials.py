from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .errors import InvalidCredentialsError

_FIELDS = ("client_id", "client_secret", "redirect_uri")


@dataclass(frozen=True)
class AppCredentials:
    client_id: str
    client_secret: str = field(repr=False)
    redirect_uri: str

    @classmethod
    def from_mapping(cls, value: AppCredentials | Mapping[str, Any]) -> AppCredentials:
        """Validate a credentials object.

        All three fields must be present and of type ``str``. The error names
        the offending fields but never echoes their values.
        """
        if isinstance(value, AppCredentials):
            data: Mapping[str, Any] = {name: getattr(value, name) for name in _FIELDS}
        elif isinstance(value, Mapping):
            data = value
        else:
            raise InvalidCredentialsError(list(_FIELDS))

        bad = [name for name in _FIELDS if not isinstance(data.get(name), str)]
        if bad:
            raise InvalidCredentialsError(bad)
        return cls(
            client_id=data["client_id"],
            client_secret=data["client_secret"],
            redirect_uri=data["redirect_uri"],
        )

    def as_params(self) -> dict[str, str]:
        return {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "redirect_uri": self.redirect_uri,
        }
