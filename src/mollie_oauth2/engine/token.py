"""Access token value returned by the token endpoint."""

from __future__ import annotations

import time
from collections.abc import Mapping
from typing import Any

from pydantic import Field

from ..errors import MissingParameterError
from ..models import OAuthBaseModel

# Values above this are absolute UNIX timestamps, anything below is a lifetime.
_EXPIRATION_TIMESTAMP_THRESHOLD = 10**9

_KNOWN_KEYS = frozenset(
    {"access_token", "resource_owner_id", "refresh_token", "expires_in", "expires"}
)


class AccessToken(OAuthBaseModel):
    """Parsed OAuth2 access token.

    ``expires`` is an absolute UNIX timestamp. ``response_values`` holds every
    response field without a dedicated attribute (``token_type``, ``scope``, ...).
    """

    access_token: str
    expires: int | None = None
    refresh_token: str | None = None
    resource_owner_id: str | None = None
    response_values: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_response(cls, options: Mapping[str, Any], now: float | None = None) -> AccessToken:
        """Build a token from a prepared token endpoint response.

        ``expires_in`` is a lifetime in seconds and must be numeric. ``expires``
        is accepted as either an absolute timestamp or a lifetime.
        """
        if not options.get("access_token"):
            raise MissingParameterError('Required option not passed: "access_token"')

        current = int(now if now is not None else time.time())
        expires: int | None = None

        if options.get("expires_in") is not None:
            try:
                expires = current + int(options["expires_in"])
            except (TypeError, ValueError) as exc:
                raise MissingParameterError("expires_in value must be an integer") from exc
        elif options.get("expires") is not None:
            try:
                expires = int(options["expires"])
            except (TypeError, ValueError) as exc:
                raise MissingParameterError("expires value must be an integer") from exc
            if expires <= _EXPIRATION_TIMESTAMP_THRESHOLD:
                expires += current

        resource_owner_id = options.get("resource_owner_id")
        refresh_token = options.get("refresh_token")
        return cls(
            access_token=str(options["access_token"]),
            expires=expires,
            refresh_token=str(refresh_token) if refresh_token is not None else None,
            resource_owner_id=str(resource_owner_id) if resource_owner_id is not None else None,
            response_values={k: v for k, v in options.items() if k not in _KNOWN_KEYS},
        )

    def has_expired(self, now: float | None = None) -> bool:
        if self.expires is None:
            raise RuntimeError('"expires" is not set on the token')
        return self.expires < (now if now is not None else time.time())

    def __str__(self) -> str:
        return self.access_token


__all__ = ["AccessToken"]
