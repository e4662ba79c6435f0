"""Exception hierarchy for mollie-oauth2.

Every error raised by this package derives from ``MollieOAuthError`` so
callers can catch the whole family at once. HTTP transport failures raised
by httpx are not wrapped and propagate unchanged.
"""

from __future__ import annotations

from typing import Any

import httpx


class MollieOAuthError(Exception):
    """Base class for all mollie-oauth2 errors."""


class ConfigurationError(MollieOAuthError, ValueError):
    """Invalid provider configuration (client id prefix, base URLs, config files)."""


class UnexpectedResponseError(MollieOAuthError):
    """A response body could not be interpreted as the expected mapping."""

    def __init__(self, message: str, response: httpx.Response | None = None):
        super().__init__(message)
        self.response = response


class IdentityProviderError(MollieOAuthError):
    """The provider answered with an HTTP error status.

    Carries the HTTP status code, the parsed body and the raw response so
    callers can inspect what the provider returned.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        response: httpx.Response,
        data: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response
        self.data = data


class MissingFieldError(MollieOAuthError, LookupError):
    """A required field is absent from a provider response."""

    def __init__(self, field: str):
        super().__init__(f"Required field missing from response: {field!r}")
        self.field = field


class InvalidGrantError(MollieOAuthError, ValueError):
    """An unknown grant was requested."""


class MissingParameterError(MollieOAuthError, ValueError):
    """A parameter required by a grant or a token response is missing."""


__all__ = [
    "ConfigurationError",
    "IdentityProviderError",
    "InvalidGrantError",
    "MissingFieldError",
    "MissingParameterError",
    "MollieOAuthError",
    "UnexpectedResponseError",
]
