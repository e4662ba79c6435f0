"""Contracts between the generic OAuth2 engine and provider adapters."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

import httpx

from .token import AccessToken


@runtime_checkable
class ProviderCapabilities(Protocol):
    """Callbacks a provider adapter supplies to ``OAuth2Engine``."""

    def base_authorization_url(self) -> str:
        """Return the URL the user is redirected to for consent."""

    def base_access_token_url(self, params: Mapping[str, Any]) -> str:
        """Return the URL used to request (and revoke) access tokens."""

    def resource_owner_details_url(self, token: AccessToken) -> str:
        """Return the URL that serves the resource owner's profile."""

    def default_scopes(self) -> list[str]:
        """Scopes requested when the caller does not pass any."""

    def scope_separator(self) -> str:
        """Separator used when joining a list of scopes."""

    def check_response(self, response: httpx.Response, data: Any) -> None:
        """Raise when ``response`` is an error response."""

    def create_resource_owner(self, response: Mapping[str, Any], token: AccessToken) -> Any:
        """Build a resource owner from a parsed profile response."""

    def default_headers(self) -> dict[str, str]:
        """Headers added to every request."""


__all__ = ["ProviderCapabilities"]
