"""Provider-agnostic OAuth2 Authorization Code engine.

``OAuth2Engine`` owns client credentials and the HTTP client, and calls back
into a ``ProviderCapabilities`` implementation for everything that differs
between identity providers (URLs, scopes, error mapping, resource owners).
"""

from __future__ import annotations

import logging
import secrets
from collections.abc import Callable, Mapping
from typing import Any

import httpx

from ..errors import UnexpectedResponseError
from . import pkce
from .contracts import ProviderCapabilities
from .grants import AbstractGrant, GrantFactory
from .http import (
    FORM_CONTENT_TYPE,
    BearerAuth,
    build_query_string,
    create_http_client,
    parse_response,
)
from .token import AccessToken

logger = logging.getLogger(__name__)

METHOD_GET = "GET"
METHOD_POST = "POST"

STATE_LENGTH = 32


def random_state(length: int = STATE_LENGTH) -> str:
    """Return ``length`` lowercase hex characters."""
    return secrets.token_hex(length // 2)


class OAuth2Engine:
    """Generic OAuth2 client driven by a provider adapter."""

    def __init__(
        self,
        provider: ProviderCapabilities,
        *,
        client_id: str | None = None,
        client_secret: str | None = None,
        redirect_uri: str | None = None,
        http_client: httpx.Client | None = None,
        state_generator: Callable[[int], str] | None = None,
        grant_factory: GrantFactory | None = None,
        pkce_method: str | None = None,
        access_token_resource_owner_id: str | None = None,
    ):
        if pkce_method is not None and pkce_method not in pkce.SUPPORTED_METHODS:
            raise ValueError(
                f"Unknown PKCE method {pkce_method!r}; expected one of {pkce.SUPPORTED_METHODS}"
            )

        self.provider = provider
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.pkce_method = pkce_method
        self.access_token_resource_owner_id = access_token_resource_owner_id

        self.grant_factory = grant_factory or GrantFactory()
        self._state_generator = state_generator or random_state
        self._http_client = http_client
        self._owns_http_client = http_client is None

        self.state: str | None = None
        self.pkce_code: str | None = None

    # ── collaborators ────────────────────────────────────────────────────────
    @property
    def http_client(self) -> httpx.Client:
        if self._http_client is None:
            self._http_client = create_http_client()
        return self._http_client

    def close(self) -> None:
        """Close the HTTP client if the engine created it."""
        if self._owns_http_client and self._http_client is not None:
            self._http_client.close()
            self._http_client = None

    # ── authorization ────────────────────────────────────────────────────────
    def get_random_state(self, length: int = STATE_LENGTH) -> str:
        return self._state_generator(length)

    def get_state(self) -> str | None:
        """The state sent with the last generated authorization URL."""
        return self.state

    def get_authorization_parameters(self, options: Mapping[str, Any]) -> dict[str, Any]:
        params = dict(options)

        if not params.get("state"):
            params["state"] = self.get_random_state()
        if not params.get("scope"):
            params["scope"] = self.provider.default_scopes()
        params.setdefault("response_type", "code")
        params.setdefault("approval_prompt", "auto")

        if isinstance(params["scope"], (list, tuple, set, frozenset)):
            params["scope"] = self.provider.scope_separator().join(params["scope"])

        # Remembered so the caller can verify it on the redirect back.
        self.state = params["state"]

        if self.pkce_method:
            self.pkce_code = pkce.generate_code_verifier()
            params["code_challenge"] = pkce.code_challenge(self.pkce_code, self.pkce_method)
            params["code_challenge_method"] = self.pkce_method

        params["client_id"] = self.client_id
        params.setdefault("redirect_uri", self.redirect_uri)
        return params

    def get_authorization_url(self, **options: Any) -> str:
        base = self.provider.base_authorization_url()
        query = build_query_string(self.get_authorization_parameters(options))
        separator = "&" if "?" in base else "?"
        return f"{base}{separator}{query}"

    # ── token exchange ───────────────────────────────────────────────────────
    def verify_grant(self, grant: str | AbstractGrant) -> AbstractGrant:
        if isinstance(grant, str):
            return self.grant_factory.get_grant(grant)
        if not self.grant_factory.is_grant(grant):
            raise TypeError(f"Grant must be a grant name or AbstractGrant, got {type(grant)!r}")
        return grant

    def get_access_token_request(self, params: Mapping[str, Any]) -> httpx.Request:
        return self.get_request(
            METHOD_POST,
            self.provider.base_access_token_url(params),
            headers={"Content-Type": FORM_CONTENT_TYPE},
            content=build_query_string(params),
        )

    def prepare_access_token_response(self, result: Mapping[str, Any]) -> dict[str, Any]:
        prepared = dict(result)
        key = self.access_token_resource_owner_id
        if key is not None and key in prepared:
            prepared["resource_owner_id"] = prepared[key]
        return prepared

    def create_access_token(self, response: Mapping[str, Any], grant: AbstractGrant) -> AccessToken:
        return AccessToken.from_response(response)

    # ── resource owner ───────────────────────────────────────────────────────
    def fetch_resource_owner_details(self, token: AccessToken) -> Mapping[str, Any]:
        url = self.provider.resource_owner_details_url(token)
        response = self.get_parsed_response(self.get_request(METHOD_GET, url), token=token)
        if not isinstance(response, Mapping):
            raise UnexpectedResponseError(
                "Invalid response received from Authorization Server. Expected JSON."
            )
        return response

    def get_resource_owner(self, token: AccessToken) -> Any:
        details = self.fetch_resource_owner_details(token)
        return self.provider.create_resource_owner(details, token)

    # ── requests ─────────────────────────────────────────────────────────────
    def get_request(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str] | None = None,
        content: str | bytes | None = None,
    ) -> httpx.Request:
        merged = {**self.provider.default_headers(), **(headers or {})}
        return httpx.Request(method, url, headers=merged, content=content)

    def get_authenticated_request(
        self, method: str, url: str, token: AccessToken | str
    ) -> httpx.Request:
        """Build a request that already carries the bearer header."""
        request = self.get_request(method, url)
        return next(BearerAuth(str(token)).auth_flow(request))

    def send(self, request: httpx.Request, token: AccessToken | str | None = None) -> httpx.Response:
        logger.debug(
            "Sending OAuth request",
            extra={
                "provider": getattr(self.provider, "provider_name", None),
                "method": request.method,
                "endpoint": request.url.path,
            },
        )
        if token is None:
            return self.http_client.send(request)
        return self.http_client.send(request, auth=BearerAuth(str(token)))

    def get_parsed_response(
        self, request: httpx.Request, token: AccessToken | str | None = None
    ) -> Any:
        response = self.send(request, token=token)
        parsed = parse_response(response)
        self.provider.check_response(response, parsed)
        return parsed


__all__ = ["OAuth2Engine", "random_state"]
