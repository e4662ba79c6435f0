"""Mollie OAuth2 provider adapter."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

import httpx
from pydantic import ValidationError

from ..config.models import MollieProviderConfigModel, normalize_base_url
from ..engine import AccessToken, GrantFactory, OAuth2Engine
from ..engine.grants import AbstractGrant
from ..engine.http import FORM_CONTENT_TYPE, build_query_string
from ..errors import ConfigurationError, IdentityProviderError, UnexpectedResponseError
from ..version import get_user_agent
from .resource_owner import MollieResourceOwner
from .scopes import SCOPE_ORGANIZATIONS_READ

logger = logging.getLogger(__name__)

CLIENT_ID_PREFIX = "app_"

METHOD_DELETE = "DELETE"

TOKEN_TYPE_ACCESS = "access_token"
TOKEN_TYPE_REFRESH = "refresh_token"


class MollieProviderAdapter:
    """Mollie-specific URLs, scopes and response handling for ``OAuth2Engine``.

    Typical flow::

        provider = MollieProviderAdapter(
            {"client_id": "app_...", "client_secret": "...", "redirect_uri": "https://..."}
        )
        url = provider.get_authorization_url(scope=[SCOPE_PAYMENTS_READ])
        # ... redirect the merchant, then on the callback:
        token = provider.get_access_token("authorization_code", code=code)
        owner = provider.get_resource_owner(token)
    """

    provider_name = "mollie"

    def __init__(
        self,
        config: MollieProviderConfigModel | Mapping[str, Any] | None = None,
        *,
        http_client: httpx.Client | None = None,
        state_generator: Callable[[int], str] | None = None,
        grant_factory: GrantFactory | None = None,
        pkce_method: str | None = None,
    ):
        if config is None:
            config = MollieProviderConfigModel()
        elif not isinstance(config, MollieProviderConfigModel):
            try:
                config = MollieProviderConfigModel.model_validate(dict(config))
            except ValidationError as exc:
                raise ConfigurationError(f"Invalid Mollie provider configuration: {exc}") from exc

        if config.client_id is not None and not config.client_id.startswith(CLIENT_ID_PREFIX):
            raise ConfigurationError(
                f"Mollie needs the client ID to be prefixed with {CLIENT_ID_PREFIX}."
            )

        self._api_url = config.api_url
        self._web_url = config.web_url
        self.engine = OAuth2Engine(
            self,
            client_id=config.client_id,
            client_secret=config.client_secret,
            redirect_uri=config.redirect_uri,
            http_client=http_client,
            state_generator=state_generator,
            grant_factory=grant_factory,
            pkce_method=pkce_method,
        )

    # ── configuration ────────────────────────────────────────────────────────
    @property
    def api_url(self) -> str:
        return self._api_url

    @property
    def web_url(self) -> str:
        return self._web_url

    def set_mollie_api_url(self, url: str) -> MollieProviderAdapter:
        self._api_url = self._checked_url(url)
        return self

    def set_mollie_web_url(self, url: str) -> MollieProviderAdapter:
        self._web_url = self._checked_url(url)
        return self

    @staticmethod
    def _checked_url(url: str) -> str:
        try:
            return normalize_base_url(url)
        except ValueError as exc:
            raise ConfigurationError(str(exc)) from exc

    @property
    def client_id(self) -> str | None:
        return self.engine.client_id

    @property
    def client_secret(self) -> str | None:
        return self.engine.client_secret

    @property
    def redirect_uri(self) -> str | None:
        return self.engine.redirect_uri

    # ── engine callbacks ─────────────────────────────────────────────────────
    def base_authorization_url(self) -> str:
        return f"{self._web_url}/oauth2/authorize"

    def base_access_token_url(self, params: Mapping[str, Any]) -> str:
        """Token endpoint, used for both requesting and revoking tokens."""
        return f"{self._api_url}/oauth2/tokens"

    def resource_owner_details_url(self, token: AccessToken) -> str:
        return f"{self._api_url}/v2/organizations/me"

    def default_scopes(self) -> list[str]:
        # organizations.read lets the app fetch the merchant's profile.
        return [SCOPE_ORGANIZATIONS_READ]

    def scope_separator(self) -> str:
        return " "

    def default_headers(self) -> dict[str, str]:
        return {"User-Agent": get_user_agent()}

    def check_response(self, response: httpx.Response, data: Any) -> None:
        """Raise ``IdentityProviderError`` for any HTTP status >= 400."""
        if response.status_code < 400:
            return

        error = data.get("error") if isinstance(data, Mapping) else None
        if error is None:
            message = response.reason_phrase
        elif isinstance(error, Mapping):
            if error.get("type") is not None and error.get("message") is not None:
                message = f"[{error['type']}] {error['message']}"
            else:
                message = str(error["message"] if error.get("message") is not None else error)
            if error.get("field") is not None:
                message += f" (field: {error['field']})"
        else:
            message = str(error)

        logger.warning(
            "Mollie endpoint returned an error response",
            extra={
                "provider": self.provider_name,
                "status_code": response.status_code,
            },
        )
        raise IdentityProviderError(message, response.status_code, response, data)

    def create_resource_owner(
        self, response: Mapping[str, Any], token: AccessToken
    ) -> MollieResourceOwner:
        return MollieResourceOwner(response)

    # ── public operations ────────────────────────────────────────────────────
    def get_authorization_url(self, **options: Any) -> str:
        return self.engine.get_authorization_url(**options)

    def get_state(self) -> str | None:
        return self.engine.get_state()

    def get_pkce_code(self) -> str | None:
        return self.engine.pkce_code

    def set_pkce_code(self, code: str | None) -> MollieProviderAdapter:
        """Restore the PKCE verifier generated for an earlier authorization URL."""
        self.engine.pkce_code = code
        return self

    def get_access_token(self, grant: str | AbstractGrant, **options: Any) -> AccessToken:
        """Request an access token using ``grant`` and the given options.

        Raises:
            IdentityProviderError: The token endpoint returned an error status.
            UnexpectedResponseError: The response body was not a mapping.
        """
        grant = self.engine.verify_grant(grant)

        if isinstance(options.get("scope"), (list, tuple)):
            options["scope"] = self.scope_separator().join(options["scope"])

        params: dict[str, Any] = {
            "client_id": self.engine.client_id,
            "client_secret": self.engine.client_secret,
            "redirect_uri": self.engine.redirect_uri,
        }
        if self.engine.pkce_code:
            params["code_verifier"] = self.engine.pkce_code

        params = grant.prepare_request_parameters(params, options)
        request = self.engine.get_access_token_request(params)
        response = self.engine.get_parsed_response(request)
        if not isinstance(response, Mapping):
            raise UnexpectedResponseError(
                "Invalid response received from Authorization Server. Expected JSON."
            )
        prepared = self.engine.prepare_access_token_response(response)
        return self.engine.create_access_token(prepared, grant)

    def get_resource_owner(self, token: AccessToken) -> MollieResourceOwner:
        return self.engine.get_resource_owner(token)

    def revoke_access_token(self, access_token: str) -> httpx.Response:
        return self.revoke_token(TOKEN_TYPE_ACCESS, access_token)

    def revoke_refresh_token(self, refresh_token: str) -> httpx.Response:
        return self.revoke_token(TOKEN_TYPE_REFRESH, refresh_token)

    def revoke_token(self, type_hint: str, token: str) -> httpx.Response:
        """Revoke an access or refresh token.

        The raw response is returned as-is; revocation responses are not
        passed through ``check_response``.
        """
        params = {
            "token_type_hint": type_hint,
            "token": token,
            "client_id": self.engine.client_id,
            "client_secret": self.engine.client_secret,
            "redirect_uri": self.engine.redirect_uri,
        }
        request = self.engine.get_request(
            METHOD_DELETE,
            self.base_access_token_url({}),
            headers={"Content-Type": FORM_CONTENT_TYPE},
            content=build_query_string(params),
        )
        return self.engine.send(request)

    # ── lifecycle ────────────────────────────────────────────────────────────
    def close(self) -> None:
        self.engine.close()

    def __enter__(self) -> MollieProviderAdapter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
