"""OAuth2 grant types.

Each grant knows its ``grant_type`` name and the options a caller must pass
when requesting a token with it.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from ..errors import InvalidGrantError, MissingParameterError


class AbstractGrant:
    """Base class for grants used with the token endpoint."""

    name: ClassVar[str]
    required_request_parameters: ClassVar[tuple[str, ...]] = ()

    def prepare_request_parameters(
        self, defaults: Mapping[str, Any], options: Mapping[str, Any]
    ) -> dict[str, Any]:
        """Merge client defaults, the grant type and caller options.

        Caller options take precedence over the defaults.
        """
        for param in self.required_request_parameters:
            if param not in options:
                raise MissingParameterError(f'Required parameter not passed: "{param}"')
        return {**defaults, "grant_type": self.name, **options}

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class AuthorizationCode(AbstractGrant):
    name = "authorization_code"
    required_request_parameters = ("code",)


class RefreshToken(AbstractGrant):
    name = "refresh_token"
    required_request_parameters = ("refresh_token",)


class ClientCredentials(AbstractGrant):
    name = "client_credentials"


class Password(AbstractGrant):
    name = "password"
    required_request_parameters = ("username", "password")


class GrantFactory:
    """Resolves grant names to grant instances."""

    def __init__(self) -> None:
        self._registry: dict[str, type[AbstractGrant]] = {}
        for grant_cls in (AuthorizationCode, RefreshToken, ClientCredentials, Password):
            self.register(grant_cls)

    def register(self, grant_cls: type[AbstractGrant]) -> None:
        self._registry[grant_cls.name] = grant_cls

    def get_grant(self, name: str) -> AbstractGrant:
        try:
            grant_cls = self._registry[name]
        except KeyError:
            raise InvalidGrantError(f'Grant "{name}" must extend AbstractGrant') from None
        return grant_cls()

    def is_grant(self, grant: Any) -> bool:
        return isinstance(grant, AbstractGrant)


__all__ = [
    "AbstractGrant",
    "AuthorizationCode",
    "ClientCredentials",
    "GrantFactory",
    "Password",
    "RefreshToken",
]
