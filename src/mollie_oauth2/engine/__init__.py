"""Generic OAuth2 engine.

Provider-agnostic pieces of the Authorization Code flow: authorization URL
construction with CSRF state and PKCE, grants, token requests, response
parsing and the ``AccessToken`` value. Provider adapters plug in by
implementing ``ProviderCapabilities``.
"""

from .contracts import ProviderCapabilities
from .engine import OAuth2Engine, random_state
from .grants import (
    AbstractGrant,
    AuthorizationCode,
    ClientCredentials,
    GrantFactory,
    Password,
    RefreshToken,
)
from .http import BearerAuth, build_query_string, create_http_client, parse_response
from .token import AccessToken

__all__ = [
    "AbstractGrant",
    "AccessToken",
    "AuthorizationCode",
    "BearerAuth",
    "ClientCredentials",
    "GrantFactory",
    "OAuth2Engine",
    "Password",
    "ProviderCapabilities",
    "RefreshToken",
    "build_query_string",
    "create_http_client",
    "parse_response",
    "random_state",
]
