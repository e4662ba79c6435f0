"""Mollie provider adapter, resource owner and scope constants."""

from . import scopes
from .mollie import (
    CLIENT_ID_PREFIX,
    TOKEN_TYPE_ACCESS,
    TOKEN_TYPE_REFRESH,
    MollieProviderAdapter,
)
from .resource_owner import MollieResourceOwner

__all__ = [
    "CLIENT_ID_PREFIX",
    "MollieProviderAdapter",
    "MollieResourceOwner",
    "TOKEN_TYPE_ACCESS",
    "TOKEN_TYPE_REFRESH",
    "scopes",
]
