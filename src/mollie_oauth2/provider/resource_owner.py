"""Mollie organization profile (the OAuth resource owner)."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from ..errors import MissingFieldError


class MollieResourceOwner:
    """Read-only view over the ``/v2/organizations/me`` response.

    The wrapped mapping is the source of truth; fields without a dedicated
    accessor (``name``, ``address``, ``_links``, ...) are available through
    ``to_dict()``.
    """

    __slots__ = ("_response",)

    def __init__(self, response: Mapping[str, Any]):
        object.__setattr__(self, "_response", MappingProxyType(copy.deepcopy(dict(response))))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def id(self) -> str:
        try:
            return self._response["id"]
        except KeyError:
            raise MissingFieldError("id") from None

    @property
    def email(self) -> str | None:
        return self._response.get("email")

    @property
    def registration_number(self) -> str | None:
        return self._response.get("registrationNumber")

    @property
    def vat_number(self) -> str | None:
        return self._response.get("vatNumber")

    def to_dict(self) -> dict[str, Any]:
        """Return all owner details exactly as the API sent them."""
        return copy.deepcopy(dict(self._response))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MollieResourceOwner):
            return NotImplemented
        return self._response == other._response

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"MollieResourceOwner(id={self._response.get('id')!r})"
