"""HTTP plumbing shared by the engine and provider adapters."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import parse_qsl, urlencode

import httpx

from ..errors import UnexpectedResponseError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class BearerAuth(httpx.Auth):
    """Attach ``Authorization: Bearer <token>`` to outgoing requests."""

    def __init__(self, token: str):
        self._token = token

    def auth_flow(self, request: httpx.Request):  # type: ignore[no-untyped-def]
        request.headers["Authorization"] = f"Bearer {self._token}"
        yield request


def create_http_client() -> httpx.Client:
    """Create the default synchronous HTTP client."""
    return httpx.Client(timeout=DEFAULT_TIMEOUT)


def build_query_string(params: Mapping[str, Any]) -> str:
    """Form-encode ``params``; ``None`` values are dropped."""
    return urlencode([(k, v) for k, v in params.items() if v is not None], doseq=True)


def parse_response(response: httpx.Response) -> Any:
    """Parse a response body into a mapping when possible.

    Form-encoded bodies are decoded into a dict. Other bodies are decoded as
    JSON; if that fails the raw text is returned, unless the body claimed to
    be JSON or the server answered 500.
    """
    content = response.text
    content_type = response.headers.get("content-type", "")

    if "urlencoded" in content_type:
        return dict(parse_qsl(content, keep_blank_values=True))

    try:
        return json.loads(content)
    except ValueError as exc:
        if "json" in content_type:
            raise UnexpectedResponseError(
                f"Failed to parse JSON response: {exc}", response=response
            ) from exc
        if response.status_code == 500:
            raise UnexpectedResponseError(
                "An OAuth server error was encountered that did not contain a JSON body",
                response=response,
            ) from exc
        logger.debug(
            "Response body is not JSON",
            extra={"status_code": response.status_code, "content_type": content_type},
        )
        return content


__all__ = [
    "BearerAuth",
    "DEFAULT_TIMEOUT",
    "FORM_CONTENT_TYPE",
    "build_query_string",
    "create_http_client",
    "parse_response",
]
