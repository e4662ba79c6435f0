"""Pydantic models for provider configuration.

## Security-relevant configuration fields

- ``client_secret``: never logged, never echoed by the CLI.
- ``redirect_uri``: must match the redirect URI registered for the app.
- ``api_url`` / ``web_url``: every request and redirect is built from these.
"""

from urllib.parse import urlsplit

from pydantic import field_validator

from mollie_oauth2.models import OAuthBaseModel

MOLLIE_API_URL = "https://api.mollie.com"
MOLLIE_WEB_URL = "https://my.mollie.com"


def normalize_base_url(url: str) -> str:
    """Validate an absolute http(s) origin and drop trailing slashes.

    Raises ``ValueError`` for anything else, including URLs with a path,
    query or fragment.
    """
    parts = urlsplit(url)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ValueError(f"Expected an absolute http(s) URL, got {url!r}")
    if "?" in url or "#" in url or parts.path.strip("/"):
        raise ValueError(f"Expected a URL without path, query or fragment, got {url!r}")
    return f"{parts.scheme}://{parts.netloc}"


class MollieProviderConfigModel(OAuthBaseModel):
    """Mollie OAuth app configuration.

    Client credentials are optional at the type level; the provider checks
    the client id prefix when it is constructed.
    """

    client_id: str | None = None
    client_secret: str | None = None
    redirect_uri: str | None = None
    api_url: str = MOLLIE_API_URL
    web_url: str = MOLLIE_WEB_URL

    @field_validator("api_url", "web_url")
    @classmethod
    def _check_base_url(cls, value: str) -> str:
        return normalize_base_url(value)
