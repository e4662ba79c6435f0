"""
Global pytest configuration and fixtures.
"""

import pytest

from mollie_oauth2.provider import MollieProviderAdapter
from tests.http_testkit import RecordingTransport

MOCK_CLIENT_ID = "app_mock_client_id"
MOCK_SECRET = "mock_secret"
REDIRECT_URI = "none"


@pytest.fixture
def provider_options() -> dict[str, str]:
    return {
        "client_id": MOCK_CLIENT_ID,
        "client_secret": MOCK_SECRET,
        "redirect_uri": REDIRECT_URI,
    }


@pytest.fixture
def make_provider(provider_options):
    """Build a provider whose HTTP client is served by the given transport."""

    def factory(transport: RecordingTransport, **kwargs) -> MollieProviderAdapter:
        return MollieProviderAdapter(provider_options, http_client=transport.client(), **kwargs)

    return factory


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """Keep developer MOLLIE_* settings from leaking into tests."""
    for var in (
        "MOLLIE_OAUTH_CONFIG",
        "MOLLIE_OAUTH_DEBUG",
        "MOLLIE_CLIENT_ID",
        "MOLLIE_CLIENT_SECRET",
        "MOLLIE_REDIRECT_URI",
        "MOLLIE_API_URL",
        "MOLLIE_WEB_URL",
    ):
        monkeypatch.delenv(var, raising=False)
