"""Centralized package information for mollie-oauth2.

Single source of truth for the distribution name and version, used to build
the User-Agent header sent with every request.
"""

import platform
from importlib.metadata import PackageNotFoundError, version

__all__ = ["PACKAGE_NAME", "PACKAGE_VERSION", "USER_AGENT_PRODUCT", "get_user_agent"]

# Distribution name on the package index
PACKAGE_NAME = "mollie-oauth2"

# Product token used in the User-Agent header
USER_AGENT_PRODUCT = "MollieOAuth2Python"

try:
    PACKAGE_VERSION = version(PACKAGE_NAME)
except PackageNotFoundError:
    PACKAGE_VERSION = "unknown"


def get_user_agent() -> str:
    """Return the User-Agent string identifying this library and runtime."""
    return " ".join(
        [
            f"{USER_AGENT_PRODUCT}/{PACKAGE_VERSION}",
            f"Python/{platform.python_version()}",
        ]
    )
