"""Load Mollie provider configuration from YAML files or the environment.

The configuration file may either hold the provider fields at the top level
or under a ``mollie:`` section::

    mollie:
      client_id: app_abc123
      client_secret: ${MOLLIE_CLIENT_SECRET}
      redirect_uri: https://example.org/oauth/callback

String values may reference environment variables with ``${ENV_VAR}``.
"""

import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from mollie_oauth2.errors import ConfigurationError

from .models import MollieProviderConfigModel

logger = logging.getLogger(__name__)

__all__ = ["CONFIG_ENV_VAR", "ENV_VARS", "interpolate_env", "load_provider_config"]

# Points at a YAML configuration file
CONFIG_ENV_VAR = "MOLLIE_OAUTH_CONFIG"

# Config field -> environment variable consulted when no file is used
ENV_VARS = {
    "client_id": "MOLLIE_CLIENT_ID",
    "client_secret": "MOLLIE_CLIENT_SECRET",
    "redirect_uri": "MOLLIE_REDIRECT_URI",
    "api_url": "MOLLIE_API_URL",
    "web_url": "MOLLIE_WEB_URL",
}

ENV_VAR_PATTERN = re.compile(r"\${([A-Za-z0-9_]+)}")


def _resolve_env_var(value: str) -> str:
    def replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in os.environ:
            raise ConfigurationError(f"Environment variable {name} is not set")
        return os.environ[name]

    return ENV_VAR_PATTERN.sub(replace, value)


def interpolate_env(config: Any) -> Any:
    """Recursively resolve ``${ENV_VAR}`` references in string values."""
    if isinstance(config, dict):
        return {k: interpolate_env(v) for k, v in config.items()}
    if isinstance(config, list):
        return [interpolate_env(v) for v in config]
    if isinstance(config, str):
        return _resolve_env_var(config)
    return config


def _from_environment() -> dict[str, Any]:
    return {field: os.environ[var] for field, var in ENV_VARS.items() if os.environ.get(var)}


def _read_file(path: Path) -> dict[str, Any]:
    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read Mollie OAuth config at {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in Mollie OAuth config at {path}: {e}") from e

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Mollie OAuth config at {path} must be a mapping")

    section = raw.get("mollie", raw)
    if not isinstance(section, dict):
        raise ConfigurationError(f"'mollie' section in {path} must be a mapping")
    return section


def load_provider_config(path: str | Path | None = None) -> MollieProviderConfigModel:
    """Load the provider configuration.

    Args:
        path: YAML file to read. Defaults to ``$MOLLIE_OAUTH_CONFIG``; when
            neither is given the ``MOLLIE_*`` environment variables are used.

    Returns:
        The validated configuration model.

    Raises:
        ConfigurationError: If the file cannot be read or parsed, an
            interpolated variable is not set, or validation fails.
    """
    if path is None and os.environ.get(CONFIG_ENV_VAR):
        path = os.environ[CONFIG_ENV_VAR]

    if path is not None:
        logger.debug(f"Loading Mollie OAuth config from: {path}")
        values = interpolate_env(_read_file(Path(path)))
    else:
        logger.debug("No Mollie OAuth config file, reading environment variables")
        values = _from_environment()

    try:
        return MollieProviderConfigModel.model_validate(values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid Mollie OAuth config: {e}") from e
