"""Configuration models and loaders."""

from .loader import CONFIG_ENV_VAR, ENV_VARS, interpolate_env, load_provider_config
from .models import MOLLIE_API_URL, MOLLIE_WEB_URL, MollieProviderConfigModel, normalize_base_url

__all__ = [
    "CONFIG_ENV_VAR",
    "ENV_VARS",
    "MOLLIE_API_URL",
    "MOLLIE_WEB_URL",
    "MollieProviderConfigModel",
    "interpolate_env",
    "load_provider_config",
    "normalize_base_url",
]
