"""Mollie OAuth2 client.

Connects apps to Mollie merchant accounts through the OAuth2 Authorization
Code flow.

## Quick Example

```python
from mollie_oauth2 import MollieProviderAdapter
from mollie_oauth2.provider.scopes import SCOPE_PAYMENTS_READ

provider = MollieProviderAdapter(
    {
        "client_id": "app_abc123",
        "client_secret": "secret",
        "redirect_uri": "https://example.org/oauth/callback",
    }
)

# Send the merchant here and keep provider.get_state() to check the callback.
url = provider.get_authorization_url(scope=[SCOPE_PAYMENTS_READ])

# On the callback:
token = provider.get_access_token("authorization_code", code=request_code)
owner = provider.get_resource_owner(token)
print(owner.id, owner.email)

provider.revoke_refresh_token(token.refresh_token)
```
"""

from .config import MollieProviderConfigModel, load_provider_config
from .engine import AccessToken, OAuth2Engine
from .errors import (
    ConfigurationError,
    IdentityProviderError,
    InvalidGrantError,
    MissingFieldError,
    MissingParameterError,
    MollieOAuthError,
    UnexpectedResponseError,
)
from .provider import MollieProviderAdapter, MollieResourceOwner
from .version import PACKAGE_VERSION as __version__

__all__ = [
    "AccessToken",
    "ConfigurationError",
    "IdentityProviderError",
    "InvalidGrantError",
    "MissingFieldError",
    "MissingParameterError",
    "MollieOAuthError",
    "MollieProviderAdapter",
    "MollieProviderConfigModel",
    "MollieResourceOwner",
    "OAuth2Engine",
    "UnexpectedResponseError",
    "__version__",
    "load_provider_config",
]
