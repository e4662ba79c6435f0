"""Base Pydantic models for mollie-oauth2.

All configuration and value models in this package inherit from
``OAuthBaseModel`` so they share the same validation behavior:

- Strict field validation (no extra fields allowed)
- Immutable instances

Example:
    >>> from mollie_oauth2.models import OAuthBaseModel
    >>>
    >>> class MyModel(OAuthBaseModel):
    ...     name: str
    >>>
    >>> MyModel(name="test").model_dump()
    {'name': 'test'}
"""

from pydantic import BaseModel, ConfigDict


class OAuthBaseModel(BaseModel):
    """Base model for all mollie-oauth2 Pydantic models.

    - extra="forbid": Rejects any fields not defined in the model
    - frozen=True: Makes instances immutable
    """

    model_config = ConfigDict(extra="forbid", frozen=True)
