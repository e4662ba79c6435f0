import pytest

from mollie_oauth2.engine.grants import (
    AbstractGrant,
    AuthorizationCode,
    ClientCredentials,
    GrantFactory,
    Password,
    RefreshToken,
)
from mollie_oauth2.errors import InvalidGrantError, MissingParameterError


@pytest.mark.parametrize(
    ("name", "grant_cls"),
    [
        ("authorization_code", AuthorizationCode),
        ("refresh_token", RefreshToken),
        ("client_credentials", ClientCredentials),
        ("password", Password),
    ],
)
def test_factory_resolves_known_grants(name: str, grant_cls: type[AbstractGrant]) -> None:
    grant = GrantFactory().get_grant(name)
    assert isinstance(grant, grant_cls)
    assert str(grant) == name


def test_factory_rejects_unknown_grants() -> None:
    with pytest.raises(InvalidGrantError):
        GrantFactory().get_grant("implicit")


def test_factory_accepts_custom_grants() -> None:
    class DeviceCode(AbstractGrant):
        name = "urn:ietf:params:oauth:grant-type:device_code"
        required_request_parameters = ("device_code",)

    factory = GrantFactory()
    factory.register(DeviceCode)
    assert isinstance(factory.get_grant(DeviceCode.name), DeviceCode)


def test_prepare_request_parameters_merges_defaults_and_options() -> None:
    params = AuthorizationCode().prepare_request_parameters(
        {"client_id": "app_x", "redirect_uri": "https://example.org/cb"},
        {"code": "abc", "redirect_uri": "https://example.org/other"},
    )
    assert params == {
        "client_id": "app_x",
        "grant_type": "authorization_code",
        "code": "abc",
        "redirect_uri": "https://example.org/other",
    }


@pytest.mark.parametrize(
    ("grant", "options", "missing"),
    [
        (AuthorizationCode(), {}, "code"),
        (RefreshToken(), {"code": "x"}, "refresh_token"),
        (Password(), {"username": "u"}, "password"),
    ],
)
def test_required_parameters(grant: AbstractGrant, options: dict, missing: str) -> None:
    with pytest.raises(MissingParameterError) as exc:
        grant.prepare_request_parameters({}, options)
    assert f'"{missing}"' in str(exc.value)


def test_client_credentials_needs_nothing() -> None:
    assert ClientCredentials().prepare_request_parameters({}, {}) == {
        "grant_type": "client_credentials"
    }
