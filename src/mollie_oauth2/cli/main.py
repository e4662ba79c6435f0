from typing import Any, Optional, Tuple

import click
import httpx

from mollie_oauth2.cli.utils import configure_logging, output_error, output_result
from mollie_oauth2.config import load_provider_config
from mollie_oauth2.engine import AccessToken
from mollie_oauth2.engine.pkce import SUPPORTED_METHODS
from mollie_oauth2.errors import MollieOAuthError
from mollie_oauth2.provider import MollieProviderAdapter

CLI_ERRORS = (MollieOAuthError, httpx.HTTPError)


def create_provider(config_path: Optional[str], pkce_method: Optional[str] = None) -> MollieProviderAdapter:
    """Build a provider from the config file (or MOLLIE_* environment variables)."""
    return MollieProviderAdapter(load_provider_config(config_path), pkce_method=pkce_method)


def _token_result(token: AccessToken) -> dict[str, Any]:
    return token.model_dump()


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    envvar="MOLLIE_OAUTH_CONFIG",
    help="YAML config file (defaults to $MOLLIE_OAUTH_CONFIG, then MOLLIE_* variables)",
)
@click.option("--json-output", is_flag=True, help="Output in JSON format")
@click.option("--debug", is_flag=True, help="Show detailed debug information")
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[str], json_output: bool, debug: bool) -> None:
    """Mollie OAuth2 command line client."""
    configure_logging(debug)
    ctx.obj = {"config_path": config_path, "json_output": json_output, "debug": debug}


@cli.command(name="authorize-url")
@click.option("--scope", "scopes", multiple=True, help="Scope to request (repeatable)")
@click.option("--state", help="State value to use instead of a random one")
@click.option("--pkce", type=click.Choice(SUPPORTED_METHODS), help="Enable PKCE with this method")
@click.pass_obj
def authorize_url(obj: dict, scopes: Tuple[str, ...], state: Optional[str], pkce: Optional[str]) -> None:
    """Print the URL to send the merchant to for consent.

    Keep the printed state (and code verifier, with --pkce) to complete the
    flow with `exchange-code`.

    Examples:
        mollie-oauth2 authorize-url --scope payments.read --scope orders.read
        mollie-oauth2 authorize-url --pkce S256
    """
    try:
        with create_provider(obj["config_path"], pkce_method=pkce) as provider:
            options: dict[str, Any] = {}
            if scopes:
                options["scope"] = list(scopes)
            if state:
                options["state"] = state
            result = {
                "url": provider.get_authorization_url(**options),
                "state": provider.get_state(),
            }
            if provider.get_pkce_code():
                result["code_verifier"] = provider.get_pkce_code()
        output_result(result, obj["json_output"])
    except CLI_ERRORS as e:
        output_error(e, obj["json_output"], obj["debug"])


@cli.command(name="exchange-code")
@click.argument("code")
@click.option("--code-verifier", help="PKCE verifier printed by authorize-url")
@click.pass_obj
def exchange_code(obj: dict, code: str, code_verifier: Optional[str]) -> None:
    """Exchange an authorization code for an access token."""
    try:
        with create_provider(obj["config_path"]) as provider:
            if code_verifier:
                provider.set_pkce_code(code_verifier)
            token = provider.get_access_token("authorization_code", code=code)
        output_result(_token_result(token), obj["json_output"])
    except CLI_ERRORS as e:
        output_error(e, obj["json_output"], obj["debug"])


@cli.command(name="refresh")
@click.argument("refresh_token")
@click.option("--scope", "scopes", multiple=True, help="Scope to request (repeatable)")
@click.pass_obj
def refresh(obj: dict, refresh_token: str, scopes: Tuple[str, ...]) -> None:
    """Get a new access token using a refresh token."""
    try:
        with create_provider(obj["config_path"]) as provider:
            options: dict[str, Any] = {"refresh_token": refresh_token}
            if scopes:
                options["scope"] = list(scopes)
            token = provider.get_access_token("refresh_token", **options)
        output_result(_token_result(token), obj["json_output"])
    except CLI_ERRORS as e:
        output_error(e, obj["json_output"], obj["debug"])


@cli.command(name="whoami")
@click.argument("access_token")
@click.pass_obj
def whoami(obj: dict, access_token: str) -> None:
    """Show the organization an access token belongs to."""
    try:
        with create_provider(obj["config_path"]) as provider:
            owner = provider.get_resource_owner(AccessToken(access_token=access_token))
        output_result(owner.to_dict(), obj["json_output"])
    except CLI_ERRORS as e:
        output_error(e, obj["json_output"], obj["debug"])


@cli.command(name="revoke")
@click.argument("token")
@click.option("--refresh", "is_refresh", is_flag=True, help="TOKEN is a refresh token")
@click.pass_obj
def revoke(obj: dict, token: str, is_refresh: bool) -> None:
    """Revoke an access token (or a refresh token with --refresh)."""
    try:
        with create_provider(obj["config_path"]) as provider:
            if is_refresh:
                response = provider.revoke_refresh_token(token)
            else:
                response = provider.revoke_access_token(token)
        output_result({"status_code": response.status_code}, obj["json_output"])
    except CLI_ERRORS as e:
        output_error(e, obj["json_output"], obj["debug"])
