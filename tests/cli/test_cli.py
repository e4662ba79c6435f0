import json
import logging
from urllib.parse import parse_qs, urlsplit

import httpx
import pytest
from click.testing import CliRunner

from mollie_oauth2.cli import main as cli_main
from mollie_oauth2.config import load_provider_config
from mollie_oauth2.provider import MollieProviderAdapter
from tests.http_testkit import RecordingTransport, form_body, json_response

CONFIG = "mollie:\n  client_id: app_cli\n  client_secret: secret\n  redirect_uri: https://example.org/cb\n"


@pytest.fixture(autouse=True)
def restore_logging():
    """The CLI reconfigures the root logger; undo that after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "mollie.yml"
    path.write_text(CONFIG)
    return str(path)


@pytest.fixture
def serve(monkeypatch):
    """Route the CLI's provider through a recording transport."""

    def install(*responses: httpx.Response) -> RecordingTransport:
        transport = RecordingTransport(*responses)

        def create_provider(config_path, pkce_method=None):
            return MollieProviderAdapter(
                load_provider_config(config_path),
                http_client=transport.client(),
                pkce_method=pkce_method,
            )

        monkeypatch.setattr(cli_main, "create_provider", create_provider)
        return transport

    return install


def _invoke(*args: str):
    return CliRunner().invoke(cli_main.cli, list(args))


def test_authorize_url(config_file):
    result = _invoke(
        "--config", config_file, "--json-output", "authorize-url", "--scope", "payments.read",
        "--scope", "orders.read", "--state", "abc",
    )
    assert result.exit_code == 0, result.output

    payload = json.loads(result.output)
    assert payload["status"] == "ok"
    url = payload["result"]["url"]
    query = parse_qs(urlsplit(url).query)
    assert url.startswith("https://my.mollie.com/oauth2/authorize?")
    assert query["scope"] == ["payments.read orders.read"]
    assert query["client_id"] == ["app_cli"]
    assert payload["result"]["state"] == "abc"
    assert "code_verifier" not in payload["result"]


def test_authorize_url_with_pkce(config_file):
    result = _invoke("--config", config_file, "--json-output", "authorize-url", "--pkce", "S256")
    assert result.exit_code == 0, result.output
    assert len(json.loads(result.output)["result"]["code_verifier"]) == 64


def test_exchange_code(config_file, serve):
    transport = serve(json_response(200, {"access_token": "at", "refresh_token": "rt"}))

    result = _invoke(
        "--config", config_file, "--json-output", "exchange-code", "the-code",
        "--code-verifier", "v",
    )

    assert result.exit_code == 0, result.output
    token = json.loads(result.output)["result"]
    assert token["access_token"] == "at"
    assert token["refresh_token"] == "rt"
    body = form_body(transport.last_request)
    assert body["code"] == "the-code"
    assert body["code_verifier"] == "v"
    assert body["client_id"] == "app_cli"


def test_refresh(config_file, serve):
    transport = serve(json_response(200, {"access_token": "new"}))

    result = _invoke("--config", config_file, "refresh", "rt", "--scope", "payments.read")

    assert result.exit_code == 0, result.output
    assert "access_token: new" in result.output
    body = form_body(transport.last_request)
    assert body["grant_type"] == "refresh_token"
    assert body["scope"] == "payments.read"


def test_whoami(config_file, serve):
    transport = serve(json_response(200, {"id": "org_1", "name": "Shop"}))

    result = _invoke("--config", config_file, "--json-output", "whoami", "at")

    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["result"] == {"id": "org_1", "name": "Shop"}
    assert transport.last_request.headers["authorization"] == "Bearer at"


@pytest.mark.parametrize(("flag", "hint"), [((), "access_token"), (("--refresh",), "refresh_token")])
def test_revoke(config_file, serve, flag, hint):
    transport = serve(httpx.Response(204))

    result = _invoke("--config", config_file, "revoke", "tok", *flag)

    assert result.exit_code == 0, result.output
    assert "status_code: 204" in result.output
    assert transport.last_request.method == "DELETE"
    assert form_body(transport.last_request)["token_type_hint"] == hint


def test_provider_error_exits_non_zero(config_file, serve):
    serve(json_response(400, {"error": {"type": "request", "message": "Invalid code"}}))

    result = _invoke("--config", config_file, "exchange-code", "bad")

    assert result.exit_code == 1
    assert "Error: [request] Invalid code" in result.output


def test_invalid_client_id_is_reported(tmp_path):
    path = tmp_path / "bad.yml"
    path.write_text("client_id: nope\n")

    result = _invoke("--config", str(path), "authorize-url")

    assert result.exit_code == 1
    assert "prefixed with app_" in result.output
