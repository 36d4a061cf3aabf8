from __future__ import annotations

import json
from types import SimpleNamespace

import httpx
import pytest
from typer.testing import CliRunner

from agrismart_cli import http, main
from agrismart_client import AgriSmartClient, ClientConfig

runner = CliRunner()


@pytest.fixture
def api(config_dir, monkeypatch):
    """Route CLI clients to a mock transport; returns the list of seen requests."""
    routes: dict[tuple[str, str], httpx.Response] = {}
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return routes.get((request.method, request.url.path), httpx.Response(404))

    def _make_client(cfg, *, base_url_override):
        return AgriSmartClient(
            ClientConfig(base_url=base_url_override or cfg.base_url, timeout_s=cfg.timeout_s),
            http.load_session(),
            on_unauthorized=http._notify_unauthorized,
            transport=httpx.MockTransport(handler),
        )

    monkeypatch.setattr(http, "make_client", _make_client)
    return SimpleNamespace(routes=routes, seen=seen)


def test_login_saves_session_file(api) -> None:
    api.routes[("POST", "/api/auth/login")] = httpx.Response(200, json={"token": "T"})

    result = runner.invoke(main.app, ["auth", "login", "--email", "f@farm.test", "--password", "pw"])

    assert result.exit_code == 0, result.output
    assert "Login successful" in result.output
    assert json.loads(api.seen[0].content) == {"email": "f@farm.test", "password": "pw"}
    session = http.load_session()
    assert session.token == "T"
    assert session.is_authenticated

    status = runner.invoke(main.app, ["auth", "status"])
    assert "signed in" in status.output


def test_login_failure_exits_2(api) -> None:
    api.routes[("POST", "/api/auth/login")] = httpx.Response(400, json={"message": "Invalid credentials"})

    result = runner.invoke(main.app, ["auth", "login", "--email", "f@farm.test", "--password", "bad"])

    assert result.exit_code == 2
    assert "Invalid credentials" in result.output
    assert http.load_session().token is None


def test_logout_clears_session_even_when_server_fails(api) -> None:
    http.load_session().save("T")
    api.routes[("POST", "/api/auth/logout")] = httpx.Response(500)

    result = runner.invoke(main.app, ["auth", "logout"])

    assert result.exit_code == 0, result.output
    assert api.seen[0].headers["Authorization"] == "Bearer T"
    assert http.load_session().token is None


def test_get_command_prints_json(api) -> None:
    api.routes[("GET", "/api/soil/health")] = httpx.Response(200, json={"ph": 6.5})

    result = runner.invoke(main.app, ["soil", "health"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"ph": 6.5}


def test_server_error_uses_fallback_message(api) -> None:
    api.routes[("GET", "/api/market/prices")] = httpx.Response(500)

    result = runner.invoke(main.app, ["market", "prices"])

    assert result.exit_code == 2
    assert "Failed to fetch market prices" in result.output


def test_unauthorized_clears_session_and_prompts_login(api) -> None:
    http.load_session().save("stale")
    api.routes[("GET", "/api/weather/current")] = httpx.Response(401, json={"message": "Unauthorized"})

    result = runner.invoke(main.app, ["weather", "current"])

    assert result.exit_code == 2
    assert "agrismart auth login" in result.output
    assert http.load_session().token is None


def test_community_report_sends_payload(api) -> None:
    api.routes[("POST", "/api/community/reports")] = httpx.Response(201, json={"id": 3})

    result = runner.invoke(
        main.app,
        ["community", "report", "--data", '{"pest": "locust"}', "--set", "severity=4"],
    )

    assert result.exit_code == 0, result.output
    assert json.loads(api.seen[0].content) == {"pest": "locust", "severity": 4}


def test_pest_detect_uploads_image(api, tmp_path) -> None:
    image = tmp_path / "leaf.png"
    image.write_bytes(b"png")
    api.routes[("POST", "/api/pest/detect")] = httpx.Response(200, json={"pest": "mite"})

    result = runner.invoke(main.app, ["pest", "detect", str(image)])

    assert result.exit_code == 0, result.output
    assert api.seen[0].headers["Content-Type"].startswith("multipart/form-data")
    assert b'filename="leaf.png"' in api.seen[0].content


def test_base_url_override(api) -> None:
    api.routes[("GET", "/api/reports")] = httpx.Response(200, json=[])

    result = runner.invoke(main.app, ["reports", "list", "--base-url", "https://staging.farm.test"])

    assert result.exit_code == 0, result.output
    assert api.seen[0].url.host == "staging.farm.test"


def test_settings_set_and_show(config_dir) -> None:
    result = runner.invoke(main.app, ["settings", "set", "base_url", "localhost:9000"])
    assert result.exit_code == 0, result.output

    result = runner.invoke(main.app, ["settings", "set", "timeout_s", "7"])
    assert result.exit_code == 0, result.output

    shown = runner.invoke(main.app, ["settings", "show"])
    assert "base_url=http://localhost:9000" in shown.output
    assert "timeout_s=7.0" in shown.output


def test_settings_set_unknown_key(config_dir) -> None:
    result = runner.invoke(main.app, ["settings", "set", "colour", "blue"])
    assert result.exit_code == 2


def test_endpoints_lists_catalog() -> None:
    result = runner.invoke(main.app, ["endpoints"])
    assert result.exit_code == 0
    assert "/api/weather/alerts" in result.output
