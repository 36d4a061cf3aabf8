from __future__ import annotations

import typer

from .. import console
from ..config import resolve_config, session_path
from ..http import call_api, load_session
from ..payload import build_payload

app = typer.Typer(help="Auth commands.")


@app.command("login")
def login(
    email: str = typer.Option(..., "--email", prompt=True, help="Account email."),
    password: str = typer.Option(..., "--password", prompt=True, hide_input=True, help="Account password."),
    base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    data = call_api(lambda c: c.login({"email": email, "password": password}), base_url=base_url)
    if isinstance(data, dict) and data.get("token"):
        console.ok(f"Login successful. Token saved to {session_path()}.")
    else:
        console.warn("Login succeeded but the server returned no token.")


@app.command("register")
def register(
    name: str = typer.Option(..., "--name", prompt=True, help="Display name."),
    email: str = typer.Option(..., "--email", prompt=True, help="Account email."),
    password: str = typer.Option(
        ..., "--password", prompt=True, hide_input=True, confirmation_prompt=True, help="Account password."
    ),
    extra: list[str] | None = typer.Option(None, "--set", help="Extra profile field as KEY=VALUE."),
    base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    payload = build_payload(None, extra)
    payload.update({"name": name, "email": email, "password": password})
    data = call_api(lambda c: c.register(payload), base_url=base_url)
    console.ok("Registration successful. Run `agrismart auth login` to sign in.")
    console.print_json(data)


@app.command("logout", help="Sign out and clear the stored token.")
def logout(
    base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    call_api(lambda c: c.logout(), base_url=base_url)
    console.ok("Signed out.")


@app.command("refresh", help="Exchange the stored token for a fresh one.")
def refresh(
    base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    data = call_api(lambda c: c.refresh_token(), base_url=base_url)
    if isinstance(data, dict) and data.get("token"):
        console.ok("Token refreshed.")
    else:
        console.warn("Server returned no token; stored token unchanged.")


@app.command("status", help="Show whether a token is stored locally.")
def status():
    cfg = resolve_config()
    session = load_session()
    state = "signed in" if session.is_authenticated and session.token else "signed out"
    console.print(f"base_url={cfg.base_url} session={state}")
