from __future__ import annotations

import typer

from ..http import show
from ..payload import build_payload

app = typer.Typer(help="User profile.")


@app.command("show")
def show_profile(
    base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    show(lambda c: c.get_profile(), base_url=base_url)


@app.command("update")
def update_profile(
    data: str | None = typer.Option(None, "--data", help="Profile fields as a JSON object."),
    fields: list[str] | None = typer.Option(None, "--set", help="Profile field as KEY=VALUE."),
    base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    payload = build_payload(data, fields)
    if not payload:
        raise typer.BadParameter("nothing to update; pass --data or --set")
    show(lambda c: c.update_profile(payload), base_url=base_url)
