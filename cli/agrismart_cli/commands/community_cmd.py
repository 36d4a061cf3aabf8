from __future__ import annotations

import typer

from ..http import show
from ..payload import build_payload

app = typer.Typer(help="Community reports and posts.")


@app.command("reports")
def list_reports(
    base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    show(lambda c: c.get_community_reports(), base_url=base_url)


@app.command("report", help="Submit a community report (pest sighting, disease outbreak, ...).")
def submit_report(
    data: str | None = typer.Option(None, "--data", help="Report body as a JSON object."),
    fields: list[str] | None = typer.Option(None, "--set", help="Report field as KEY=VALUE."),
    base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    payload = build_payload(data, fields)
    if not payload:
        raise typer.BadParameter("empty report; pass --data or --set")
    show(lambda c: c.submit_community_report(payload), base_url=base_url)


@app.command("posts")
def list_posts(
    base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    show(lambda c: c.get_community_posts(), base_url=base_url)


@app.command("post")
def create_post(
    data: str | None = typer.Option(None, "--data", help="Post body as a JSON object."),
    fields: list[str] | None = typer.Option(None, "--set", help="Post field as KEY=VALUE."),
    base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    payload = build_payload(data, fields)
    if not payload:
        raise typer.BadParameter("empty post; pass --data or --set")
    show(lambda c: c.create_community_post(payload), base_url=base_url)
