from __future__ import annotations

from pathlib import Path

import typer

from ..http import show

app = typer.Typer(help="Pest detection.")


@app.command("detect")
def detect(
    image: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="Leaf or crop photo."),
    base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    show(lambda c: c.detect_pest(image), base_url=base_url)


@app.command("history")
def history(
    base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    show(lambda c: c.get_pest_history(), base_url=base_url)


@app.command("gallery")
def gallery(
    base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    show(lambda c: c.get_pest_gallery(), base_url=base_url)
