from __future__ import annotations

import typer

from .. import console
from ..config import config_path, load_config, normalize_base_url, parse_timeout, resolve_config, save_config

app = typer.Typer(help="Manage local CLI settings (~/.config/agrismart/config.toml).")


@app.command("show")
def show_settings():
    cfg = resolve_config()
    console.print(f"base_url={cfg.base_url} timeout_s={cfg.timeout_s} config={config_path()}")


@app.command("set")
def set_setting(
        key: str = typer.Argument(..., help="Setting key (base_url, timeout_s)."),
        value: str = typer.Argument(..., help="New value."),
):
    cfg = load_config()
    k = key.strip().lower()
    if k == "base_url":
        base_url = normalize_base_url(value, warn=True)
        if not base_url:
            console.err("Base URL cannot be empty.")
            raise typer.Exit(code=2)
        cfg.base_url = base_url
    elif k in {"timeout", "timeout_s"}:
        timeout_s = parse_timeout(value)
        if timeout_s is None:
            console.err(f"Invalid timeout: {value}")
            raise typer.Exit(code=2)
        cfg.timeout_s = timeout_s
    else:
        console.err(f"Unknown setting: {key}")
        raise typer.Exit(code=2)
    saved = save_config(cfg)
    console.ok(f"Settings updated: {saved}")
