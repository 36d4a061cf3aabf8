from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, TypeVar

import httpx
import typer

from agrismart_client import AgriSmartClient, ApiError, FileTokenStore, Session, StorageError
from agrismart_client.config_types import ClientConfig

from . import console
from .compat import cli_version
from .config import AppConfig, normalize_base_url, resolve_config, session_path

T = TypeVar("T")


def load_session() -> Session:
    return Session(FileTokenStore(session_path()))


def _notify_unauthorized(response: httpx.Response) -> None:
    console.warn("Session expired. Run `agrismart auth login`.")


def make_client(cfg: AppConfig, *, base_url_override: str | None) -> AgriSmartClient:
    base_url = normalize_base_url(base_url_override or cfg.base_url, warn=True)
    return AgriSmartClient(
        ClientConfig(
            base_url=base_url,
            timeout_s=cfg.timeout_s,
            user_agent=f"agrismart-cli/{cli_version()}",
        ),
        load_session(),
        on_unauthorized=_notify_unauthorized,
    )


def call_api(operation: Callable[[AgriSmartClient], Awaitable[T]], *, base_url: str | None = None) -> T:
    """Run one client operation to completion, exiting with code 2 on failure."""
    cfg = resolve_config()

    async def _run() -> T:
        async with make_client(cfg, base_url_override=base_url) as client:
            return await operation(client)

    try:
        return asyncio.run(_run())
    except ApiError as e:
        console.err(str(e))
        raise typer.Exit(code=2)
    except StorageError as e:
        console.err(f"Session storage error: {e}")
        raise typer.Exit(code=2)


def show(operation: Callable[[AgriSmartClient], Awaitable[Any]], *, base_url: str | None = None) -> None:
    console.print_json(call_api(operation, base_url=base_url))
