from __future__ import annotations

from typing import Callable

import httpx
import pytest

from agrismart_cli import config
from agrismart_client import AgriSmartClient, ClientConfig, MemoryTokenStore, Session

BASE_URL = "https://api.example.test"


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    def _config_dir(_: str) -> str:
        return str(tmp_path)

    monkeypatch.setattr(config, "user_config_dir", _config_dir)
    monkeypatch.delenv(config.ENV_BASE_URL, raising=False)
    monkeypatch.delenv(config.ENV_TIMEOUT, raising=False)
    return tmp_path


@pytest.fixture
def make_client() -> Callable[..., AgriSmartClient]:
    def _make(handler, *, session: Session | None = None, **kwargs) -> AgriSmartClient:
        return AgriSmartClient(
            ClientConfig(base_url=BASE_URL),
            session if session is not None else Session(MemoryTokenStore()),
            transport=httpx.MockTransport(handler),
            **kwargs,
        )

    return _make


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
