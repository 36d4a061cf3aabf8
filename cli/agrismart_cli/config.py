from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from typing import Any

import tomli_w
from platformdirs import user_config_dir

from agrismart_client.config_types import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_S

from . import console

APP_NAME = "agrismart"
CONFIG_FILENAME = "config.toml"
SESSION_FILENAME = "session.toml"
ENV_BASE_URL = "AGRISMART_BASE_URL"
ENV_TIMEOUT = "AGRISMART_TIMEOUT"

_WARNED_BASE_URL_SCHEME = False


@dataclass
class AppConfig:
    base_url: str = DEFAULT_BASE_URL
    timeout_s: float = DEFAULT_TIMEOUT_S


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def session_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{SESSION_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig(base_url=DEFAULT_BASE_URL, timeout_s=DEFAULT_TIMEOUT_S)


def normalize_base_url(raw: str | None, *, warn: bool = False) -> str:
    value = (raw or "").strip()
    if not value:
        return ""
    value = value.rstrip("/")
    lowered = value.lower()
    if lowered.startswith("http://") or lowered.startswith("https://"):
        return value

    host = value.split("/", 1)[0]
    host = host.split(":", 1)[0].lower()
    if host in {"localhost", "127.0.0.1", "0.0.0.0"}:
        scheme = "http://"
    else:
        scheme = "https://"

    normalized = f"{scheme}{value}"
    if warn:
        _warn_missing_scheme(normalized)
    return normalized


def parse_timeout(raw: Any) -> float | None:
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    return value if value > 0 else None


def _warn_missing_scheme(normalized: str) -> None:
    global _WARNED_BASE_URL_SCHEME
    if _WARNED_BASE_URL_SCHEME:
        return
    if not _is_interactive():
        return
    console.warn(f"base_url missing scheme, assuming {normalized}")
    _WARNED_BASE_URL_SCHEME = True


def _is_interactive() -> bool:
    import sys
    return bool(sys.stderr.isatty() or sys.stdout.isatty())


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    return {"base_url": cfg.base_url, "timeout_s": cfg.timeout_s}


def from_toml(data: dict[str, Any]) -> AppConfig:
    cfg = default_config()
    base_url = normalize_base_url(str(data.get("base_url") or ""), warn=True)
    if base_url:
        cfg.base_url = base_url
    timeout_s = parse_timeout(data.get("timeout_s"))
    if timeout_s is not None:
        cfg.timeout_s = timeout_s
    return cfg


def apply_env(cfg: AppConfig) -> AppConfig:
    base_url = normalize_base_url(os.getenv(ENV_BASE_URL, ""))
    timeout_s = parse_timeout(os.getenv(ENV_TIMEOUT))
    return AppConfig(
        base_url=base_url or cfg.base_url,
        timeout_s=timeout_s if timeout_s is not None else cfg.timeout_s,
    )


def load_config() -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return from_toml(data)
    except FileNotFoundError:
        return default_config()


def resolve_config() -> AppConfig:
    """File settings with AGRISMART_* environment overrides applied; never saved."""
    return apply_env(load_config())


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    ensure_parent_dir(path)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path
