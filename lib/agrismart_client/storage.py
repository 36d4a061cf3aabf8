from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Protocol

import tomli_w

from .errors import StorageError

TOKEN_KEY = "authToken"
AUTH_FLAG_KEY = "isAuthenticated"


class TokenStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryTokenStore:
    def __init__(self, initial: dict[str, str] | None = None):
        self._items: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._items.get(key)

    def set(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove(self, key: str) -> None:
        self._items.pop(key, None)

    def snapshot(self) -> dict[str, str]:
        return dict(self._items)


class FileTokenStore:
    """Key/value store kept in a small TOML file (mode 0600).

    Every call reads or rewrites the whole file, so concurrent writers
    simply overwrite each other.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path).expanduser()

    def _load(self) -> dict[str, str]:
        try:
            with self.path.open("rb") as f:
                data = tomllib.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise StorageError(f"cannot read {self.path}: {e}") from e
        session = data.get("session") if isinstance(data, dict) else None
        if not isinstance(session, dict):
            return {}
        return {str(k): v for k, v in session.items() if isinstance(v, str)}

    def _save(self, items: dict[str, str]) -> None:
        try:
            if not items:
                if self.path.exists():
                    self.path.unlink()
                return
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
            with os.fdopen(fd, "wb") as f:
                # an existing file keeps its old mode through O_CREAT
                os.fchmod(f.fileno(), 0o600)
                f.write(tomli_w.dumps({"session": items}).encode("utf-8"))
        except OSError as e:
            raise StorageError(f"cannot write {self.path}: {e}") from e

    def get(self, key: str) -> str | None:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        items = self._load()
        items[key] = value
        self._save(items)

    def remove(self, key: str) -> None:
        items = self._load()
        if key in items:
            del items[key]
            self._save(items)


class Session:
    """Token and authenticated flag on top of a TokenStore."""

    def __init__(self, store: TokenStore | None = None):
        self.store: TokenStore = store if store is not None else MemoryTokenStore()

    @property
    def token(self) -> str | None:
        return self.store.get(TOKEN_KEY) or None

    @property
    def is_authenticated(self) -> bool:
        return self.store.get(AUTH_FLAG_KEY) == "true"

    def save(self, token: str) -> None:
        self.store.set(TOKEN_KEY, token)
        self.store.set(AUTH_FLAG_KEY, "true")

    def clear(self) -> None:
        self.store.remove(TOKEN_KEY)
        self.store.remove(AUTH_FLAG_KEY)
