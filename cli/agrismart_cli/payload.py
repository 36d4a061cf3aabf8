from __future__ import annotations

import json
from typing import Any

import typer


def _coerce(value: str) -> Any:
    try:
        return json.loads(value)
    except ValueError:
        return value


def build_payload(data: str | None, assignments: list[str] | None) -> dict[str, Any]:
    """Merge a JSON object from ``--data`` with ``--set KEY=VALUE`` pairs.

    Values given with ``--set`` are parsed as JSON when possible, so
    ``--set acres=12`` sends a number and ``--set name=north`` a string.
    """
    payload: dict[str, Any] = {}
    if data:
        try:
            parsed = json.loads(data)
        except ValueError as e:
            raise typer.BadParameter(f"invalid JSON: {e}", param_hint="--data")
        if not isinstance(parsed, dict):
            raise typer.BadParameter("expected a JSON object", param_hint="--data")
        payload.update(parsed)
    for item in assignments or []:
        key, sep, value = item.partition("=")
        key = key.strip()
        if not sep or not key:
            raise typer.BadParameter(f"expected KEY=VALUE, got {item!r}", param_hint="--set")
        payload[key] = _coerce(value)
    return payload
