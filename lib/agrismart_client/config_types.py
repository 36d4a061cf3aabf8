from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

DEFAULT_BASE_URL = "https://agrismart-3dtnfrcb7-sarhan-vohras-projects.vercel.app"
DEFAULT_TIMEOUT_S = 30.0


def _default_headers() -> Mapping[str, str]:
    return MappingProxyType({"Content-Type": "application/json"})


@dataclass(frozen=True)
class ClientConfig:
    base_url: str = DEFAULT_BASE_URL
    timeout_s: float = DEFAULT_TIMEOUT_S
    headers: Mapping[str, str] = field(default_factory=_default_headers)
    user_agent: str = "agrismart-client/0.1.0"
