from __future__ import annotations

import asyncio
import logging
import mimetypes
import os
from pathlib import Path
from typing import Any, BinaryIO, Iterable, Union

import httpx

from .config_types import ClientConfig
from .endpoints import endpoint_path
from .errors import ApiError, StorageError
from .storage import Session
from .transport import RequestHook, ResponseHook, Transport, UnauthorizedCallback

logger = logging.getLogger(__name__)

ImageInput = Union[str, os.PathLike, bytes, bytearray, BinaryIO]


def _image_part(image: ImageInput) -> tuple[str, bytes, str]:
    """Return (filename, content, mime type) for the ``image`` form field."""
    if isinstance(image, (str, os.PathLike)):
        path = Path(image)
        filename = path.name
        content = path.read_bytes()
    elif isinstance(image, (bytes, bytearray)):
        filename = "image"
        content = bytes(image)
    else:
        filename = os.path.basename(str(getattr(image, "name", "") or "")) or "image"
        content = image.read()
    mime = mimetypes.guess_type(filename)[0] or "application/octet-stream"
    return filename, content, mime


class AgriSmartClient:
    """Async facade over the AgriSmart REST API.

    Every method issues exactly one request and returns the decoded body
    unchanged. Failures surface as ``ApiError`` (or a subclass) whose message
    is the server's ``message`` field when present, otherwise a fixed
    per-operation fallback.
    """

    def __init__(
            self,
            cfg: ClientConfig | None = None,
            session: Session | None = None,
            *,
            on_unauthorized: UnauthorizedCallback | None = None,
            request_hooks: Iterable[RequestHook] = (),
            response_hooks: Iterable[ResponseHook] = (),
            transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._session = session if session is not None else Session()
        self._t = Transport(
            cfg or ClientConfig(),
            self._session,
            on_unauthorized=on_unauthorized,
            request_hooks=request_hooks,
            response_hooks=response_hooks,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._t.aclose()

    async def __aenter__(self) -> AgriSmartClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def _call(
            self,
            method: str,
            endpoint: str,
            fallback: str,
            *,
            json_body: Any | None = None,
            files: dict[str, Any] | None = None,
    ) -> Any:
        try:
            return await self._t.request(method, endpoint_path(endpoint), json_body=json_body, files=files)
        except ApiError as e:
            raise e.with_message(e.server_message or fallback) from e

    def _store_token(self, data: Any) -> None:
        if not isinstance(data, dict):
            return
        token = data.get("token")
        if token:
            self._session.save(str(token))

    # --- auth ---
    async def login(self, credentials: dict[str, Any]) -> Any:
        data = await self._call("POST", "LOGIN", "Login failed", json_body=credentials)
        self._store_token(data)
        return data

    async def register(self, user_data: dict[str, Any]) -> Any:
        return await self._call("POST", "REGISTER", "Registration failed", json_body=user_data)

    async def logout(self) -> None:
        try:
            await self._t.request("POST", endpoint_path("LOGOUT"))
        except ApiError as e:
            logger.error("Logout error: %s", e)
        try:
            self._session.clear()
        except StorageError as e:
            logger.error("Logout error: %s", e)

    async def refresh_token(self) -> Any:
        data = await self._call("POST", "REFRESH_TOKEN", "Token refresh failed")
        self._store_token(data)
        return data

    # --- user profile ---
    async def get_profile(self) -> Any:
        return await self._call("GET", "USER_PROFILE", "Failed to fetch user profile")

    async def update_profile(self, profile: dict[str, Any]) -> Any:
        return await self._call("POST", "UPDATE_PROFILE", "Failed to update user profile", json_body=profile)

    # --- pest detection ---
    async def detect_pest(self, image: ImageInput) -> Any:
        # file reads can be slow; keep them off the event loop
        files = {"image": await asyncio.to_thread(_image_part, image)}
        return await self._call("POST", "PEST_DETECTION", "Pest detection failed", files=files)

    async def get_pest_history(self) -> Any:
        return await self._call("GET", "PEST_HISTORY", "Failed to fetch pest history")

    async def get_pest_gallery(self) -> Any:
        return await self._call("GET", "PEST_GALLERY", "Failed to fetch pest gallery")

    # --- soil health ---
    async def get_soil_health(self) -> Any:
        return await self._call("GET", "SOIL_HEALTH", "Failed to fetch soil health data")

    async def get_soil_recommendations(self) -> Any:
        return await self._call("GET", "SOIL_RECOMMENDATIONS", "Failed to fetch soil recommendations")

    async def get_soil_history(self) -> Any:
        return await self._call("GET", "SOIL_HISTORY", "Failed to fetch soil history")

    # --- weather ---
    async def get_current_weather(self) -> Any:
        return await self._call("GET", "WEATHER_CURRENT", "Failed to fetch weather data")

    async def get_weather_forecast(self) -> Any:
        return await self._call("GET", "WEATHER_FORECAST", "Failed to fetch weather forecast")

    async def get_weather_alerts(self) -> Any:
        return await self._call("GET", "WEATHER_ALERTS", "Failed to fetch weather alerts")

    # --- crop management ---
    async def get_crop_yield(self) -> Any:
        return await self._call("GET", "CROP_YIELD", "Failed to fetch crop yield data")

    async def get_crop_schedule(self) -> Any:
        return await self._call("GET", "CROP_SCHEDULE", "Failed to fetch crop schedule")

    async def get_crop_recommendations(self) -> Any:
        return await self._call("GET", "CROP_RECOMMENDATIONS", "Failed to fetch crop recommendations")

    # --- market data ---
    async def get_market_prices(self) -> Any:
        return await self._call("GET", "MARKET_PRICES", "Failed to fetch market prices")

    async def get_market_trends(self) -> Any:
        return await self._call("GET", "MARKET_TRENDS", "Failed to fetch market trends")

    # --- reports & analytics ---
    async def get_reports(self) -> Any:
        return await self._call("GET", "REPORTS", "Failed to fetch reports")

    async def get_analytics(self) -> Any:
        return await self._call("GET", "ANALYTICS", "Failed to fetch analytics")

    # --- community ---
    async def get_community_reports(self) -> Any:
        return await self._call("GET", "COMMUNITY_REPORTS", "Failed to fetch community reports")

    async def submit_community_report(self, report_data: dict[str, Any]) -> Any:
        return await self._call(
            "POST", "COMMUNITY_REPORTS", "Failed to submit community report", json_body=report_data
        )

    async def get_community_posts(self) -> Any:
        return await self._call("GET", "COMMUNITY_POSTS", "Failed to fetch community posts")

    async def create_community_post(self, post_data: dict[str, Any]) -> Any:
        return await self._call("POST", "COMMUNITY_POSTS", "Failed to create community post", json_body=post_data)
