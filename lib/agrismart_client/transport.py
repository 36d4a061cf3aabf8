from __future__ import annotations

import json
import logging
import uuid
from typing import Any, Awaitable, Callable, Iterable

import httpx

from .config_types import ClientConfig
from .errors import ApiError, AuthError, NetworkError, StorageError
from .storage import Session

logger = logging.getLogger(__name__)

RequestHook = Callable[[httpx.Request], Awaitable[None]]
ResponseHook = Callable[[httpx.Response], Awaitable[None]]
UnauthorizedCallback = Callable[[httpx.Response], None]


class Transport:
    """Shared httpx.AsyncClient plus the request/response hook chain.

    Built-in hooks run first: the request hook attaches the bearer token,
    the response hook clears the session on 401 and fires ``on_unauthorized``.
    Extra hooks run afterwards in the order given.
    """

    def __init__(
            self,
            cfg: ClientConfig,
            session: Session,
            *,
            on_unauthorized: UnauthorizedCallback | None = None,
            request_hooks: Iterable[RequestHook] = (),
            response_hooks: Iterable[ResponseHook] = (),
            transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._cfg = cfg
        self._session = session
        self._on_unauthorized = on_unauthorized
        headers = dict(cfg.headers)
        if cfg.user_agent:
            headers["User-Agent"] = cfg.user_agent

        self._client = httpx.AsyncClient(
            base_url=cfg.base_url.rstrip("/"),
            timeout=cfg.timeout_s,
            headers=headers,
            follow_redirects=True,
            transport=transport,
            event_hooks={
                "request": [self._attach_token, *request_hooks],
                "response": [self._handle_unauthorized, *response_hooks],
            },
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _attach_token(self, request: httpx.Request) -> None:
        try:
            token = self._session.token
        except StorageError as e:
            logger.debug("token lookup failed, sending %s unauthenticated: %s", request.url.path, e)
            return
        if token:
            request.headers["Authorization"] = f"Bearer {token}"

    async def _handle_unauthorized(self, response: httpx.Response) -> None:
        if response.status_code != 401:
            return
        try:
            self._session.clear()
        except StorageError as e:
            logger.warning("could not clear session after 401: %s", e)
        if self._on_unauthorized is not None:
            self._on_unauthorized(response)

    async def request(
            self,
            method: str,
            path: str,
            *,
            json_body: Any | None = None,
            files: dict[str, Any] | None = None,
    ) -> Any:
        kwargs: dict[str, Any] = {}
        if files is not None:
            # replaces the JSON default; httpx keeps the boundary given here
            kwargs["files"] = files
            kwargs["headers"] = {"Content-Type": f"multipart/form-data; boundary={uuid.uuid4().hex}"}
        elif json_body is not None:
            kwargs["json"] = json_body

        try:
            r = await self._client.request(method, path, **kwargs)
        except httpx.RequestError as e:
            raise NetworkError(None, str(e) or type(e).__name__) from e
        logger.debug("%s %s -> %s", method, path, r.status_code)

        data: Any = None
        text = ""
        if r.content:
            try:
                data = r.json()
            except ValueError:
                text = r.text

        if r.status_code >= 400:
            msg = f"{method} {path} failed with {r.status_code}"
            details = None
            server_message = None

            if isinstance(data, dict):
                details = json.dumps(data, ensure_ascii=False)
                raw = data.get("message")
                if isinstance(raw, str) and raw:
                    server_message = raw
                    msg = raw
            elif text:
                details = text[:1000]

            if r.status_code in (401, 403):
                raise AuthError(r.status_code, msg, details, server_message)
            raise ApiError(r.status_code, msg, details, server_message)

        if data is not None:
            return data
        return text or None
