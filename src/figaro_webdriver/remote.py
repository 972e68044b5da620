"""Async transport that sends built requests to a WebDriver remote end."""

from __future__ import annotations

import json
import logging
import urllib.parse
from typing import Any

import httpx

from .command import Command, NewSession, RequestData, Status, build_request
from .config import Settings
from .connection import build_headers, unwrap
from .errors import RemoteConnectionError, WebDriverError
from .types import SessionId

logger = logging.getLogger(__name__)


def _strip_credentials(url: str) -> str:
    parsed = urllib.parse.urlsplit(url)
    netloc = parsed.netloc.rpartition("@")[2]
    return urllib.parse.urlunsplit(parsed._replace(netloc=netloc)).rstrip("/")


class RemoteConnection:
    """Wrapper around httpx.AsyncClient speaking the WebDriver wire protocol.

    Credentials embedded in the server URL are sent as a Basic Authorization
    header and removed from the request URLs.
    """

    def __init__(
        self,
        server_url: str | None = None,
        timeout: float | None = None,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        settings = settings or Settings()
        server_url = server_url or settings.server_url
        self._headers = build_headers(server_url, user_agent=settings.user_agent)
        self._base_url = _strip_credentials(server_url)
        self._timeout = timeout if timeout is not None else settings.request_timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        return self._base_url

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers=self._headers,
                timeout=httpx.Timeout(self._timeout),
                transport=self._transport,
            )
            logger.info("Opened WebDriver connection to %s", self._base_url)
        return self._client

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            logger.info("Closed WebDriver connection to %s", self._base_url)
        self._client = None

    async def __aenter__(self) -> RemoteConnection:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def send(self, request: RequestData) -> Any:
        """Send a request and return the decoded response body.

        Raises:
            RemoteConnectionError: on transport failure or a non-JSON body.
            WebDriverError: when the remote end reports an error.
        """
        client = await self._get_client()
        content = json.dumps(request.body).encode() if request.body is not None else None
        logger.debug("%s %s", request.method.value, request.url)

        try:
            response = await client.request(
                request.method.value,
                self._base_url + request.url,
                content=content,
            )
        except httpx.HTTPError as e:
            raise RemoteConnectionError(f"{request.method.value} {request.url} failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise RemoteConnectionError(
                f"{request.method.value} {request.url} returned a non-JSON body "
                f"(HTTP {response.status_code})"
            ) from e

        if response.is_error or _is_legacy_error(data):
            error = WebDriverError.from_response(response.status_code, data)
            logger.warning("%s %s: %s", request.method.value, request.url, error)
            raise error
        return data

    async def execute(self, command: Command, session_id: SessionId | None = None) -> Any:
        """Run a command and return the ``value`` member of the response.

        Raises:
            ValueError: if ``session_id`` is missing for a session-bound command.
        """
        if not session_id:
            if not isinstance(command, (Status, NewSession)):
                raise ValueError(f"session_id is required for {type(command).__name__}")
            session_id = SessionId("")
        request = build_request(command, session_id)
        data = await self.send(request)
        if isinstance(data, dict):
            return data.get("value")
        return data

    async def new_session(self, capabilities: Any) -> SessionId:
        """Start a session and return its id, for W3C and legacy servers alike."""
        data = await self.send(build_request(NewSession(capabilities), SessionId("")))
        value = data.get("value") if isinstance(data, dict) else None
        if isinstance(value, dict) and "sessionId" in value:
            session_id = value["sessionId"]
        else:
            session_id = data.get("sessionId") if isinstance(data, dict) else None
        return unwrap(session_id, SessionId)


def _is_legacy_error(data: Any) -> bool:
    if not isinstance(data, dict):
        return False
    # Legacy JSON wire protocol: non-zero status signals failure.
    status = data.get("status")
    return isinstance(status, int) and not isinstance(status, bool) and status != 0
