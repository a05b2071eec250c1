"""HTTP client for a Task Manager server."""

from __future__ import annotations

import asyncio
from typing import Any

import httpx

from taskmanager.config import get_settings
from taskmanager.models import ClientConfig


class APIError(Exception):
    """Non-2xx response from the server, decoded from its error body."""

    def __init__(
        self,
        status_code: int,
        message: str,
        code: str | None = None,
        field: str | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.code = code
        self.field = field

    @classmethod
    def from_response(cls, response: httpx.Response) -> APIError:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and "message" in body:
            return cls(
                response.status_code,
                body["message"],
                code=body.get("code"),
                field=body.get("field"),
            )
        return cls(response.status_code, response.text or response.reason_phrase)


class APIClient:
    """Async HTTP client with JSON headers and retry on server errors.

    4xx responses are raised immediately; 5xx responses and transport errors
    are retried with exponential backoff.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30,
        retry: int = 3,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retry = retry
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                follow_redirects=True,
                headers={
                    "Content-Type": "application/json",
                    "Accept": "application/json",
                },
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> APIClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Send a request, retrying on 5xx and transport errors.

        Raises:
            APIError: On a 4xx response, or a 5xx once retries run out
            httpx.RequestError: When the server stays unreachable
        """
        client = self._get_client()
        url = path if path.startswith("/") else f"/{path}"

        last_exception: Exception | None = None
        for attempt in range(self.retry + 1):
            try:
                response = await client.request(method, url, json=json, params=params)
            except httpx.RequestError as e:
                last_exception = e
            else:
                if response.is_success:
                    return response
                error = APIError.from_response(response)
                # Don't retry client errors (4xx)
                if response.status_code < 500:
                    raise error
                last_exception = error

            if attempt < self.retry:
                await asyncio.sleep(0.5 * 2**attempt)

        assert last_exception is not None
        raise last_exception

    async def get(self, path: str, *, params: dict[str, Any] | None = None) -> httpx.Response:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, *, json: Any = None) -> httpx.Response:
        return await self.request("POST", path, json=json)

    async def put(self, path: str, *, json: Any = None) -> httpx.Response:
        return await self.request("PUT", path, json=json)

    async def delete(self, path: str) -> httpx.Response:
        return await self.request("DELETE", path)


def get_client(config: ClientConfig | None = None) -> APIClient:
    """Build a client from the ``client`` section of the settings."""
    if config is None:
        config = get_settings().client
    return APIClient(config.endpoint, timeout=config.timeout, retry=config.retry)
