"""Transport protocol and the default httpx-backed implementation."""

from typing import Any, Protocol

import httpx

from fetch_wrapper.config import FetchConfig
from fetch_wrapper.headers import normalize_headers
from fetch_wrapper.settings import Settings


class ResponseHandle(Protocol):
    """What the pipeline reads from a transport response."""

    status_code: int
    headers: Any

    def json(self) -> Any: ...


class Transport(Protocol):
    """Capability that performs the actual request dispatch."""

    async def fetch(self, url: str, config: FetchConfig) -> ResponseHandle: ...


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    """Build an AsyncClient configured from Settings."""
    return httpx.AsyncClient(
        base_url=settings.base_url,
        timeout=settings.timeout,
        follow_redirects=settings.follow_redirects,
    )


def request_kwargs(config: FetchConfig) -> dict[str, Any]:
    """Map a FetchConfig onto ``httpx.AsyncClient.request`` keywords."""
    kwargs: dict[str, Any] = dict(config.extra)
    if config.headers:
        kwargs["headers"] = normalize_headers(config.headers)
    if config.body is not None:
        kwargs["content"] = config.body
    for name in ("params", "cookies", "timeout", "follow_redirects"):
        value = getattr(config, name)
        if value is not None:
            kwargs[name] = value
    return kwargs


class HttpxTransport:
    """Transport wrapper around a shared AsyncClient."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "HttpxTransport":
        """Factory that builds the transport from Settings."""
        return cls(create_http_client(settings))

    async def fetch(self, url: str, config: FetchConfig) -> httpx.Response:
        return await self._client.request(config.method or "GET", url, **request_kwargs(config))

    async def aclose(self) -> None:
        """Close the underlying HTTP resources."""
        await self._client.aclose()
