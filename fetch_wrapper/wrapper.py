"""
Request pipeline: per-method request functions over a pluggable transport.

Each call runs one request/response cycle through the same stages: the
before-send chain, method resolution, body serialization, transport dispatch,
status validation and content-type-aware decoding. Failures while preparing
the request go to ``on_send_error``; transport failures, non-2xx statuses and
undecodable JSON go to ``on_response_error``. Whatever the interceptor returns
becomes the call's result, so by default errors are returned, not raised.
"""

import inspect
import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from fetch_wrapper.config import (
    DEFAULT_CONFIG,
    BeforeSend,
    ConfigSource,
    FetchConfig,
    HttpMethod,
    merge_config,
)
from fetch_wrapper.errors import HttpStatusError, ResponseDecodeError
from fetch_wrapper.headers import content_type_of
from fetch_wrapper.http_client import HttpxTransport, Transport
from fetch_wrapper.registry import InstanceRegistry, default_registry
from fetch_wrapper.settings import Settings

logger = logging.getLogger(__name__)

BoundRequest = Callable[..., Awaitable[Any]]


def is_http_status_ok(code: int) -> bool:
    """Return True for status codes in the 2xx range."""
    return 200 <= code < 300


async def _resolve(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


class FetchWrapper:
    """
    Owns the instance-level configuration and the transport used by every call.

    ``FetchWrapper(options, **overrides)`` merges builtin defaults, ``options``
    and keyword overrides. With ``singleton=True`` the first such construction
    is recorded in the registry and every later singleton construction returns
    it, discarding its own options and transport. The outcome therefore depends
    on construction order. Constructions without the flag always build an
    independent instance and never touch the registry.
    """

    config: FetchConfig

    def __new__(
        cls,
        options: ConfigSource = None,
        *,
        transport: Transport | None = None,
        registry: InstanceRegistry | None = None,
        **overrides: Any,
    ) -> "FetchWrapper":
        config = merge_config(DEFAULT_CONFIG, options, overrides)
        registry = registry if registry is not None else default_registry
        if config.singleton:
            existing = registry.get(cls)
            if existing is not None:
                logger.debug("Reusing singleton FetchWrapper")
                return existing

        self = super().__new__(cls)
        self.config = config
        self._transport = transport
        if config.singleton:
            return registry.register(cls, self)
        return self

    # Construction happens entirely in __new__, so a reused singleton keeps its state.
    def __init__(self, *args: Any, **kwargs: Any) -> None:
        pass

    @property
    def transport(self) -> Transport:
        """The injected transport, or an httpx one built from Settings on first use."""
        if self._transport is None:
            self._transport = HttpxTransport.from_settings(Settings.load())
        return self._transport

    async def aclose(self) -> None:
        """Close the transport if it holds resources."""
        close = getattr(self._transport, "aclose", None)
        if close is not None:
            await close()

    def create(self, method: HttpMethod = "GET") -> BoundRequest:
        """Return an async request function bound to ``method``."""

        async def request(url: str, data: Any = None, options: Mapping[str, Any] | None = None) -> Any:
            return await self._request(method, url, data, options or {})

        request.__name__ = f"fetch_{method.lower()}"
        return request

    def bind(self, *methods: HttpMethod) -> dict[str, BoundRequest]:
        """Create one request function per method, GET and POST by default."""
        return {method: self.create(method) for method in methods or ("GET", "POST")}

    async def _run_before_send(self, config: FetchConfig, call_before_send: BeforeSend | None) -> FetchConfig:
        # Instance-level runs first so the call-level interceptor sees its result.
        for interceptor in (self.config.before_send, call_before_send):
            if interceptor is None:
                continue
            result = await _resolve(interceptor(config))
            if not isinstance(result, FetchConfig):
                raise TypeError(f"before_send interceptor returned {type(result).__name__}, expected FetchConfig")
            config = result
        return config

    async def _request(self, method: str, url: str, data: Any, options: Mapping[str, Any]) -> Any:
        config = merge_config(self.config, options)

        try:
            config = await self._run_before_send(config, options.get("before_send"))
            config.method = str(method if options.get("method") is None else options["method"]).upper()
            config.body = await _resolve(config.transform_data(data))
        except Exception as exc:  # noqa: BLE001
            logger.warning(
                "Request preparation failed",
                extra={"method": config.method or method, "url": url},
                exc_info=exc,
            )
            return await _resolve(config.on_send_error(exc))

        logger.debug("Dispatching request", extra={"method": config.method, "url": url})
        try:
            response = await self.transport.fetch(url, config)
        except Exception as exc:  # noqa: BLE001
            logger.error(
                "Transport request failed",
                extra={"method": config.method, "url": url},
                exc_info=exc,
            )
            return await _resolve(config.on_response_error(exc))

        if not is_http_status_ok(response.status_code):
            logger.warning(
                "Response status outside 2xx",
                extra={"method": config.method, "url": url, "status_code": response.status_code},
            )
            return await _resolve(config.on_response_error(HttpStatusError(response.status_code, response)))

        content_type = content_type_of(config.headers)
        if not content_type or "application/json" not in content_type:
            return await _resolve(config.on_response_success(response))

        try:
            payload = await _resolve(response.json())
        except Exception as exc:  # noqa: BLE001
            logger.error(
                "Response body is not valid JSON",
                extra={"method": config.method, "url": url},
            )
            try:
                raise ResponseDecodeError(f"Response body is not valid JSON ({config.method} {url}).") from exc
            except ResponseDecodeError as error:
                return await _resolve(config.on_response_error(error))
        return await _resolve(config.on_response_success(payload))


def create_fetch_wrapper(
    options: ConfigSource = None,
    *,
    transport: Transport | None = None,
    registry: InstanceRegistry | None = None,
    **overrides: Any,
) -> FetchWrapper:
    """Construct a FetchWrapper; see the class docstring for the singleton rule."""
    return FetchWrapper(options, transport=transport, registry=registry, **overrides)
