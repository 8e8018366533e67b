"""Request configuration model and the three-tier merge."""

import json
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field, fields
from typing import Any, Literal, Union

from fetch_wrapper.headers import HeadersInit, normalize_headers

HttpMethod = Literal["CONNECT", "DELETE", "GET", "HEAD", "OPTIONS", "PATCH", "POST", "PUT", "TRACE"]

BeforeSend = Callable[["FetchConfig"], Union["FetchConfig", Awaitable["FetchConfig"]]]
ErrorInterceptor = Callable[[BaseException], Any]
ResponseInterceptor = Callable[[Any], Any]
TransformData = Callable[[Any], Union[str, bytes, None]]

ConfigSource = Union["FetchConfig", Mapping[str, Any], None]


def _identity(value: Any) -> Any:
    return value


def _json_body(data: Any) -> str | None:
    """Serialize the payload as JSON; no payload means no body."""
    if data is None:
        return None
    return json.dumps(data)


@dataclass(slots=True)
class FetchConfig:
    """Effective configuration for a single request."""

    method: str | None = None
    headers: HeadersInit | None = None
    body: str | bytes | None = None
    params: Any = None
    cookies: Any = None
    timeout: Any = None
    follow_redirects: bool | None = None
    singleton: bool = False
    before_send: BeforeSend = _identity
    on_send_error: ErrorInterceptor = _identity
    on_response_success: ResponseInterceptor = _identity
    on_response_error: ErrorInterceptor = _identity
    transform_data: TransformData = _json_body
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Flatten into a single mapping with ``extra`` keys at the top level."""
        data = {f.name: getattr(self, f.name) for f in fields(self) if f.name != "extra"}
        data.update(self.extra)
        return data


FIELD_NAMES = frozenset(f.name for f in fields(FetchConfig) if f.name != "extra")

DEFAULT_CONFIG = FetchConfig()


def merge_config(*sources: ConfigSource) -> FetchConfig:
    """
    Shallow-merge configuration sources, later sources winning field by field.

    ``FetchConfig`` sources contribute every field. Mapping sources contribute
    only the keys they carry, and a ``None`` value counts as not supplied.
    Nested values such as headers are replaced wholesale. Keys that are not
    configuration fields are kept in ``extra``.
    """
    merged: dict[str, Any] = {}
    for source in sources:
        if source is None:
            continue
        if isinstance(source, FetchConfig):
            merged.update(source.to_dict())
            continue
        for key, value in source.items():
            if value is None:
                continue
            if key == "extra" and isinstance(value, Mapping):
                merged.update(value)
            else:
                merged[key] = value

    known = {key: value for key, value in merged.items() if key in FIELD_NAMES}
    extra = {key: value for key, value in merged.items() if key not in FIELD_NAMES}
    return FetchConfig(**known, extra=extra)


def merge_headers(headers: HeadersInit) -> BeforeSend:
    """
    Build a before-send interceptor that layers ``headers`` over the config's own.

    The resulting headers are a plain mapping; later names replace earlier ones.
    """
    additions = normalize_headers(headers)

    def _merge(config: FetchConfig) -> FetchConfig:
        combined = dict(normalize_headers(config.headers))
        combined.update(additions)
        config.headers = combined
        return config

    return _merge


__all__ = [
    "BeforeSend",
    "ConfigSource",
    "DEFAULT_CONFIG",
    "ErrorInterceptor",
    "FetchConfig",
    "HttpMethod",
    "ResponseInterceptor",
    "TransformData",
    "merge_config",
    "merge_headers",
]
