"""
Configurable async HTTP request pipeline.

``create_fetch_wrapper`` builds an instance from layered options and
``FetchWrapper.create`` hands out per-method request functions that run the
before-send chain, dispatch through the transport and route the outcome to the
configured interceptors.
"""

from fetch_wrapper.config import DEFAULT_CONFIG, FetchConfig, HttpMethod, merge_config, merge_headers
from fetch_wrapper.errors import FetchWrapperError, HttpStatusError, ResponseDecodeError
from fetch_wrapper.headers import content_type_of, normalize_headers
from fetch_wrapper.http_client import HttpxTransport, Transport, create_http_client
from fetch_wrapper.registry import InstanceRegistry, default_registry
from fetch_wrapper.settings import Settings
from fetch_wrapper.wrapper import FetchWrapper, create_fetch_wrapper, is_http_status_ok

__all__ = [
    "DEFAULT_CONFIG",
    "FetchConfig",
    "FetchWrapper",
    "FetchWrapperError",
    "HttpMethod",
    "HttpStatusError",
    "HttpxTransport",
    "InstanceRegistry",
    "ResponseDecodeError",
    "Settings",
    "Transport",
    "content_type_of",
    "create_fetch_wrapper",
    "create_http_client",
    "default_registry",
    "is_http_status_ok",
    "merge_config",
    "merge_headers",
    "normalize_headers",
]
