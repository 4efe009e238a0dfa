"""HTTP transport seam (httpx client construction, URIs, request verbs)."""

from .client import MiddlewareHook, add_event_hook, build_httpx_client, noop_middleware, response_logger
from .requests import HttpRequestsMixin
from .uri import build_uri, join_path

__all__ = [
    "MiddlewareHook",
    "add_event_hook",
    "build_httpx_client",
    "noop_middleware",
    "response_logger",
    "HttpRequestsMixin",
    "build_uri",
    "join_path",
]
