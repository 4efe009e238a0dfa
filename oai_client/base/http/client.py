"""httpx client construction for clients.

Purpose:
    Build the ``httpx.Client`` a request runs on from a ``ClientConfig`` and
    apply the caller's middleware hook to it. Each request gets its own
    short-lived client: headers and timeouts differ between (derived)
    clients, so there is nothing safe to pool at this layer.

External dependencies:
    - ``httpx`` for the underlying synchronous HTTP client.

Middleware hooks:
    A hook is any ``Callable[[httpx.Client], None]``. It typically registers
    httpx event hooks; ``response_logger`` is the stock one.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

import httpx

from ..client_config import ClientConfig
from ..logging import get_logger, log_event

MiddlewareHook = Callable[[httpx.Client], Any]


def noop_middleware(_conn: httpx.Client) -> None:
    """Default hook; leaves the httpx client untouched."""


def build_httpx_client(
    config: ClientConfig,
    *,
    middleware_hook: Optional[MiddlewareHook] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> httpx.Client:
    """Return a new ``httpx.Client`` configured for ``config``.

    Parameters:
        config: Resolved client configuration; ``request_timeout`` becomes the
            connect/read/write/pool timeout.
        middleware_hook: Applied to the new client before it is returned.
        transport: Optional transport override (``httpx.MockTransport`` in tests).

    Returns:
        An open ``httpx.Client``; callers close it (use it as a context manager).
    """
    conn = httpx.Client(timeout=config.request_timeout, transport=transport)
    if middleware_hook is not None:
        middleware_hook(conn)
    return conn


def add_event_hook(conn: httpx.Client, kind: str, hook: Callable[..., Any]) -> None:
    """Append ``hook`` to the ``kind`` (``"request"``/``"response"``) hooks of ``conn``."""
    hooks = conn.event_hooks
    hooks[kind] = [*hooks.get(kind, []), hook]
    conn.event_hooks = hooks


def response_logger(
    logger: Optional[logging.Logger] = None,
    *,
    bodies: bool = False,
    level: int = logging.INFO,
) -> MiddlewareHook:
    """Return a middleware hook that logs every response.

    Emits ``http.response`` events with method, URL (query stripped), status
    and, when ``bodies`` is true, the response text. Request headers are never
    logged.
    """
    log = logger or get_logger("oai_client.http")

    def log_response(response: httpx.Response) -> None:
        request = response.request
        body = None
        if bodies:
            response.read()
            body = response.text
        log_event(
            log,
            "http.response",
            level=level,
            method=request.method,
            url=str(request.url).split("?", 1)[0],
            status=response.status_code,
            body=body,
        )

    def hook(conn: httpx.Client) -> None:
        add_event_hook(conn, "response", log_response)

    return hook


__all__ = [
    "MiddlewareHook",
    "noop_middleware",
    "build_httpx_client",
    "add_event_hook",
    "response_logger",
]
