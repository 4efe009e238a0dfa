"""
Error classification helpers mapping exceptions to normalized ErrorCode values.

Implements HTTP status extraction, status-to-code mapping, and httpx exception
class checks.
"""
from __future__ import annotations

from typing import Dict, Optional

import httpx

from .client_error import ClientError
from .error_code import ErrorCode


def _extract_status(exc: Exception) -> Optional[int]:
    """Attempt to extract an HTTP status code from an exception.

    Supported attribute shapes (checked in order):
    - ``exc.status_code``
    - ``exc.response.status_code``
    Returns ``None`` if no valid status can be found.
    """
    val = getattr(exc, "status_code", None)
    if isinstance(val, int) and 100 <= val < 600:
        return val
    resp = getattr(exc, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and 100 <= sc < 600:
            return sc
    return None


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    409: ErrorCode.CONFLICT,
    422: ErrorCode.VALIDATION,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
}


def classify_status(status: int) -> ErrorCode:
    """Map an HTTP status to an :class:`ErrorCode`."""
    if status in _HTTP_STATUS_MAP:
        return _HTTP_STATUS_MAP[status]
    if status >= 500:
        return ErrorCode.SERVER_ERROR
    return ErrorCode.UNKNOWN


def classify_exception(exc: Exception) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. ClientError passthrough.
        2. HTTP status mapping.
        3. Timeout exceptions (httpx and builtin).
        4. Connection/transport exceptions.
        5. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, ClientError):
        return exc.code
    status = _extract_status(exc)
    if status is not None:
        return classify_status(status)
    if isinstance(exc, (httpx.TimeoutException, TimeoutError)):
        return ErrorCode.TIMEOUT
    if isinstance(exc, (httpx.TransportError, ConnectionError)):
        return ErrorCode.CONNECTION
    return ErrorCode.UNKNOWN


__all__ = [
    "classify_exception",
    "classify_status",
    "_extract_status",
    "_HTTP_STATUS_MAP",
]
