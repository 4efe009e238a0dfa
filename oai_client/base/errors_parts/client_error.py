"""
Structured client error exception type.

Wraps transport exceptions and failed HTTP responses with a normalized
`ErrorCode` for consistent handling and structured logging.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .error_code import ErrorCode


@dataclass
class ClientError(Exception):
    """Represents a failed request with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        status_code: HTTP status when the server answered.
        body: Parsed (or raw text) response body, if any.
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    status_code: Optional[int] = None
    body: Any = None
    raw: Optional[Exception] = None

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"[{self.code.value} {self.status_code}] {self.message}"
        return f"[{self.code.value}] {self.message}"
