"""Structured logging context object for client events.

This module defines :class:`LogContext`, a dataclass carrying the common
fields of client logging events (client identity, HTTP method, request path
and extra metadata). ``to_dict`` merges the ``extra`` mapping and prunes
``None`` values for clean structured output.

Never put credentials in a context; it is written verbatim.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Structured context for client logging events."""

    client_id: Optional[str] = None
    method: Optional[str] = None
    path: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
