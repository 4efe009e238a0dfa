"""
Client Base Package

Provider-agnostic building blocks of the client layer:
- Options: typed, presence-aware constructor options
- ClientConfig: immutable resolved configuration snapshot
- Headers / diagnostics: pure functions over a ClientConfig
- HTTP: httpx transport seam used by resource wrappers
- Errors and structured logging

Only the leaf modules (errors, logging) are imported eagerly here; the rest
depend on ``oai_client.config`` and are imported from their own modules.
"""

from .errors import ClientError, ConfigurationError, ErrorCode, classify_exception
from .logging import LogContext, configure_logger, get_logger, log_event

__all__ = [
    "ClientError",
    "ConfigurationError",
    "ErrorCode",
    "classify_exception",
    "LogContext",
    "configure_logger",
    "get_logger",
    "log_event",
]
