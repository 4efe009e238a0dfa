"""oai_client package

Configuration and instantiation layer for OpenAI-style API clients.

Purpose:
    Resolve, per client, a coherent set of connection parameters from
    process-wide defaults and per-instance overrides, and expose derived
    ``admin`` / ``beta`` client variants without mutating the original.

Public API (re-exported):
    - Version: ``__version__``
    - Client: :class:`Client`, :class:`ClientOptions`, :class:`ClientConfig`
    - Configuration: :class:`Configuration`, :func:`configure`,
      :func:`get_configuration`, :func:`reset_configuration`
    - Transport helpers: :func:`response_logger`
    - Errors: :class:`ClientError`, :class:`ConfigurationError`, :class:`ErrorCode`
"""

from .base.client_config import ClientConfig
from .base.errors import ClientError, ConfigurationError, ErrorCode
from .base.http import response_logger
from .base.logging import configure_logger
from .base.options import ClientOptions
from .client import Client
from .config import Configuration, configure, get_configuration, reset_configuration
from .config.defaults import DEFAULT_REQUEST_TIMEOUT, DEFAULT_URI_BASE

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Client",
    "ClientOptions",
    "ClientConfig",
    "Configuration",
    "configure",
    "get_configuration",
    "reset_configuration",
    "configure_logger",
    "response_logger",
    "ClientError",
    "ConfigurationError",
    "ErrorCode",
    "DEFAULT_REQUEST_TIMEOUT",
    "DEFAULT_URI_BASE",
]
