"""Unified client error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``oai_client.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.client_error import ClientError
from .errors_parts.configuration_error import ConfigurationError
from .errors_parts.classification import classify_exception, classify_status

__all__ = ["ErrorCode", "ClientError", "ConfigurationError", "classify_exception", "classify_status"]
