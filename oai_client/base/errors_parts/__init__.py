"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `oai_client.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .client_error import ClientError
from .configuration_error import ConfigurationError
from .classification import classify_exception, classify_status

__all__ = ["ErrorCode", "ClientError", "ConfigurationError", "classify_exception", "classify_status"]
