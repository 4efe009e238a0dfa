"""oai_client.config.env
=====================

Centralized environment variable mapping for client configuration fields.

Purpose
-------
- Provide a single source of truth mapping configuration field names to the
  environment variables that may supply them.
- Offer small helpers to read and coerce those values in a consistent way.

Failure Modes
-------------
- Helpers never raise on unset or malformed variables. Unparseable values are
  reported as absent so the caller falls back to the previous layer.
"""

from __future__ import annotations

import os
from typing import Any, Dict, Optional

# Configuration field -> environment variable
ENV_MAP: Dict[str, str] = {
    "access_token": "OPENAI_ACCESS_TOKEN",
    "admin_token": "OPENAI_ADMIN_TOKEN",
    "organization_id": "OPENAI_ORGANIZATION_ID",
    "uri_base": "OPENAI_URI_BASE",
    "request_timeout": "OPENAI_REQUEST_TIMEOUT",
    "api_type": "OPENAI_API_TYPE",
    "api_version": "OPENAI_API_VERSION",
    "log_errors": "OPENAI_LOG_ERRORS",
}

# Path to an optional JSON/YAML file with configuration defaults.
CONFIG_FILE_ENV = "OAI_CLIENT_CONFIG_FILE"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


def parse_bool(value: Optional[str]) -> Optional[bool]:
    """Parse a boolean-ish string; ``None`` when unrecognized."""
    if value is None:
        return None
    v = value.strip().lower()
    if v in _TRUTHY:
        return True
    if v in _FALSY:
        return False
    return None


def parse_int(value: Optional[str]) -> Optional[int]:
    """Parse an integer string (``"30"`` or ``"30.0"``); ``None`` on failure."""
    if value is None:
        return None
    try:
        return int(float(value.strip()))
    except (ValueError, OverflowError):
        return None


_COERCE = {
    "request_timeout": parse_int,
    "log_errors": parse_bool,
}


def env_overrides() -> Dict[str, Any]:
    """Return configuration values present in the process environment.

    Only variables that are set (and, for typed fields, parse cleanly) are
    included, so the result can be merged over lower-precedence layers.
    """
    out: Dict[str, Any] = {}
    for field, name in ENV_MAP.items():
        raw = os.environ.get(name)
        if raw is None:
            continue
        coerce = _COERCE.get(field)
        value = coerce(raw) if coerce else raw
        if value is not None:
            out[field] = value
    return out


def env_access_token() -> Optional[str]:
    """Return the access token from the environment, ignoring empty values."""
    return os.environ.get(ENV_MAP["access_token"]) or None


__all__ = [
    "ENV_MAP",
    "CONFIG_FILE_ENV",
    "parse_bool",
    "parse_int",
    "env_overrides",
    "env_access_token",
]
