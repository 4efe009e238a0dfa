"""oai_client.config.defaults
==========================

Central place for the small, stable default values used by the client
configuration layer. These defaults can be overridden via an external config
file, environment variables, ``configure()`` or per-client options, but provide
sensible fallbacks for local development and tests.

This module intentionally avoids importing from other oai_client packages to
prevent circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Connection ----

# Base URI used when neither configuration nor client options supply one.
DEFAULT_URI_BASE = "https://api.openai.com/"
# Request timeout in seconds handed to the transport.
DEFAULT_REQUEST_TIMEOUT = 120
# API version segment appended to the base URI (or sent as api-version on Azure).
DEFAULT_API_VERSION = "v1"
# Whether failed HTTP responses are logged with their body.
DEFAULT_LOG_ERRORS = False

# ---- Credentials ----

# Token used when no access token is configured anywhere.
FALLBACK_ACCESS_TOKEN = "dummy-token"  # nosec B105 - placeholder, not a credential

# ---- API variants ----

AZURE_API_TYPE = "azure"
# Azure paths served without the /deployments/<name> segment.
AZURE_DEPLOYMENTLESS_PATHS = ("/assistants", "/threads", "/vector_stores")

# ---- Headers ----

AUTHORIZATION_HEADER = "Authorization"
AZURE_AUTHORIZATION_HEADER = "api-key"
ORGANIZATION_HEADER = "OpenAI-Organization"
BETA_HEADER = "OpenAI-Beta"
BETA_SEPARATOR = ";"
JSON_CONTENT_TYPE = "application/json"
MULTIPART_CONTENT_TYPE = "multipart/form-data"

__all__ = [
    "DEFAULT_URI_BASE",
    "DEFAULT_REQUEST_TIMEOUT",
    "DEFAULT_API_VERSION",
    "DEFAULT_LOG_ERRORS",
    "FALLBACK_ACCESS_TOKEN",
    "AZURE_API_TYPE",
    "AZURE_DEPLOYMENTLESS_PATHS",
    "AUTHORIZATION_HEADER",
    "AZURE_AUTHORIZATION_HEADER",
    "ORGANIZATION_HEADER",
    "BETA_HEADER",
    "BETA_SEPARATOR",
    "JSON_CONTENT_TYPE",
    "MULTIPART_CONTENT_TYPE",
]
