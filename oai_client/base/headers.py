"""Request header construction.

``build_headers`` is a pure function of a ``ClientConfig``: the same snapshot
always yields the same mapping, so clients rebuild it per request instead of
caching it.

Precedence (later wins):
    1. ``Content-Type``
    2. credential header (``Authorization: Bearer`` or Azure ``api-key``)
    3. ``OpenAI-Organization`` (standard API only, when set)
    4. ``OpenAI-Beta`` (when beta flags are set)
    5. every ``extra_headers`` entry, so callers can replace any of the above
"""
from __future__ import annotations

from typing import Dict, Optional

from ..config.defaults import (
    AUTHORIZATION_HEADER,
    AZURE_AUTHORIZATION_HEADER,
    BETA_HEADER,
    JSON_CONTENT_TYPE,
    ORGANIZATION_HEADER,
)
from .client_config import ClientConfig


def build_headers(
    config: ClientConfig,
    *,
    access_token: Optional[str] = None,
    content_type: Optional[str] = JSON_CONTENT_TYPE,
) -> Dict[str, str]:
    """Return the header mapping for a request made with ``config``.

    Parameters:
        config: Resolved client configuration.
        access_token: Token to send; defaults to ``config.access_token``.
            ``Client`` passes its effective token (env / placeholder fallback).
        content_type: ``Content-Type`` value, or ``None`` to omit it (multipart
            requests let the transport set the boundary).
    """
    token = access_token if access_token is not None else config.access_token
    headers: Dict[str, str] = {}
    if content_type:
        headers["Content-Type"] = content_type
    if config.azure:
        if token is not None:
            headers[AZURE_AUTHORIZATION_HEADER] = token
    else:
        if token is not None:
            headers[AUTHORIZATION_HEADER] = f"Bearer {token}"
        if config.organization_id:
            headers[ORGANIZATION_HEADER] = config.organization_id
    if beta := config.beta_header_value:
        headers[BETA_HEADER] = beta
    headers.update(config.extra_headers)
    return headers


__all__ = ["build_headers"]
