"""Printable, secret-free representation of a client.

Two layers keep credentials out of ``repr(client)``:

1. Only fields tagged ``secret=False`` on ``ClientConfig`` are rendered.
2. Every string held by a secret field (each ``extra_headers`` value included,
   whatever its key) plus the effective access token forms a blacklist; any
   occurrence left in the rendered fields, e.g. a token embedded in
   ``uri_base``, is replaced with ``[REDACTED]``. This covers the whole line,
   type name and identity included: a secret that happens to equal part of
   ``Client`` or of the ``0x...`` address is hidden at the cost of that part.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List, Protocol, Set

from .client_config import ClientConfig

REDACTED = "[REDACTED]"


class _Diagnosable(Protocol):
    config: ClientConfig
    access_token: str


def _strings(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, Mapping):
        return [s for v in value.values() for s in _strings(v)]
    if isinstance(value, (list, tuple, set, frozenset)):
        return [s for v in value for s in _strings(v)]
    return [str(value)]


def secret_values(client: _Diagnosable) -> Set[str]:
    """Return every non-empty secret string carried by ``client``."""
    config = client.config
    found: Set[str] = set()
    for name in ClientConfig.secret_fields():
        found.update(_strings(getattr(config, name)))
    found.update(_strings(client.access_token))
    return {s for s in found if s}


def redact(text: str, secrets: Set[str]) -> str:
    """Replace each secret in ``text``; longest first so overlaps stay hidden."""
    for secret in sorted(secrets, key=len, reverse=True):
        text = text.replace(secret, REDACTED)
    return text


def format_client(client: _Diagnosable) -> str:
    """Render ``client`` for logs and the REPL without any credential."""
    cls = type(client)
    config = client.config
    parts = []
    for name in ClientConfig.public_fields():
        value = getattr(config, name)
        if isinstance(value, Mapping):
            value = dict(value)
        parts.append(f"{name}={value!r}")
    body = ", ".join(parts)
    text = f"<{cls.__module__}.{cls.__qualname__} object at {hex(id(client))} {body}>"
    return redact(text, secret_values(client))


__all__ = ["REDACTED", "format_client", "redact", "secret_values"]
