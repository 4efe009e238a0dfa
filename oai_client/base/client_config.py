"""Immutable, fully resolved configuration snapshot of one client.

A ``ClientConfig`` is computed once when a client is constructed by laying the
caller's options over the configuration defaults. Afterwards nothing refers
back to the configuration object: values are copied, and mapping fields are
wrapped in read-only proxies over private copies.

Derived clients are produced with ``with_admin()`` / ``with_beta()``, which
return ``dataclasses.replace`` copies; no snapshot is ever mutated in place.

Each field declares ``metadata={"secret": ...}``. Diagnostic formatting relies
on that tag, so a new credential-bearing field must be declared secret here.
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from ..config import Configuration, get_configuration
from ..config.defaults import (
    AZURE_API_TYPE,
    BETA_SEPARATOR,
    DEFAULT_API_VERSION,
    DEFAULT_LOG_ERRORS,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_URI_BASE,
)
from .options import ClientOptions

_SECRET = {"secret": True}
_PUBLIC = {"secret": False}


def _frozen_mapping(value: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return MappingProxyType({str(k): v for k, v in (value or {}).items()})


@dataclass(frozen=True)
class ClientConfig:
    """Resolved configuration values for one client instance.

    ``admin`` is true only on snapshots derived through ``with_admin()``; in
    that case ``access_token`` already holds the admin token.
    Mapping fields take part in equality but not in the hash.
    """

    access_token: Optional[str] = field(default=None, metadata=_SECRET)
    admin_token: Optional[str] = field(default=None, metadata=_SECRET)
    organization_id: Optional[str] = field(default=None, metadata=_SECRET)
    uri_base: str = field(default=DEFAULT_URI_BASE, metadata=_PUBLIC)
    request_timeout: int = field(default=DEFAULT_REQUEST_TIMEOUT, metadata=_PUBLIC)
    extra_headers: Mapping[str, str] = field(default_factory=dict, hash=False, metadata=_SECRET)
    api_type: Optional[str] = field(default=None, metadata=_PUBLIC)
    api_version: str = field(default=DEFAULT_API_VERSION, metadata=_PUBLIC)
    log_errors: bool = field(default=DEFAULT_LOG_ERRORS, metadata=_PUBLIC)
    beta_flags: Mapping[str, str] = field(default_factory=dict, hash=False, metadata=_PUBLIC)
    admin: bool = field(default=False, metadata=_PUBLIC)

    def __post_init__(self) -> None:
        object.__setattr__(self, "extra_headers", _frozen_mapping(self.extra_headers))
        object.__setattr__(self, "beta_flags", _frozen_mapping(self.beta_flags))

    @property
    def azure(self) -> bool:
        return (self.api_type or "").strip().lower() == AZURE_API_TYPE

    @property
    def beta_header_value(self) -> Optional[str]:
        """``"name=version"`` pairs joined by ``;``, or ``None`` without flags."""
        if not self.beta_flags:
            return None
        return BETA_SEPARATOR.join(f"{name}={version}" for name, version in self.beta_flags.items())

    @classmethod
    def secret_fields(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls) if f.metadata.get("secret"))

    @classmethod
    def public_fields(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls) if not f.metadata.get("secret"))

    def with_admin(self) -> "ClientConfig":
        """Copy with the admin token in the access-token slot."""
        return replace(self, access_token=self.admin_token, admin=True)

    def with_beta(self, flags: Mapping[str, str]) -> "ClientConfig":
        """Copy whose beta flags are exactly ``flags``."""
        return replace(self, beta_flags=flags)


def resolve_client_config(
    options: Optional[ClientOptions] = None,
    configuration: Optional[Configuration] = None,
) -> ClientConfig:
    """Lay ``options`` over ``configuration`` and freeze the result.

    Per field: a supplied non-``None`` option wins, otherwise the current
    configuration value is copied. ``extra_headers`` only overrides when the
    supplied mapping is non-empty, and then replaces the default mapping
    wholesale.
    """
    cfg = configuration if configuration is not None else get_configuration()
    values: Dict[str, Any] = {name: getattr(cfg, name) for name in Configuration.field_names()}
    provided = options.provided() if options is not None else {}
    provided.pop("middleware_hook", None)
    headers = provided.pop("extra_headers", None)
    if headers:
        values["extra_headers"] = headers
    values.update(provided)
    return ClientConfig(**values)


__all__ = ["ClientConfig", "resolve_client_config"]
