"""Typed constructor options for ``Client``.

Purpose
-------
Capture the optional per-client overrides in one small DTO instead of a long
argument list, and record which of them the caller actually supplied. A field
that was never set (or was set to ``None``) inherits the configuration
default; any other value, including an empty string, overrides it.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for field typing, ``extra="forbid"`` rejection of
  misspelled option names, and ``model_fields_set`` presence tracking.

Failure modes & side effects
----------------------------
- Pure data container: no I/O. ``ValidationError`` is raised only for unknown
  option names. Values are stored unchecked (``SkipValidation``): a float
  timeout or a non-string header value is accepted and surfaces, if at all,
  at the transport.
"""
from __future__ import annotations

from typing import Annotated, Any, Callable, Dict, Mapping, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, SkipValidation

_T = TypeVar("_T")

# declared type, stored as given
Lenient = Annotated[Optional[_T], SkipValidation()]


class ClientOptions(BaseModel):
    """Per-client overrides; every field is optional.

    Attributes
    ----------
    access_token:
        Bearer credential for standard requests.
    admin_token:
        Credential swapped in by ``Client.admin()``.
    organization_id:
        Organization sent in the ``OpenAI-Organization`` header.
    uri_base:
        API base URI (proxies, gateways, Azure resources).
    request_timeout:
        Transport timeout in seconds.
    extra_headers:
        Headers added to every request. A non-empty mapping replaces the
        configured default mapping as a whole; it is never merged with it.
    api_type:
        API flavor; ``"azure"`` switches URI and header shapes.
    api_version:
        Version path segment, or the Azure ``api-version`` query value.
    log_errors:
        Log failed responses with their body.
    middleware_hook:
        Callable receiving each ``httpx.Client`` the client builds.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    access_token: Lenient[str] = None
    admin_token: Lenient[str] = None
    organization_id: Lenient[str] = None
    uri_base: Lenient[str] = None
    request_timeout: Lenient[int] = None
    extra_headers: Lenient[Dict[str, str]] = None
    api_type: Lenient[str] = None
    api_version: Lenient[str] = None
    log_errors: Lenient[bool] = None
    middleware_hook: Optional[Callable[..., Any]] = None

    def provided(self) -> Dict[str, Any]:
        """Return the fields the caller supplied with a non-``None`` value."""
        out: Dict[str, Any] = {}
        for name in self.model_fields_set:
            value = getattr(self, name)
            if value is not None:
                out[name] = value
        return out


def coerce_options(
    options: Union[ClientOptions, Mapping[str, Any], None],
    overrides: Mapping[str, Any],
) -> ClientOptions:
    """Merge keyword ``overrides`` over ``options`` into one ``ClientOptions``.

    Keyword arguments win on overlapping keys. Only explicitly set fields are
    carried over so presence information survives the merge.
    """
    if options is None:
        base: Dict[str, Any] = {}
    elif isinstance(options, ClientOptions):
        base = {name: getattr(options, name) for name in options.model_fields_set}
    else:
        base = dict(options)
    if not overrides and isinstance(options, ClientOptions):
        return options
    return ClientOptions(**(base | dict(overrides)))


__all__ = ["ClientOptions", "coerce_options"]
