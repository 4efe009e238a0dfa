"""User-facing API client.

A ``Client`` owns one immutable ``ClientConfig`` resolved at construction from
its options over the configuration defaults, plus the runtime pieces that are
not configuration values (middleware hook, optional transport override).

``admin()`` and ``beta()`` never touch the receiver: they return new clients
whose snapshot differs on one axis, so both compose in either order::

    client = Client(admin_token="...")
    client.beta(assistants="v2").admin().headers["OpenAI-Beta"]  # "assistants=v2"

``repr(client)`` goes through ``format_client`` and never shows credentials,
the organization id or extra header values.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Union

import httpx

from .base.client_config import ClientConfig, resolve_client_config
from .base.diagnostics import format_client
from .base.headers import build_headers
from .base.http import HttpRequestsMixin, MiddlewareHook, noop_middleware
from .base.logging import get_logger, log_event
from .base.options import ClientOptions, coerce_options
from .config import Configuration
from .config.defaults import FALLBACK_ACCESS_TOKEN
from .config.env import env_access_token
from .resources import Files, FineTunes, Images, Models

_logger = get_logger("oai_client.client")


class Client(HttpRequestsMixin):
    """Configured handle for one set of connection parameters.

    Parameters:
        options: ``ClientOptions`` or a plain mapping of option names.
        configuration: Defaults to resolve against; the process-wide
            configuration when omitted.
        middleware_hook: Callable applied to every ``httpx.Client`` this
            client builds. Overrides ``options.middleware_hook``.
        transport: ``httpx`` transport override.
        **overrides: Option fields as keywords; they win over ``options``.

    Construction performs no I/O and accepts any value; problems surface when
    a request is made.
    """

    def __init__(
        self,
        options: Union[ClientOptions, Mapping[str, Any], None] = None,
        *,
        configuration: Optional[Configuration] = None,
        middleware_hook: Optional[MiddlewareHook] = None,
        transport: Optional[httpx.BaseTransport] = None,
        **overrides: Any,
    ) -> None:
        opts = coerce_options(options, overrides)
        self._config = resolve_client_config(opts, configuration)
        self._middleware_hook = middleware_hook or opts.middleware_hook or noop_middleware
        self._transport = transport
        self._log("client.init")

    def _derive(self, config: ClientConfig, axis: str) -> "Client":
        cls = type(self)
        child = cls.__new__(cls)
        child._config = config
        child._middleware_hook = self._middleware_hook
        child._transport = self._transport
        child._log("client.derive", axis=axis, parent=hex(id(self)))
        return child

    def _log(self, event: str, **fields: Any) -> None:
        cfg = self._config
        log_event(
            _logger,
            event,
            level=logging.DEBUG,
            client_id=hex(id(self)),
            uri_base=cfg.uri_base,
            request_timeout=cfg.request_timeout,
            api_type=cfg.api_type,
            admin=cfg.admin,
            **fields,
        )

    # -------------------- Derivation --------------------

    def admin(self) -> "Client":
        """Return a client that authenticates with the admin token.

        Without a configured admin token the new client silently falls back to
        the environment token or the placeholder; callers must guard for that.
        """
        if not self._config.admin_token:
            log_event(_logger, "client.admin.missing_token", level=logging.WARNING, client_id=hex(id(self)))
        return self._derive(self._config.with_admin(), "admin")

    def beta(self, flags: Optional[Mapping[str, str]] = None, /, **named_flags: str) -> "Client":
        """Return a client sending exactly these beta flags in ``OpenAI-Beta``.

        ``client.beta({"assistants": "v2"})`` and ``client.beta(assistants="v2")``
        are equivalent. The flags replace any the receiver carried.
        """
        merged: Dict[str, str] = {str(k): str(v) for k, v in (flags or {}).items()}
        merged.update({k: str(v) for k, v in named_flags.items()})
        return self._derive(self._config.with_beta(merged), "beta")

    # -------------------- Accessors --------------------

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def access_token(self) -> str:
        """Effective token: configured, else ``OPENAI_ACCESS_TOKEN``, else a placeholder."""
        return self._config.access_token or env_access_token() or FALLBACK_ACCESS_TOKEN

    @property
    def admin_token(self) -> Optional[str]:
        return self._config.admin_token

    @property
    def organization_id(self) -> Optional[str]:
        return self._config.organization_id

    @property
    def uri_base(self) -> str:
        return self._config.uri_base

    @property
    def request_timeout(self) -> int:
        return self._config.request_timeout

    @property
    def extra_headers(self) -> Dict[str, str]:
        return dict(self._config.extra_headers)

    @property
    def api_type(self) -> Optional[str]:
        return self._config.api_type

    @property
    def api_version(self) -> str:
        return self._config.api_version

    @property
    def log_errors(self) -> bool:
        return self._config.log_errors

    @property
    def beta_flags(self) -> Dict[str, str]:
        return dict(self._config.beta_flags)

    @property
    def azure(self) -> bool:
        return self._config.azure

    @property
    def headers(self) -> Dict[str, str]:
        """Headers for a JSON request, rebuilt on every access."""
        return build_headers(self._config, access_token=self.access_token)

    @property
    def middleware_hook(self) -> MiddlewareHook:
        return self._middleware_hook

    @property
    def transport(self) -> Optional[httpx.BaseTransport]:
        return self._transport

    # -------------------- Resources --------------------

    @property
    def files(self) -> Files:
        return Files(self)

    @property
    def finetunes(self) -> FineTunes:
        return FineTunes(self)

    @property
    def images(self) -> Images:
        return Images(self)

    @property
    def models(self) -> Models:
        return Models(self)

    def __repr__(self) -> str:
        return format_client(self)


__all__ = ["Client"]
