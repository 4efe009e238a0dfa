"""Process-wide configuration defaults for clients.

Goals
-----
* Centralize the default connection parameters every new ``Client`` reads.
* Merge sources in a predictable order (later wins):
    1. Built-in defaults (``oai_client.config.defaults``)
    2. Optional external config file (JSON or YAML) named by OAI_CLIENT_CONFIG_FILE
    3. Environment variables (OPENAI_ACCESS_TOKEN, OPENAI_URI_BASE, ...)
    4. ``configure()`` calls made by the application
* Keep the default instance replaceable: every ``Client`` also accepts an
  explicit ``configuration=`` argument, so nothing forces hidden global state.

External Config File (Optional)
-------------------------------
```
uri_base: https://example.com/
request_timeout: 30
extra_headers:
  X-Proxy-Team: research
```

Concurrency
-----------
No locking. ``configure()`` is an administrative operation meant for process
start and teardown; racing it against client construction is the caller's
problem. Clients copy values at construction and never read this state again.

Public API
----------
* Configuration
* configure(mutator=None, **fields) -> Configuration
* get_configuration() -> Configuration
* reset_configuration() -> Configuration
"""
from __future__ import annotations

import copy
import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Callable, Dict, Optional
import os

import yaml

from ..base.errors import ConfigurationError
from ..base.logging import get_logger, log_event
from .defaults import (
    DEFAULT_API_VERSION,
    DEFAULT_LOG_ERRORS,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_URI_BASE,
)
from .env import CONFIG_FILE_ENV, env_overrides

_logger = get_logger("oai_client.config")


@dataclass
class Configuration:
    """Mutable default values consulted when a client is constructed.

    Attributes:
        access_token: Default bearer credential.
        admin_token: Default credential for admin endpoints.
        organization_id: Default organization sent with each request.
        uri_base: Base URI of the API.
        request_timeout: Transport timeout in seconds.
        extra_headers: Headers added to every request.
        api_type: API flavor; ``"azure"`` switches URI and header shapes.
        api_version: Version path segment (or Azure ``api-version``).
        log_errors: Log failed responses with their body.
    """

    access_token: Optional[str] = None
    admin_token: Optional[str] = None
    organization_id: Optional[str] = None
    uri_base: str = DEFAULT_URI_BASE
    request_timeout: int = DEFAULT_REQUEST_TIMEOUT
    extra_headers: Dict[str, str] = field(default_factory=dict)
    api_type: Optional[str] = None
    api_version: str = DEFAULT_API_VERSION
    log_errors: bool = DEFAULT_LOG_ERRORS

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_env(cls) -> "Configuration":
        """Build an instance from defaults, the config file and the environment."""
        cfg = cls()
        cfg.update(_load_external_config())
        cfg.update(env_overrides())
        return cfg

    def update(self, values: Dict[str, Any]) -> None:
        """Assign known fields from ``values``; unknown keys are ignored."""
        known = self.field_names()
        for key, value in values.items():
            if key in known:
                setattr(self, key, dict(value or {}) if key == "extra_headers" else value)

    def copy(self) -> "Configuration":
        """Return an independent copy of this configuration."""
        return copy.deepcopy(self)


def _load_external_config() -> Dict[str, Any]:
    """Read the optional config file named by ``OAI_CLIENT_CONFIG_FILE``.

    JSON is tried first, then YAML. A missing file or a document that is not a
    mapping yields ``{}``.
    """
    path = os.getenv(CONFIG_FILE_ENV)
    if not path:
        return {}
    p = Path(path).expanduser()
    if not p.is_file():
        return {}
    text = p.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError:
            log_event(_logger, "config.file.unreadable", path=str(p))
            return {}
    return data if isinstance(data, dict) else {}


_DEFAULT: Configuration = Configuration.from_env()


def get_configuration() -> Configuration:
    """Return the process-wide default configuration instance."""
    return _DEFAULT


def configure(
    mutator: Optional[Callable[[Configuration], None]] = None,
    /,
    **fields_: Any,
) -> Configuration:
    """Mutate the process-wide defaults in place.

    Accepts a callable receiving the configuration, keyword assignments, or
    both (the callable runs first). Values are not validated; a bad URI or a
    negative timeout surfaces later at the transport.

    Raises:
        ConfigurationError: a keyword names a field that does not exist.
    """
    cfg = _DEFAULT
    if unknown := sorted(set(fields_) - set(cfg.field_names())):
        raise ConfigurationError(f"Unknown configuration field(s): {', '.join(unknown)}")
    before = {name: getattr(cfg, name) for name in cfg.field_names()}
    before["extra_headers"] = dict(cfg.extra_headers)
    if mutator is not None:
        mutator(cfg)
    for name, value in fields_.items():
        setattr(cfg, name, value)
    changed = [name for name in cfg.field_names() if getattr(cfg, name) != before[name]]
    # field names only; values may be credentials
    log_event(_logger, "config.update", fields=changed)
    return cfg


def reset_configuration() -> Configuration:
    """Replace the default instance with a freshly built one and return it."""
    global _DEFAULT
    _DEFAULT = Configuration.from_env()
    return _DEFAULT


__all__ = [
    "Configuration",
    "configure",
    "get_configuration",
    "reset_configuration",
]
