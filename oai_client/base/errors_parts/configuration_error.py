"""Error raised for programming mistakes in configuration calls."""
from __future__ import annotations


class ConfigurationError(AttributeError):
    """A configuration call named a field that does not exist.

    Bad *values* are never rejected here; they surface at the transport.
    """


__all__ = ["ConfigurationError"]
