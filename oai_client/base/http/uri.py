"""Request URI construction for the standard and Azure API shapes."""
from __future__ import annotations

import re

from ...config.defaults import AZURE_DEPLOYMENTLESS_PATHS
from ..client_config import ClientConfig

_DEPLOYMENT_SEGMENT = re.compile(r"/deployments?/[^/]+")


def join_path(*parts: str) -> str:
    """Join URI pieces with exactly one ``/`` at each seam."""
    out = parts[0]
    for part in parts[1:]:
        out = out.rstrip("/") + "/" + part.lstrip("/")
    return out


def _azure_uri(config: ClientConfig, path: str) -> str:
    base = config.uri_base
    if any(p in path for p in AZURE_DEPLOYMENTLESS_PATHS):
        base = _DEPLOYMENT_SEGMENT.sub("", base)
    return f"{join_path(base, path)}?api-version={config.api_version}"


def build_uri(config: ClientConfig, path: str) -> str:
    """Return the absolute URI for ``path``.

    Azure: ``<uri_base>/<path>?api-version=<version>``, with the deployment
    segment dropped for assistants, threads and vector stores. Otherwise the
    version segment is inserted unless ``uri_base`` already contains it.
    """
    if config.azure:
        return _azure_uri(config, path)
    if config.api_version and config.api_version in config.uri_base:
        return join_path(config.uri_base, path)
    return join_path(config.uri_base, config.api_version, path)


__all__ = ["build_uri", "join_path"]
