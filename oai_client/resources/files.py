"""File resource wrapper."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional

if TYPE_CHECKING:
    from ..client import Client


class Files:
    def __init__(self, client: "Client") -> None:
        self._client = client

    def list(self, parameters: Optional[Mapping[str, Any]] = None) -> Any:
        return self._client.get(path="/files", parameters=dict(parameters or {}))
