"""Model listing resource wrapper."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..client import Client


class Models:
    def __init__(self, client: "Client") -> None:
        self._client = client

    def list(self) -> Any:
        return self._client.get(path="/models")
