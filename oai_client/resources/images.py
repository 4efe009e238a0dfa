"""Image generation resource wrapper."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional

if TYPE_CHECKING:
    from ..client import Client


class Images:
    def __init__(self, client: "Client") -> None:
        self._client = client

    def generate(self, parameters: Optional[Mapping[str, Any]] = None) -> Any:
        return self._client.json_post(path="/images/generations", parameters=dict(parameters or {}))
