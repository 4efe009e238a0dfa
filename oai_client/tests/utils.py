"""Shared helpers for client tests."""
from __future__ import annotations

import io
import json
from typing import Any, Dict, List


def log_events(stream: io.StringIO) -> List[Dict[str, Any]]:
    """Parse the JSON event lines captured by the ``log_stream`` fixture."""
    events = []
    for line in stream.getvalue().splitlines():
        line = line.strip()
        if line.startswith("{"):
            events.append(json.loads(line))
    return events
