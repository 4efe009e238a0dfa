"""Thin resource wrappers.

Each wrapper supplies only a path and parameters and calls back into the
owning client's request verbs (``get``, ``json_post``, ...). Request shaping
and response parsing beyond that belong to callers.
"""

from .files import Files
from .fine_tunes import FineTunes
from .images import Images
from .models import Models

__all__ = ["Files", "FineTunes", "Images", "Models"]
