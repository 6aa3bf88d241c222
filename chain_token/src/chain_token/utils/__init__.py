from __future__ import annotations

from .b64d import b64d
from .b64e import b64e

__all__ = [
    "b64d",
    "b64e",
]
