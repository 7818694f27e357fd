from __future__ import annotations

from .core import (
    Run,
    EncodeResult,
    ByteCounters,
)
from .run_status import SourceStatus


__all__ = [
    "Run",
    "EncodeResult",
    "ByteCounters",
    "SourceStatus",
]
