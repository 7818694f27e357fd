from __future__ import annotations

from pydantic import BaseModel


class SourceStatus(BaseModel):
    name: str
    lines: int = 0
    consumed: int = 0
    emitted: int = 0
