from __future__ import annotations

from pydantic import BaseModel, Field


# ---------- Encoder ----------
class Run(BaseModel):
    char: int = Field(..., ge=0, le=255, description="Byte value of the run")
    count: int = Field(..., ge=1)


class EncodeResult(BaseModel):
    consumed: int = Field(0, ge=0, description="Bytes read, terminator included")
    emitted: int = Field(0, ge=0, description="Token bytes written, newline excluded")


# ---------- Driver ----------
class ByteCounters(BaseModel):
    read: int = 0
    written: int = 0

    def add(self, result: EncodeResult) -> None:
        self.read += result.consumed
        self.written += result.emitted
