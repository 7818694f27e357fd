from __future__ import annotations

import os
from typing import List, Optional

from pydantic import BaseModel, Field


class LineRLEConfig(BaseModel):
    """
    Configuration for one encoder invocation.

    Notes:
    - Built once at startup and passed down; nothing reads globals.
    - output_path None means standard output.
    - input_paths empty means standard input.
    """
    program_name: str = Field(default_factory=lambda: os.getenv("LINERLE_PROGRAM_NAME", "linerle"))

    output_path: Optional[str] = None
    input_paths: List[str] = Field(default_factory=list)

    # observability
    event_log: Optional[str] = Field(default_factory=lambda: os.getenv("LINERLE_EVENT_LOG") or None)
    log_level: str = Field(default_factory=lambda: os.getenv("LINERLE_LOG_LEVEL", "WARNING"))
