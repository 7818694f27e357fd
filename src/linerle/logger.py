from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from rich.console import Console
from rich.logging import RichHandler


@dataclass
class EventLogger:
    """
    Structured event logger (JSON Lines).

    - fixed fields (ts, stage, event)
    - meta dict reserved for structured diagnostics
    - one event per line (append-only)
    - no-op when log_path is None
    """
    log_path: Optional[Path] = None

    def log(self, stage: str, event: str, meta: Optional[Dict[str, Any]] = None) -> None:
        if self.log_path is None:
            return
        record = {
            "ts": time.strftime("%Y-%m-%dT%H:%M:%S", time.localtime()),
            "stage": stage,
            "event": event,
            "meta": meta or {},
        }
        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        with self.log_path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(record, ensure_ascii=False) + "\n")


def setup_logging(level: str = "WARNING") -> None:
    """Route stdlib logging to stderr through rich; stdout stays reserved for encoded output."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
