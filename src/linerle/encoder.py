"""
Line encoder.
Turns one input line into `<byte><count>` tokens on a shared sink.
File: src/linerle/encoder.py
"""

from __future__ import annotations

import logging
from typing import BinaryIO, List, Optional

from .diagnostics import Diagnostics
from .logger import EventLogger
from .schemas import EncodeResult, Run

logger = logging.getLogger(__name__)

NEWLINE = b"\n"


def split_runs(body: bytes) -> List[Run]:
    """
    Partition `body` into maximal runs of identical bytes, in order.
    """
    runs: List[Run] = []
    if not body:
        return runs

    current = body[0]
    count = 1
    for b in body[1:]:
        if b == current:
            count += 1
        else:
            runs.append(Run(char=current, count=count))
            current = b
            count = 1

    runs.append(Run(char=current, count=count))
    return runs


def _token(char: int, count: int) -> bytes:
    return bytes([char]) + str(count).encode("ascii")


def render_token(run: Run) -> bytes:
    return _token(run.char, run.count)


def _write(sink: BinaryIO, data: bytes, diagnostics: Optional[Diagnostics], events: Optional[EventLogger]) -> bool:
    try:
        sink.write(data)
    except OSError as e:
        logger.debug("sink write failed: %s", e)
        if diagnostics is not None:
            diagnostics.error("Error while writing to file")
        if events is not None:
            events.log("encoder", "write_failed", {"bytes": len(data), "error": str(e)})
        return False
    return True


def encode_line(
    line: bytes,
    sink: BinaryIO,
    diagnostics: Optional[Diagnostics] = None,
    events: Optional[EventLogger] = None,
) -> EncodeResult:
    """
    Encode one line onto `sink`.

    A run is written only when a differing byte closes it, so the last run of
    every line never reaches the sink. A single newline always follows the
    tokens and is not counted in `emitted`.

    Write failures are reported and skipped; they never abort the line.
    """
    result = EncodeResult(consumed=len(line))

    body = line[:-1] if line.endswith(NEWLINE) else line
    current = -1
    count = 0
    for b in body:
        if count == 0:
            current, count = b, 1
        elif b == current:
            count += 1
        else:
            token = _token(current, count)
            if _write(sink, token, diagnostics, events):
                result.emitted += len(token)
            current, count = b, 1

    _write(sink, NEWLINE, diagnostics, events)
    return result
