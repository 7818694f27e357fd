from __future__ import annotations

import sys
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, Optional, Tuple

from .access import check_access
from .config import LineRLEConfig
from .diagnostics import Diagnostics
from .encoder import encode_line
from .errors import AccessError
from .logger import EventLogger
from .schemas import ByteCounters, SourceStatus

STDIN_NAME = "<stdin>"


def _open_checked(path: str, mode: str, buffering: int = -1) -> BinaryIO:
    """
    Pre-check then open `path`. Open failures the pre-check cannot see
    (e.g. a directory) are reported as AccessError too.
    """
    check_access(path)
    try:
        return open(path, mode, buffering=buffering)
    except OSError as e:
        raise AccessError(path, e.strerror or str(e)) from e


class Driver:
    """
    Feeds every line of every input source through the encoder into one sink.

    Sources:
      - standard input when no input paths are configured
      - otherwise each named file, in order, one open at a time
    """

    def __init__(
        self,
        cfg: LineRLEConfig,
        diagnostics: Diagnostics,
        stdin: Optional[BinaryIO] = None,
        stdout: Optional[BinaryIO] = None,
        events: Optional[EventLogger] = None,
    ):
        self.cfg = cfg
        self.diagnostics = diagnostics
        self.stdin = stdin
        self.stdout = stdout
        self.events = events or EventLogger()
        self.counters = ByteCounters()

    def open_sink(self) -> Tuple[BinaryIO, bool]:
        """
        Return (sink, owned). Owned sinks are files the driver must close.
        """
        if self.cfg.output_path is None:
            return (sys.stdout.buffer if self.stdout is None else self.stdout), False

        # unbuffered so each token write fails on its own
        return _open_checked(self.cfg.output_path, "wb", buffering=0), True

    @contextmanager
    def _open_source(self, path: str) -> Iterator[BinaryIO]:
        with _open_checked(path, "rb") as f:
            yield f

    def _release_sink(self, sink: BinaryIO, owned: bool) -> None:
        try:
            if owned:
                sink.close()
            else:
                sink.flush()
        except OSError as e:
            self.diagnostics.error("Error while writing to file")
            self.events.log("driver", "sink_close_failed", {"error": str(e)})

    def iter_sources(self) -> Iterator[Tuple[str, BinaryIO]]:
        """
        Yield (name, stream) pairs. A file is closed before the next is opened.
        """
        if not self.cfg.input_paths:
            yield STDIN_NAME, (sys.stdin.buffer if self.stdin is None else self.stdin)
            return

        for path in self.cfg.input_paths:
            with self._open_source(path) as f:
                yield path, f

    def _drain(self, name: str, source: BinaryIO, sink: BinaryIO) -> SourceStatus:
        status = SourceStatus(name=name)
        for line in source:
            result = encode_line(line, sink, self.diagnostics, self.events)
            self.counters.add(result)
            status.lines += 1
            status.consumed += result.consumed
            status.emitted += result.emitted
        return status

    def run(self) -> ByteCounters:
        """
        Execute the whole invocation and print the summary.

        Raises:
        - AccessError when the output or any input fails the pre-check.
          Output already written for earlier sources stays in the sink.
        """
        self.events.log("driver", "start", {
            "output": self.cfg.output_path or "<stdout>",
            "inputs": self.cfg.input_paths or [STDIN_NAME],
        })

        try:
            sink, owned = self.open_sink()
        except AccessError as e:
            self.events.log("driver", "fail", {"path": e.path, "error": e.reason})
            raise

        try:
            for name, source in self.iter_sources():
                self.events.log("source", "open", {"name": name})
                status = self._drain(name, source, sink)
                self.events.log("source", "done", status.model_dump())
            self.diagnostics.summary(self.counters)
        except AccessError as e:
            self.events.log("driver", "fail", {"path": e.path, "error": e.reason})
            raise
        finally:
            self._release_sink(sink, owned)

        self.events.log("driver", "done", self.counters.model_dump())
        return self.counters


def run_driver(cfg: LineRLEConfig, diagnostics: Optional[Diagnostics] = None) -> ByteCounters:
    diagnostics = diagnostics or Diagnostics(program_name=cfg.program_name)
    events = EventLogger(log_path=Path(cfg.event_log) if cfg.event_log else None)
    return Driver(cfg, diagnostics, events=events).run()
