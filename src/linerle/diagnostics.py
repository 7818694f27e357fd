from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TextIO

import typer

from .schemas import ByteCounters


@dataclass
class Diagnostics:
    """
    Diagnostic channel (stderr unless a stream is injected).

    Carries the program identifier used to prefix error lines.
    """
    program_name: str
    stream: Optional[TextIO] = None

    def _echo(self, message: str) -> None:
        if self.stream is None:
            typer.echo(message, err=True)
        else:
            typer.echo(message, file=self.stream)

    def error(self, message: str) -> None:
        self._echo(f"[{self.program_name}] ERROR: {message}")

    def usage(self) -> None:
        self._echo(f"USAGE: {self.program_name} [-o OUTPUT] [INPUT]...")

    def summary(self, counters: ByteCounters) -> None:
        self._echo(f"READ: {counters.read} characters")
        self._echo(f"Written: {counters.written} characters")
