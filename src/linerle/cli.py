from __future__ import annotations

# ---- Environment bootstrap (MUST be first) ----
from dotenv import load_dotenv

# Load .env once at process start
load_dotenv()

# ---- CLI / Driver imports ----
from typing import List, Optional

import typer

from .config import LineRLEConfig
from .diagnostics import Diagnostics
from .driver import run_driver
from .errors import AccessError
from .logger import setup_logging


app = typer.Typer(add_completion=False, help="Line-oriented run-length encoder")


@app.command()
def main(
    inputs: Optional[List[str]] = typer.Argument(None, metavar="[INPUT]...", help="Input files (default: stdin)"),
    output: Optional[List[str]] = typer.Option(None, "-o", "--output", metavar="OUTPUT", help="Output file (default: stdout)"),
):
    """
    Encode each input line as <char><count> tokens.
    """
    cfg = LineRLEConfig(input_paths=list(inputs or []))
    diagnostics = Diagnostics(program_name=cfg.program_name)

    output = output or []
    if len(output) > 1:
        diagnostics.error("flag -o can only appear once")
        diagnostics.usage()
        raise typer.Exit(code=2)
    cfg.output_path = output[0] if output else None

    setup_logging(cfg.log_level)

    try:
        run_driver(cfg, diagnostics)
    except AccessError as e:
        diagnostics.error(str(e))
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
