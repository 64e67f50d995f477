"""Analyze source text piped through stdin."""

import sys
from pathlib import Path
from typing import Optional

import typer

from ..api import analyze_source
from ..exceptions import ComplexityInsightError
from . import app
from ._common import FORMAT_HELP, fail, render, resolve_config


@app.command()
def code(
    language: Optional[str] = typer.Option(
        None,
        "--language",
        "-l",
        help="Language key (java, asm, 6502); inferred from --name if omitted",
    ),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="File name used in the report"),
    output_format: Optional[str] = typer.Option(None, "--format", "-f", help=FORMAT_HELP),
    threshold: Optional[int] = typer.Option(
        None, "--threshold", "-t", help="Flag units with complexity above this value"
    ),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to a TOML config"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
) -> None:
    """Compute cyclomatic complexity for source code read from stdin."""
    settings = resolve_config(config, output_format, threshold, verbose, quiet)
    source = sys.stdin.read()

    try:
        result = analyze_source(source, language=language, file_name=name, config=settings)
    except ComplexityInsightError as e:
        fail(e)
    render(result, settings)
