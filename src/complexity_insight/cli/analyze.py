"""Analyze source files on disk."""

from pathlib import Path
from typing import List, Optional

import typer

from ..api import analyze_file
from ..exceptions import ComplexityInsightError
from . import app
from ._common import FORMAT_HELP, render, report_error, resolve_config


@app.command()
def analyze(
    paths: List[Path] = typer.Argument(..., help="Source files to analyze"),
    language: Optional[str] = typer.Option(
        None,
        "--language",
        "-l",
        help="Language key (java, asm, 6502); inferred from the extension if omitted",
    ),
    output_format: Optional[str] = typer.Option(None, "--format", "-f", help=FORMAT_HELP),
    threshold: Optional[int] = typer.Option(
        None, "--threshold", "-t", help="Flag units with complexity above this value"
    ),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to a TOML config"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
) -> None:
    """Compute cyclomatic complexity for each function in PATHS."""
    settings = resolve_config(config, output_format, threshold, verbose, quiet)

    failures = 0
    for path in paths:
        try:
            result = analyze_file(path, language=language, config=settings)
        except ComplexityInsightError as e:
            report_error(e)
            failures += 1
            continue
        render(result, settings)

    if failures:
        raise typer.Exit(code=1)
