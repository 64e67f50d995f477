"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..config import AnalysisConfig, load_config
from ..exceptions import ComplexityInsightError
from ..formatters import get_formatter
from ..logging_config import setup_logging
from ..models import ComplexityResult

console = Console()
err_console = Console(stderr=True)

FORMAT_HELP = "Output format: rich, json or text"


def resolve_config(
    config: Optional[Path] = None,
    output_format: Optional[str] = None,
    threshold: Optional[int] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> AnalysisConfig:
    """Build configuration from CLI options and set up logging."""
    try:
        settings = load_config(
            config_file=config,
            output_format=output_format,
            warning_threshold=threshold,
            verbose=verbose,
            quiet=quiet,
        )
    except ComplexityInsightError as e:
        fail(e)
    setup_logging(settings.verbosity)
    return settings


def render(result: ComplexityResult, settings: AnalysisConfig) -> None:
    formatter = get_formatter(settings.output_format, threshold=settings.warning_threshold)
    if settings.output_format == "rich":
        formatter.console = console
        formatter.render(result)
    else:
        typer.echo(formatter.format(result).rstrip("\n"))


def report_error(error: ComplexityInsightError) -> None:
    err_console.print(f"[red]Error:[/red] {escape(str(error))}", highlight=False, soft_wrap=True)


def fail(error: ComplexityInsightError) -> None:
    report_error(error)
    raise typer.Exit(code=1)
