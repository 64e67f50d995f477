"""CLI entry point; registers all subcommands."""

from typing import Optional

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="complexity-insight",
    help="Complexity Insight - McCabe cyclomatic complexity for Java and assembler",
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"complexity-insight {__version__}")
        raise typer.Exit()


@app.callback()
def _root(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Compute per-function cyclomatic complexity."""


# Import subcommands to register them
from .analyze import analyze as _analyze  # noqa: F401, E402
from .code import code as _code  # noqa: F401, E402
from .languages import languages as _languages  # noqa: F401, E402


def main() -> None:
    app()
