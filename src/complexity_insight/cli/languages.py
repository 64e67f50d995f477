"""List supported languages."""

from rich.table import Table

from ..languages import Language
from . import app
from ._common import console


@app.command()
def languages() -> None:
    """Show supported language keys and the extensions mapped to them."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("Key", style="cyan")
    table.add_column("Language")
    table.add_column("Extensions")
    for language in Language:
        table.add_row(language.key, language.display_name, ", ".join(language.extensions))
    console.print(table)
