"""Patterns command."""

from . import cli
from .shared import console

from rich.table import Table
from rich.text import Text

from chatmarkup.config import load_settings
from chatmarkup.formatting import URL_PATTERNS, markdown_patterns


@cli.command()
def patterns():
    """Show URL and markdown patterns in priority order."""
    code_color = load_settings().code_color
    tables = (("URL patterns", URL_PATTERNS), ("Markdown patterns", markdown_patterns(code_color)))
    for title, table_patterns in tables:
        table = Table(title=title, padding=(0, 2))
        table.add_column("#", style="dim")
        table.add_column("Name", style="bold")
        table.add_column("Regex")
        table.add_column("Template")

        for i, pattern in enumerate(table_patterns, 1):
            table.add_row(str(i), pattern.name, Text(pattern.regex.pattern), Text(pattern.template))
        console.print(table)
