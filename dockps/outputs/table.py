from typing import IO, List, Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from dockps.models import DisplayRow

# Column order follows the DisplayRow fields
HEADER_ROW = list(DisplayRow.model_fields.keys())

# Upper bound used to measure the natural width of the table
MAX_TABLE_WIDTH = 100_000


def build_container_table(rows: List[DisplayRow]) -> Table:
    table = Table(box=box.ROUNDED, header_style="")
    for column in HEADER_ROW:
        table.add_column(column, no_wrap=True)

    for row in rows:
        # Text cells so container values are never parsed as markup
        table.add_row(*[Text(getattr(row, column)) for column in HEADER_ROW])
    return table


def render_container_table(rows: List[DisplayRow], file: Optional[IO[str]] = None) -> None:
    """
    Prints the rows as a rounded table without colors. The table is printed at its natural width so cells are never
    cut or wrapped to fit the terminal.

    :param rows: DisplayRows in the order they should be printed
    :param file: Output stream, defaults to standard output
    """
    table = build_container_table(rows)
    width = Console(width=MAX_TABLE_WIDTH).measure(table).maximum

    console = Console(file=file, width=width, color_system=None, highlight=False)
    console.print(table)
