"""Console tables rendered with rich."""

from collections.abc import Sequence

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

# Horizontal padding rich adds to each cell (one space per side)
CELL_PADDING = 2


def build_table(
    head: Sequence[str],
    rows: Sequence[Sequence[str]],
    col_widths: Sequence[int],
) -> Table:
    """Fixed-width table; ``col_widths`` include cell padding, long cells end in an ellipsis."""
    if len(head) != len(col_widths):
        raise ValueError("head and col_widths must have the same length")

    table = Table(box=box.ASCII, show_lines=False)
    for title, width in zip(head, col_widths):
        table.add_column(
            Text(title),
            width=max(width - CELL_PADDING, 1),
            no_wrap=True,
            overflow="ellipsis",
        )
    for row in rows:
        # Text cells so phrases like "[bold]" are not read as markup
        table.add_row(*(Text(" ".join(str(cell).split())) for cell in row))
    return table


def render_table(
    head: Sequence[str],
    rows: Sequence[Sequence[str]],
    col_widths: Sequence[int],
) -> str:
    """Render a table to plain text for printing."""
    table = build_table(head, rows, col_widths)
    # Wide enough for every column plus the border characters
    console = Console(
        width=sum(col_widths) + len(col_widths) + 1,
        color_system=None,
        highlight=False,
    )
    with console.capture() as capture:
        console.print(table)
    return capture.get().rstrip("\n")
