"""Bordered text rendering of parsed tables."""

from __future__ import annotations

from collections.abc import Iterable

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from dsl_tables.store import RenderedTable


def build_table(rendered: RenderedTable) -> Table:
    """Convert a rendered store into a rich table captioned with its name."""
    table = Table(
        caption=rendered.caption,
        box=box.ASCII,
        min_width=len(rendered.caption),
    )
    for column in rendered.header:
        table.add_column(column, overflow="fold")
    for row in rendered.rows():
        table.add_row(*(Text(cell) for cell in row))
    return table


def print_tables(
    tables: Iterable[RenderedTable],
    console: Console | None = None,
) -> None:
    console = console or Console()
    for rendered in tables:
        console.print(build_table(rendered))
        console.print()
