# commands/top_rated.py
"""List the highest-rated advocates across the whole roster."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from directory import AdvocateDirectory
from models import AdvocateRecord


def run(
    limit: int | None = None,
    advocates_path: str | None = None,
    console: Console | None = None,
) -> list[AdvocateRecord]:
    console = console or Console()
    advocates = AdvocateDirectory.from_file(advocates_path).top_rated(limit)

    table = Table(title="Top rated advocates")
    table.add_column("Name")
    table.add_column("District")
    table.add_column("Practice area")
    table.add_column("Rating", justify="right")
    for advocate in advocates:
        table.add_row(
            advocate.name,
            advocate.district,
            advocate.area_of_practice,
            f"{advocate.rating:.1f} ({advocate.review_count})",
        )
    console.print(table)
    return advocates
