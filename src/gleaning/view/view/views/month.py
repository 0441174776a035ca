# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from gleaning.model.entry import Entry
from gleaning.service.month import is_in_month, month_label
from gleaning.view.view.views.header import header


def months_view(months: list[str], entries: list[Entry]) -> None:
    header("months")

    months_table = Table(box=box.SIMPLE)
    months_table.add_column("month")
    months_table.add_column("label")
    months_table.add_column("entries", justify="right")

    for month in months:
        entry_count = len(
            [entry for entry in entries if is_in_month(entry["date"], month)]
        )
        months_table.add_row(
            month,
            month_label(month),
            str(entry_count),
        )

    console = Console()
    console.print(months_table)
