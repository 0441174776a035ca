# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from gleaning.color import MUTED_COLOR, get_project_style
from gleaning.model.entry import Entry
from gleaning.model.project import Project
from gleaning.view.view.util import project_label
from gleaning.view.view.views.header import header


def single_entry_view(entry: Entry, project: Optional[Project]) -> None:
    header("entry")

    entry_table = Table(box=box.SIMPLE)
    entry_table.add_column("property")
    entry_table.add_column("value")

    entry_table.add_row("date", entry["date"])
    entry_table.add_row("project", project_label(project))
    entry_table.add_row("intensity", str(entry["intensity"]))

    console = Console()
    console.print(entry_table)

    border_style = get_project_style(project["color"]) if project is not None else ""
    console.print(
        Panel(Text(entry["content"]), title="Entry", border_style=border_style or "blue")
    )


def empty_cell_view(date: str, project: Project) -> None:
    console = Console()
    console.print(
        Text(f" nothing recorded for {project['name']} on {date}", style=MUTED_COLOR)
    )
