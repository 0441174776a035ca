# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from gleaning.color import MUTED_COLOR, get_cell_style, get_project_style
from gleaning.model.entry import Entry
from gleaning.model.project import Project
from gleaning.repository.id_map import ID_MAP_REPO
from gleaning.service.entry import entry_for_cell
from gleaning.time import date_to_display_str, dates_in_month, today_local_date_str
from gleaning.view.view.views.header import header

CELL_WIDTH = 16


def matrix_view(
    month_title: str,
    month: str,
    projects: list[Project],
    entries: list[Entry],
) -> None:
    """
    The monthly grid: one row per day, one column per ongoing project.

    Filled cells show the start of the entry in the project's shade for the
    entry intensity.
    """
    header(f"matrix: {month_title}")

    console = Console()
    if len(projects) == 0:
        console.print(
            Text(" no ongoing projects, add one with `gleaning project add`", style=MUTED_COLOR)
        )
        return

    today = today_local_date_str()

    matrix_table = Table(box=box.SIMPLE, show_lines=False)
    matrix_table.add_column("day", no_wrap=True)
    for project in projects:
        synthetic_id = ID_MAP_REPO.associate_id("projects", project["id"])
        matrix_table.add_column(
            Text(
                f"{synthetic_id} {project['name']}",
                style=get_project_style(project["color"]),
            ),
            width=CELL_WIDTH,
            no_wrap=True,
            overflow="ellipsis",
        )

    for date in dates_in_month(month):
        day_style = "bold underline" if date == today else ""
        row: list[Text] = [Text(date_to_display_str(date), style=day_style)]
        for project in projects:
            entry = entry_for_cell(entries, date, project["id"])
            if entry is None:
                row.append(Text(""))
                continue
            first_line = entry["content"].split("\n")[0]
            row.append(
                Text(first_line, style=get_cell_style(project["color"], entry["intensity"]))
            )
        matrix_table.add_row(*row)

    console.print(matrix_table)
