# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from gleaning.color import MUTED_COLOR, get_project_style
from gleaning.model.statistics import ProjectStatistics
from gleaning.time import iso_str_to_display_local_datetime_str
from gleaning.view.view.util import preview
from gleaning.view.view.views.header import header

# Entries and inspirations listed per project unless expanded
COLLAPSED_ITEM_COUNT = 3


def statistics_view(
    month_title: str, statistics: list[ProjectStatistics], expand: bool = False
) -> None:
    header(f"review: {month_title}")

    console = Console()
    if len(statistics) == 0:
        console.print(Text(" no projects match", style=MUTED_COLOR))
        return

    for project_statistics in statistics:
        console.print(__project_panel(project_statistics, expand))


def __project_panel(statistics: ProjectStatistics, expand: bool) -> Panel:
    project = statistics["project"]
    style = get_project_style(project["color"])

    entries_table = Table(box=box.SIMPLE, show_header=False, expand=True)
    entries_table.add_column("date", no_wrap=True, style=MUTED_COLOR)
    entries_table.add_column("content")
    shown_entries = (
        statistics["entries"] if expand else statistics["entries"][:COLLAPSED_ITEM_COUNT]
    )
    for entry in shown_entries:
        entries_table.add_row(entry["date"], Text(preview(entry["content"], expand)))

    inspirations_table = Table(box=box.SIMPLE, show_header=False, expand=True)
    inspirations_table.add_column("created", no_wrap=True, style=MUTED_COLOR)
    inspirations_table.add_column("content")
    shown_inspirations = (
        statistics["inspirations"]
        if expand
        else statistics["inspirations"][:COLLAPSED_ITEM_COUNT]
    )
    for inspiration in shown_inspirations:
        inspirations_table.add_row(
            iso_str_to_display_local_datetime_str(inspiration["created_at"]),
            Text(preview(inspiration["content"], expand)),
        )

    parts: list[Text | Table] = [
        Text(f"entries: {statistics['entry_count']}", style="bold")
    ]
    if len(shown_entries) > 0:
        parts.append(entries_table)
    parts.append(Text(f"inspirations: {statistics['inspiration_count']}", style="bold"))
    if len(shown_inspirations) > 0:
        parts.append(inspirations_table)

    hidden_count = (
        statistics["entry_count"]
        - len(shown_entries)
        + statistics["inspiration_count"]
        - len(shown_inspirations)
    )
    if hidden_count > 0:
        parts.append(Text(f"{hidden_count} more, use --expand", style=MUTED_COLOR))

    title = Text(project["name"], style=style)
    if project["is_finished"]:
        title.append(" (finished)", style=MUTED_COLOR)
    return Panel(Group(*parts), title=title, title_align="left", border_style=style or "blue")
