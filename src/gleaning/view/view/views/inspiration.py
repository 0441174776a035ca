# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from gleaning.color import MUTED_COLOR
from gleaning.model.inspiration import Inspiration
from gleaning.model.project import Project
from gleaning.repository.id_map import ID_MAP_REPO
from gleaning.service.project import resolve_project
from gleaning.time import iso_str_to_display_local_datetime_str
from gleaning.view.view.util import preview, project_label
from gleaning.view.view.views.header import header


def inspirations_view(
    report_name: str,
    inspirations: list[Inspiration],
    projects: list[Project],
    expand: bool = False,
) -> None:
    header(report_name)

    console = Console()
    if len(inspirations) == 0:
        console.print(Text(" nothing found", style=MUTED_COLOR))
        return

    inspirations_table = Table(box=box.SIMPLE)
    inspirations_table.add_column("id")
    inspirations_table.add_column("created", no_wrap=True)
    inspirations_table.add_column("project")
    inspirations_table.add_column("content")

    for inspiration in inspirations:
        content = Text(preview(inspiration["content"], expand))
        if inspiration["is_hidden"]:
            content.stylize(MUTED_COLOR)
        inspirations_table.add_row(
            str(ID_MAP_REPO.associate_id("inspirations", inspiration["id"])),
            iso_str_to_display_local_datetime_str(inspiration["created_at"]),
            project_label(resolve_project(projects, inspiration["project_id"])),
            content,
        )

    console.print(inspirations_table)


def single_inspiration_view(
    inspiration: Inspiration, project: Optional[Project]
) -> None:
    header("inspiration")

    inspiration_table = Table(box=box.SIMPLE)
    inspiration_table.add_column("property")
    inspiration_table.add_column("value")

    inspiration_table.add_row(
        "id", str(ID_MAP_REPO.associate_id("inspirations", inspiration["id"]))
    )
    inspiration_table.add_row("project", project_label(project))
    inspiration_table.add_row(
        "created", iso_str_to_display_local_datetime_str(inspiration["created_at"])
    )
    inspiration_table.add_row("hidden", "yes" if inspiration["is_hidden"] else "no")

    console = Console()
    console.print(inspiration_table)
    console.print(Panel(Text(inspiration["content"]), title="Inspiration", border_style="blue"))
