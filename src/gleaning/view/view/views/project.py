# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from gleaning import configuration
from gleaning.color import MUTED_COLOR, get_project_style
from gleaning.model.entry import Entry
from gleaning.model.project import Project
from gleaning.repository.id_map import ID_MAP_REPO
from gleaning.service.entry import orphaned_entries
from gleaning.service.project import count_ongoing_projects
from gleaning.view.view.views.header import header


def projects_view(projects: list[Project], entries: list[Entry]) -> None:
    ongoing = count_ongoing_projects(projects)
    header(f"projects ({ongoing}/{configuration.ACTIVE_PROJECT_CAP} ongoing)")

    projects_table = Table(box=box.SIMPLE)
    projects_table.add_column("id")
    projects_table.add_column("slot")
    projects_table.add_column("name")
    projects_table.add_column("color")
    projects_table.add_column("status")
    projects_table.add_column("entries", justify="right")

    for project in projects:
        entry_count = len(
            [entry for entry in entries if entry["project_id"] == project["id"]]
        )
        projects_table.add_row(
            str(ID_MAP_REPO.associate_id("projects", project["id"])),
            str(project["slot"]),
            Text(project["name"], style=get_project_style(project["color"])),
            Text(project["color"]),
            "finished" if project["is_finished"] else "ongoing",
            str(entry_count),
        )

    console = Console()
    console.print(projects_table)

    orphan_count = len(orphaned_entries(entries, projects))
    if orphan_count > 0:
        console.print(
            Text(f" {orphan_count} entries belong to deleted projects", style=MUTED_COLOR)
        )


def single_project_view(project: Project) -> None:
    header("project")

    project_table = Table(box=box.SIMPLE)
    project_table.add_column("property")
    project_table.add_column("value")

    project_table.add_row(
        "id", str(ID_MAP_REPO.associate_id("projects", project["id"]))
    )
    project_table.add_row(
        "name", Text(project["name"], style=get_project_style(project["color"]))
    )
    project_table.add_row("color", Text(project["color"]))
    project_table.add_row("slot", str(project["slot"]))
    project_table.add_row("status", "finished" if project["is_finished"] else "ongoing")

    console = Console()
    console.print(project_table)
