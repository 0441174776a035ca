# SPDX-License-Identifier: MIT

from typing import Optional

from gleaning.model.entity_id import EntityId
from gleaning.model.entry import Entry
from gleaning.model.filter import ALL_MONTHS, ProjectStatus
from gleaning.model.inspiration import Inspiration
from gleaning.model.project import Project
from gleaning.model.statistics import ProjectStatistics
from gleaning.service.entry import entries_for_project
from gleaning.service.inspiration import inspirations_for_project
from gleaning.service.month import is_in_month


def sort_projects(projects: list[Project]) -> list[Project]:
    return sorted(projects, key=lambda project: project["slot"])


def resolve_project(
    projects: list[Project], project_id: Optional[EntityId]
) -> Optional[Project]:
    """
    Look up a referenced project.

    Entries and inspirations only hold project ids, so a deleted project
    simply resolves to None and the referrer reads as unlinked.
    """
    if project_id is None:
        return None
    for project in projects:
        if project["id"] == project_id:
            return project
    return None


def count_ongoing_projects(projects: list[Project]) -> int:
    return len([project for project in projects if not project["is_finished"]])


def matrix_projects(projects: list[Project]) -> list[Project]:
    """Columns of the monthly grid: ongoing projects only, in slot order."""
    return [project for project in sort_projects(projects) if not project["is_finished"]]


def visible_projects(
    projects: list[Project], entries: list[Entry], viewing_month: str
) -> list[Project]:
    """
    Projects worth reviewing for a month, in slot order.

    Ongoing projects are always shown. A finished project is shown only if it
    has an entry in the viewed month, except for ALL where every project is.
    """
    if viewing_month == ALL_MONTHS:
        return sort_projects(projects)

    project_ids_with_entries = {
        entry["project_id"]
        for entry in entries
        if is_in_month(entry["date"], viewing_month)
    }
    return [
        project
        for project in sort_projects(projects)
        if not project["is_finished"] or project["id"] in project_ids_with_entries
    ]


def matches_status(project: Project, status: ProjectStatus) -> bool:
    if status == "ONGOING":
        return not project["is_finished"]
    if status == "FINISHED":
        return project["is_finished"]
    return True


def project_statistics(
    projects: list[Project],
    entries: list[Entry],
    inspirations: list[Inspiration],
    viewing_month: str,
    search: str = "",
    status: ProjectStatus = "ALL",
) -> list[ProjectStatistics]:
    """
    Review data for every visible project that matches the name search and status.

    Each project carries its entries for the month, newest date first, and its
    inspirations that are not hidden, newest first.
    """
    lowered_search = search.lower()
    statistics: list[ProjectStatistics] = []
    for project in visible_projects(projects, entries, viewing_month):
        if lowered_search not in project["name"].lower():
            continue
        if not matches_status(project, status):
            continue

        project_entries = entries_for_project(entries, project["id"], viewing_month)
        project_inspirations = inspirations_for_project(inspirations, project["id"])
        statistics.append(
            {
                "project": project,
                "entries": project_entries,
                "inspirations": project_inspirations,
                "entry_count": len(project_entries),
                "inspiration_count": len(project_inspirations),
            }
        )
    return statistics
