# SPDX-License-Identifier: MIT

from typing import Optional

from gleaning.model.entity_id import EntityId
from gleaning.model.filter import InspirationFilter
from gleaning.model.inspiration import Inspiration
from gleaning.model.project import Project


def sort_inspirations(inspirations: list[Inspiration]) -> list[Inspiration]:
    """Newest first by creation time."""
    return sorted(
        inspirations, key=lambda inspiration: inspiration["created_at"], reverse=True
    )


def inspirations_for_project(
    inspirations: list[Inspiration], project_id: EntityId
) -> list[Inspiration]:
    return sort_inspirations(
        [
            inspiration
            for inspiration in inspirations
            if inspiration["project_id"] == project_id and not inspiration["is_hidden"]
        ]
    )


def is_unlinked(
    inspiration: Inspiration, projects: Optional[list[Project]] = None
) -> bool:
    """
    True if the inspiration has no project.

    When the project list is given, a reference to a deleted project also
    counts as unlinked.
    """
    if inspiration["project_id"] is None:
        return True
    if projects is None:
        return False
    return inspiration["project_id"] not in {project["id"] for project in projects}


def filtered_inspirations(
    inspirations: list[Inspiration],
    query: str = "",
    filter_value: str = InspirationFilter.ALL,
    projects: Optional[list[Project]] = None,
) -> list[Inspiration]:
    """
    Inspirations matching a text query and a filter, in stored order.

    filter_value is ALL, UNLINKED, HIDDEN or a project id. HIDDEN lists only
    hidden inspirations; every other filter leaves hidden ones out. The query
    is a case-insensitive substring match on the content.
    """
    lowered_query = query.lower()
    result: list[Inspiration] = []
    for inspiration in inspirations:
        if lowered_query not in inspiration["content"].lower():
            continue

        if filter_value == InspirationFilter.HIDDEN:
            if inspiration["is_hidden"]:
                result.append(inspiration)
            continue

        if inspiration["is_hidden"]:
            continue
        if filter_value == InspirationFilter.ALL:
            result.append(inspiration)
        elif filter_value == InspirationFilter.UNLINKED:
            if is_unlinked(inspiration, projects):
                result.append(inspiration)
        elif inspiration["project_id"] == filter_value:
            result.append(inspiration)
    return result
