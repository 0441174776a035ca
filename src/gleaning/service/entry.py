# SPDX-License-Identifier: MIT

from typing import Optional

from gleaning.errors import (
    EmptyContentError,
    IntensityOutOfRangeError,
    InvalidDateError,
)
from gleaning.model.entity_id import EntityId
from gleaning.model.entry import MAX_INTENSITY, MIN_INTENSITY, Entry
from gleaning.model.project import Project
from gleaning.service.month import is_in_month
from gleaning.time import is_date_str


def entry_for_cell(
    entries: list[Entry], date: str, project_id: EntityId
) -> Optional[Entry]:
    """Return the entry occupying the (date, project) grid cell, if any."""
    for entry in entries:
        if entry["date"] == date and entry["project_id"] == project_id:
            return entry
    return None


def entries_for_project(
    entries: list[Entry], project_id: EntityId, viewing_month: str
) -> list[Entry]:
    """A project's entries within the viewed month, newest date first."""
    return sorted(
        [
            entry
            for entry in entries
            if entry["project_id"] == project_id
            and is_in_month(entry["date"], viewing_month)
        ],
        key=lambda entry: entry["date"],
        reverse=True,
    )


def orphaned_entries(entries: list[Entry], projects: list[Project]) -> list[Entry]:
    """Entries whose project has been deleted."""
    project_ids = {project["id"] for project in projects}
    return [entry for entry in entries if entry["project_id"] not in project_ids]


def validate_content(content: str, field_name: str = "content") -> None:
    if not content.strip():
        raise EmptyContentError(f"{field_name} cannot be empty")


def validate_intensity(intensity: int) -> None:
    if not (MIN_INTENSITY <= intensity <= MAX_INTENSITY):
        raise IntensityOutOfRangeError(
            f"Intensity must be between {MIN_INTENSITY} and {MAX_INTENSITY} "
            f"(inclusive). Got: {intensity}"
        )


def validate_date(date: str) -> None:
    if not is_date_str(date):
        raise InvalidDateError(f"Date must be a calendar day as YYYY-MM-DD. Got: {date}")
