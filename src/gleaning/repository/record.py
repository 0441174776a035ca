# SPDX-License-Identifier: MIT

"""
Conversion between the in-memory models and their record form.

Records use the camelCase field names of the on-disk collections and of backup
snapshots. Optional flags that a record leaves out take their model defaults.
"""

from typing import cast

from gleaning.model.entry import Entry
from gleaning.model.inspiration import Inspiration
from gleaning.model.project import Project
from gleaning.model.snapshot import Record


def project_to_record(project: Project) -> Record:
    return {
        "id": project["id"],
        "name": project["name"],
        "color": project["color"],
        "slot": project["slot"],
        "isFinished": project["is_finished"],
    }


def project_from_record(record: Record) -> Project:
    return cast(
        Project,
        {
            "id": record["id"],
            "name": record["name"],
            "color": record["color"],
            "slot": record["slot"],
            "is_finished": record.get("isFinished", False),
        },
    )


def entry_to_record(entry: Entry) -> Record:
    return {
        "id": entry["id"],
        "date": entry["date"],
        "projectId": entry["project_id"],
        "content": entry["content"],
        "intensity": entry["intensity"],
    }


def entry_from_record(record: Record) -> Entry:
    return cast(
        Entry,
        {
            "id": record["id"],
            "date": record["date"],
            "project_id": record["projectId"],
            "content": record["content"],
            "intensity": record["intensity"],
        },
    )


def inspiration_to_record(inspiration: Inspiration) -> Record:
    record: Record = {
        "id": inspiration["id"],
        "content": inspiration["content"],
    }
    # Unlinked inspirations carry no projectId key at all
    if inspiration["project_id"] is not None:
        record["projectId"] = inspiration["project_id"]
    record["createdAt"] = inspiration["created_at"]
    record["isHidden"] = inspiration["is_hidden"]
    return record


def inspiration_from_record(record: Record) -> Inspiration:
    return cast(
        Inspiration,
        {
            "id": record["id"],
            "content": record["content"],
            "project_id": record.get("projectId"),
            "created_at": record["createdAt"],
            "is_hidden": record.get("isHidden", False),
        },
    )
