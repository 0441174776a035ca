# SPDX-License-Identifier: MIT

"""
Whole-store backup snapshots.

A snapshot is a single JSON object holding the three collections in record
form plus `exportedAt` and `version`. Restoring one replaces the store
wholesale: nothing is merged and per-entity rules are not re-checked, they
apply again from the next edit on.
"""

import json
import logging
from typing import Any, Optional

import pendulum

from gleaning.errors import BackupFormatError
from gleaning.model.entry import Entry
from gleaning.model.inspiration import Inspiration
from gleaning.model.project import Project
from gleaning.model.snapshot import Record, Snapshot
from gleaning.repository.record import (
    entry_from_record,
    entry_to_record,
    inspiration_from_record,
    inspiration_to_record,
    project_from_record,
    project_to_record,
)
from gleaning.repository.store import EntityStore
from gleaning.time import datetime_to_iso_str, now_utc

logger = logging.getLogger(__name__)

SNAPSHOT_VERSION = "1"
COLLECTION_KEYS = ("projects", "entries", "inspirations")


def export_snapshot(store: EntityStore) -> Snapshot:
    return {
        "projects": [project_to_record(project) for project in store.projects],
        "entries": [entry_to_record(entry) for entry in store.entries],
        "inspirations": [
            inspiration_to_record(inspiration) for inspiration in store.inspirations
        ],
        "exportedAt": datetime_to_iso_str(now_utc()),
        "version": SNAPSHOT_VERSION,
    }


def dump_snapshot(snapshot: Snapshot) -> bytes:
    return json.dumps(snapshot, indent=2, ensure_ascii=False).encode("utf-8")


def backup_filename(now: Optional[pendulum.DateTime] = None) -> str:
    moment = now if now is not None else pendulum.now("local")
    return f"gleaning_backup_{moment.format('YYYY-MM-DD')}.json"


def load_snapshot(data: bytes) -> Any:
    """Parse backup file bytes. The result still has to pass validate_snapshot."""
    try:
        return json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise BackupFormatError(f"Not a readable backup file: {e}") from e


def __require_collection(snapshot: dict[str, Any], key: str) -> list[Record]:
    collection = snapshot.get(key)
    if not isinstance(collection, list):
        raise BackupFormatError(f"Backup is missing the '{key}' list")
    for record in collection:
        if not isinstance(record, dict):
            raise BackupFormatError(f"Backup '{key}' must only hold objects")
    return collection


def validate_snapshot(
    snapshot: Any,
) -> tuple[list[Project], list[Entry], list[Inspiration]]:
    """
    Convert a parsed backup into projects, entries and inspirations.

    The snapshot must hold projects, entries and inspirations lists of records.
    Raises BackupFormatError otherwise. Nothing is written.
    """
    if not isinstance(snapshot, dict):
        raise BackupFormatError("Backup must be a JSON object")

    collections = {key: __require_collection(snapshot, key) for key in COLLECTION_KEYS}
    try:
        projects = [project_from_record(record) for record in collections["projects"]]
        entries = [entry_from_record(record) for record in collections["entries"]]
        inspirations = [
            inspiration_from_record(record) for record in collections["inspirations"]
        ]
    except KeyError as e:
        raise BackupFormatError(f"Backup record is missing the {e} field") from e
    return projects, entries, inspirations


def import_snapshot(store: EntityStore, snapshot: Any) -> None:
    """
    Replace the store's contents with a snapshot.

    Everything is converted before the store is touched, so a rejected snapshot
    leaves the store as it was.
    """
    projects, entries, inspirations = validate_snapshot(snapshot)
    store.replace_all(projects, entries, inspirations)
    logger.info(
        "restored backup version %s exported at %s",
        snapshot.get("version", "unknown"),
        snapshot.get("exportedAt", snapshot.get("timestamp", "unknown")),
    )
