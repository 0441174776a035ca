"""
Shared test fixtures for gleaning.

Core tests run against an EntityStore over an in-memory blob store. CLI tests
point the module-level store, id map and configuration at a temporary
directory.
"""

from typing import Any, Optional

import pytest
from typer.testing import CliRunner

from gleaning import configuration
from gleaning.model.entry import Entry
from gleaning.model.inspiration import Inspiration
from gleaning.model.project import Project
from gleaning.repository.blob_store import MemoryBlobStore
from gleaning.repository.configuration import CONFIGURATION_REPO
from gleaning.repository.id_map import ID_MAP_REPO
from gleaning.repository.store import STORE, EntityStore
from gleaning.view import state as view_state


# ---------------------------------------------------------------------------
# Model builders
# ---------------------------------------------------------------------------


def make_project(
    id: str, slot: int, name: Optional[str] = None, is_finished: bool = False
) -> Project:
    return {
        "id": id,
        "name": name if name is not None else id,
        "color": "bg-[#D8E2DC]",
        "slot": slot,
        "is_finished": is_finished,
    }


def make_entry(
    id: str, date: str, project_id: str, content: str = "note", intensity: int = 1
) -> Entry:
    return {
        "id": id,
        "date": date,
        "project_id": project_id,
        "content": content,
        "intensity": intensity,
    }


def make_inspiration(
    id: str,
    content: str,
    project_id: Optional[str] = None,
    created_at: str = "2024-05-01T10:00:00+00:00",
    is_hidden: bool = False,
) -> Inspiration:
    return {
        "id": id,
        "content": content,
        "project_id": project_id,
        "created_at": created_at,
        "is_hidden": is_hidden,
    }


# ---------------------------------------------------------------------------
# Store fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def blob_store() -> MemoryBlobStore:
    # An existing empty project list keeps the starter projects out
    return MemoryBlobStore({"projects": "[]\n"})


@pytest.fixture
def store(blob_store: MemoryBlobStore) -> EntityStore:
    return EntityStore(blob_store)


@pytest.fixture
def seeded_store(store: EntityStore) -> EntityStore:
    """A store holding projects A, B and C in slots 0, 1 and 2."""
    for name in ("A", "B", "C"):
        store.add_project(name)
    return store


def project_id_by_name(store: EntityStore, name: str) -> str:
    return next(p["id"] for p in store.get_all_projects() if p["name"] == name)


# ---------------------------------------------------------------------------
# CLI fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def cli(tmp_path: Any, monkeypatch: pytest.MonkeyPatch) -> Any:
    """A CliRunner whose data, id map and config all live under tmp_path."""
    data_path = tmp_path / "data"
    monkeypatch.setattr(configuration, "DATA_PATH", data_path)
    monkeypatch.setattr(configuration, "DATA_ID_MAP_PATH", data_path / "id_map.yaml")
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", tmp_path / "config.yaml")
    monkeypatch.setattr(
        CONFIGURATION_REPO, "_config", configuration.get_default_configuration()
    )
    STORE.unload()
    ID_MAP_REPO.clear_ids()
    view_state.set_show_header(True)
    view_state.set_clear_ids(True)

    yield CliRunner()

    STORE.unload()
    ID_MAP_REPO.clear_ids()
