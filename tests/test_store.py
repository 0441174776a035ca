"""Tests for the EntityStore mutation API and its persistence."""

import logging
from typing import Optional

import pytest

from gleaning import configuration
from gleaning.color import PALETTE
from gleaning.errors import (
    CellOccupiedError,
    EmptyContentError,
    IntensityOutOfRangeError,
    InvalidDateError,
    ProjectCapReachedError,
)
from gleaning.repository.blob_store import FileBlobStore, MemoryBlobStore
from gleaning.repository.store import EntityStore
from gleaning.service.entry import entry_for_cell, orphaned_entries
from gleaning.template.project import DEFAULT_PROJECT_NAME, STARTER_PROJECT_NAMES

from tests.conftest import make_project, project_id_by_name


def _slots(store: EntityStore) -> list[int]:
    return [project["slot"] for project in store.get_all_projects()]


def _names(store: EntityStore) -> list[str]:
    return [project["name"] for project in store.get_all_projects()]


def _splice(names: list[str], dragged: str, target: str) -> list[str]:
    """Move dragged to the index target held, the way a drag and drop does."""
    order = list(names)
    to_index = order.index(target)
    order.remove(dragged)
    order.insert(to_index, dragged)
    return order


class TestProjects:
    def test_first_load_seeds_starter_projects(self):
        blob_store = MemoryBlobStore()
        store = EntityStore(blob_store)

        assert _names(store) == STARTER_PROJECT_NAMES
        assert "projects" in blob_store.blobs

    def test_add_project_defaults(self, store):
        project = store.add_project()

        assert project["name"] == DEFAULT_PROJECT_NAME
        assert project["slot"] == 0
        assert project["color"] == PALETTE[0]
        assert project["is_finished"] is False

    def test_add_project_rotates_palette(self, seeded_store):
        colors = [project["color"] for project in seeded_store.get_all_projects()]
        assert colors == PALETTE[:3]

    @pytest.mark.parametrize("name", ["", "   ", "\n"])
    def test_add_project_rejects_blank_name(self, store, name):
        with pytest.raises(EmptyContentError):
            store.add_project(name)
        assert store.get_all_projects() == []

    def test_cap_leaves_projects_unchanged(self, store):
        for index in range(configuration.ACTIVE_PROJECT_CAP):
            store.add_project(f"P{index}")
        before = store.get_all_projects()

        with pytest.raises(ProjectCapReachedError):
            store.add_project("one too many")

        assert store.get_all_projects() == before

    def test_finished_projects_do_not_count_toward_cap(self, store):
        for index in range(configuration.ACTIVE_PROJECT_CAP):
            store.add_project(f"P{index}")
        store.update_project(project_id_by_name(store, "P0"), is_finished=True)

        project = store.add_project("tenth")

        assert project["slot"] == configuration.ACTIVE_PROJECT_CAP
        assert project["color"] == PALETTE[0]

    def test_update_project_merges_fields(self, seeded_store):
        project_id = project_id_by_name(seeded_store, "B")

        assert seeded_store.update_project(project_id, name="Bee", is_finished=True)

        project = seeded_store.get_project(project_id)
        assert project is not None
        assert project["name"] == "Bee"
        assert project["is_finished"] is True
        assert project["color"] == PALETTE[1]

    def test_update_unknown_project_is_noop(self, seeded_store):
        before = seeded_store.get_all_projects()
        assert seeded_store.update_project("missing", name="x") is False
        assert seeded_store.get_all_projects() == before

    def test_update_project_rejects_blank_name(self, seeded_store):
        project_id = project_id_by_name(seeded_store, "A")
        with pytest.raises(EmptyContentError):
            seeded_store.update_project(project_id, name=" ")
        assert _names(seeded_store) == ["A", "B", "C"]

    def test_getters_return_copies(self, seeded_store):
        projects = seeded_store.get_all_projects()
        projects[0]["name"] = "changed"
        assert _names(seeded_store) == ["A", "B", "C"]

    def test_delete_keeps_entries_and_densifies_slots(self, seeded_store):
        a_id = project_id_by_name(seeded_store, "A")
        entry_id = seeded_store.add_entry("2024-05-01", a_id, "kept")

        assert seeded_store.delete_project(a_id)

        assert _names(seeded_store) == ["B", "C"]
        assert _slots(seeded_store) == [0, 1]
        entry = seeded_store.get_entry(entry_id)
        assert entry is not None
        assert entry["project_id"] == a_id
        orphans = orphaned_entries(
            seeded_store.get_all_entries(), seeded_store.get_all_projects()
        )
        assert [orphan["id"] for orphan in orphans] == [entry_id]

    def test_delete_unknown_project_is_noop(self, seeded_store):
        assert seeded_store.delete_project("missing") is False
        assert _names(seeded_store) == ["A", "B", "C"]

    def test_add_after_delete_uses_next_dense_slot(self, seeded_store):
        seeded_store.delete_project(project_id_by_name(seeded_store, "B"))
        project = seeded_store.add_project("D")

        assert project["slot"] == 2
        assert _slots(seeded_store) == [0, 1, 2]


class TestReorder:
    def test_drag_first_onto_last(self, seeded_store):
        a_id = project_id_by_name(seeded_store, "A")
        c_id = project_id_by_name(seeded_store, "C")

        assert seeded_store.reorder_projects(a_id, c_id)

        assert _names(seeded_store) == ["B", "C", "A"]
        assert _slots(seeded_store) == [0, 1, 2]

    def test_drag_last_onto_first(self, seeded_store):
        a_id = project_id_by_name(seeded_store, "A")
        c_id = project_id_by_name(seeded_store, "C")

        seeded_store.reorder_projects(c_id, a_id)

        assert _names(seeded_store) == ["C", "A", "B"]

    @pytest.mark.parametrize(
        "dragged,target",
        [("A", "A"), ("A", None), (None, "B")],
        ids=["same", "unknown-target", "unknown-dragged"],
    )
    def test_noop_cases(self, seeded_store, dragged, target):
        def resolve(name: Optional[str]) -> str:
            return project_id_by_name(seeded_store, name) if name else "missing"

        assert seeded_store.reorder_projects(resolve(dragged), resolve(target)) is False
        assert _names(seeded_store) == ["A", "B", "C"]

    def test_slots_stay_dense_over_many_moves(self, store):
        for name in "ABCDEF":
            store.add_project(name)
        moves = [("A", "F"), ("C", "A"), ("F", "B"), ("E", "D"), ("B", "C")]
        expected = list("ABCDEF")

        for dragged, target in moves:
            store.reorder_projects(
                project_id_by_name(store, dragged), project_id_by_name(store, target)
            )
            expected = _splice(expected, dragged, target)
            assert _slots(store) == list(range(6))
            assert _names(store) == expected

        assert _names(store) == list("FEDACB")

    def test_reorder_skips_over_gaps_in_imported_slots(self, store):
        store.replace_all(
            [make_project("a", 0), make_project("b", 5), make_project("c", 9)], [], []
        )

        store.reorder_projects("c", "a")

        assert _names(store) == ["c", "a", "b"]
        assert _slots(store) == [0, 1, 2]


class TestEntries:
    def test_add_entry(self, seeded_store):
        a_id = project_id_by_name(seeded_store, "A")

        entry_id = seeded_store.add_entry("2024-05-01", a_id, "ran 5k")

        entry = seeded_store.get_entry(entry_id)
        assert entry is not None
        assert entry["content"] == "ran 5k"
        assert entry["intensity"] == 1

    def test_adding_to_occupied_cell_updates_existing(self, seeded_store):
        a_id = project_id_by_name(seeded_store, "A")
        first_id = seeded_store.add_entry("2024-05-01", a_id, "first")

        second_id = seeded_store.add_entry("2024-05-01", a_id, "second")

        assert second_id == first_id
        cell_entries = [
            entry
            for entry in seeded_store.get_all_entries()
            if entry["date"] == "2024-05-01" and entry["project_id"] == a_id
        ]
        assert len(cell_entries) == 1
        assert cell_entries[0]["content"] == "second"

    def test_same_day_different_projects(self, seeded_store):
        a_id = project_id_by_name(seeded_store, "A")
        b_id = project_id_by_name(seeded_store, "B")

        seeded_store.add_entry("2024-05-01", a_id, "a")
        seeded_store.add_entry("2024-05-01", b_id, "b")

        assert len(seeded_store.get_all_entries()) == 2

    @pytest.mark.parametrize(
        "date,content,intensity,error",
        [
            ("2024-05-01", "  ", 1, EmptyContentError),
            ("2024-02-30", "x", 1, InvalidDateError),
            ("May 1st", "x", 1, InvalidDateError),
            ("2024-05-01", "x", 5, IntensityOutOfRangeError),
            ("2024-05-01", "x", -1, IntensityOutOfRangeError),
        ],
    )
    def test_add_entry_rejects(self, seeded_store, date, content, intensity, error):
        a_id = project_id_by_name(seeded_store, "A")
        with pytest.raises(error):
            seeded_store.add_entry(date, a_id, content, intensity)
        assert seeded_store.get_all_entries() == []

    def test_intensity_range_is_accepted(self, seeded_store):
        a_id = project_id_by_name(seeded_store, "A")
        for day, intensity in enumerate(range(5), start=1):
            seeded_store.add_entry(f"2024-05-0{day}", a_id, "x", intensity)
        assert sorted(e["intensity"] for e in seeded_store.get_all_entries()) == [
            0,
            1,
            2,
            3,
            4,
        ]

    def test_update_onto_occupied_cell_is_rejected(self, seeded_store):
        a_id = project_id_by_name(seeded_store, "A")
        seeded_store.add_entry("2024-05-01", a_id, "one")
        moving_id = seeded_store.add_entry("2024-05-02", a_id, "two")

        with pytest.raises(CellOccupiedError):
            seeded_store.update_entry(moving_id, date="2024-05-01", content="moved")

        entry = seeded_store.get_entry(moving_id)
        assert entry is not None
        assert entry["date"] == "2024-05-02"
        assert entry["content"] == "two"

    def test_update_entry_moves_to_free_cell(self, seeded_store):
        a_id = project_id_by_name(seeded_store, "A")
        b_id = project_id_by_name(seeded_store, "B")
        entry_id = seeded_store.add_entry("2024-05-01", a_id, "one")

        assert seeded_store.update_entry(entry_id, project_id=b_id)

        assert seeded_store.get_entry_for_cell("2024-05-01", a_id) is None
        moved = seeded_store.get_entry_for_cell("2024-05-01", b_id)
        assert moved is not None
        assert moved["id"] == entry_id

    def test_unknown_ids_are_noops(self, seeded_store):
        assert seeded_store.update_entry("missing", content="x") is False
        assert seeded_store.delete_entry("missing") is False

    def test_delete_entry_frees_cell(self, seeded_store):
        a_id = project_id_by_name(seeded_store, "A")
        entry_id = seeded_store.add_entry("2024-05-01", a_id, "one")

        assert seeded_store.delete_entry(entry_id)

        assert entry_for_cell(seeded_store.get_all_entries(), "2024-05-01", a_id) is None


class TestInspirations:
    @pytest.mark.parametrize("content", ["", "   "])
    def test_blank_content_is_rejected(self, store, content):
        with pytest.raises(EmptyContentError):
            store.add_inspiration(content)
        assert store.get_all_inspirations() == []

    def test_add_prepends(self, store):
        store.add_inspiration("older")
        inspiration = store.add_inspiration("x")

        inspirations = store.get_all_inspirations()
        assert len(inspirations) == 2
        assert inspirations[0]["id"] == inspiration["id"]
        assert inspirations[0]["is_hidden"] is False
        assert inspirations[0]["project_id"] is None
        assert inspirations[0]["created_at"]

    def test_link_and_unlink(self, seeded_store):
        a_id = project_id_by_name(seeded_store, "A")
        inspiration = seeded_store.add_inspiration("idea")

        seeded_store.update_inspiration(inspiration["id"], project_id=a_id)
        linked = seeded_store.get_inspiration(inspiration["id"])
        assert linked is not None
        assert linked["project_id"] == a_id

        seeded_store.update_inspiration(inspiration["id"], unlink=True)
        unlinked = seeded_store.get_inspiration(inspiration["id"])
        assert unlinked is not None
        assert unlinked["project_id"] is None

    def test_update_rejects_blank_content(self, store):
        inspiration = store.add_inspiration("idea")
        with pytest.raises(EmptyContentError):
            store.update_inspiration(inspiration["id"], content=" ")
        assert store.get_all_inspirations()[0]["content"] == "idea"

    def test_toggle_hidden(self, store):
        inspiration = store.add_inspiration("idea")

        assert store.toggle_inspiration_hidden(inspiration["id"])
        assert store.get_all_inspirations()[0]["is_hidden"] is True
        store.toggle_inspiration_hidden(inspiration["id"])
        assert store.get_all_inspirations()[0]["is_hidden"] is False

    def test_unknown_ids_are_noops(self, store):
        assert store.update_inspiration("missing", content="x") is False
        assert store.toggle_inspiration_hidden("missing") is False
        assert store.delete_inspiration("missing") is False

    def test_delete(self, store):
        inspiration = store.add_inspiration("idea")
        assert store.delete_inspiration(inspiration["id"])
        assert store.get_all_inspirations() == []


class TestPersistence:
    def test_reload_from_same_blob_store(self, seeded_store, blob_store):
        a_id = project_id_by_name(seeded_store, "A")
        seeded_store.add_entry("2024-05-01", a_id, "ünïcode note")
        seeded_store.add_inspiration("idea", a_id)
        seeded_store.add_inspiration("loose idea")

        reloaded = EntityStore(blob_store)

        assert reloaded.get_all_projects() == seeded_store.get_all_projects()
        assert reloaded.get_all_entries() == seeded_store.get_all_entries()
        assert reloaded.get_all_inspirations() == seeded_store.get_all_inspirations()

    def test_unlinked_inspiration_record_has_no_project_key(self, store, blob_store):
        store.add_inspiration("loose idea")
        assert "projectId" not in blob_store.blobs["inspirations"]
        assert "isHidden" in blob_store.blobs["inspirations"]

    def test_file_blob_store_round_trip(self, tmp_path):
        blob_store = FileBlobStore(tmp_path / "data")
        store = EntityStore(blob_store)
        store.add_inspiration("idea")

        assert blob_store.path_for("inspirations").is_file()
        assert not (tmp_path / "data" / "inspirations.yaml.tmp").exists()
        assert EntityStore(blob_store).get_all_inspirations()[0]["content"] == "idea"

    def test_failed_write_keeps_mutation(self, caplog):
        class FailingBlobStore(MemoryBlobStore):
            def set(self, key: str, value: str) -> None:
                raise OSError("disk full")

        store = EntityStore(FailingBlobStore({"projects": "[]\n"}))

        with caplog.at_level(logging.WARNING):
            project = store.add_project("Still here")

        assert store.get_project(project["id"]) is not None
        assert "could not save projects" in caplog.text
