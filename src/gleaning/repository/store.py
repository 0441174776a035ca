# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from gleaning import configuration
from gleaning.errors import CellOccupiedError, ProjectCapReachedError
from gleaning.model.entity_id import EntityId
from gleaning.model.entry import Entry
from gleaning.model.inspiration import Inspiration
from gleaning.model.project import Project
from gleaning.model.snapshot import Record
from gleaning.repository.blob_store import BlobStore, FileBlobStore
from gleaning.repository.record import (
    entry_from_record,
    entry_to_record,
    inspiration_from_record,
    inspiration_to_record,
    project_from_record,
    project_to_record,
)
from gleaning.service.entry import (
    entry_for_cell,
    validate_content,
    validate_date,
    validate_intensity,
)
from gleaning.service.project import count_ongoing_projects, sort_projects
from gleaning.template.entry import DEFAULT_INTENSITY, get_entry_template
from gleaning.template.inspiration import get_inspiration_template
from gleaning.template.project import (
    DEFAULT_PROJECT_NAME,
    get_project_template,
    get_starter_projects,
)

logger = logging.getLogger(__name__)

PROJECTS_KEY = "projects"
ENTRIES_KEY = "entries"
INSPIRATIONS_KEY = "inspirations"


class EntityStore:
    """
    Sole owner of the projects, entries and inspirations collections.

    Every change goes through the methods below, which validate before they
    mutate and write the touched collection back to the blob store right
    after. Getters hand out deep copies.
    """

    def __init__(self, blob_store: BlobStore) -> None:
        self._blob_store = blob_store
        self._projects: Optional[list[Project]] = None
        self._entries: Optional[list[Entry]] = None
        self._inspirations: Optional[list[Inspiration]] = None

    @property
    def projects(self) -> list[Project]:
        if self._projects is None:
            self.__load_data()
        if self._projects is None:
            raise ValueError()
        return self._projects

    @property
    def entries(self) -> list[Entry]:
        if self._entries is None:
            self.__load_data()
        if self._entries is None:
            raise ValueError()
        return self._entries

    @property
    def inspirations(self) -> list[Inspiration]:
        if self._inspirations is None:
            self.__load_data()
        if self._inspirations is None:
            raise ValueError()
        return self._inspirations

    # ─────────────────────────────────────────────────────────────
    # Persistence
    # ─────────────────────────────────────────────────────────────

    def __load_data(self) -> None:
        raw_projects = self.__load_records(PROJECTS_KEY)
        if raw_projects is None:
            # First run: start with a few example practices
            self._projects = get_starter_projects()
            self.__save_projects()
        else:
            self._projects = [project_from_record(record) for record in raw_projects]

        self._entries = [
            entry_from_record(record)
            for record in self.__load_records(ENTRIES_KEY) or []
        ]
        self._inspirations = [
            inspiration_from_record(record)
            for record in self.__load_records(INSPIRATIONS_KEY) or []
        ]
        logger.debug(
            "loaded %d projects, %d entries, %d inspirations",
            len(self._projects),
            len(self._entries),
            len(self._inspirations),
        )

    def __load_records(self, key: str) -> Optional[list[Record]]:
        text = self._blob_store.get(key)
        if text is None:
            return None
        records = load(text, Loader=Loader)
        if records is None:
            return []
        return records

    def __save(self, key: str, records: list[Record]) -> None:
        # Fire and forget: a failed write must not undo or fail the mutation
        try:
            self._blob_store.set(
                key,
                dump(records, Dumper=Dumper, allow_unicode=True, sort_keys=False),
            )
        except OSError as e:
            logger.warning("could not save %s: %s", key, e)

    def __save_projects(self) -> None:
        self.__save(
            PROJECTS_KEY, [project_to_record(project) for project in self.projects]
        )

    def __save_entries(self) -> None:
        self.__save(ENTRIES_KEY, [entry_to_record(entry) for entry in self.entries])

    def __save_inspirations(self) -> None:
        self.__save(
            INSPIRATIONS_KEY,
            [inspiration_to_record(inspiration) for inspiration in self.inspirations],
        )

    def unload(self) -> None:
        """Forget the in-memory collections; the next access reloads them."""
        self._projects = None
        self._entries = None
        self._inspirations = None

    # ─────────────────────────────────────────────────────────────
    # Projects
    # ─────────────────────────────────────────────────────────────

    def __find_project(self, id: EntityId) -> Optional[Project]:
        return next((project for project in self.projects if project["id"] == id), None)

    def add_project(self, name: Optional[str] = None) -> Project:
        if name is not None:
            validate_content(name, "project name")

        if count_ongoing_projects(self.projects) >= configuration.ACTIVE_PROJECT_CAP:
            logger.info("project cap reached, not adding %r", name)
            raise ProjectCapReachedError(
                f"At most {configuration.ACTIVE_PROJECT_CAP} projects can be ongoing "
                "at once. Finish or delete one first."
            )

        project = get_project_template(
            len(self.projects), name if name is not None else DEFAULT_PROJECT_NAME
        )
        self.projects.append(project)
        self.__save_projects()
        logger.debug("added project %s at slot %d", project["id"], project["slot"])
        return deepcopy(project)

    def update_project(
        self,
        id: EntityId,
        name: Optional[str] = None,
        color: Optional[str] = None,
        is_finished: Optional[bool] = None,
    ) -> bool:
        project = self.__find_project(id)
        if project is None:
            return False
        if name is not None:
            validate_content(name, "project name")

        if name is not None:
            project["name"] = name
        if color is not None:
            project["color"] = color
        if is_finished is not None:
            project["is_finished"] = is_finished
        self.__save_projects()
        logger.debug("updated project %s", id)
        return True

    def delete_project(self, id: EntityId) -> bool:
        """
        Remove a project. Its entries and inspirations are kept and read as
        unlinked from now on.
        """
        project = self.__find_project(id)
        if project is None:
            return False

        remaining = sort_projects(
            [project for project in self.projects if project["id"] != id]
        )
        for index, remaining_project in enumerate(remaining):
            remaining_project["slot"] = index
        self._projects = remaining
        self.__save_projects()
        logger.debug("deleted project %s", id)
        return True

    def reorder_projects(self, dragged_id: EntityId, target_id: EntityId) -> bool:
        """
        Move the dragged project to the target's position.

        The dragged project is taken out of the slot order and inserted at the
        index the target held before the move, so every project in between
        shifts by one. Slots are then renumbered 0..count-1.
        """
        if dragged_id == target_id:
            return False
        ordered = sort_projects(self.projects)
        ids = [project["id"] for project in ordered]
        if dragged_id not in ids or target_id not in ids:
            return False

        from_index = ids.index(dragged_id)
        to_index = ids.index(target_id)
        dragged = ordered.pop(from_index)
        ordered.insert(to_index, dragged)
        for index, project in enumerate(ordered):
            project["slot"] = index

        self._projects = ordered
        self.__save_projects()
        logger.debug("moved project %s from slot %d to %d", dragged_id, from_index, to_index)
        return True

    def get_all_projects(self) -> list[Project]:
        return deepcopy(sort_projects(self.projects))

    def get_project(self, id: EntityId) -> Optional[Project]:
        return deepcopy(self.__find_project(id))

    # ─────────────────────────────────────────────────────────────
    # Entries
    # ─────────────────────────────────────────────────────────────

    def __find_entry(self, id: EntityId) -> Optional[Entry]:
        return next((entry for entry in self.entries if entry["id"] == id), None)

    def add_entry(
        self,
        date: str,
        project_id: EntityId,
        content: str,
        intensity: int = DEFAULT_INTENSITY,
    ) -> EntityId:
        """
        Record the entry for a (date, project) cell and return its id.

        A cell holds at most one entry, so adding to an occupied cell updates
        the entry already there instead of inserting a second one.
        """
        validate_date(date)
        validate_content(content)
        validate_intensity(intensity)

        existing = entry_for_cell(self.entries, date, project_id)
        if existing is not None:
            logger.debug("cell %s/%s is taken, updating %s", date, project_id, existing["id"])
            self.update_entry(existing["id"], content=content, intensity=intensity)
            return existing["id"]

        entry = get_entry_template(date, project_id, content, intensity)
        self.entries.append(entry)
        self.__save_entries()
        logger.debug("added entry %s for %s/%s", entry["id"], date, project_id)
        return entry["id"]

    def update_entry(
        self,
        id: EntityId,
        content: Optional[str] = None,
        intensity: Optional[int] = None,
        date: Optional[str] = None,
        project_id: Optional[EntityId] = None,
    ) -> bool:
        entry = self.__find_entry(id)
        if entry is None:
            return False
        if content is not None:
            validate_content(content)
        if intensity is not None:
            validate_intensity(intensity)
        if date is not None:
            validate_date(date)

        new_date = date if date is not None else entry["date"]
        new_project_id = project_id if project_id is not None else entry["project_id"]
        occupant = entry_for_cell(self.entries, new_date, new_project_id)
        if occupant is not None and occupant["id"] != id:
            raise CellOccupiedError(
                f"There is already an entry for {new_date} in that project."
            )

        if content is not None:
            entry["content"] = content
        if intensity is not None:
            entry["intensity"] = intensity
        entry["date"] = new_date
        entry["project_id"] = new_project_id
        self.__save_entries()
        logger.debug("updated entry %s", id)
        return True

    def delete_entry(self, id: EntityId) -> bool:
        if self.__find_entry(id) is None:
            return False
        self._entries = [entry for entry in self.entries if entry["id"] != id]
        self.__save_entries()
        logger.debug("deleted entry %s", id)
        return True

    def get_all_entries(self) -> list[Entry]:
        return deepcopy(self.entries)

    def get_entry(self, id: EntityId) -> Optional[Entry]:
        return deepcopy(self.__find_entry(id))

    def get_entry_for_cell(self, date: str, project_id: EntityId) -> Optional[Entry]:
        return deepcopy(entry_for_cell(self.entries, date, project_id))

    # ─────────────────────────────────────────────────────────────
    # Inspirations
    # ─────────────────────────────────────────────────────────────

    def __find_inspiration(self, id: EntityId) -> Optional[Inspiration]:
        return next(
            (inspiration for inspiration in self.inspirations if inspiration["id"] == id),
            None,
        )

    def add_inspiration(
        self, content: str, project_id: Optional[EntityId] = None
    ) -> Inspiration:
        validate_content(content)

        inspiration = get_inspiration_template(content, project_id)
        # Newest first
        self.inspirations.insert(0, inspiration)
        self.__save_inspirations()
        logger.debug("added inspiration %s", inspiration["id"])
        return deepcopy(inspiration)

    def update_inspiration(
        self,
        id: EntityId,
        content: Optional[str] = None,
        project_id: Optional[EntityId] = None,
        is_hidden: Optional[bool] = None,
        unlink: bool = False,
    ) -> bool:
        inspiration = self.__find_inspiration(id)
        if inspiration is None:
            return False
        if content is not None:
            validate_content(content)

        if content is not None:
            inspiration["content"] = content
        if project_id is not None:
            inspiration["project_id"] = project_id
        if is_hidden is not None:
            inspiration["is_hidden"] = is_hidden
        if unlink:
            inspiration["project_id"] = None
        self.__save_inspirations()
        logger.debug("updated inspiration %s", id)
        return True

    def toggle_inspiration_hidden(self, id: EntityId) -> bool:
        inspiration = self.__find_inspiration(id)
        if inspiration is None:
            return False
        return self.update_inspiration(id, is_hidden=not inspiration["is_hidden"])

    def delete_inspiration(self, id: EntityId) -> bool:
        if self.__find_inspiration(id) is None:
            return False
        self._inspirations = [
            inspiration for inspiration in self.inspirations if inspiration["id"] != id
        ]
        self.__save_inspirations()
        logger.debug("deleted inspiration %s", id)
        return True

    def get_all_inspirations(self) -> list[Inspiration]:
        return deepcopy(self.inspirations)

    def get_inspiration(self, id: EntityId) -> Optional[Inspiration]:
        return deepcopy(self.__find_inspiration(id))

    # ─────────────────────────────────────────────────────────────
    # Whole store
    # ─────────────────────────────────────────────────────────────

    def replace_all(
        self,
        projects: list[Project],
        entries: list[Entry],
        inspirations: list[Inspiration],
    ) -> None:
        """Swap in all three collections at once, exactly as given."""
        self._projects = deepcopy(projects)
        self._entries = deepcopy(entries)
        self._inspirations = deepcopy(inspirations)
        self.__save_projects()
        self.__save_entries()
        self.__save_inspirations()
        logger.debug(
            "replaced store with %d projects, %d entries, %d inspirations",
            len(projects),
            len(entries),
            len(inspirations),
        )


STORE = EntityStore(FileBlobStore())
