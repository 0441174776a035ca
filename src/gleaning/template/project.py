# SPDX-License-Identifier: MIT

from gleaning.color import get_palette_color
from gleaning.model.entity_id import generate_entity_id
from gleaning.model.project import Project

DEFAULT_PROJECT_NAME = "New practice"

# Projects a brand new data directory starts with
STARTER_PROJECT_NAMES = ["Writing", "Movement", "Aesthetics"]


def get_project_template(slot: int, name: str = DEFAULT_PROJECT_NAME) -> Project:
    return {
        "id": generate_entity_id(),
        "name": name,
        "color": get_palette_color(slot),
        "slot": slot,
        "is_finished": False,
    }


def get_starter_projects() -> list[Project]:
    return [
        get_project_template(slot, name)
        for slot, name in enumerate(STARTER_PROJECT_NAMES)
    ]
