# SPDX-License-Identifier: MIT

from gleaning.model.entity_id import EntityId, generate_entity_id
from gleaning.model.entry import Entry

# The cell editor writes every entry at this weight
DEFAULT_INTENSITY = 1


def get_entry_template(
    date: str, project_id: EntityId, content: str, intensity: int = DEFAULT_INTENSITY
) -> Entry:
    return {
        "id": generate_entity_id(),
        "date": date,
        "project_id": project_id,
        "content": content,
        "intensity": intensity,
    }
