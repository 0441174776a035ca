# SPDX-License-Identifier: MIT

from typing import TypedDict

from gleaning.model.entity_id import EntityId

MIN_INTENSITY = 0
MAX_INTENSITY = 4


class Entry(TypedDict):
    id: EntityId
    date: str  # YYYY-MM-DD
    project_id: EntityId  # soft reference, may no longer resolve
    content: str
    intensity: int  # MIN_INTENSITY..MAX_INTENSITY
