# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from gleaning.model.entity_id import EntityId


class Inspiration(TypedDict):
    id: EntityId
    content: str
    project_id: Optional[EntityId]  # None means unlinked
    created_at: str  # ISO-8601, never changes after creation
    is_hidden: bool
