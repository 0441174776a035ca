# SPDX-License-Identifier: MIT

from typing import Literal, TypeAlias, TypedDict

from gleaning.model.entity_id import EntityId

EntityType = Literal["projects", "inspirations"]


IdMapDict: TypeAlias = "dict[EntityType, IdMapMapping]"


class IdMap(TypedDict):
    """
    Short synthetic ids handed out by views, per entity type.

    Synthetic id : real entity id, and the reverse. If a listing showed a
    project as 3, then its real id is

    real_project_id = id_map["projects"]["synthetic_to_real"][3]
    """

    projects: "IdMapMapping"
    inspirations: "IdMapMapping"


class IdMapMapping(TypedDict):
    synthetic_to_real: dict[int, EntityId]
    real_to_synthetic: dict[EntityId, int]
