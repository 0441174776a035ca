# SPDX-License-Identifier: MIT

from typing import TypedDict

from gleaning.model.entity_id import EntityId


class Project(TypedDict):
    id: EntityId
    name: str
    color: str  # palette token, see gleaning.color.PALETTE
    slot: int  # dense display order, 0..count-1
    is_finished: bool
