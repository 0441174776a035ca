# SPDX-License-Identifier: MIT

from typing import Optional

from gleaning.model.entity_id import EntityId, generate_entity_id
from gleaning.model.inspiration import Inspiration
from gleaning.time import datetime_to_iso_str, now_utc


def get_inspiration_template(
    content: str, project_id: Optional[EntityId] = None
) -> Inspiration:
    return {
        "id": generate_entity_id(),
        "content": content,
        "project_id": project_id,
        "created_at": datetime_to_iso_str(now_utc()),
        "is_hidden": False,
    }
