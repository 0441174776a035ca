# SPDX-License-Identifier: MIT

from typing import TypeAlias
from uuid import uuid4

# uuid4 string, assigned once when an entity is created
EntityId: TypeAlias = str


def generate_entity_id() -> EntityId:
    return str(uuid4())
