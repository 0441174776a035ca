# SPDX-License-Identifier: MIT

from functools import wraps
from typing import Any, Callable, TypeVar

from gleaning.model.id_map import EntityType
from gleaning.repository.id_map import ID_MAP_REPO
from gleaning.view import state as view_state

F = TypeVar("F", bound=Callable[..., Any])


def clear_id_map(entity_type: EntityType) -> Callable[[F], F]:
    """Number an entity type's synthetic ids from 1 again before a listing renders."""

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            if view_state.get_clear_ids():
                ID_MAP_REPO.clear_ids(entity_type)
            return func(*args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator
