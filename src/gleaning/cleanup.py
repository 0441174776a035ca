# SPDX-License-Identifier: MIT

import atexit

from gleaning.repository.configuration import CONFIGURATION_REPO
from gleaning.repository.id_map import ID_MAP_REPO


def flush() -> None:
    """Write out the settings and synthetic ids held in memory until exit."""
    # Entity collections are already written as they change
    for repository in (CONFIGURATION_REPO, ID_MAP_REPO):
        repository.flush()


def register_cleanup() -> None:
    atexit.register(flush)
