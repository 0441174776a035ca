# SPDX-License-Identifier: MIT

from typing import Any, TypeAlias, TypedDict

# Records are the camelCase form used on disk and in backups, e.g.
# {"id": ..., "projectId": ..., "isHidden": ...}
Record: TypeAlias = dict[str, Any]


class Snapshot(TypedDict):
    projects: list[Record]
    entries: list[Record]
    inspirations: list[Record]
    exportedAt: str
    version: str
