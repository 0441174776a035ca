# SPDX-License-Identifier: MIT

from typing import TypedDict

from gleaning.model.entry import Entry
from gleaning.model.inspiration import Inspiration
from gleaning.model.project import Project


class ProjectStatistics(TypedDict):
    project: Project
    entries: list[Entry]  # within the viewed month, newest date first
    inspirations: list[Inspiration]  # not hidden, newest first
    entry_count: int
    inspiration_count: int
