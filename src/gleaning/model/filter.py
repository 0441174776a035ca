# SPDX-License-Identifier: MIT

from typing import Literal, TypeAlias

# Sentinel month meaning "every month"
ALL_MONTHS = "ALL"


class InspirationFilter:
    ALL = "ALL"
    UNLINKED = "UNLINKED"
    HIDDEN = "HIDDEN"


ProjectStatus: TypeAlias = Literal["ALL", "ONGOING", "FINISHED"]

PROJECT_STATUSES: tuple[ProjectStatus, ...] = ("ALL", "ONGOING", "FINISHED")
