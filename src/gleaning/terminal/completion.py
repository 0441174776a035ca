# SPDX-License-Identifier: MIT

from gleaning.model.filter import ALL_MONTHS, PROJECT_STATUSES
from gleaning.repository.store import STORE
from gleaning.service.month import available_months


def complete_month(incomplete: str) -> list[str]:
    """Return the months that have entries, for shell completion."""
    months = [
        month.lower() if month == ALL_MONTHS else month
        for month in available_months(STORE.entries)
    ]
    return [month for month in months if month.startswith(incomplete)]


def complete_status(incomplete: str) -> list[str]:
    statuses = [status.lower() for status in PROJECT_STATUSES]
    return [status for status in statuses if status.startswith(incomplete)]


def complete_inspiration_filter(incomplete: str) -> list[str]:
    filters = ["all", "unlinked", "hidden"]
    return [value for value in filters if value.startswith(incomplete)]
