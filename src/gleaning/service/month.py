# SPDX-License-Identifier: MIT

from typing import Optional

from gleaning.model.entry import Entry
from gleaning.model.filter import ALL_MONTHS
from gleaning.time import current_month, month_of, month_to_display_str


def available_months(
    entries: list[Entry], current: Optional[str] = None
) -> list[str]:
    """
    Months that can be viewed, newest first, behind the ALL sentinel.

    Every month holding at least one entry is listed, and the current month is
    always present even when it is still empty. 'YYYY-MM' strings sort the
    same lexicographically and chronologically.
    """
    months = {current if current is not None else current_month()}
    months.update(month_of(entry["date"]) for entry in entries)
    return [ALL_MONTHS, *sorted(months, reverse=True)]


def effective_month(viewing_month: str, current: Optional[str] = None) -> str:
    """The month the grid lays out: ALL has no grid of its own, so use today's."""
    if viewing_month == ALL_MONTHS:
        return current if current is not None else current_month()
    return viewing_month


def is_in_month(date: str, viewing_month: str) -> bool:
    return viewing_month == ALL_MONTHS or date.startswith(viewing_month)


def month_label(viewing_month: str) -> str:
    if viewing_month == ALL_MONTHS:
        return "All time"
    return month_to_display_str(viewing_month)
