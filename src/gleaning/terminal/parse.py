# SPDX-License-Identifier: MIT

import os
import re
import subprocess
import tempfile
from typing import Optional

import pendulum
import typer

from gleaning.model.entity_id import EntityId
from gleaning.model.filter import ALL_MONTHS, PROJECT_STATUSES, InspirationFilter
from gleaning.repository.id_map import ID_MAP_REPO
from gleaning.time import DATE_FORMAT, is_date_str, is_month_str


def parse_date(date_param: str) -> str:
    """
    Parse a day given as YYYY-MM-DD, today, yesterday, tomorrow, or a day
    offset like 1, -1. Returns the day as YYYY-MM-DD.
    """
    date = date_param.strip()

    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        if not is_date_str(date):
            raise typer.BadParameter(f"'{date}' is not a calendar day")
        return date

    if re.match(r"^-?\d+$", date):
        return pendulum.today("local").add(days=int(date)).format(DATE_FORMAT)

    if date == "today" or date == "t":
        return pendulum.today("local").format(DATE_FORMAT)
    if date == "yesterday" or date == "y":
        return pendulum.yesterday("local").format(DATE_FORMAT)
    if date == "tomorrow" or date == "o":
        return pendulum.tomorrow("local").format(DATE_FORMAT)
    raise typer.BadParameter("Incorrect date format")


def parse_month(month_param: Optional[str]) -> Optional[str]:
    """Parse YYYY-MM or all. None means the caller's default month."""
    if month_param is None:
        return None
    month = month_param.strip()
    if month.upper() == ALL_MONTHS:
        return ALL_MONTHS
    if not is_month_str(month):
        raise typer.BadParameter("Month must be YYYY-MM or all")
    return month


def parse_status(status_param: str) -> str:
    status = status_param.strip().upper()
    if status not in PROJECT_STATUSES:
        raise typer.BadParameter(
            f"Status must be one of {', '.join(s.lower() for s in PROJECT_STATUSES)}"
        )
    return status


def parse_inspiration_filter(filter_param: str) -> str:
    """
    Parse all, unlinked, hidden, or a project's synthetic id into a filter
    value for filtered_inspirations.
    """
    filter_value = filter_param.strip()
    if filter_value.isdigit():
        return get_real_project_id(int(filter_value))
    upper = filter_value.upper()
    if upper in (InspirationFilter.ALL, InspirationFilter.UNLINKED, InspirationFilter.HIDDEN):
        return upper
    raise typer.BadParameter("Filter must be all, unlinked, hidden or a project id")


def get_real_project_id(synthetic_id: int) -> EntityId:
    real_id = ID_MAP_REPO.get_real_id("projects", synthetic_id)
    if real_id is None:
        raise typer.BadParameter(
            f"No project with id {synthetic_id}, list projects to refresh ids"
        )
    return real_id


def get_real_inspiration_id(synthetic_id: int) -> EntityId:
    real_id = ID_MAP_REPO.get_real_id("inspirations", synthetic_id)
    if real_id is None:
        raise typer.BadParameter(
            f"No inspiration with id {synthetic_id}, list inspirations to refresh ids"
        )
    return real_id


def open_editor_for_text(initial_text: Optional[str] = None) -> Optional[str]:
    """
    Open the user's preferred editor to edit text.
    Returns the edited text with trailing newlines removed, or None if empty.
    """
    editor = os.environ.get("EDITOR", "nano")

    with tempfile.NamedTemporaryFile(mode="w+", suffix=".txt") as tf:
        if initial_text is not None:
            tf.write(initial_text)
            tf.flush()

        subprocess.run([editor, tf.name], check=True)
        tf.seek(0)
        text = tf.read()
        if not text.strip():
            return None
        # Remove trailing newlines but preserve internal empty lines
        return text.rstrip("\n")
