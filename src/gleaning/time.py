# SPDX-License-Identifier: MIT

import re
from typing import cast

import pendulum

DATE_FORMAT = "YYYY-MM-DD"
MONTH_FORMAT = "YYYY-MM"

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_MONTH_PATTERN = re.compile(r"^\d{4}-\d{2}$")


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def today_local_date_str() -> str:
    return pendulum.today("local").format(DATE_FORMAT)


def current_month() -> str:
    """The local calendar month in 'YYYY-MM' form."""
    return pendulum.now("local").format(MONTH_FORMAT)


def is_date_str(value: str) -> bool:
    """True if value is a real calendar day written as 'YYYY-MM-DD'."""
    if not _DATE_PATTERN.match(value):
        return False
    try:
        pendulum.from_format(value, DATE_FORMAT)
    except ValueError:
        return False
    return True


def is_month_str(value: str) -> bool:
    if not _MONTH_PATTERN.match(value):
        return False
    month = int(value[5:7])
    return 1 <= month <= 12


def month_of(date_str: str) -> str:
    return date_str[:7]


def dates_in_month(month: str) -> list[str]:
    """Every day of a 'YYYY-MM' month as 'YYYY-MM-DD' strings, in order."""
    start = pendulum.from_format(month, MONTH_FORMAT)
    return [
        start.add(days=offset).format(DATE_FORMAT)
        for offset in range(start.days_in_month)
    ]


def month_to_display_str(month: str) -> str:
    return pendulum.from_format(month, MONTH_FORMAT).format("MMMM YYYY")


def date_to_display_str(date_str: str) -> str:
    return pendulum.from_format(date_str, DATE_FORMAT).format("MM-DD ddd")


def date_to_long_display_str(date_str: str) -> str:
    return pendulum.from_format(date_str, DATE_FORMAT).format("dddd D MMMM YYYY")


def iso_str_to_display_local_datetime_str(iso_str: str) -> str:
    # Imported timestamps are trusted as-is and may not parse
    try:
        return datetime_from_str(iso_str).in_tz("local").format("YYYY-MM-DD HH:mm")
    except ValueError:
        return iso_str
