# SPDX-License-Identifier: MIT

"""Display switches for the current invocation, set from config and global options."""

from contextvars import ContextVar

_show_header_var: ContextVar[bool] = ContextVar("show_header", default=True)

# Listings number their rows from 1 again each time they render
_clear_ids_var: ContextVar[bool] = ContextVar("clear_ids", default=True)


def set_show_header(value: bool) -> None:
    """Set whether reports print the gleaning header.

    Args:
        value: False for bare output, e.g. when piping
    """
    _show_header_var.set(value)


def get_show_header() -> bool:
    return _show_header_var.get()


def set_clear_ids(value: bool) -> None:
    _clear_ids_var.set(value)


def get_clear_ids() -> bool:
    return _clear_ids_var.get()
