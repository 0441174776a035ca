# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.padding import Padding
from rich.text import Text

from gleaning.time import date_to_long_display_str, today_local_date_str
from gleaning.view.state import get_show_header


def header(sub_header: Optional[str] = None) -> None:
    """Print the application name, the report name and today's date.

    Args:
        sub_header: Optional report name to display
    """
    if not get_show_header():
        return

    print(Padding("[rosy_brown]gleaning[/rosy_brown]", (1, 0, 0, 1)))
    if sub_header is not None:
        print(Padding(Text(sub_header, style="sandy_brown"), (0, 1)))
    today = date_to_long_display_str(today_local_date_str())
    print(Padding(Text(today, style="plum1"), (0, 1)))
