# SPDX-License-Identifier: MIT

from typing import Optional

from rich.text import Text

from gleaning import configuration
from gleaning.color import MUTED_COLOR, get_project_style
from gleaning.model.project import Project


def is_long_content(content: str) -> bool:
    """Whether content is long enough to be collapsed in list views."""
    return (
        len(content) > configuration.LONG_CONTENT_LIMIT
        or len(content.split("\n")) > configuration.LONG_CONTENT_LINES
    )


def preview(content: str, expand: bool = False) -> str:
    """The first line of content, shortened unless expanded."""
    if expand or not is_long_content(content):
        return content
    first_line = content.split("\n")[0]
    if len(first_line) > configuration.LONG_CONTENT_LIMIT:
        first_line = first_line[: configuration.LONG_CONTENT_LIMIT - 3]
    return first_line + "..."


def project_label(project: Optional[Project]) -> Text:
    """Project name in its color, or a marker for unlinked references."""
    if project is None:
        return Text("unlinked", style=MUTED_COLOR)
    return Text(project["name"], style=get_project_style(project["color"]))
