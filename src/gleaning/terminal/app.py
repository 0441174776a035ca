# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from gleaning.terminal import (
    backup,
    configuration,
    entry,
    inspiration,
    project,
    view,
)
from gleaning.terminal.custom_typer import OrderedAliasedTyperGroup
from gleaning.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="Gleaning - a daily practice journal in the CLI",
    no_args_is_help=True,
)
app.add_typer(project.app, name="project, p", help="Manage practice projects")
app.add_typer(entry.app, name="entry, e", help="Write and read daily entries")
app.add_typer(inspiration.app, name="inspiration, i", help="Capture and browse ideas")
app.add_typer(view.app, name="view, v", help="Month grid and review")
app.add_typer(backup.app, name="backup, b", help="Export and import backups")
app.add_typer(configuration.app, name="config, c", help="Show and change settings")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    clear_ids: Annotated[
        Optional[bool],
        typer.Option(
            "--clear-ids/--no-clear-ids",
            help="Renumber listing ids from 1, overriding the config setting",
        ),
    ] = None,
) -> None:
    """
    Gleaning - a daily practice journal in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if clear_ids is not None:
        view_state.set_clear_ids(clear_ids)


def run() -> None:
    app()
