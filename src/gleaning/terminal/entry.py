# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from gleaning.errors import ValidationError
from gleaning.model.project import Project
from gleaning.repository.store import STORE
from gleaning.terminal.custom_typer import AliasedTyperGroup
from gleaning.terminal.parse import get_real_project_id, open_editor_for_text, parse_date
from gleaning.view.view.views import entry as entry_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

DATE_HELP = "valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1"


@app.command("set, s", no_args_is_help=True)
def set_entry(
    date: Annotated[str, typer.Argument(help=DATE_HELP)],
    project_id: Annotated[int, typer.Argument(help="project id from the grid")],
    content: Annotated[
        Optional[str],
        typer.Argument(help="opens $EDITOR when left out"),
    ] = None,
) -> None:
    """Write the note for a day of a project, replacing any note already there."""
    day = parse_date(date)
    project = __get_project(project_id)
    if project["is_finished"]:
        typer.echo(
            f"'{project['name']}' is finished, resume it before adding entries", err=True
        )
        raise typer.Exit(1)

    if content is None:
        existing = STORE.get_entry_for_cell(day, project["id"])
        content = open_editor_for_text(
            existing["content"] if existing is not None else None
        )
        if content is None:
            typer.echo("Entry not saved (no text provided)")
            return

    try:
        entry_id = STORE.add_entry(day, project["id"], content)
    except ValidationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    entry = STORE.get_entry(entry_id)
    if entry is not None:
        entry_report.single_entry_view(entry, project)


@app.command("show, sh", no_args_is_help=True)
def show(
    date: Annotated[str, typer.Argument(help=DATE_HELP)],
    project_id: int,
) -> None:
    day = parse_date(date)
    project = __get_project(project_id)
    entry = STORE.get_entry_for_cell(day, project["id"])
    if entry is None:
        entry_report.empty_cell_view(day, project)
        return
    entry_report.single_entry_view(entry, project)


@app.command("delete, del", no_args_is_help=True)
def delete(
    date: Annotated[str, typer.Argument(help=DATE_HELP)],
    project_id: int,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="skip confirmation")] = False,
) -> None:
    day = parse_date(date)
    project = __get_project(project_id)
    entry = STORE.get_entry_for_cell(day, project["id"])
    if entry is None:
        entry_report.empty_cell_view(day, project)
        return

    if not yes:
        confirm = typer.confirm(f"Delete the entry for {project['name']} on {day}?")
        if not confirm:
            raise typer.Exit(0)

    STORE.delete_entry(entry["id"])
    typer.echo(f"Deleted the entry for {project['name']} on {day}")


def __get_project(synthetic_id: int) -> Project:
    project = STORE.get_project(get_real_project_id(synthetic_id))
    if project is None:
        typer.echo(f"Project {synthetic_id} no longer exists", err=True)
        raise typer.Exit(1)
    return project
