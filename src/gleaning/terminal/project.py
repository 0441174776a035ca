# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from gleaning.color import to_color_token
from gleaning.errors import ValidationError
from gleaning.id_map import clear_id_map
from gleaning.repository.store import STORE
from gleaning.terminal.custom_typer import AliasedTyperGroup
from gleaning.terminal.parse import get_real_project_id
from gleaning.view.view.views import project as project_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a")
def add(
    name: Annotated[Optional[str], typer.Argument()] = None,
) -> None:
    """Start a new project. At most nine can be ongoing at once."""
    try:
        project = STORE.add_project(name)
    except ValidationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    project_report.single_project_view(project)


@app.command("list, ls")
@clear_id_map("projects")
def list_projects() -> None:
    """List every project in slot order, finished ones included."""
    project_report.projects_view(STORE.get_all_projects(), STORE.get_all_entries())


@app.command("show, s", no_args_is_help=True)
def show(id: int) -> None:
    project = STORE.get_project(get_real_project_id(id))
    if project is None:
        typer.echo(f"Project {id} no longer exists", err=True)
        raise typer.Exit(1)
    project_report.single_project_view(project)


@app.command("modify, m", no_args_is_help=True)
def modify(
    id: int,
    name: Annotated[Optional[str], typer.Option("--name", "-n")] = None,
    color: Annotated[
        Optional[str],
        typer.Option("--color", "-c", help="hex color like #D8E2DC"),
    ] = None,
) -> None:
    real_id = get_real_project_id(id)
    token = None
    if color is not None:
        token = to_color_token(color)
        if token is None:
            raise typer.BadParameter(f"not a hex color: {color}", param_hint="--color")
    try:
        updated = STORE.update_project(real_id, name=name, color=token)
    except ValidationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    __show_updated(id, real_id, updated)


@app.command("finish, f", no_args_is_help=True)
def finish(id: int) -> None:
    """Mark a project finished. It leaves the grid but keeps its history."""
    real_id = get_real_project_id(id)
    __show_updated(id, real_id, STORE.update_project(real_id, is_finished=True))


@app.command("resume, r", no_args_is_help=True)
def resume(id: int) -> None:
    """Bring a finished project back onto the grid."""
    real_id = get_real_project_id(id)
    __show_updated(id, real_id, STORE.update_project(real_id, is_finished=False))


@app.command("move, mv", no_args_is_help=True)
def move(
    dragged: Annotated[int, typer.Argument(help="project to move")],
    target: Annotated[int, typer.Argument(help="project whose place it takes")],
) -> None:
    """Move a project to another project's position, shifting those in between."""
    moved = STORE.reorder_projects(
        get_real_project_id(dragged), get_real_project_id(target)
    )
    if not moved:
        typer.echo("Nothing to move")
        return
    list_projects()


@app.command("delete, del", no_args_is_help=True)
def delete(
    id: int,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="skip confirmation")] = False,
) -> None:
    """Delete a project. Its entries and inspirations become unlinked."""
    real_id = get_real_project_id(id)
    project = STORE.get_project(real_id)
    if project is None:
        typer.echo(f"Project {id} no longer exists", err=True)
        raise typer.Exit(1)

    if not yes:
        confirm = typer.confirm(
            f"Delete '{project['name']}'? Its entries and inspirations become unlinked."
        )
        if not confirm:
            raise typer.Exit(0)

    STORE.delete_project(real_id)
    typer.echo(f"Deleted project '{project['name']}'")


def __show_updated(synthetic_id: int, real_id: str, updated: bool) -> None:
    if not updated:
        typer.echo(f"Project {synthetic_id} no longer exists", err=True)
        raise typer.Exit(1)
    project = STORE.get_project(real_id)
    if project is not None:
        project_report.single_project_view(project)
