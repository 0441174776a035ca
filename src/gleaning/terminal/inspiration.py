# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from gleaning.errors import ValidationError
from gleaning.id_map import clear_id_map
from gleaning.model.filter import InspirationFilter
from gleaning.repository.store import STORE
from gleaning.service.inspiration import filtered_inspirations, sort_inspirations
from gleaning.service.project import resolve_project
from gleaning.terminal.completion import complete_inspiration_filter
from gleaning.terminal.custom_typer import AliasedTyperGroup
from gleaning.terminal.parse import (
    get_real_inspiration_id,
    get_real_project_id,
    open_editor_for_text,
    parse_inspiration_filter,
)
from gleaning.view.view.views import inspiration as inspiration_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a")
def add(
    content: Annotated[
        Optional[str],
        typer.Argument(help="opens $EDITOR when left out"),
    ] = None,
    project: Annotated[
        Optional[int],
        typer.Option("--project", "-p", help="project id to link to"),
    ] = None,
) -> None:
    """Capture an idea, optionally linked to a project."""
    project_id = get_real_project_id(project) if project is not None else None

    if content is None:
        content = open_editor_for_text()
        if content is None:
            typer.echo("Inspiration not saved (no text provided)")
            return

    try:
        inspiration = STORE.add_inspiration(content, project_id)
    except ValidationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    inspiration_report.single_inspiration_view(
        inspiration, resolve_project(STORE.projects, inspiration["project_id"])
    )


@app.command("list, ls")
@clear_id_map("inspirations")
def list_inspirations(
    search: Annotated[
        str, typer.Option("--search", "-s", help="case-insensitive text match")
    ] = "",
    filter_param: Annotated[
        str,
        typer.Option(
            "--filter",
            "-f",
            help="all, unlinked, hidden, or a project id",
            autocompletion=complete_inspiration_filter,
        ),
    ] = "all",
    expand: Annotated[
        bool, typer.Option("--expand", "-x", help="show long text in full")
    ] = False,
) -> None:
    """List inspirations, newest first. Hidden ones only appear under --filter hidden."""
    filter_value = parse_inspiration_filter(filter_param)
    projects = STORE.get_all_projects()
    inspirations = sort_inspirations(
        filtered_inspirations(
            STORE.get_all_inspirations(), search, filter_value, projects
        )
    )

    report_name = "inspirations"
    if filter_value == InspirationFilter.HIDDEN:
        report_name = "hidden inspirations"
    elif filter_value == InspirationFilter.UNLINKED:
        report_name = "unlinked inspirations"
    elif filter_value != InspirationFilter.ALL:
        linked = resolve_project(projects, filter_value)
        if linked is not None:
            report_name = f"inspirations for {linked['name']}"

    inspiration_report.inspirations_view(report_name, inspirations, projects, expand)


@app.command("show, sh", no_args_is_help=True)
def show(id: int) -> None:
    __show(id, get_real_inspiration_id(id))


@app.command("modify, m", no_args_is_help=True)
def modify(
    id: int,
    content: Annotated[Optional[str], typer.Option("--content", "-c")] = None,
    edit_text: Annotated[
        bool, typer.Option("--edit-text", "-e", help="open $EDITOR on the text")
    ] = False,
    project: Annotated[
        Optional[int], typer.Option("--project", "-p", help="project id to link to")
    ] = None,
    unlink: Annotated[
        bool, typer.Option("--unlink", "-u", help="remove the project link")
    ] = False,
) -> None:
    real_id = get_real_inspiration_id(id)
    project_id = get_real_project_id(project) if project is not None else None

    if edit_text:
        current = STORE.get_inspiration(real_id)
        if current is not None:
            content = open_editor_for_text(current["content"])
            if content is None:
                typer.echo("Text editing cancelled")
                return

    try:
        updated = STORE.update_inspiration(
            real_id, content=content, project_id=project_id, unlink=unlink
        )
    except ValidationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    if not updated:
        typer.echo(f"Inspiration {id} no longer exists", err=True)
        raise typer.Exit(1)
    __show(id, real_id)


@app.command("hide, h", no_args_is_help=True)
def hide(id: int) -> None:
    """Archive an inspiration. It stays listed under --filter hidden."""
    real_id = get_real_inspiration_id(id)
    if not STORE.update_inspiration(real_id, is_hidden=True):
        typer.echo(f"Inspiration {id} no longer exists", err=True)
        raise typer.Exit(1)
    typer.echo(f"Hid inspiration {id}")


@app.command("unhide, uh", no_args_is_help=True)
def unhide(id: int) -> None:
    real_id = get_real_inspiration_id(id)
    if not STORE.update_inspiration(real_id, is_hidden=False):
        typer.echo(f"Inspiration {id} no longer exists", err=True)
        raise typer.Exit(1)
    typer.echo(f"Restored inspiration {id}")


@app.command("toggle, t", no_args_is_help=True)
def toggle(id: int) -> None:
    """Hide a visible inspiration or restore a hidden one."""
    real_id = get_real_inspiration_id(id)
    if not STORE.toggle_inspiration_hidden(real_id):
        typer.echo(f"Inspiration {id} no longer exists", err=True)
        raise typer.Exit(1)
    inspiration = STORE.get_inspiration(real_id)
    if inspiration is not None and inspiration["is_hidden"]:
        typer.echo(f"Hid inspiration {id}")
    else:
        typer.echo(f"Restored inspiration {id}")


@app.command("delete, del", no_args_is_help=True)
def delete(
    id: int,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="skip confirmation")] = False,
) -> None:
    """Delete an inspiration for good. Hide it instead to keep it around."""
    real_id = get_real_inspiration_id(id)
    if STORE.get_inspiration(real_id) is None:
        typer.echo(f"Inspiration {id} no longer exists", err=True)
        raise typer.Exit(1)

    if not yes:
        confirm = typer.confirm("Delete this inspiration? This cannot be undone.")
        if not confirm:
            raise typer.Exit(0)

    STORE.delete_inspiration(real_id)
    typer.echo(f"Deleted inspiration {id}")


def __show(synthetic_id: int, real_id: str) -> None:
    inspiration = STORE.get_inspiration(real_id)
    if inspiration is None:
        typer.echo(f"Inspiration {synthetic_id} no longer exists", err=True)
        raise typer.Exit(1)
    inspiration_report.single_inspiration_view(
        inspiration, resolve_project(STORE.projects, inspiration["project_id"])
    )
