# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer

from gleaning.errors import BackupFormatError
from gleaning.repository.id_map import ID_MAP_REPO
from gleaning.repository.store import STORE
from gleaning.service.backup import (
    backup_filename,
    dump_snapshot,
    export_snapshot,
    import_snapshot,
    load_snapshot,
    validate_snapshot,
)
from gleaning.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("export, e")
def export(
    path: Annotated[
        Optional[Path],
        typer.Argument(help="file or directory, defaults to the current directory"),
    ] = None,
) -> None:
    """Write every project, entry and inspiration to a JSON backup file."""
    target = path if path is not None else Path.cwd()
    if target.is_dir():
        target = target / backup_filename()

    try:
        target.write_bytes(dump_snapshot(export_snapshot(STORE)))
    except OSError as e:
        typer.echo(f"Error: could not write {target}: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Backup written to {target}")


@app.command("import, i", no_args_is_help=True)
def import_backup(
    path: Path,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="skip confirmation")] = False,
) -> None:
    """Replace all current data with the contents of a backup file."""
    try:
        snapshot = load_snapshot(path.read_bytes())
        validate_snapshot(snapshot)
    except (OSError, BackupFormatError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if not yes:
        confirm = typer.confirm(
            "Importing replaces all current data. This cannot be undone. Continue?"
        )
        if not confirm:
            raise typer.Exit(0)

    import_snapshot(STORE, snapshot)

    # Synthetic ids point at records that no longer exist
    ID_MAP_REPO.clear_ids()
    typer.echo("Backup restored")
