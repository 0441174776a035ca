# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from gleaning import configuration
from gleaning.configuration import Configuration
from gleaning.logger import LOG_LEVELS
from gleaning.repository.configuration import CONFIGURATION_REPO
from gleaning.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("show, sh")
def show() -> None:
    """Display current configuration settings."""
    console = Console()
    console.print(__config_table(CONFIGURATION_REPO.get_config()))
    console.print(f"Data directory in use: {configuration.DATA_PATH}")


@app.command("set, s")
def set(
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Show the header above reports",
        ),
    ] = None,
    data_path: Annotated[
        Optional[str],
        typer.Option(
            "--data-path",
            help="Directory for the data files (default is the user data directory)",
        ),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option(
            "--remove-data-path",
            help="Go back to the user data directory",
        ),
    ] = False,
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level",
            help=f"One of {', '.join(LOG_LEVELS)}",
        ),
    ] = None,
    clear_ids_on_view: Annotated[
        Optional[bool],
        typer.Option(
            "--clear-ids-on-view/--no-clear-ids-on-view",
            help="Renumber ids each time a list or the matrix is shown",
        ),
    ] = None,
) -> None:
    """
    Update configuration settings.
    """
    if log_level is not None:
        log_level = log_level.upper()
        if log_level not in LOG_LEVELS:
            raise typer.BadParameter(
                f"Log level must be one of {', '.join(LOG_LEVELS)}",
                param_hint="--log-level",
            )

    CONFIGURATION_REPO.update_config(
        show_header=show_header,
        data_path=data_path,
        remove_data_path=remove_data_path,
        log_level=log_level,
        clear_ids_on_view=clear_ids_on_view,
    )

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(__config_table(CONFIGURATION_REPO.get_config()))


def __config_table(config: Configuration) -> Table:
    table = Table(title="Configuration", show_header=True)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row(
        "data_path",
        config["data_path"] if config["data_path"] else "None (user data directory)",
    )
    table.add_row("log_level", config["log_level"])
    table.add_row(
        "clear_ids_on_view",
        "✓ Enabled" if config["clear_ids_on_view"] else "✗ Disabled",
    )
    return table
