# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import typer

from gleaning.id_map import clear_id_map
from gleaning.model.filter import ProjectStatus
from gleaning.repository.store import STORE
from gleaning.service.month import available_months, effective_month, month_label
from gleaning.service.project import matrix_projects, project_statistics
from gleaning.terminal.completion import complete_month, complete_status
from gleaning.terminal.custom_typer import AliasedTyperGroup
from gleaning.terminal.parse import parse_month, parse_status
from gleaning.time import current_month
from gleaning.view.view.views.matrix import matrix_view
from gleaning.view.view.views.month import months_view
from gleaning.view.view.views.statistics import statistics_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

MONTH_HELP = "YYYY-MM or all, defaults to the current month"


@app.command("matrix, m")
@clear_id_map("projects")
def matrix(
    month: Annotated[
        Optional[str],
        typer.Option("--month", "-m", help=MONTH_HELP, autocompletion=complete_month),
    ] = None,
) -> None:
    """The month grid of ongoing projects. 'all' shows the current month."""
    viewing_month = parse_month(month) or current_month()
    grid_month = effective_month(viewing_month)
    matrix_view(
        month_label(grid_month),
        grid_month,
        matrix_projects(STORE.get_all_projects()),
        STORE.get_all_entries(),
    )


@app.command("stats, s")
def stats(
    month: Annotated[
        Optional[str],
        typer.Option("--month", "-m", help=MONTH_HELP, autocompletion=complete_month),
    ] = None,
    search: Annotated[
        str, typer.Option("--search", "-s", help="case-insensitive project name match")
    ] = "",
    status: Annotated[
        str,
        typer.Option(
            "--status",
            help="all, ongoing or finished",
            autocompletion=complete_status,
        ),
    ] = "all",
    expand: Annotated[
        bool, typer.Option("--expand", "-x", help="list every entry and inspiration")
    ] = False,
) -> None:
    """Review each project's entries for a month and its open inspirations."""
    viewing_month = parse_month(month) or current_month()
    statistics = project_statistics(
        STORE.get_all_projects(),
        STORE.get_all_entries(),
        STORE.get_all_inspirations(),
        viewing_month,
        search,
        cast(ProjectStatus, parse_status(status)),
    )
    statistics_view(month_label(viewing_month), statistics, expand)


@app.command("months, mo")
def months() -> None:
    """Every month with entries, plus the current one."""
    entries = STORE.get_all_entries()
    months_view(available_months(entries), entries)
