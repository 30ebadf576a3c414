"""District commands -- ``tba district ...``.

District keys are the short letter codes used by the API (``ne``, ``in``,
``mar``, ...), combined with a season.
"""

from __future__ import annotations

import typer

from tbaclient.commands.common import show


district_app = typer.Typer(no_args_is_help=True)

_DISTRICT_HELP = "District code, e.g. ne, in, mar."
_YEAR_HELP = "Season, e.g. 2014."


@district_app.command("list")
def district_list(
    ctx: typer.Context,
    year: int = typer.Argument(help=_YEAR_HELP),
) -> None:
    """List the districts active in a season."""
    show(ctx, lambda tba: tba.get_district_list(year))


@district_app.command("events")
def district_events(
    ctx: typer.Context,
    district_key: str = typer.Argument(help=_DISTRICT_HELP),
    year: int = typer.Argument(help=_YEAR_HELP),
) -> None:
    """List the events of a district."""
    show(ctx, lambda tba: tba.get_district_events(district_key, year))


@district_app.command("rankings")
def district_rankings(
    ctx: typer.Context,
    district_key: str = typer.Argument(help=_DISTRICT_HELP),
    year: int = typer.Argument(help=_YEAR_HELP),
) -> None:
    """Show the district ranking of teams."""
    show(ctx, lambda tba: tba.get_district_rankings(district_key, year))


@district_app.command("teams")
def district_teams(
    ctx: typer.Context,
    district_key: str = typer.Argument(help=_DISTRICT_HELP),
    year: int = typer.Argument(help=_YEAR_HELP),
) -> None:
    """List the teams of a district."""
    show(ctx, lambda tba: tba.get_district_teams(district_key, year))
