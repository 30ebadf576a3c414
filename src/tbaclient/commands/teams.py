"""Team commands -- ``tba team ...``.

Every command maps to one team endpoint of :class:`~tbaclient.api.TBA`.
Team keys are passed through verbatim, including the program prefix
(``frc3128``).
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

import typer

from tbaclient.commands.common import show


team_app = typer.Typer(no_args_is_help=True)


class HistoryKind(str, Enum):
    """Sections of a team's history."""

    EVENTS = "events"
    AWARDS = "awards"
    ROBOTS = "robots"
    DISTRICTS = "districts"


@team_app.command("list")
def team_list(
    ctx: typer.Context,
    page: int = typer.Argument(1, help="Page number; page n holds teams 500*n to 500*n+499."),
) -> None:
    """List teams, 500 per page."""
    show(ctx, lambda tba: tba.get_team_list(page))


@team_app.command("info")
def team_info(
    ctx: typer.Context,
    team_key: str = typer.Argument(help="Team key, e.g. frc3128."),
) -> None:
    """Show information on a team.

    Example::

        tba team info frc3128
    """
    show(ctx, lambda tba: tba.get_team(team_key))


@team_app.command("years")
def team_years(
    ctx: typer.Context,
    team_key: str = typer.Argument(help="Team key, e.g. frc3128."),
) -> None:
    """List the years a team has competed in."""
    show(ctx, lambda tba: tba.get_team_years_participated(team_key))


@team_app.command("media")
def team_media(
    ctx: typer.Context,
    team_key: str = typer.Argument(help="Team key, e.g. frc254."),
    year: Optional[int] = typer.Option(None, "--year", "-y", help="Season (default: current)."),
) -> None:
    """List photo and video links for a team."""
    show(ctx, lambda tba: tba.get_team_media(team_key, year))


@team_app.command("history")
def team_history(
    ctx: typer.Context,
    team_key: str = typer.Argument(help="Team key, e.g. frc3128."),
    kind: HistoryKind = typer.Argument(HistoryKind.EVENTS, help="Which history to show."),
) -> None:
    """Show a team's event, award, robot or district history."""
    getters = {
        HistoryKind.EVENTS: lambda tba: tba.get_team_history_events(team_key),
        HistoryKind.AWARDS: lambda tba: tba.get_team_history_awards(team_key),
        HistoryKind.ROBOTS: lambda tba: tba.get_team_history_robots(team_key),
        HistoryKind.DISTRICTS: lambda tba: tba.get_team_history_districts(team_key),
    }
    show(ctx, getters[kind])


@team_app.command("events")
def team_events(
    ctx: typer.Context,
    team_key: str = typer.Argument(help="Team key, e.g. frc3128."),
    year: int = typer.Argument(help="Season, e.g. 2016."),
) -> None:
    """List the events a team attended in a season."""
    show(ctx, lambda tba: tba.get_team_event_list(team_key, year))


@team_app.command("event-awards")
def team_event_awards(
    ctx: typer.Context,
    team_key: str = typer.Argument(help="Team key, e.g. frc3128."),
    event_key: str = typer.Argument(help="Event key, e.g. 2016casd."),
) -> None:
    """List the awards a team won at an event."""
    show(ctx, lambda tba: tba.get_team_event_awards(team_key, event_key))


@team_app.command("event-matches")
def team_event_matches(
    ctx: typer.Context,
    team_key: str = typer.Argument(help="Team key, e.g. frc3128."),
    event_key: str = typer.Argument(help="Event key, e.g. 2016casd."),
) -> None:
    """List the matches a team played at an event."""
    show(ctx, lambda tba: tba.get_team_event_matches(team_key, event_key))
