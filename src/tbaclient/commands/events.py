"""Event commands -- ``tba event ...``."""

from __future__ import annotations

import typer

from tbaclient.commands.common import show


event_app = typer.Typer(no_args_is_help=True)

_EVENT_KEY_HELP = "Event key: season followed by the event code, e.g. 2016casd."


@event_app.command("list")
def event_list(
    ctx: typer.Context,
    year: int = typer.Argument(help="Season, e.g. 2016."),
) -> None:
    """List all events of a season."""
    show(ctx, lambda tba: tba.get_event_list(year))


@event_app.command("info")
def event_info(
    ctx: typer.Context,
    event_key: str = typer.Argument(help=_EVENT_KEY_HELP),
) -> None:
    """Show information on an event."""
    show(ctx, lambda tba: tba.get_event(event_key))


@event_app.command("teams")
def event_teams(
    ctx: typer.Context,
    event_key: str = typer.Argument(help=_EVENT_KEY_HELP),
) -> None:
    """List the teams attending an event."""
    show(ctx, lambda tba: tba.get_event_teams(event_key))


@event_app.command("matches")
def event_matches(
    ctx: typer.Context,
    event_key: str = typer.Argument(help=_EVENT_KEY_HELP),
) -> None:
    """List the matches played at an event."""
    show(ctx, lambda tba: tba.get_event_matches(event_key))


@event_app.command("stats")
def event_stats(
    ctx: typer.Context,
    event_key: str = typer.Argument(help=_EVENT_KEY_HELP),
) -> None:
    """Show OPR, DPR and CCWM for the teams at an event."""
    show(ctx, lambda tba: tba.get_event_stats(event_key))


@event_app.command("rankings")
def event_rankings(
    ctx: typer.Context,
    event_key: str = typer.Argument(help=_EVENT_KEY_HELP),
) -> None:
    """Show the ranking table of an event."""
    show(ctx, lambda tba: tba.get_event_rankings(event_key))


@event_app.command("awards")
def event_awards(
    ctx: typer.Context,
    event_key: str = typer.Argument(help=_EVENT_KEY_HELP),
) -> None:
    """List the awards given at an event."""
    show(ctx, lambda tba: tba.get_event_awards(event_key))


@event_app.command("district-points")
def event_district_points(
    ctx: typer.Context,
    event_key: str = typer.Argument(help=_EVENT_KEY_HELP),
) -> None:
    """Show the district points earned at an event."""
    show(ctx, lambda tba: tba.get_event_district_points(event_key))
