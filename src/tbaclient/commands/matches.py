"""Match commands -- ``tba match ...``."""

from __future__ import annotations

import typer

from tbaclient.commands.common import show


match_app = typer.Typer(no_args_is_help=True)


@match_app.command("info")
def match_info(
    ctx: typer.Context,
    match_key: str = typer.Argument(
        help="Match key: event key, competition level and number, e.g. 2014cmp_f1m1."
    ),
) -> None:
    """Show a single match."""
    show(ctx, lambda tba: tba.get_match(match_key))
