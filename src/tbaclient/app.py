"""Typer application and CLI entry point for tbaclient.

This module wires together the top-level ``tba`` Typer application and
registers the API command groups (``team``, ``event``, ``match``,
``district``) and the ``config`` group.

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``. It installs signal handlers and invokes the Typer app.
:class:`~tbaclient.exceptions.TBAError` instances exit with their
``exit_code``; any other exception is written to a crash log under the
data directory.

See Also:
    :mod:`tbaclient.config`: Identity and configuration resolution.
    :mod:`tbaclient.output`: Output formatting initialised in :func:`main_callback`.
"""

from __future__ import annotations

import signal
import sys
import traceback
from datetime import datetime
from typing import Any, Optional

import typer

from tbaclient import __version__
from tbaclient.commands.config import config_app
from tbaclient.commands.districts import district_app
from tbaclient.commands.events import event_app
from tbaclient.commands.matches import match_app
from tbaclient.commands.teams import team_app
from tbaclient.exit_codes import EXIT_GENERIC_FAILURE
from tbaclient.output import OutputFormat


app = typer.Typer(
    name="tba",
    help="Query The Blue Alliance API from the command line.",
    no_args_is_help=True,
    add_completion=True,
    rich_markup_mode="rich",
)

app.add_typer(team_app, name="team", help="Teams: info, media, history, events.")
app.add_typer(event_app, name="event", help="Events: info, teams, matches, rankings.")
app.add_typer(match_app, name="match", help="Single matches.")
app.add_typer(district_app, name="district", help="Districts: events, rankings, teams.")
app.add_typer(config_app, name="config", help="Configuration management.")


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"tba {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    organization: Optional[str] = typer.Option(
        None, "--org", help="Organization for the X-TBA-App-Id header."
    ),
    app_identifier: Optional[str] = typer.Option(
        None, "--app-id", help="App identifier for the X-TBA-App-Id header."
    ),
    app_version: Optional[str] = typer.Option(
        None, "--app-version", help="App version for the X-TBA-App-Id header."
    ),
    base_url: Optional[str] = typer.Option(
        None, "--base-url", help="Override the API base URL."
    ),
    json_output: bool = typer.Option(
        False, "--json", help="JSON output format."
    ),
    plain_output: bool = typer.Option(
        False, "--plain", help="Plain text output."
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable color output."
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show cache hits and HTTP statuses."
    ),
    force: bool = typer.Option(
        False, "--force", "-f", help="Skip confirmations."
    ),
    output_file: Optional[str] = typer.Option(
        None, "-o", "--output", help="Output file path."
    ),
) -> None:
    """Root callback executed before every sub-command.

    Initialises the global :class:`~tbaclient.output.OutputManager` from
    CLI flags and stores the identity / base URL overrides in ``ctx.obj``
    for :func:`~tbaclient.commands.common.open_client`.
    """
    from tbaclient.output import OutputManager, set_output

    if json_output:
        fmt = OutputFormat.JSON
    elif plain_output:
        fmt = OutputFormat.PLAIN
    else:
        fmt = _configured_format()

    output = OutputManager(
        format=fmt,
        no_color=no_color,
        quiet=quiet,
        verbose=verbose,
        output_file=output_file,
    )
    set_output(output)

    ctx.ensure_object(dict)
    ctx.obj["organization"] = organization
    ctx.obj["app_identifier"] = app_identifier
    ctx.obj["app_version"] = app_version
    ctx.obj["base_url"] = base_url
    ctx.obj["force"] = force


def _configured_format() -> OutputFormat:
    """Return the output format stored in the global config, or AUTO."""
    from tbaclient.config import load_global_config
    from tbaclient.exceptions import ConfigError

    try:
        stored = load_global_config().output.format
    except ConfigError:
        # Reported by the command that actually needs the config.
        return OutputFormat.AUTO
    try:
        return OutputFormat(stored)
    except ValueError:
        return OutputFormat.AUTO


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)

    signal.signal(signal.SIGINT, _handler)


def _write_crash_log(exc: Exception) -> str:
    """Write a crash traceback to disk and return the log file path."""
    from tbaclient.config import get_data_dir

    logs_dir = get_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    log_path = logs_dir / f"crash-{timestamp}.log"
    log_path.write_text(traceback.format_exc())
    return str(log_path)


def main() -> None:
    """CLI entry point invoked by the ``tba`` console script.

    Unhandled :class:`~tbaclient.exceptions.TBAError` instances cause a
    clean exit with the error's ``exit_code``. All other exceptions produce
    a crash log and a generic failure exit.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)
    except Exception as exc:
        from tbaclient.exceptions import TBAError
        from tbaclient.output import error

        if isinstance(exc, TBAError):
            error(str(exc))
            sys.exit(exc.exit_code)
        else:
            log_path = _write_crash_log(exc)
            error(f"Unexpected error. Debug log: {log_path}")
            sys.exit(EXIT_GENERIC_FAILURE)
