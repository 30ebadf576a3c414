"""Helpers shared by the API command groups.

:func:`open_client` turns the global CLI options stored in ``ctx.obj`` into
a configured :class:`~tbaclient.api.TBA` client, and :func:`show` runs one
endpoint call and renders the result. Library errors are reported on stderr
and converted into the matching process exit code.
"""

from __future__ import annotations

from typing import Any, Callable

import typer

from tbaclient.api import TBA
from tbaclient.exceptions import ConfigError, TBAError
from tbaclient.output import error, format_response, suggest


def open_client(ctx: typer.Context) -> TBA:
    """Build a :class:`TBA` client from the resolved configuration.

    Raises:
        ConfigError: If no app identity can be resolved or a config file
            is invalid.
    """
    from tbaclient.config import require_identity, resolve_config

    obj: dict[str, Any] = ctx.obj or {}
    config = resolve_config(
        cli_organization=obj.get("organization"),
        cli_app_identifier=obj.get("app_identifier"),
        cli_version=obj.get("app_version"),
        cli_base_url=obj.get("base_url"),
    )
    identity = require_identity(config)
    return TBA.from_identity(
        identity,
        config=config.request,
        cache_config=config.cache,
        transport=obj.get("transport"),
    )


def show(ctx: typer.Context, call: Callable[[TBA], Any]) -> None:
    """Run *call* against a fresh client and print its result to stdout."""
    try:
        with open_client(ctx) as tba:
            data = call(tba)
    except ConfigError as exc:
        error(str(exc))
        suggest("tba config identity <organization> <app-id> <version>")
        raise typer.Exit(code=exc.exit_code) from None
    except TBAError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    format_response(data)
