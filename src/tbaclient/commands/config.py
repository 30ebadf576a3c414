"""Config commands -- view and modify global configuration.

Provides the ``tba config`` sub-command group for reading, updating, and
resetting the user's global configuration file
(:class:`~tbaclient.models.GlobalConfig`). Settings are persisted in the
tbaclient config directory and control the app identity, base URL,
request timeout, cache limits and default output format.
"""

from __future__ import annotations

from typing import Any

import typer

from tbaclient.output import error, format_response, info, success


config_app = typer.Typer(no_args_is_help=True)


@config_app.command("show")
def config_show() -> None:
    """Show the stored configuration.

    Example::

        tba config show
        tba --json config show
    """
    from tbaclient.config import get_config_dir, load_global_config

    config = load_global_config()
    info(f"Config directory: {get_config_dir()}")
    format_response(config.model_dump(mode="json"))


@config_app.command("path")
def config_path() -> None:
    """Print the path of the global config file."""
    from tbaclient.config import global_config_path
    from tbaclient.output import print_data

    print_data(str(global_config_path()))


@config_app.command("identity")
def config_identity(
    organization: str = typer.Argument(help="Organization or person making the requests."),
    app_identifier: str = typer.Argument(help="Identifier of the app or experiment."),
    version: str = typer.Argument(help="Version of the app or experiment."),
) -> None:
    """Store the identity sent in the X-TBA-App-Id header.

    Example::

        tba config identity frc3128 scouting 1.0
    """
    from tbaclient.config import load_global_config, save_global_config
    from tbaclient.models import AppIdentity

    config = load_global_config()
    identity = AppIdentity(
        organization=organization, app_identifier=app_identifier, version=version
    )
    save_global_config(config.model_copy(update={"identity": identity}))
    success(f"Identity set to {identity.header_value}")


@config_app.command("set")
def config_set(
    key: str = typer.Argument(
        help="Config key (dot notation, e.g. 'request.timeout')."
    ),
    value: str = typer.Argument(help="Value to set; 'none' clears optional settings."),
) -> None:
    """Set a configuration value.

    Uses dot notation for nested keys. The value is validated against
    :class:`~tbaclient.models.GlobalConfig`, which coerces strings to the
    field type; ``none`` (or ``null``) clears optional values such as
    ``cache.max_entries``.

    Raises:
        typer.Exit: With code 2 if the key path is invalid or validation fails.

    Example::

        tba config set request.timeout 10
        tba config set cache.max_entries 500
        tba config set output.format json
    """
    from pydantic import ValidationError

    from tbaclient.config import load_global_config, save_global_config
    from tbaclient.models import GlobalConfig

    config = load_global_config()
    data = config.model_dump(mode="json")

    keys = key.split(".")
    target = data
    for k in keys[:-1]:
        if k not in target or not isinstance(target[k], dict):
            error(f"Invalid config key: {key}")
            raise typer.Exit(code=2)
        target = target[k]

    final_key = keys[-1]
    if final_key not in target or isinstance(target[final_key], dict):
        error(f"Unknown config key: {key}")
        raise typer.Exit(code=2)

    coerced: Any = None if value.lower() in ("none", "null") else value
    target[final_key] = coerced

    try:
        new_config = GlobalConfig.model_validate(data)
    except ValidationError as exc:
        error(f"Validation error: {exc}")
        raise typer.Exit(code=2) from None

    save_global_config(new_config)
    stored = new_config.model_dump(mode="json")
    for k in keys:
        stored = stored[k]
    success(f"Set {key} = {stored}")


@config_app.command("reset")
def config_reset(ctx: typer.Context) -> None:
    """Reset configuration to defaults.

    Asks for confirmation unless ``--force`` is active.

    Example::

        tba config reset
        tba --force config reset
    """
    from tbaclient.config import save_global_config
    from tbaclient.models import GlobalConfig

    force = ctx.obj.get("force", False) if ctx.obj else False
    if not force:
        confirmed = typer.confirm("Reset all config to defaults?")
        if not confirmed:
            info("Cancelled.")
            raise typer.Exit()

    save_global_config(GlobalConfig())
    success("Configuration reset to defaults.")
