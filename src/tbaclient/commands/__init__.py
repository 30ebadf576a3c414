"""Built-in CLI sub-commands for tbaclient.

This package groups the Typer sub-command modules that form the ``tba``
command tree:

* :mod:`~tbaclient.commands.teams` -- team info, media, history and
  per-event results.
* :mod:`~tbaclient.commands.events` -- event info, teams, matches,
  statistics, rankings and awards.
* :mod:`~tbaclient.commands.matches` -- single match lookup.
* :mod:`~tbaclient.commands.districts` -- district events, rankings and
  teams.
* :mod:`~tbaclient.commands.config` -- view and modify global settings.

The API command groups share :func:`~tbaclient.commands.common.show`, which
builds a :class:`~tbaclient.api.TBA` client from the resolved configuration
and prints the result in the active output format.
"""
