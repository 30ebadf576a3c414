"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~tbaclient.exceptions.TBAError` subclass.
Shell scripts wrapping the ``tba`` command can inspect the exit code to
tell a missing team apart from an unreachable server without parsing stderr.

Example::

    $ tba team info frc99999
    $ echo $?
    4   # EXIT_NOT_FOUND -- the API has no such team
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments or missing required parameters."""

EXIT_AUTH_FAILURE = 3
"""The API rejected the application identification (HTTP 401 / 403)."""

EXIT_NOT_FOUND = 4
"""The requested resource was not found (HTTP 404)."""

EXIT_API_ERROR = 5
"""The remote API answered with an error status (any other 4xx or 5xx)."""

EXIT_CONNECTION_ERROR = 6
"""A network-level error occurred (timeout, DNS failure, connection refused)."""

EXIT_PARSE_ERROR = 7
"""The API response body was not valid JSON."""
