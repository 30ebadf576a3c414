"""Exception hierarchy for tbaclient.

All exceptions inherit from :class:`TBAError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`tbaclient.exit_codes`.
Library callers catch :class:`TBAError` (or a narrower subclass); the
``tba`` entry point in :func:`tbaclient.app.main` catches it and exits with
the appropriate code, while unexpected exceptions produce a crash log and
exit with :data:`EXIT_GENERIC_FAILURE`.

Subclass hierarchy::

    TBAError (exit 1)
    +-- InvalidUsageError    (exit 2)
    +-- APIError             (exit 5)
    |   +-- AuthError        (exit 3)
    |   +-- NotFoundError    (exit 4)
    |   +-- ServerError      (exit 5)
    +-- ConnectionError_     (exit 6)
    +-- ResponseParseError   (exit 7)
    +-- ConfigError          (exit 1)
"""

from __future__ import annotations

from tbaclient.exit_codes import (
    EXIT_API_ERROR,
    EXIT_AUTH_FAILURE,
    EXIT_CONNECTION_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_NOT_FOUND,
    EXIT_PARSE_ERROR,
)


class TBAError(Exception):
    """Base exception for all tbaclient errors.

    Every subclass sets a class-level ``exit_code`` corresponding to one of
    the constants in :mod:`tbaclient.exit_codes`.

    Args:
        message: Human-readable error description.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(TBAError):
    """Raised for invalid CLI arguments or missing required parameters."""

    exit_code = EXIT_INVALID_USAGE


class APIError(TBAError):
    """Raised when the API answers with a status that is neither 2xx nor 3xx.

    Args:
        message: Human-readable error description.
        status_code: The HTTP status code returned by the server.
        reason: The HTTP reason phrase (``"Not Found"``, ...).
        url: The URL that was requested.
    """

    exit_code = EXIT_API_ERROR

    def __init__(
        self,
        message: str,
        status_code: int,
        reason: str = "",
        url: str = "",
    ):
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason
        self.url = url


class AuthError(APIError):
    """Raised on HTTP 401 / 403, usually a missing or rejected ``X-TBA-App-Id``."""

    exit_code = EXIT_AUTH_FAILURE


class NotFoundError(APIError):
    """Raised when the API returns HTTP 404 (unknown team, event, match...)."""

    exit_code = EXIT_NOT_FOUND


class ServerError(APIError):
    """Raised when the API returns an HTTP 5xx server error."""

    exit_code = EXIT_API_ERROR


class ConnectionError_(TBAError):
    """Raised on network-level failures (timeout, DNS resolution, connection refused).

    Named with a trailing underscore to avoid shadowing the built-in
    ``ConnectionError``.
    """

    exit_code = EXIT_CONNECTION_ERROR


class ResponseParseError(TBAError):
    """Raised when a successful response body cannot be decoded as JSON."""

    exit_code = EXIT_PARSE_ERROR


class ConfigError(TBAError):
    """Raised for configuration problems (missing identity, invalid JSON config files)."""

    exit_code = EXIT_GENERIC_FAILURE
