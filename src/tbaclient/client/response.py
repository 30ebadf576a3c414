"""Response interpretation shared by the sync and async fetchers.

After an HTTP round-trip completes, the fetchers hand the
:class:`httpx.Response` to this module:

* :func:`raise_for_status` turns any status that is neither success (2xx)
  nor redirection (3xx) into a typed :class:`~tbaclient.exceptions.APIError`.
* :func:`parse_response_body` decodes the JSON payload, raising
  :class:`~tbaclient.exceptions.ResponseParseError` when the body is not
  valid JSON.
"""

from __future__ import annotations

from typing import Any

import httpx

from tbaclient.exceptions import (
    APIError,
    AuthError,
    NotFoundError,
    ResponseParseError,
    ServerError,
)


def is_success(status_code: int) -> bool:
    """Return ``True`` for success (2xx) and redirection (3xx) statuses."""
    return 200 <= status_code < 400


def raise_for_status(response: httpx.Response, url: str) -> None:
    """Raise a typed exception unless *response* is a success or redirect.

    Args:
        response: The response to inspect.
        url: The URL that was requested, recorded on the exception.

    Raises:
        AuthError: On 401 / 403.
        NotFoundError: On 404.
        ServerError: On 5xx.
        APIError: On any other non-success, non-redirect status.
    """
    status = response.status_code
    if is_success(status):
        return

    reason = response.reason_phrase or ""
    detail = _error_detail(response)
    prefix = f"HTTP {status} {reason}".rstrip()
    message = f"{prefix}: {detail}" if detail else prefix
    message = f"{message} ({url})"

    exc_type: type[APIError]
    if status in (401, 403):
        exc_type = AuthError
    elif status == 404:
        exc_type = NotFoundError
    elif status >= 500:
        exc_type = ServerError
    else:
        exc_type = APIError
    raise exc_type(message, status_code=status, reason=reason, url=url)


def parse_response_body(response: httpx.Response, url: str) -> Any:
    """Decode the JSON body of a successful response.

    Args:
        response: A response that passed :func:`raise_for_status`.
        url: The URL that was requested, used in the error message.

    Returns:
        The decoded payload (``dict``, ``list``, or scalar).

    Raises:
        ResponseParseError: If the body is empty or not valid JSON.
    """
    try:
        return response.json()
    except ValueError as exc:
        raise ResponseParseError(f"Invalid JSON in response from {url}: {exc}") from exc


def _error_detail(response: httpx.Response) -> str:
    """Best-effort extraction of an error message from the response body."""
    try:
        detail = response.json()
    except ValueError:
        return response.text[:200] if response.text else ""

    if isinstance(detail, dict):
        for key in ("message", "error", "Error", "Errors", "detail"):
            if detail.get(key):
                return str(detail[key])
        # The API reports some errors as {"404": "frc0 not found"}.
        status_key = str(response.status_code)
        if detail.get(status_key):
            return str(detail[status_key])
        return ""
    return str(detail)
