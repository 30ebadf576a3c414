"""Canonical Pydantic models shared across all tbaclient modules.

This is the single source of truth for configuration shapes in the project.
Every other module imports from here rather than defining its own models:

* :class:`AppIdentity` -- who is calling the API, rendered into the
  ``X-TBA-App-Id`` header.
* :class:`RequestConfig` -- where and how requests are sent (base URL,
  timeout, TLS verification, redirects).
* :class:`CacheConfig` -- the in-memory response cache knobs.
* :class:`OutputConfig` -- default CLI output format.
* :class:`GlobalConfig` -- the JSON document persisted in the user's config
  directory, grouping all of the above.

The per-client models are frozen: once a client is constructed its identity
and base URL cannot change.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BASE_URL = "https://www.thebluealliance.com/api/v2/"
"""Prefix every resource path is appended to."""

APP_ID_HEADER = "X-TBA-App-Id"
"""Name of the identification header sent with every request."""


class AppIdentity(BaseModel):
    """Identification of the application making requests.

    The three parts are joined with ``:`` into the ``X-TBA-App-Id`` header
    value. No validation is applied beyond their presence; numbers such as
    ``version=1.0`` are accepted and rendered with ``str()``.

    Example::

        AppIdentity(organization="frc3128", app_identifier="scouting", version="1.0")
    """

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    organization: str = Field(
        description="The organization or person responsible for the requests"
    )
    app_identifier: str = Field(description="An identifier for the app or experiment")
    version: str = Field(description="The version of the app or experiment")

    @property
    def header_value(self) -> str:
        """The ``organization:app_identifier:version`` header value."""
        return f"{self.organization}:{self.app_identifier}:{self.version}"


class RequestConfig(BaseModel):
    """HTTP request settings owned by a single client instance."""

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(
        default=DEFAULT_BASE_URL, description="Prefix for every resource path"
    )
    timeout: Optional[float] = Field(
        default=None, description="Request timeout in seconds (None waits forever)"
    )
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")
    follow_redirects: bool = Field(
        default=True, description="Follow 3xx responses to their target"
    )


class CacheConfig(BaseModel):
    """In-memory response cache settings.

    The defaults reproduce a plain unbounded, never-expiring map.
    ``max_entries`` and ``ttl_seconds`` are opt-in for long-running
    processes.
    """

    model_config = ConfigDict(frozen=True)

    enabled: bool = Field(default=True, description="Enable response caching")
    max_entries: Optional[int] = Field(
        default=None, ge=1, description="Maximum cached responses (None = unbounded)"
    )
    ttl_seconds: Optional[float] = Field(
        default=None, gt=0, description="Entry lifetime in seconds (None = forever)"
    )


class OutputConfig(BaseModel):
    """Default output settings for the ``tba`` command."""

    format: str = Field(
        default="auto", description="Default output format: auto, json, plain, rich"
    )


class GlobalConfig(BaseModel):
    """Top-level configuration stored in ``config.json``.

    Loaded by :func:`~tbaclient.config.load_global_config` and saved by
    :func:`~tbaclient.config.save_global_config`. Every section is optional
    so an empty file is valid.
    """

    identity: Optional[AppIdentity] = Field(
        default=None, description="Identity sent in the X-TBA-App-Id header"
    )
    request: RequestConfig = Field(default_factory=RequestConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
