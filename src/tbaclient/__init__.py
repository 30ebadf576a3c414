"""tbaclient -- Python bindings for The Blue Alliance API v2.

The Blue Alliance publishes FIRST Robotics Competition data: teams, events,
matches, awards, rankings and districts. This package exposes one method per
API endpoint, identifies the caller with the ``X-TBA-App-Id`` header, and
caches every parsed response for the lifetime of the client.

Typical use::

    from tbaclient import TBA

    tba = TBA("frc3128", "scouting-app", "1.0")
    tba.get_team("frc3128")["rookie_year"]

Modules:
    api: :class:`TBA` and :class:`AsyncTBA` endpoint bindings.
    endpoints: Resource path templates.
    client: Sync and async resource fetchers on top of httpx.
    cache: The URL-keyed response cache.
    models: Pydantic models for identity and configuration.
    exceptions: Exception hierarchy with exit-code mapping.
    app: The ``tba`` command-line interface.
"""

__version__ = "0.3.0"

from tbaclient.api import TBA, AsyncTBA  # noqa: E402
from tbaclient.models import AppIdentity, CacheConfig, RequestConfig  # noqa: E402

__all__ = ["TBA", "AsyncTBA", "AppIdentity", "CacheConfig", "RequestConfig", "__version__"]
