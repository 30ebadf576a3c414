"""Endpoint bindings for The Blue Alliance API v2.

:class:`TBA` is the blocking client: one method per endpoint, each joining
the client's base URL with a path from :mod:`tbaclient.endpoints` and
delegating to a :class:`~tbaclient.client.ResourceFetcher`. :class:`AsyncTBA`
exposes the same methods as coroutines on top of
:class:`~tbaclient.client.AsyncResourceFetcher`.

Every response is parsed JSON and cached for the lifetime of the client, so
asking twice for the same resource costs one request.

Example::

    from tbaclient import TBA

    tba = TBA("frc3128", "scouting-app", "1.0")
    team = tba.get_team("frc3128")
    print(team["rookie_year"])
"""

from __future__ import annotations

from typing import Any, Optional, Union

import httpx

from tbaclient import endpoints
from tbaclient.cache import ResponseCache
from tbaclient.client import AsyncResourceFetcher, ResourceFetcher
from tbaclient.endpoints import Year
from tbaclient.models import AppIdentity, CacheConfig, RequestConfig


def _build_cache(
    cache: Optional[ResponseCache], cache_config: Optional[CacheConfig]
) -> ResponseCache:
    if cache is not None:
        return cache
    return ResponseCache(cache_config)


class TBA:
    """Blocking client for The Blue Alliance API.

    Args:
        organization: The organization or person responsible for the requests.
        app_identifier: An identifier for the app or experiment being run.
        version: The version of the app or experiment being run.
        config: Request settings; the base URL lives here and cannot change
            after construction.
        cache_config: Settings for the cache created for this client.
            Ignored when *cache* is given.
        cache: An existing cache to use instead of a fresh one.
        transport: Optional httpx transport (tests use
            :class:`httpx.MockTransport`).
    """

    def __init__(
        self,
        organization: str,
        app_identifier: str,
        version: str,
        *,
        config: Optional[RequestConfig] = None,
        cache_config: Optional[CacheConfig] = None,
        cache: Optional[ResponseCache] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        identity = AppIdentity(
            organization=organization, app_identifier=app_identifier, version=version
        )
        self._fetcher = ResourceFetcher(
            identity,
            config=config,
            cache=_build_cache(cache, cache_config),
            transport=transport,
        )

    @classmethod
    def from_identity(cls, identity: AppIdentity, **kwargs: Any) -> TBA:
        """Build a client from an :class:`~tbaclient.models.AppIdentity`."""
        return cls(identity.organization, identity.app_identifier, identity.version, **kwargs)

    @property
    def identity(self) -> AppIdentity:
        return self._fetcher.identity

    @property
    def base_url(self) -> str:
        return self._fetcher.config.base_url

    @property
    def cache(self) -> ResponseCache:
        return self._fetcher.cache

    def __enter__(self) -> TBA:
        self._fetcher.__enter__()
        return self

    def __exit__(self, *args: object) -> None:
        self._fetcher.__exit__(*args)

    def close(self) -> None:
        """Release the underlying HTTP connection pool."""
        self._fetcher.close()

    def url_for(self, path: str) -> str:
        """Join the base URL and a resource path by plain concatenation."""
        return f"{self.base_url}{path}"

    def get_api_resource(self, url: str) -> Any:
        """Fetch a fully-formed URL through the cache. Used by every endpoint method."""
        return self._fetcher.fetch(url)

    def _get(self, path: str) -> Any:
        return self.get_api_resource(self.url_for(path))

    # ------------------------------------------------------------------ #
    # Teams
    # ------------------------------------------------------------------ #

    def get_team_list(self, page: Union[int, str] = 1) -> list[dict[str, Any]]:
        """Get a page of teams.

        Each page holds the teams whose number is between ``500 * page`` and
        ``500 * page + 499``, inclusive.

        Example::

            teams = tba.get_team_list(2)
        """
        return self._get(endpoints.team_list(page))

    def get_team(self, team_key: str) -> dict[str, Any]:
        """Get information on a single team.

        Args:
            team_key: Team number prefixed with the program tag, e.g. ``"frc3128"``.

        Example::

            tba.get_team("frc3128")["rookie_year"]
            # => 2010
        """
        return self._get(endpoints.team(team_key))

    def get_team_years_participated(self, team_key: str) -> list[int]:
        """Get the years a team has competed in."""
        return self._get(endpoints.team_years_participated(team_key))

    def get_team_media(self, team_key: str, year: Optional[Year] = None) -> list[dict[str, Any]]:
        """Get photo and video links for a team.

        Args:
            team_key: Team key, e.g. ``"frc254"``.
            year: Season to query. When omitted the API answers for the
                current season.
        """
        return self._get(endpoints.team_media(team_key, year))

    def get_team_history_events(self, team_key: str) -> list[dict[str, Any]]:
        """Get every event a team has attended."""
        return self._get(endpoints.team_history_events(team_key))

    def get_team_history_awards(self, team_key: str) -> list[dict[str, Any]]:
        """Get every award a team has received."""
        return self._get(endpoints.team_history_awards(team_key))

    def get_team_history_robots(self, team_key: str) -> list[dict[str, Any]]:
        return self._get(endpoints.team_history_robots(team_key))

    def get_team_history_districts(self, team_key: str) -> dict[str, str]:
        """Get the district a team belonged to, keyed by year (``{"2016": "2016ne"}``)."""
        return self._get(endpoints.team_history_districts(team_key))

    def get_team_event_list(self, team_key: str, year: Year) -> list[dict[str, Any]]:
        """Get the events a team attended during *year*."""
        return self._get(endpoints.team_event_list(team_key, year))

    def get_team_event_awards(self, team_key: str, event_key: str) -> list[dict[str, Any]]:
        """Get the awards a team won at one event."""
        return self._get(endpoints.team_event_awards(team_key, event_key))

    def get_team_event_matches(self, team_key: str, event_key: str) -> list[dict[str, Any]]:
        """Get the matches a team played at one event."""
        return self._get(endpoints.team_event_matches(team_key, event_key))

    # ------------------------------------------------------------------ #
    # Events
    # ------------------------------------------------------------------ #

    def get_event_list(self, year: Year) -> list[dict[str, Any]]:
        return self._get(endpoints.event_list(year))

    def get_event(self, event_key: str) -> dict[str, Any]:
        """Get information on a single event.

        Args:
            event_key: Year followed by the FIRST event code, e.g. ``"2016casd"``.
        """
        return self._get(endpoints.event(event_key))

    def get_event_teams(self, event_key: str) -> list[dict[str, Any]]:
        return self._get(endpoints.event_teams(event_key))

    def get_event_matches(self, event_key: str) -> list[dict[str, Any]]:
        """Get every match played at an event.

        Example::

            tba.get_event_matches("2015casd")[0]["key"]
            # => '2015casd_f1m1'
        """
        return self._get(endpoints.event_matches(event_key))

    def get_event_stats(self, event_key: str) -> dict[str, Any]:
        """Get OPR / DPR / CCWM statistics, keyed by stat then team number."""
        return self._get(endpoints.event_stats(event_key))

    def get_event_rankings(self, event_key: str) -> list[list[Any]]:
        """Get the ranking table; the first row holds the column headers."""
        return self._get(endpoints.event_rankings(event_key))

    def get_event_awards(self, event_key: str) -> list[dict[str, Any]]:
        return self._get(endpoints.event_awards(event_key))

    def get_event_district_points(self, event_key: str) -> dict[str, Any]:
        """Get the district points each team earned at an event."""
        return self._get(endpoints.event_district_points(event_key))

    # ------------------------------------------------------------------ #
    # Matches
    # ------------------------------------------------------------------ #

    def get_match(self, match_key: str) -> dict[str, Any]:
        """Get a single match.

        Args:
            match_key: Event key, competition level and number, e.g.
                ``"2014cmp_f1m1"``.
        """
        return self._get(endpoints.match(match_key))

    # ------------------------------------------------------------------ #
    # Districts
    # ------------------------------------------------------------------ #

    def get_district_list(self, year: Year) -> list[dict[str, Any]]:
        """Get the districts active during *year*."""
        return self._get(endpoints.district_list(year))

    def get_district_events(self, district_key: str, year: Year) -> list[dict[str, Any]]:
        """Get the events of a district.

        Args:
            district_key: District letter code, e.g. ``"ne"``, ``"in"``, ``"mar"``.
            year: Season to query.
        """
        return self._get(endpoints.district_events(district_key, year))

    def get_district_rankings(self, district_key: str, year: Year) -> list[dict[str, Any]]:
        return self._get(endpoints.district_rankings(district_key, year))

    def get_district_teams(self, district_key: str, year: Year) -> list[dict[str, Any]]:
        return self._get(endpoints.district_teams(district_key, year))


class AsyncTBA:
    """Non-blocking client for The Blue Alliance API.

    Takes the same arguments as :class:`TBA` (with an async transport) and
    exposes the same endpoint methods as coroutines.

    Example::

        async with AsyncTBA("frc3128", "scouting-app", "1.0") as tba:
            matches = await tba.get_event_matches("2015casd")
    """

    def __init__(
        self,
        organization: str,
        app_identifier: str,
        version: str,
        *,
        config: Optional[RequestConfig] = None,
        cache_config: Optional[CacheConfig] = None,
        cache: Optional[ResponseCache] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        identity = AppIdentity(
            organization=organization, app_identifier=app_identifier, version=version
        )
        self._fetcher = AsyncResourceFetcher(
            identity,
            config=config,
            cache=_build_cache(cache, cache_config),
            transport=transport,
        )

    @classmethod
    def from_identity(cls, identity: AppIdentity, **kwargs: Any) -> AsyncTBA:
        return cls(identity.organization, identity.app_identifier, identity.version, **kwargs)

    @property
    def identity(self) -> AppIdentity:
        return self._fetcher.identity

    @property
    def base_url(self) -> str:
        return self._fetcher.config.base_url

    @property
    def cache(self) -> ResponseCache:
        return self._fetcher.cache

    async def __aenter__(self) -> AsyncTBA:
        await self._fetcher.__aenter__()
        return self

    async def __aexit__(self, *args: object) -> None:
        await self._fetcher.__aexit__(*args)

    async def aclose(self) -> None:
        await self._fetcher.aclose()

    def url_for(self, path: str) -> str:
        return f"{self.base_url}{path}"

    async def get_api_resource(self, url: str) -> Any:
        return await self._fetcher.fetch(url)

    async def _get(self, path: str) -> Any:
        return await self.get_api_resource(self.url_for(path))

    # --- Teams ---

    async def get_team_list(self, page: Union[int, str] = 1) -> list[dict[str, Any]]:
        return await self._get(endpoints.team_list(page))

    async def get_team(self, team_key: str) -> dict[str, Any]:
        return await self._get(endpoints.team(team_key))

    async def get_team_years_participated(self, team_key: str) -> list[int]:
        return await self._get(endpoints.team_years_participated(team_key))

    async def get_team_media(
        self, team_key: str, year: Optional[Year] = None
    ) -> list[dict[str, Any]]:
        return await self._get(endpoints.team_media(team_key, year))

    async def get_team_history_events(self, team_key: str) -> list[dict[str, Any]]:
        return await self._get(endpoints.team_history_events(team_key))

    async def get_team_history_awards(self, team_key: str) -> list[dict[str, Any]]:
        return await self._get(endpoints.team_history_awards(team_key))

    async def get_team_history_robots(self, team_key: str) -> list[dict[str, Any]]:
        return await self._get(endpoints.team_history_robots(team_key))

    async def get_team_history_districts(self, team_key: str) -> dict[str, str]:
        return await self._get(endpoints.team_history_districts(team_key))

    async def get_team_event_list(self, team_key: str, year: Year) -> list[dict[str, Any]]:
        return await self._get(endpoints.team_event_list(team_key, year))

    async def get_team_event_awards(
        self, team_key: str, event_key: str
    ) -> list[dict[str, Any]]:
        return await self._get(endpoints.team_event_awards(team_key, event_key))

    async def get_team_event_matches(
        self, team_key: str, event_key: str
    ) -> list[dict[str, Any]]:
        return await self._get(endpoints.team_event_matches(team_key, event_key))

    # --- Events ---

    async def get_event_list(self, year: Year) -> list[dict[str, Any]]:
        return await self._get(endpoints.event_list(year))

    async def get_event(self, event_key: str) -> dict[str, Any]:
        return await self._get(endpoints.event(event_key))

    async def get_event_teams(self, event_key: str) -> list[dict[str, Any]]:
        return await self._get(endpoints.event_teams(event_key))

    async def get_event_matches(self, event_key: str) -> list[dict[str, Any]]:
        return await self._get(endpoints.event_matches(event_key))

    async def get_event_stats(self, event_key: str) -> dict[str, Any]:
        return await self._get(endpoints.event_stats(event_key))

    async def get_event_rankings(self, event_key: str) -> list[list[Any]]:
        return await self._get(endpoints.event_rankings(event_key))

    async def get_event_awards(self, event_key: str) -> list[dict[str, Any]]:
        return await self._get(endpoints.event_awards(event_key))

    async def get_event_district_points(self, event_key: str) -> dict[str, Any]:
        return await self._get(endpoints.event_district_points(event_key))

    # --- Matches ---

    async def get_match(self, match_key: str) -> dict[str, Any]:
        return await self._get(endpoints.match(match_key))

    # --- Districts ---

    async def get_district_list(self, year: Year) -> list[dict[str, Any]]:
        return await self._get(endpoints.district_list(year))

    async def get_district_events(self, district_key: str, year: Year) -> list[dict[str, Any]]:
        return await self._get(endpoints.district_events(district_key, year))

    async def get_district_rankings(
        self, district_key: str, year: Year
    ) -> list[dict[str, Any]]:
        return await self._get(endpoints.district_rankings(district_key, year))

    async def get_district_teams(self, district_key: str, year: Year) -> list[dict[str, Any]]:
        return await self._get(endpoints.district_teams(district_key, year))
