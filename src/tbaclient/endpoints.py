"""Resource paths for every supported TBA API v2 endpoint.

Each function maps typed parameters to the path that is appended to the
client's base URL. Parameters are substituted verbatim with ``str()``; no
URL-encoding or validation is applied, so a key such as ``"frc3128"`` or
``"2015casd"`` lands in the path exactly as given.

See http://www.thebluealliance.com/apidocs for the endpoint reference.
"""

from __future__ import annotations

from typing import Optional, Union

Year = Union[int, str]


# --- Teams ---


def team_list(page: Union[int, str] = 1) -> str:
    """Teams paginated by number: page ``n`` holds teams ``500*n`` to ``500*n + 499``."""
    return f"teams/{page}"


def team(team_key: str) -> str:
    return f"team/{team_key}"


def team_years_participated(team_key: str) -> str:
    return f"team/{team_key}/years_participated"


def team_media(team_key: str, year: Optional[Year] = None) -> str:
    """Media for a team; without a year the API answers for the current season."""
    if year is None:
        return f"team/{team_key}/media"
    return f"team/{team_key}/{year}/media"


def team_history_events(team_key: str) -> str:
    return f"team/{team_key}/history/events"


def team_history_awards(team_key: str) -> str:
    return f"team/{team_key}/history/awards"


def team_history_robots(team_key: str) -> str:
    return f"team/{team_key}/history/robots"


def team_history_districts(team_key: str) -> str:
    return f"team/{team_key}/history/districts"


def team_event_list(team_key: str, year: Year) -> str:
    return f"team/{team_key}/{year}/events"


def team_event_awards(team_key: str, event_key: str) -> str:
    return f"team/{team_key}/event/{event_key}/awards"


def team_event_matches(team_key: str, event_key: str) -> str:
    return f"team/{team_key}/event/{event_key}/matches"


# --- Events ---


def event_list(year: Year) -> str:
    return f"events/{year}"


def event(event_key: str) -> str:
    return f"event/{event_key}"


def event_teams(event_key: str) -> str:
    return f"event/{event_key}/teams"


def event_matches(event_key: str) -> str:
    return f"event/{event_key}/matches"


def event_stats(event_key: str) -> str:
    return f"event/{event_key}/stats"


def event_rankings(event_key: str) -> str:
    return f"event/{event_key}/rankings"


def event_awards(event_key: str) -> str:
    return f"event/{event_key}/awards"


def event_district_points(event_key: str) -> str:
    return f"event/{event_key}/district_points"


# --- Matches ---


def match(match_key: str) -> str:
    return f"match/{match_key}"


# --- Districts ---


def district_list(year: Year) -> str:
    return f"districts/{year}"


def district_events(district_key: str, year: Year) -> str:
    return f"district/{district_key}/{year}/events"


def district_rankings(district_key: str, year: Year) -> str:
    return f"district/{district_key}/{year}/rankings"


def district_teams(district_key: str, year: Year) -> str:
    return f"district/{district_key}/{year}/teams"
