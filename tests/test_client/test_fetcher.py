"""Tests for the synchronous resource fetcher."""

from __future__ import annotations

import httpx
import pytest

from tbaclient.cache import ResponseCache
from tbaclient.client.fetcher import ResourceFetcher
from tbaclient.exceptions import (
    APIError,
    AuthError,
    ConnectionError_,
    InvalidUsageError,
    NotFoundError,
    ResponseParseError,
    ServerError,
)
from tbaclient.models import AppIdentity, RequestConfig

BASE = "https://www.thebluealliance.com/api/v2/"


def _fetcher(identity: AppIdentity, server, **kwargs) -> ResourceFetcher:
    return ResourceFetcher(identity, transport=server.transport, **kwargs)


# ---------------------------------------------------------------------------
# Context manager / lifecycle
# ---------------------------------------------------------------------------


class TestLifecycle:
    def test_client_opened_lazily(self, identity, server) -> None:
        server.add("team/frc3128", json={"key": "frc3128"})
        fetcher = _fetcher(identity, server)
        assert fetcher._client is None
        fetcher.fetch(BASE + "team/frc3128")
        assert fetcher._client is not None
        fetcher.close()
        assert fetcher._client is None

    def test_context_manager_opens_and_closes(self, identity, server) -> None:
        with _fetcher(identity, server) as fetcher:
            assert fetcher._client is not None
        assert fetcher._client is None

    def test_cache_survives_close(self, identity, server) -> None:
        server.add("team/frc3128", json={"key": "frc3128"})
        fetcher = _fetcher(identity, server)
        fetcher.fetch(BASE + "team/frc3128")
        fetcher.close()
        assert fetcher.fetch(BASE + "team/frc3128") == {"key": "frc3128"}
        assert len(server.requests) == 1

    def test_defaults(self, identity) -> None:
        fetcher = ResourceFetcher(identity)
        assert fetcher.config == RequestConfig()
        assert fetcher.config.timeout is None
        assert len(fetcher.cache) == 0


# ---------------------------------------------------------------------------
# Request shape
# ---------------------------------------------------------------------------


class TestRequest:
    def test_sends_identification_header(self, identity, server) -> None:
        server.add("team/frc3128", json={})
        with _fetcher(identity, server) as fetcher:
            fetcher.fetch(BASE + "team/frc3128")

        request = server.requests[0]
        assert request.method == "GET"
        assert request.headers["X-TBA-App-Id"] == "frc3128:scouting:1.0"

    def test_header_is_literal_concatenation(self, server) -> None:
        identity = AppIdentity(organization="a:b", app_identifier="", version="v 2")
        server.add("teams/1", json=[])
        with _fetcher(identity, server) as fetcher:
            fetcher.fetch(BASE + "teams/1")
        assert server.requests[0].headers["X-TBA-App-Id"] == "a:b::v 2"

    def test_no_request_body(self, identity, server) -> None:
        server.add("teams/1", json=[])
        with _fetcher(identity, server) as fetcher:
            fetcher.fetch(BASE + "teams/1")
        assert server.requests[0].content == b""

    def test_plain_http_url(self, identity, server) -> None:
        server.add("teams/1", json=[])
        with _fetcher(identity, server) as fetcher:
            fetcher.fetch("http://localhost:8080/api/v2/teams/1")
        assert server.requests[0].url.scheme == "http"
        assert server.requests[0].url.port == 8080


# ---------------------------------------------------------------------------
# Caching
# ---------------------------------------------------------------------------


class TestCaching:
    def test_second_fetch_served_from_cache(self, identity, server) -> None:
        server.add("team/frc3128", json={"rookie_year": 2010})
        with _fetcher(identity, server) as fetcher:
            first = fetcher.fetch(BASE + "team/frc3128")
            second = fetcher.fetch(BASE + "team/frc3128")

        assert first == second == {"rookie_year": 2010}
        assert len(server.requests) == 1

    def test_distinct_urls_fetched_separately(self, identity, server) -> None:
        server.add("team/frc3128", json={"team_number": 3128})
        server.add("team/frc254", json={"team_number": 254})
        with _fetcher(identity, server) as fetcher:
            fetcher.fetch(BASE + "team/frc3128")
            fetcher.fetch(BASE + "team/frc254")
        assert server.paths == ["team/frc3128", "team/frc254"]

    def test_parsed_body_stored_under_url(self, identity, server) -> None:
        server.add("event/2015casd/matches", json=[{"key": "2015casd_f1m1"}])
        cache = ResponseCache()
        with _fetcher(identity, server, cache=cache) as fetcher:
            fetcher.fetch(BASE + "event/2015casd/matches")
        assert cache.get(BASE + "event/2015casd/matches") == [{"key": "2015casd_f1m1"}]

    def test_prefilled_cache_skips_network(self, identity, server) -> None:
        cache = ResponseCache()
        cache.set(BASE + "team/frc1", {"nickname": "cached"})
        with _fetcher(identity, server, cache=cache) as fetcher:
            assert fetcher.fetch(BASE + "team/frc1") == {"nickname": "cached"}
        assert server.requests == []


# ---------------------------------------------------------------------------
# Status handling
# ---------------------------------------------------------------------------


class TestErrorStatuses:
    def test_404_raises_and_is_not_cached(self, identity, server) -> None:
        with _fetcher(identity, server) as fetcher:
            with pytest.raises(NotFoundError) as exc_info:
                fetcher.fetch(BASE + "team/frc0")
            assert not fetcher.cache.exists(BASE + "team/frc0")

            # A retry goes back to the network and can now succeed.
            server.add("team/frc0", json={"key": "frc0"})
            assert fetcher.fetch(BASE + "team/frc0") == {"key": "frc0"}

        assert len(server.requests) == 2
        err = exc_info.value
        assert err.status_code == 404
        assert err.url == BASE + "team/frc0"
        assert "team/frc0 not found" in str(err)

    @pytest.mark.parametrize("status", [401, 403])
    def test_auth_errors(self, identity, server, status: int) -> None:
        server.add("team/frc1", json={"Error": "X-TBA-App-Id required"}, status_code=status)
        with _fetcher(identity, server) as fetcher:
            with pytest.raises(AuthError) as exc_info:
                fetcher.fetch(BASE + "team/frc1")
        assert exc_info.value.status_code == status

    @pytest.mark.parametrize("status", [500, 502, 503])
    def test_server_errors_not_retried(self, identity, server, status: int) -> None:
        server.add("team/frc1", content=b"upstream down", status_code=status)
        with _fetcher(identity, server) as fetcher:
            with pytest.raises(ServerError):
                fetcher.fetch(BASE + "team/frc1")
        assert len(server.requests) == 1

    def test_other_client_error(self, identity, server) -> None:
        server.add("team/frc1", json={}, status_code=418)
        with _fetcher(identity, server) as fetcher:
            with pytest.raises(APIError) as exc_info:
                fetcher.fetch(BASE + "team/frc1")
        assert type(exc_info.value) is APIError
        assert exc_info.value.status_code == 418

    def test_redirect_status_treated_as_success(self, identity, server) -> None:
        server.add("team/frc1", json={"moved": True}, status_code=304)
        with _fetcher(identity, server) as fetcher:
            assert fetcher.fetch(BASE + "team/frc1") == {"moved": True}
            assert fetcher.cache.exists(BASE + "team/frc1")

    def test_redirect_not_followed_when_disabled(self, identity, server) -> None:
        server.add(
            "team/frc1",
            json={"redirect": True},
            status_code=302,
            headers={"Location": BASE + "team/frc2"},
        )
        config = RequestConfig(follow_redirects=False)
        with _fetcher(identity, server, config=config) as fetcher:
            assert fetcher.fetch(BASE + "team/frc1") == {"redirect": True}
        assert server.paths == ["team/frc1"]

    def test_redirect_followed_by_default(self, identity, server) -> None:
        server.add("team/frc1", status_code=301, content=b"", headers={"Location": BASE + "team/frc2"})
        server.add("team/frc2", json={"key": "frc2"})
        with _fetcher(identity, server) as fetcher:
            assert fetcher.fetch(BASE + "team/frc1") == {"key": "frc2"}
            assert fetcher.cache.exists(BASE + "team/frc1")
        assert server.paths == ["team/frc1", "team/frc2"]


class TestBodyAndTransportErrors:
    def test_malformed_json_raises_parse_error(self, identity, server) -> None:
        server.add("team/frc1", content=b"<html>oops</html>")
        with _fetcher(identity, server) as fetcher:
            with pytest.raises(ResponseParseError):
                fetcher.fetch(BASE + "team/frc1")
            assert not fetcher.cache.exists(BASE + "team/frc1")

    def test_connection_error(self, identity) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        fetcher = ResourceFetcher(identity, transport=httpx.MockTransport(handler))
        with pytest.raises(ConnectionError_, match="connection refused"):
            fetcher.fetch(BASE + "team/frc1")
        assert len(fetcher.cache) == 0

    def test_timeout_maps_to_connection_error(self, identity) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        fetcher = ResourceFetcher(identity, transport=httpx.MockTransport(handler))
        with pytest.raises(ConnectionError_):
            fetcher.fetch(BASE + "team/frc1")

    def test_unsupported_scheme(self, identity) -> None:
        fetcher = ResourceFetcher(identity)
        with pytest.raises((ConnectionError_, InvalidUsageError)):
            fetcher.fetch("ftp://example.com/api/v2/team/frc1")


# ---------------------------------------------------------------------------
# Diagnostics
# ---------------------------------------------------------------------------


class TestDebugOutput:
    def test_cache_hit_and_miss_logged(self, identity, server, verbose_output, capsys) -> None:
        server.add("team/frc3128", json={})
        with _fetcher(identity, server) as fetcher:
            fetcher.fetch(BASE + "team/frc3128")
            fetcher.fetch(BASE + "team/frc3128")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert f"[debug] Cache miss: GET {BASE}team/frc3128" in captured.err
        assert "[debug] HTTP 200 OK" in captured.err
        assert f"[debug] Cache hit: {BASE}team/frc3128" in captured.err

    def test_silent_by_default(self, identity, server, capsys) -> None:
        server.add("team/frc3128", json={})
        with _fetcher(identity, server) as fetcher:
            fetcher.fetch(BASE + "team/frc3128")
        captured = capsys.readouterr()
        assert captured.err == ""
