"""Shared test fixtures for tbaclient.

Provides a fake TBA server backed by :class:`httpx.MockTransport`, an
isolated config environment, output-state management, and a CLI runner.
These fixtures are automatically discovered by pytest and available to
all test modules without explicit imports.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import httpx
import pytest

from tbaclient.models import AppIdentity
from tbaclient.output import OutputManager, reset_output, set_output


API_PREFIX = "/api/v2/"


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time. When CliRunner redirects those streams during a test
    the cached references become stale, so a fresh manager is created on
    next use.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Fake API server
# ---------------------------------------------------------------------------


class FakeTBAServer:
    """Serves canned responses keyed by resource path and records every request.

    Paths are registered relative to ``/api/v2/`` (``"team/frc3128"``).
    Unregistered paths answer 404 with the API's ``{"404": ...}`` body.
    """

    def __init__(self) -> None:
        self.routes: dict[str, tuple[int, dict[str, Any]]] = {}
        self.requests: list[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def add(
        self,
        path: str,
        json: Any = None,
        status_code: int = 200,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        kwargs: dict[str, Any] = {"headers": headers or {}}
        if content is not None:
            kwargs["content"] = content
        else:
            kwargs["json"] = json
        self.routes[path] = (status_code, kwargs)

    @property
    def paths(self) -> list[str]:
        """Requested paths relative to the API prefix, in order."""
        return [r.url.path.removeprefix(API_PREFIX) for r in self.requests]

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix(API_PREFIX)
        route = self.routes.get(path)
        if route is None:
            return httpx.Response(404, json={"404": f"{path} not found"})
        status_code, kwargs = route
        return httpx.Response(status_code, **kwargs)


@pytest.fixture
def server() -> FakeTBAServer:
    """A fresh fake TBA server."""
    return FakeTBAServer()


@pytest.fixture
def identity() -> AppIdentity:
    return AppIdentity(organization="frc3128", app_identifier="scouting", version="1.0")


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate configuration to a temporary directory.

    Sets XDG_CONFIG_HOME and XDG_DATA_HOME to subdirectories of tmp_path so
    that tests never touch real user config, forces the XDG code path,
    clears all TBA_* environment variables and changes the working
    directory to tmp_path.

    Returns:
        The tmp_path root directory for additional file creation.
    """
    monkeypatch.setattr("tbaclient.config._is_xdg_platform", lambda: True)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))

    for var in [
        "TBA_ORGANIZATION",
        "TBA_APP_ID",
        "TBA_APP_VERSION",
        "TBA_BASE_URL",
    ]:
        monkeypatch.delenv(var, raising=False)

    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# Output fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def verbose_output() -> OutputManager:
    """Install a plain, verbose OutputManager so debug lines reach stderr."""
    output = OutputManager(no_color=True, verbose=True)
    set_output(output)
    yield output
    reset_output()


# ---------------------------------------------------------------------------
# CLI runner fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
