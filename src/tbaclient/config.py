"""Configuration management with XDG paths, atomic writes, and precedence resolution.

This module handles all persistent configuration for the ``tba`` command:

* **Directory layout** -- XDG Base Directory compliant on Linux/BSD,
  ``~/.tbaclient/`` on macOS and Windows. See :func:`get_config_dir` and
  :func:`get_data_dir`.
* **Global config** -- A single :class:`~tbaclient.models.GlobalConfig`
  JSON file storing the app identity, request, cache and output defaults.
* **Precedence resolution** -- :func:`resolve_config` merges CLI flags,
  environment variables, project-local config, and global config into the
  final effective configuration.

The library classes never read configuration on their own; only the CLI
goes through :func:`resolve_config`.

All file writes use an atomic temp-file-then-rename strategy
(:func:`_atomic_write`).
"""

from __future__ import annotations

import json
import os
import platform
import tempfile
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from tbaclient.exceptions import ConfigError
from tbaclient.models import AppIdentity, GlobalConfig

_APP_NAME = "tbaclient"
_CONFIG_FILENAME = "config.json"
_PROJECT_CONFIG_FILENAME = "tba.json"
_SECTIONS = ("identity", "request", "cache", "output")

ENV_ORGANIZATION = "TBA_ORGANIZATION"
ENV_APP_ID = "TBA_APP_ID"
ENV_APP_VERSION = "TBA_APP_VERSION"
ENV_BASE_URL = "TBA_BASE_URL"


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def _fallback_base_dir() -> Path:
    """Fallback base directory for non-XDG platforms (macOS, Windows)."""
    return Path.home() / f".{_APP_NAME}"


def _xdg_base(env_var: str, default_segments: tuple[str, ...]) -> Path:
    """Resolve an XDG base directory from an env var with fallback segments under $HOME."""
    env_value = os.environ.get(env_var, "")
    if env_value:
        return Path(env_value)
    base = Path.home()
    for seg in default_segments:
        base = base / seg
    return base


def get_config_dir() -> Path:
    """Return the configuration directory, creating it if necessary.

    On Linux/BSD: ``$XDG_CONFIG_HOME/tbaclient/`` (default ``~/.config/tbaclient/``).
    On macOS/Windows: ``~/.tbaclient/``.
    """
    if _is_xdg_platform():
        base = _xdg_base("XDG_CONFIG_HOME", (".config",))
        path = base / _APP_NAME
    else:
        path = _fallback_base_dir()
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_data_dir() -> Path:
    """Return the data directory (crash logs), creating it if necessary.

    On Linux/BSD: ``$XDG_DATA_HOME/tbaclient/`` (default ``~/.local/share/tbaclient/``).
    On macOS/Windows: ``~/.tbaclient/logs/``.
    """
    if _is_xdg_platform():
        base = _xdg_base("XDG_DATA_HOME", (".local", "share"))
        path = base / _APP_NAME
    else:
        path = _fallback_base_dir() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


# --- Atomic file writes ---


def _atomic_write(path: Path, data: str) -> None:
    """Write data to file atomically using temp file + rename.

    The temporary file is created in the same directory as *path* so that
    ``os.replace`` is an atomic rename on POSIX systems. On any failure the
    temp file is removed.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    fd = None
    tmp_path: Optional[str] = None
    try:
        fd = tempfile.NamedTemporaryFile(
            mode="w",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        )
        tmp_path = fd.name
        fd.write(data)
        fd.flush()
        os.fsync(fd.fileno())
        fd.close()
        fd = None
        os.replace(tmp_path, path)
    except BaseException:
        if fd is not None:
            fd.close()
        if tmp_path is not None:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
        raise


# --- Global config ---


def global_config_path() -> Path:
    """Path to the global config file."""
    return get_config_dir() / _CONFIG_FILENAME


def _load_json_object(path: Path, label: str) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, ValueError) as exc:
        raise ConfigError(f"Invalid {label} at {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid {label} at {path}: expected a JSON object")
    return data


def load_global_config() -> GlobalConfig:
    """Load the global configuration from the config directory.

    Returns:
        The deserialised :class:`~tbaclient.models.GlobalConfig`. If the
        file does not exist, a default instance is returned.

    Raises:
        ConfigError: If the file exists but contains invalid JSON or fails
            Pydantic validation.
    """
    path = global_config_path()
    if not path.is_file():
        return GlobalConfig()
    data = _load_json_object(path, "global config")
    try:
        return GlobalConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid global config at {path}: {exc}") from exc


def save_global_config(config: GlobalConfig) -> None:
    """Persist the global configuration atomically to disk."""
    data = config.model_dump(mode="json")
    _atomic_write(global_config_path(), json.dumps(data, indent=2) + "\n")


# --- Project-local config ---


def load_project_config() -> Optional[dict[str, Any]]:
    """Load project-local configuration from ``./tba.json``.

    The file uses the same shape as the global config; any section it
    provides replaces the matching global section.

    Returns:
        The parsed JSON as a dict, or ``None`` if the file does not exist.

    Raises:
        ConfigError: If the file exists but contains invalid JSON.
    """
    path = Path.cwd() / _PROJECT_CONFIG_FILENAME
    if not path.is_file():
        return None
    return _load_json_object(path, "project config")


# --- Precedence resolution ---


def resolve_config(
    cli_organization: Optional[str] = None,
    cli_app_identifier: Optional[str] = None,
    cli_version: Optional[str] = None,
    cli_base_url: Optional[str] = None,
) -> GlobalConfig:
    """Resolve config with full precedence chain.

    Precedence (high to low):
        1. CLI flags (``--org``, ``--app-id``, ``--app-version``, ``--base-url``)
        2. Environment variables (``TBA_ORGANIZATION``, ``TBA_APP_ID``,
           ``TBA_APP_VERSION``, ``TBA_BASE_URL``)
        3. Project config (``./tba.json``)
        4. User config (``~/.config/tbaclient/config.json``)
        5. Defaults

    Identity parts are resolved one by one, so a project file may pin the
    organization while each developer supplies the version from the
    environment.

    Returns:
        The effective :class:`~tbaclient.models.GlobalConfig`. Its
        ``identity`` is ``None`` when any of the three parts is missing.

    Raises:
        ConfigError: If a config file is invalid.
    """
    # 5 + 4. Global config with defaults
    data = load_global_config().model_dump(mode="json")

    # 3. Project-local sections replace global ones
    project = load_project_config()
    if project is not None:
        for section, value in project.items():
            if section in _SECTIONS and value is not None and not isinstance(value, dict):
                raise ConfigError(
                    f"Invalid project config at {Path.cwd() / _PROJECT_CONFIG_FILENAME}: "
                    f"'{section}' must be an object"
                )
            if isinstance(value, dict) and isinstance(data.get(section), dict):
                data[section] = {**data[section], **value}
            else:
                data[section] = value

    identity: dict[str, Any] = dict(data.get("identity") or {})
    request: dict[str, Any] = dict(data.get("request") or {})

    # 2. Environment, then 1. CLI flags
    overrides = (
        ("organization", ENV_ORGANIZATION, cli_organization),
        ("app_identifier", ENV_APP_ID, cli_app_identifier),
        ("version", ENV_APP_VERSION, cli_version),
    )
    for field, env_var, cli_value in overrides:
        env_value = os.environ.get(env_var)
        if env_value:
            identity[field] = env_value
        if cli_value is not None:
            identity[field] = cli_value

    env_base_url = os.environ.get(ENV_BASE_URL)
    if env_base_url:
        request["base_url"] = env_base_url
    if cli_base_url is not None:
        request["base_url"] = cli_base_url

    data["request"] = request
    data["identity"] = identity if _is_complete(identity) else None

    try:
        return GlobalConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


def require_identity(config: GlobalConfig) -> AppIdentity:
    """Return the configured identity or raise a helpful :class:`ConfigError`."""
    if config.identity is None:
        raise ConfigError(
            "No app identity configured. Pass --org/--app-id/--app-version, "
            f"set {ENV_ORGANIZATION}/{ENV_APP_ID}/{ENV_APP_VERSION}, "
            "or store one with 'tba config identity'."
        )
    return config.identity


def _is_complete(identity: dict[str, Any]) -> bool:
    return all(identity.get(k) for k in ("organization", "app_identifier", "version"))
