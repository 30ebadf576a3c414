"""Tests for tbaclient.models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from tbaclient.models import (
    APP_ID_HEADER,
    DEFAULT_BASE_URL,
    AppIdentity,
    CacheConfig,
    GlobalConfig,
    RequestConfig,
)


class TestAppIdentity:
    def test_header_value_joins_parts(self) -> None:
        identity = AppIdentity(organization="frc3128", app_identifier="scouting", version="1.0")
        assert identity.header_value == "frc3128:scouting:1.0"

    def test_parts_are_not_validated(self) -> None:
        identity = AppIdentity(organization="a:b", app_identifier="", version="v 2")
        assert identity.header_value == "a:b::v 2"

    def test_numeric_parts_become_strings(self) -> None:
        identity = AppIdentity(organization=3128, app_identifier="scouting", version=1.0)
        assert identity.version == "1.0"
        assert identity.header_value == "3128:scouting:1.0"

    def test_frozen(self) -> None:
        identity = AppIdentity(organization="o", app_identifier="a", version="v")
        with pytest.raises(ValidationError):
            identity.organization = "other"  # type: ignore[misc]

    def test_missing_part_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AppIdentity(organization="o", app_identifier="a")  # type: ignore[call-arg]

    def test_header_name(self) -> None:
        assert APP_ID_HEADER == "X-TBA-App-Id"


class TestRequestConfig:
    def test_defaults(self) -> None:
        config = RequestConfig()
        assert config.base_url == DEFAULT_BASE_URL
        assert config.base_url.endswith("/api/v2/")
        assert config.timeout is None
        assert config.verify_ssl is True
        assert config.follow_redirects is True

    def test_base_url_is_immutable(self) -> None:
        config = RequestConfig()
        with pytest.raises(ValidationError):
            config.base_url = "http://localhost/"  # type: ignore[misc]


class TestCacheConfig:
    def test_defaults_are_unbounded(self) -> None:
        config = CacheConfig()
        assert config.enabled is True
        assert config.max_entries is None
        assert config.ttl_seconds is None

    @pytest.mark.parametrize("kwargs", [{"max_entries": 0}, {"ttl_seconds": 0}, {"ttl_seconds": -1}])
    def test_rejects_non_positive_limits(self, kwargs: dict) -> None:
        with pytest.raises(ValidationError):
            CacheConfig(**kwargs)


class TestGlobalConfig:
    def test_empty_document_is_valid(self) -> None:
        config = GlobalConfig.model_validate({})
        assert config.identity is None
        assert config.request == RequestConfig()
        assert config.output.format == "auto"

    def test_round_trips_through_json_dump(self) -> None:
        config = GlobalConfig(
            identity=AppIdentity(organization="o", app_identifier="a", version="1"),
            cache=CacheConfig(max_entries=10),
        )
        restored = GlobalConfig.model_validate(config.model_dump(mode="json"))
        assert restored == config
