"""Tests for the process-wide configuration."""

from collections.abc import Iterator

import pytest

from beacon_params.config import (
    BEACON_ENV_VAR,
    CONFIG_REGISTRY,
    get_config,
    initial_profile_name,
    set_env,
)
from beacon_params.subspecs.params import DEFAULT_PROFILE


@pytest.fixture(autouse=True)
def restore_default() -> Iterator[None]:
    """Put the process-wide selector back after each test."""
    yield
    set_env("default")


class TestInitialProfileName:
    """Tests for reading BEACON_ENV."""

    def test_unset_means_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without the variable the default profile is used."""
        monkeypatch.delenv(BEACON_ENV_VAR, raising=False)
        assert initial_profile_name() == "default"

    def test_known_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A built-in name is returned as is."""
        monkeypatch.setenv(BEACON_ENV_VAR, "demo")
        assert initial_profile_name() == "demo"

    def test_unknown_value_is_kept_and_logged(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Unknown values are returned verbatim with a warning."""
        monkeypatch.setenv(BEACON_ENV_VAR, "Prod")
        assert initial_profile_name() == "Prod"
        assert "Unknown BEACON_ENV value 'Prod'" in caplog.text


class TestProcessRegistry:
    """Tests for get_config() and set_env()."""

    def test_default_profile(self) -> None:
        """The test run pins BEACON_ENV to default."""
        assert get_config() is DEFAULT_PROFILE

    def test_set_env_demo(self) -> None:
        """set_env switches the process-wide profile."""
        set_env("demo")
        assert CONFIG_REGISTRY.active_name == "demo"
        assert get_config().shard_count == 3

    def test_set_env_unknown(self) -> None:
        """Unknown names fall back to the default profile."""
        set_env("demo")
        set_env("mainnet")
        assert get_config() is DEFAULT_PROFILE
