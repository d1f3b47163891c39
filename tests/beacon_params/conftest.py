"""Fixtures shared by the beacon_params tests."""

import pytest

from beacon_params.subspecs.params import ConfigRegistry

FIXED_NOW = 1700000000.0
"""Wall-clock value used wherever a test pins the demo genesis time."""


@pytest.fixture
def registry() -> ConfigRegistry:
    """A fresh registry with a pinned clock and no metric side effects."""
    return ConfigRegistry(time_fn=lambda: FIXED_NOW)
