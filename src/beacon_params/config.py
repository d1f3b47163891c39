"""
Global configuration for the beacon chain parameters.

Holds the process-wide registry. Its initial profile comes from the
`BEACON_ENV` environment variable and defaults to "default".

Unknown values are accepted and served by the default profile. Use
`beacon_params.subspecs.params.require_known_profile` where an unknown
name must be rejected instead.
"""

import logging
import os

from beacon_params.subspecs.params import (
    SUPPORTED_PROFILE_NAMES,
    ConfigRegistry,
    ParameterProfile,
    ProfileName,
    is_known_profile,
)

BEACON_ENV_VAR = "BEACON_ENV"
"""Name of the environment variable selecting the initial profile."""

logger = logging.getLogger(__name__)


def initial_profile_name() -> str:
    """Read the initial profile name from the environment, verbatim."""
    name = os.environ.get(BEACON_ENV_VAR, ProfileName.DEFAULT.value)
    if not is_known_profile(name):
        logger.warning(
            "Unknown %s value %r (supported: %s), using %r",
            BEACON_ENV_VAR,
            name,
            list(SUPPORTED_PROFILE_NAMES),
            ProfileName.DEFAULT.value,
        )
    return name


CONFIG_REGISTRY = ConfigRegistry(initial_profile_name(), record_metrics=True)
"""The process-wide registry shared by every consumer in this process."""


def get_config() -> ParameterProfile:
    """Retrieve the active beacon node parameters."""
    return CONFIG_REGISTRY.get_active_profile()


def set_env(name: str) -> None:
    """Set which profile the process uses."""
    CONFIG_REGISTRY.set_active_profile(name)
