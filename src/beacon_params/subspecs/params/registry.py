"""
Config Registry
===============

Holds the built-in parameter profiles and the selector naming the active one.

The selector is the only mutable state. It is written rarely (at startup, or
by a test harness) and read from every part of the node, so it sits behind a
lock. Profiles are built up front and frozen, which keeps the read path free
of allocation and failure.

Selection Rules
---------------
- An exact match on a built-in name selects that profile.
- Anything else, including an empty string or a different letter case,
  selects the default profile. The stored name is kept verbatim.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from threading import Lock
from time import time as wall_time
from types import MappingProxyType
from typing import Callable

from beacon_params.subspecs.metrics import registry as metrics

from .names import ProfileName, is_known_profile, resolve_profile_name
from .presets import build_profiles
from .profile import ParameterProfile

logger = logging.getLogger(__name__)


class ConfigRegistry:
    """
    Thread-safe owner of the active parameter profile.

    A node builds one registry at startup and hands it to every consumer.
    """

    def __init__(
        self,
        initial_name: str = ProfileName.DEFAULT.value,
        *,
        time_fn: Callable[[], float] = wall_time,
        record_metrics: bool = False,
    ):
        """
        Build all profiles and set the initial selector.

        Args:
            initial_name: Selector value before any `set_active_profile` call.
            time_fn: Clock used for the demo profile's genesis time.
            record_metrics: Publish selector changes to the Prometheus registry.
                The metrics are process-wide: when several registries publish,
                `beacon_active_profile` reports whichever registry wrote last.
                Only the process registry in `beacon_params.config` enables this.
        """
        self._profiles: Mapping[ProfileName, ParameterProfile] = MappingProxyType(
            build_profiles(time_fn)
        )
        self._record_metrics = record_metrics
        self._active_name = initial_name
        self._lock = Lock()

        if record_metrics:
            metrics.active_profile.state(resolve_profile_name(initial_name).value)

    @property
    def profiles(self) -> Mapping[ProfileName, ParameterProfile]:
        """Read-only view of every built-in profile."""
        return self._profiles

    @property
    def active_name(self) -> str:
        """The selector exactly as it was last set."""
        with self._lock:
            return self._active_name

    def get_profile(self, name: ProfileName) -> ParameterProfile:
        """Return a built-in profile by identifier, ignoring the selector."""
        return self._profiles[name]

    def set_active_profile(self, name: str) -> None:
        """
        Record which profile is active.

        Never fails. An unknown name is stored as given and served by the
        default profile.
        """
        known = is_known_profile(name)
        with self._lock:
            self._active_name = name
            if self._record_metrics:
                metrics.profile_selections.inc()
                if not known:
                    metrics.profile_fallbacks.inc()
                metrics.active_profile.state(resolve_profile_name(name).value)

        if not known:
            logger.warning(
                "Unknown parameter profile %r, using %r",
                name,
                ProfileName.DEFAULT.value,
            )
        else:
            logger.debug("Parameter profile set to %r", name)

    def get_active_profile(self) -> ParameterProfile:
        """
        Resolve the selector to a profile.

        Returns the shared instance: two calls without an intervening
        `set_active_profile` return the same object.
        """
        with self._lock:
            name = self._active_name
        return self._profiles[resolve_profile_name(name)]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(active_name={self.active_name!r})"
