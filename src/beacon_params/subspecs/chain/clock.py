"""
Slot Clock
==========

Time-to-slot conversion driven by a parameter profile.

Every node must agree on slot boundaries. Genesis time and slot duration
come from the active profile, so a demo chain and a production chain tick
at their own pace.
"""

from dataclasses import dataclass
from time import time as wall_time
from typing import Callable

from beacon_params.subspecs.params import ParameterProfile
from beacon_params.types import Uint64


@dataclass(frozen=True, slots=True)
class SlotClock:
    """
    Converts wall-clock time to slots and cycles.

    All time values are in seconds (Unix timestamps).
    """

    profile: ParameterProfile
    """Source of genesis time, slot duration and cycle length."""

    time_fn: Callable[[], float] = wall_time
    """Time source function (injectable for testing)."""

    def _seconds_since_genesis(self) -> Uint64:
        """Seconds elapsed since genesis (0 if before genesis)."""
        now = self.current_time()
        if now < self.profile.genesis_time:
            return Uint64(0)
        return Uint64(now - self.profile.genesis_time)

    def current_time(self) -> Uint64:
        """
        Get current wall-clock time as Uint64 (Unix timestamp in seconds).

        Readings before the Unix epoch clamp to 0.
        """
        return Uint64(max(0, int(self.time_fn())))

    def current_slot(self) -> Uint64:
        """Get the current slot number (0 if before genesis)."""
        return Uint64(self._seconds_since_genesis() // self.profile.slot_duration)

    def current_cycle(self) -> Uint64:
        """Get the current cycle number (0 if before genesis)."""
        return Uint64(self.current_slot() // self.profile.cycle_length)

    def slot_start_time(self, slot: Uint64) -> Uint64:
        """Unix timestamp at which `slot` begins."""
        return Uint64(self.profile.genesis_time + slot * self.profile.slot_duration)

    def seconds_until_next_slot(self) -> float:
        """
        Calculate seconds until the next slot boundary.

        Returns time until genesis if before genesis.
        Returns a full slot duration when exactly at a boundary.
        """
        now = self.time_fn()
        elapsed = now - int(self.profile.genesis_time)

        if elapsed < 0:
            # Before genesis - return time until genesis.
            return -elapsed

        slot_duration = int(self.profile.slot_duration)
        return slot_duration - (elapsed % slot_duration)
