"""Slot timing derived from the active parameter profile."""

from .clock import SlotClock

__all__ = [
    "SlotClock",
]
