"""
Metric registry using prometheus_client.

Tracks which parameter profile the node runs with and how often it changed.
"""

from __future__ import annotations

from prometheus_client import CollectorRegistry, Counter, Enum, generate_latest

# Dedicated registry, so default Python process metrics stay out of the output.
REGISTRY = CollectorRegistry()

profile_selections = Counter(
    "beacon_profile_selections_total",
    "Profile selector updates",
    registry=REGISTRY,
)

profile_fallbacks = Counter(
    "beacon_profile_fallbacks_total",
    "Profile selector updates with an unknown name, served by the default profile",
    registry=REGISTRY,
)

active_profile = Enum(
    "beacon_active_profile",
    "Parameter profile currently served",
    states=["default", "demo"],
    registry=REGISTRY,
)


def generate_metrics() -> bytes:
    """
    Generate Prometheus metrics output.

    Returns:
        Prometheus text format output as bytes.
    """
    return generate_latest(REGISTRY)
