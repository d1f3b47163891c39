"""
Metrics module for observability.

Exposes profile selection metrics in Prometheus text format.
"""

from .registry import (
    REGISTRY,
    active_profile,
    generate_metrics,
    profile_fallbacks,
    profile_selections,
)

__all__ = [
    "REGISTRY",
    "active_profile",
    "generate_metrics",
    "profile_fallbacks",
    "profile_selections",
]
