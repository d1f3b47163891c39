"""Known parameter profile names and the fallback rule for everything else."""

from enum import Enum


class ProfileName(str, Enum):
    """Identifiers of the built-in parameter profiles."""

    DEFAULT = "default"
    """Production parameters."""

    DEMO = "demo"
    """Small, fast parameters for local testing."""


SUPPORTED_PROFILE_NAMES: tuple[str, ...] = tuple(name.value for name in ProfileName)
"""Every name the registry resolves to a profile of its own."""


def is_known_profile(name: str) -> bool:
    """Check whether `name` exactly matches a built-in profile name."""
    return name in SUPPORTED_PROFILE_NAMES


def resolve_profile_name(name: str) -> ProfileName:
    """
    Map an arbitrary selector string to a built-in profile.

    Matching is exact and case-sensitive. Any name that is not recognized
    resolves to `ProfileName.DEFAULT`, so an unknown environment degrades
    to production parameters instead of failing.
    """
    if is_known_profile(name):
        return ProfileName(name)
    return ProfileName.DEFAULT
