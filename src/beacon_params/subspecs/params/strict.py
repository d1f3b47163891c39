"""
Strict profile selection.

The registry accepts any name and falls back to production parameters.
Callers that must not silently run with the wrong parameters, such as an
operator-facing CLI, validate the name here first.
"""

from beacon_params.types import UnknownProfileError

from .names import SUPPORTED_PROFILE_NAMES, ProfileName, is_known_profile
from .registry import ConfigRegistry


def require_known_profile(name: str) -> ProfileName:
    """
    Map a name to a built-in profile, rejecting unknown names.

    Raises:
        UnknownProfileError: If `name` is not an exact built-in profile name.
    """
    if not is_known_profile(name):
        raise UnknownProfileError(name, SUPPORTED_PROFILE_NAMES)
    return ProfileName(name)


def set_active_profile_strict(registry: ConfigRegistry, name: str) -> None:
    """
    Validate `name`, then select it on `registry`.

    The registry is left untouched when validation fails.

    Raises:
        UnknownProfileError: If `name` is not an exact built-in profile name.
    """
    registry.set_active_profile(require_known_profile(name).value)
