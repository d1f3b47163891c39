"""Beacon chain parameter profiles, their registry and protocol tags."""

from .enums import SpecialRecordType, ValidatorSetDeltaFlag, ValidatorStatus
from .names import (
    SUPPORTED_PROFILE_NAMES,
    ProfileName,
    is_known_profile,
    resolve_profile_name,
)
from .presets import DEFAULT_PROFILE, build_demo_profile, build_profiles
from .profile import ParameterProfile
from .registry import ConfigRegistry
from .strict import require_known_profile, set_active_profile_strict

__all__ = [
    "ConfigRegistry",
    "DEFAULT_PROFILE",
    "ParameterProfile",
    "ProfileName",
    "SUPPORTED_PROFILE_NAMES",
    "SpecialRecordType",
    "ValidatorSetDeltaFlag",
    "ValidatorStatus",
    "build_demo_profile",
    "build_profiles",
    "is_known_profile",
    "require_known_profile",
    "resolve_profile_name",
    "set_active_profile_strict",
]
