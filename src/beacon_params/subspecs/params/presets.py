"""
Built-in Parameter Profiles
===========================

Production ("default") and local-testing ("demo") parameter values.

Both profiles share most values. The demo profile shrinks the shard count,
cycle length, committee size and withdrawal delay so a handful of local
validators can drive a chain quickly, and it starts the chain "now".
"""

from datetime import datetime, timezone
from time import time as wall_time
from typing import Callable, Final

from beacon_params.types import Uint64

from .names import ProfileName
from .profile import ParameterProfile

# --- Shared Parameters ---

ETHER_DENOMINATION: Final = Uint64(10**18)
"""Wei per ether."""

DEPOSIT_SIZE: Final = 32 * ETHER_DENOMINATION
"""A validator deposit: 32 ether, in wei."""

MODULO_BIAS: Final = Uint64(2**24)
"""Largest validator list the shuffle handles without bias (16777216)."""

SLOT_DURATION: Final = Uint64(8)
"""Seconds per slot."""

DEFAULT_END_DYNASTY: Final = Uint64(999999999999999999)
"""End dynasty of a validator that has not exited."""

MIN_DYNASTY_LENGTH: Final = Uint64(256)
"""Slots before a dynasty transition may happen."""

BASE_REWARD_QUOTIENT: Final = Uint64(2**15)
"""Per-slot interest divisor (32768)."""

SQRT_EXP_DROP_TIME: Final = Uint64(2**16)
"""Offline penalty decay constant (65536)."""

MAX_VALIDATOR_CHURN_QUOTIENT: Final = Uint64(32)
"""At most 1/32 of the validator set changes per dynasty."""

LOG_OUT_MESSAGE: Final = "LOGOUT"
"""Message a validator signs to leave the validator set."""

# --- Production Parameters ---

DEFAULT_GENESIS_TIME: Final = Uint64(int(datetime(2018, 8, 31, tzinfo=timezone.utc).timestamp()))
"""Production genesis: 2018-08-31T00:00:00Z."""

DEFAULT_PROFILE: Final = ParameterProfile(
    genesis_time=DEFAULT_GENESIS_TIME,
    modulo_bias=MODULO_BIAS,
    cycle_length=Uint64(64),
    shard_count=Uint64(1024),
    ether_denomination=ETHER_DENOMINATION,
    deposit_size=DEPOSIT_SIZE,
    slot_duration=SLOT_DURATION,
    min_committee_size=Uint64(128),
    default_end_dynasty=DEFAULT_END_DYNASTY,
    bootstrapped_validators_count=Uint64(1000),
    min_dynasty_length=MIN_DYNASTY_LENGTH,
    base_reward_quotient=BASE_REWARD_QUOTIENT,
    sqrt_exp_drop_time=SQRT_EXP_DROP_TIME,
    log_out_message=LOG_OUT_MESSAGE,
    withdrawal_period=Uint64(2**19),
    max_validator_churn_quotient=MAX_VALIDATOR_CHURN_QUOTIENT,
)
"""Production parameters. Fully static, so built once at import."""


def build_demo_profile(time_fn: Callable[[], float] = wall_time) -> ParameterProfile:
    """
    Build the local-testing profile.

    Genesis is whatever `time_fn` reports when this is called, so every
    fresh demo chain starts at slot 0. Pass a fixed clock for reproducible
    results.

    No validators are seeded at genesis; local runs add them by deposit.
    """
    return ParameterProfile(
        genesis_time=Uint64(int(time_fn())),
        modulo_bias=MODULO_BIAS,
        cycle_length=Uint64(5),
        shard_count=Uint64(3),
        ether_denomination=ETHER_DENOMINATION,
        deposit_size=DEPOSIT_SIZE,
        slot_duration=SLOT_DURATION,
        min_committee_size=Uint64(3),
        default_end_dynasty=DEFAULT_END_DYNASTY,
        bootstrapped_validators_count=Uint64(0),
        min_dynasty_length=MIN_DYNASTY_LENGTH,
        base_reward_quotient=BASE_REWARD_QUOTIENT,
        sqrt_exp_drop_time=SQRT_EXP_DROP_TIME,
        log_out_message=LOG_OUT_MESSAGE,
        withdrawal_period=Uint64(128),
        max_validator_churn_quotient=MAX_VALIDATOR_CHURN_QUOTIENT,
    )


def build_profiles(
    time_fn: Callable[[], float] = wall_time,
) -> dict[ProfileName, ParameterProfile]:
    """Build every built-in profile, keyed by name."""
    return {
        ProfileName.DEFAULT: DEFAULT_PROFILE,
        ProfileName.DEMO: build_demo_profile(time_fn),
    }
