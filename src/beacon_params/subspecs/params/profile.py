"""
Parameter Profile
=================

The full set of protocol tuning parameters a beacon node runs with.

A profile is a frozen model: once built it is validated and never changes,
so a single instance can be handed to any number of threads.
"""

from __future__ import annotations

from fractions import Fraction
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, model_validator

from beacon_params.types import StrictBaseModel, Uint64


_POSITIVE_FIELDS: tuple[str, ...] = (
    "shard_count",
    "modulo_bias",
    "ether_denomination",
    "cycle_length",
    "slot_duration",
    "min_committee_size",
    "min_dynasty_length",
    "base_reward_quotient",
    "sqrt_exp_drop_time",
    "max_validator_churn_quotient",
)
"""Fields where zero would make the profile meaningless (counts, durations, divisors)."""


class ParameterProfile(StrictBaseModel):
    """Protocol parameters for one deployment environment."""

    shard_count: Uint64
    """The fixed number of shards."""

    deposit_size: int = Field(ge=0)
    """How much a validator deposits, in wei. Arbitrary precision."""

    bootstrapped_validators_count: Uint64
    """Number of validators seeded into the first crystallized state."""

    modulo_bias: Uint64
    """
    Upper bound of the validator shuffle function.

    Validator lists up to this size can be shuffled without bias.
    Must be a power of two.
    """

    ether_denomination: Uint64
    """Number of wei in one ether."""

    cycle_length: Uint64
    """One beacon chain cycle, in slots."""

    slot_duration: Uint64
    """Length of a single slot, in seconds."""

    min_committee_size: Uint64
    """Minimal number of validators in a committee."""

    default_end_dynasty: Uint64
    """
    Sentinel end dynasty for validators that have not exited.

    Used to track queued and exited validators.
    """

    min_dynasty_length: Uint64
    """Slots needed before a dynasty transition happens."""

    base_reward_quotient: Uint64
    """Divisor used to compute the per-slot interest rate of a validator."""

    sqrt_exp_drop_time: Uint64
    """Time it takes to cut the deposits of offline validators by 39.4%."""

    genesis_time: Uint64
    """Unix timestamp (seconds) when slot 0 begins."""

    log_out_message: str = Field(min_length=1)
    """The message a validator signs in order to log out."""

    withdrawal_period: Uint64
    """Slots between a validator exit and its balance becoming withdrawable."""

    max_validator_churn_quotient: Uint64
    """Quotient bounding how many validators can change during each dynasty."""

    @model_validator(mode="after")
    def validate_invariants(self) -> ParameterProfile:
        """Reject zero counts, durations and divisors, and a non power-of-two bias."""
        for name in _POSITIVE_FIELDS:
            if getattr(self, name) == 0:
                raise ValueError(f"{name} must be greater than 0")

        # Power of two: exactly one bit set.
        if self.modulo_bias & (self.modulo_bias - 1):
            raise ValueError(f"modulo_bias must be a power of two, got {self.modulo_bias}")

        return self

    @property
    def cycle_duration(self) -> Uint64:
        """Length of one cycle, in seconds."""
        return Uint64(self.cycle_length * self.slot_duration)

    @property
    def deposit_size_in_ether(self) -> Fraction:
        """The validator deposit expressed in ether, without rounding."""
        return Fraction(self.deposit_size, self.ether_denomination)

    def has_consistent_genesis(self) -> bool:
        """
        Check that genesis seeds enough validators to fill one committee.

        Not enforced at construction: the demo profile seeds no validators
        and relies on deposits arriving after genesis.
        """
        return self.min_committee_size <= self.bootstrapped_validators_count

    def to_yaml(self) -> str:
        """
        Export the profile as YAML.

        Keys use UPPERCASE to match the cross-client config convention.
        """
        data = {name.upper(): value for name, value in self.model_dump(mode="json").items()}
        return yaml.safe_dump(data, sort_keys=False)

    @classmethod
    def from_yaml(cls, content: str) -> ParameterProfile:
        """
        Load and validate a profile from a YAML string.

        Raises:
            yaml.YAMLError: If the content is not valid YAML.
            pydantic.ValidationError: If the data fails validation.
        """
        data = yaml.safe_load(content)
        return cls.model_validate(_lower_keys(data))

    @classmethod
    def from_yaml_file(cls, path: Path | str) -> ParameterProfile:
        """
        Load and validate a profile from a YAML file.

        Raises:
            FileNotFoundError: If the file does not exist.
            yaml.YAMLError: If the file is not valid YAML.
            pydantic.ValidationError: If the data fails validation.
        """
        path = Path(path)
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls.model_validate(_lower_keys(data))


def _lower_keys(data: Any) -> Any:
    """Map UPPERCASE YAML keys onto field names; leave non-mappings to validation."""
    if not isinstance(data, dict):
        return data
    return {str(key).lower(): value for key, value in data.items()}
