"""
Protocol Tags
=============

Closed sets of integer tags attached to validator records and protocol
messages. The numeric values are part of the wire and storage format, so
every member carries an explicit value.
"""

from enum import IntEnum


class ValidatorStatus(IntEnum):
    """
    Lifecycle stage of a validator.

    The regular lifecycle occupies the contiguous range 0-4. `PENALIZED`
    sits apart at 128 so it can never be confused with a lifecycle stage.
    """

    PENDING_ACTIVATION = 0
    """Queued and waiting to become active."""

    ACTIVE = 1
    """Participating in validator duties."""

    PENDING_EXIT = 2
    """Waiting to exit the validator set."""

    PENDING_WITHDRAW = 3
    """Exited and waiting for the balance to become withdrawable."""

    WITHDRAWN = 4
    """Balance has been withdrawn."""

    PENALIZED = 128
    """Slashed for misbehaviour."""

    @property
    def is_lifecycle_stage(self) -> bool:
        """True for the regular lifecycle stages, False for `PENALIZED`."""
        return self is not ValidatorStatus.PENALIZED


class SpecialRecordType(IntEnum):
    """Kind of special record carried in a block."""

    LOGOUT = 0
    """A validator requests to exit the validator pool."""

    CASPER_SLASHING = 1
    """A report of a slashable offence, submitted for a reward."""


class ValidatorSetDeltaFlag(IntEnum):
    """Direction of a validator set change, tracked by light clients."""

    ENTRY = 0
    EXIT = 1
