"""Exception hierarchy for profile selection."""

from __future__ import annotations

from collections.abc import Iterable


class ProfileError(Exception):
    """
    Base exception for all profile-related errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class UnknownProfileError(ProfileError):
    """
    Raised by the strict selection layer when a profile name is not recognized.

    The registry itself never raises this: it falls back to the default
    profile instead.

    Attributes:
        name: The rejected profile name.
        supported: The names that would have been accepted.
    """

    def __init__(self, name: str, supported: Iterable[str]) -> None:
        self.name = name
        self.supported = tuple(supported)
        super().__init__(
            f"Unknown parameter profile '{name}'. Supported values: {list(self.supported)}"
        )
