"""Exception hierarchy for fluent-automapper.

Every error raised by the engine derives from `AutoMapperError`, so callers can
catch configuration and lookup failures with a single clause. Lookup failures
additionally derive from `LookupError` and configuration failures from
`ValueError` to keep them compatible with generic handlers.

Errors:
    DuplicateInstantiation: a second engine instance was constructed
    MappingNotFound: `map()` called for an unregistered key pair
    ProfileNotFound: `with_profile()` named an unregistered profile
    InvalidConfiguration: a fluent configuration call received unusable input
"""
from __future__ import annotations

from typing import Any, Hashable

__all__ = [
    "AutoMapperError",
    "DuplicateInstantiation",
    "MappingNotFound",
    "ProfileNotFound",
    "InvalidConfiguration",
]


class AutoMapperError(Exception):
    """Base class for all fluent-automapper errors."""


class DuplicateInstantiation(AutoMapperError):
    def __init__(self) -> None:
        super().__init__(
            "Instantiation failed: use AutoMapper.get_instance() instead of the constructor."
        )


class MappingNotFound(AutoMapperError, LookupError):
    """Raised when no mapping definition exists for an ordered key pair."""

    def __init__(self, source_key: Hashable, destination_key: Hashable) -> None:
        self.source_key = source_key
        self.destination_key = destination_key
        super().__init__(
            f"Could not find map object with a source of {source_key!r} "
            f"and a destination of {destination_key!r}"
        )


class ProfileNotFound(AutoMapperError, LookupError):
    def __init__(self, profile_name: Any) -> None:
        self.profile_name = profile_name
        super().__init__(f"Could not find profile with profile name {profile_name!r}.")


class InvalidConfiguration(AutoMapperError, ValueError):
    """Raised at configuration time, before any mapping executes."""
