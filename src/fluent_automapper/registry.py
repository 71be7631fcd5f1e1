"""Mapping registry and profile store.

The registry owns every `MappingDefinition` (one per ordered key pair) and every
registered `Profile` (one per name). It is owned by the single `AutoMapper`
engine instance and lives for the whole process; `clear()` exists for tests.

The registry performs no locking. Concurrent configuration, or configuration
concurrent with mapping, must be serialized by the caller.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, Hashable, Iterator, Optional, Tuple

from .errors import MappingNotFound, ProfileNotFound
from .models.definitions import MappingDefinition

if TYPE_CHECKING:
    from .profile import Profile

logger = logging.getLogger(__name__)

__all__ = ["MappingRegistry"]

MappingKey = Tuple[Hashable, Hashable]


class MappingRegistry:
    def __init__(self) -> None:
        self._mappings: Dict[MappingKey, MappingDefinition] = {}
        self._profiles: Dict[str, "Profile"] = {}

    def register(self, source_key: Hashable, destination_key: Hashable) -> MappingDefinition:
        """Create a fresh definition for the pair, replacing any existing one."""
        key = (source_key, destination_key)
        if key in self._mappings:
            logger.debug("overwriting mapping source=%r destination=%r", source_key, destination_key)
        definition = MappingDefinition(source_key=source_key, destination_key=destination_key)
        self._mappings[key] = definition
        return definition

    def find(self, source_key: Hashable, destination_key: Hashable) -> Optional[MappingDefinition]:
        return self._mappings.get((source_key, destination_key))

    def lookup(self, source_key: Hashable, destination_key: Hashable) -> MappingDefinition:
        definition = self.find(source_key, destination_key)
        if definition is None:
            raise MappingNotFound(source_key, destination_key)
        return definition

    def register_profile(self, profile: "Profile") -> None:
        """Run the profile's `configure()` hook once, then store it by name."""
        profile.configure()
        if profile.profile_name in self._profiles:
            logger.debug("overwriting profile %s", profile.profile_name)
        self._profiles[profile.profile_name] = profile
        logger.debug("registered profile %s", profile.profile_name)

    def get_profile(self, profile_name: str) -> "Profile":
        profile = self._profiles.get(profile_name)
        if profile is None or profile.profile_name != profile_name:
            raise ProfileNotFound(profile_name)
        return profile

    def definitions(self) -> Iterator[MappingDefinition]:
        return iter(list(self._mappings.values()))

    def profiles(self) -> Iterator["Profile"]:
        return iter(list(self._profiles.values()))

    def clear(self) -> None:
        self._mappings.clear()
        self._profiles.clear()

    def __len__(self) -> int:
        return len(self._mappings)
