"""Process-wide mapping engine.

`AutoMapper` is the single entry point for creating and executing mappings.
Exactly one instance exists per process: it is created when this module is
imported and exposed as `automapper`. Constructing another instance raises
`DuplicateInstantiation`; use `AutoMapper.get_instance()` instead.

Lifecycle:
    - definitions and profiles accumulate for the life of the process
    - `reset()` clears them and exists for test isolation only

`create_map` and `map` are curried: supplying fewer arguments returns a
reusable partial call.

    automapper.initialize(lambda cfg: cfg.add_profile(ApiProfile()))
    automapper.create_map("UserRow", "User").with_profile("Api")
    users = automapper.map("UserRow", "User", rows)
"""
from __future__ import annotations

import logging
from typing import Any, Callable, ClassVar, Hashable, Optional

from .configuration import CreateMapExpression
from .curry import curried
from .errors import DuplicateInstantiation
from .executor import map_value
from .profile import Profile
from .registry import MappingRegistry

logger = logging.getLogger(__name__)

__all__ = ["AutoMapper", "Configuration", "automapper"]


class Configuration:
    """Object handed to `initialize` configurators."""

    def __init__(self, mapper: "AutoMapper") -> None:
        self._mapper = mapper

    def add_profile(self, profile: Profile) -> None:
        self._mapper.add_profile(profile)

    @curried
    def create_map(self, source_key: Hashable, destination_key: Hashable) -> CreateMapExpression:
        return self._mapper.create_map(source_key, destination_key)


class AutoMapper:
    _instance: ClassVar[Optional["AutoMapper"]] = None

    def __init__(self) -> None:
        if AutoMapper._instance is not None:
            raise DuplicateInstantiation()
        AutoMapper._instance = self
        self.registry = MappingRegistry()

    @classmethod
    def get_instance(cls) -> "AutoMapper":
        if cls._instance is None:
            return cls()
        return cls._instance

    def initialize(self, configurator: Callable[[Configuration], Any]) -> None:
        """Run `configurator` with an object exposing `add_profile` and `create_map`."""
        configurator(Configuration(self))

    def add_profile(self, profile: Profile) -> None:
        self.registry.register_profile(profile)

    @curried
    def create_map(self, source_key: Hashable, destination_key: Hashable) -> CreateMapExpression:
        definition = self.registry.register(source_key, destination_key)
        logger.debug("created map %r -> %r", source_key, destination_key)
        return CreateMapExpression(definition, self.registry)

    @curried
    def map(self, source_key: Hashable, destination_key: Hashable, source: Any) -> Any:
        """Map `source` (or each element of a list / tuple) to a new destination.

        Raises:
            MappingNotFound: no definition exists for the key pair.
        """
        definition = self.registry.lookup(source_key, destination_key)
        return map_value(definition, source)

    def reset(self) -> None:
        """Forget every definition and profile. Test support only."""
        self.registry.clear()


automapper = AutoMapper()
