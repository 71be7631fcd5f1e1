"""Fluent configuration builder for mapping definitions.

`CreateMapExpression` is the chain handle returned by `create_map`. Each method
mutates the bound `MappingDefinition` immediately and returns the same handle,
so calls can be chained in any order:

    automapper.create_map("PersonDto", "Person") \\
        .for_member("age", lambda opts: opts.map_from("ageOnId")) \\
        .for_member("secret", lambda opts: opts.ignore()) \\
        .convert_to_type(Person)

Two-phase member functions:
    `for_member` functions are called twice in their life. At declaration time
    they receive `DeclarationOptions`, whose `ignore` / `map_from` / `condition`
    directives record static intent and whose data attributes are synthetic
    stubs. At mapping time they receive `MemberOptions` carrying the real source
    object and the current value, and their return value becomes the member
    value.

Merge semantics of `with_profile`:
    all-members handlers are appended; converter and destination factory
    overwrite when the profile sets them; member mappings replace any live
    member targeting the same destination property as a whole, and staged
    members with no live counterpart are added as copies. The later of
    `for_member` and `with_profile` in a chain wins for a given member.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from .converters import resolve_type_converter
from .errors import InvalidConfiguration
from .models.definitions import ForAllMembersHandler, MappingDefinition, MemberMapping
from .profile import profile_key
from .registry import MappingRegistry

logger = logging.getLogger(__name__)

__all__ = [
    "CreateMapExpression",
    "DeclarationOptions",
    "MemberOptions",
    "SourceMemberOptions",
]


class DeclarationOptions:
    """Options seen by a `for_member` function during its declaration dry run."""

    def __init__(self, member: MemberMapping) -> None:
        self._member = member
        self.ignored = False
        self.source_property_name = member.source_property
        # Stub data so `opts.source_object[...]` style functions do not fail early.
        self.source_object = {member.source_property: {}}
        self.destination_property_value: Any = {}

    def ignore(self) -> None:
        self._member.ignore = True
        self._member.source_property = self._member.destination_property
        self._member.values = []
        self.ignored = True

    def map_from(self, source_property_name: Any) -> None:
        self._member.source_property = source_property_name

    def condition(self, predicate: Callable[[Any], Any]) -> None:
        self._member.condition = predicate


@dataclass(frozen=True)
class MemberOptions:
    """Options seen by member functions when a mapping executes."""

    source_object: Any
    source_property_name: Any
    destination_property_value: Any

    # Declaration directives are inert once the definition is built.
    def map_from(self, source_property_name: Any) -> None:
        return None

    def condition(self, predicate: Callable[[Any], Any]) -> None:
        return None

    def ignore(self) -> None:
        return None


class SourceMemberOptions:
    def __init__(self) -> None:
        self.ignored = False

    def ignore(self) -> None:
        self.ignored = True


class CreateMapExpression:
    def __init__(self, definition: MappingDefinition, registry: MappingRegistry) -> None:
        self._definition = definition
        self._registry = registry

    @property
    def definition(self) -> MappingDefinition:
        return self._definition

    def for_member(self, destination_property: Any, value_or_function: Any) -> "CreateMapExpression":
        """Configure one destination member with a literal value or a function."""
        definition = self._definition
        previous_key = None
        member = definition.find_member(destination_property)
        if member is not None:
            if member.ignore:
                return self
            previous_key = member.source_property
        else:
            member = MemberMapping(
                source_property=destination_property,
                destination_property=destination_property,
            )

        if callable(value_or_function):
            options = DeclarationOptions(member)
            try:
                value_or_function(options)
            except Exception as e:  # noqa: BLE001 - dry run only captures intent
                logger.debug(
                    "declaration dry run raised for member %r: %s", destination_property, e
                )
            if not options.ignored:
                member.values.append(value_or_function)
        else:
            member.values.append(value_or_function)

        definition.put_member(member, previous_key)
        return self

    def for_source_member(
        self, source_property: Any, config_function: Callable[[SourceMemberOptions], Any]
    ) -> "CreateMapExpression":
        if not callable(config_function):
            raise InvalidConfiguration(
                "Configuration of for_source_member has to be a function with one options parameter."
            )
        options = SourceMemberOptions()
        config_function(options)

        member = self._definition.member_mappings.get(source_property)
        if member is not None:
            if member.ignore:
                return self
            if options.ignored:
                member.ignore = True
                member.values = []
            else:
                member.values.append(config_function)
        else:
            self._definition.member_mappings[source_property] = MemberMapping(
                source_property=source_property,
                destination_property=None if options.ignored else source_property,
                values=[] if options.ignored else [config_function],
                ignore=options.ignored,
            )
        return self

    def for_all_members(self, handler: ForAllMembersHandler) -> "CreateMapExpression":
        self._definition.for_all_members.append(handler)
        return self

    def convert_to_type(self, factory: Callable[[], Any]) -> "CreateMapExpression":
        self._definition.destination_factory = factory
        return self

    def convert_using(self, type_converter: Any) -> "CreateMapExpression":
        """Replace member mapping with a whole-object converter.

        Raises:
            InvalidConfiguration: `type_converter` does not resolve to a callable
                taking exactly one argument.
        """
        self._definition.type_converter = resolve_type_converter(type_converter).convert
        return self

    def with_profile(self, profile_name: str) -> "CreateMapExpression":
        """Assign a registered profile and merge its staged definition into this one.

        Raises:
            ProfileNotFound: no profile is registered under `profile_name`.
        """
        definition = self._definition
        profile = self._registry.get_profile(profile_name)
        definition.profile = profile

        staged = self._registry.find(
            profile_key(profile_name, definition.source_key),
            profile_key(profile_name, definition.destination_key),
        )
        if staged is None or staged is definition:
            logger.debug(
                "profile %s has no staged mapping for %r -> %r",
                profile_name,
                definition.source_key,
                definition.destination_key,
            )
            return self

        definition.for_all_members.extend(staged.for_all_members)
        if staged.type_converter is not None:
            definition.type_converter = staged.type_converter
        if staged.destination_factory is not None:
            definition.destination_factory = staged.destination_factory

        # Whole-member replacement, unmatched staged members are added; no field level merge.
        for staged_member in list(staged.member_mappings.values()):
            existing = definition.find_member(staged_member.destination_property)
            if existing is not None:
                definition.member_mappings.pop(existing.source_property, None)
            definition.put_member(staged_member.clone())

        logger.debug(
            "merged profile %s into %r -> %r members=%d",
            profile_name,
            definition.source_key,
            definition.destination_key,
            len(staged.member_mappings),
        )
        return self
