"""Mapping execution: apply a finalized `MappingDefinition` to runtime input.

Single item algorithm:
    1. Build the destination with the definition's factory, or a new dict.
    2. If a type converter is set, return its result for a `ResolutionContext`;
       member rules are skipped entirely.
    3. Otherwise walk every own member of the source:
       - explicit member mapping: skip when ignored or when the condition
         returns exactly False; fold literals / functions over the raw value;
         write under the mapping's destination property.
       - no member mapping: copy the raw value, renamed through the assigned
         profile's naming conventions when both are set.
    4. Assign through the all-members handlers when any are registered,
       otherwise directly on the destination.

Lists and tuples (named tuples excepted) are mapped element by element into a new list; elements whose
result is None or a falsy scalar are dropped from the output.
"""
from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping, MutableMapping
from typing import Any, Iterable, List, Tuple

from pydantic import BaseModel

from .configuration import MemberOptions
from .converters import ResolutionContext
from .models.definitions import MappingDefinition, MemberMapping
from .naming import transform_member_name

logger = logging.getLogger(__name__)

__all__ = [
    "is_omitted",
    "iter_source_members",
    "map_array",
    "map_item",
    "map_value",
]

_SKIP = object()


def map_value(definition: MappingDefinition, source: Any) -> Any:
    if isinstance(source, (list, tuple)) and not _is_record(source):
        return map_array(definition, source)
    return map_item(definition, source)


def map_array(definition: MappingDefinition, sources: Iterable[Any]) -> List[Any]:
    destinations: List[Any] = []
    for index, source in enumerate(sources):
        destination = map_item(definition, source)
        if is_omitted(destination):
            logger.debug("omitting element %d mapped to %r", index, destination)
            continue
        destinations.append(destination)
    return destinations


def _is_record(value: Any) -> bool:
    """Named tuples are single records, not collections."""
    return isinstance(value, tuple) and hasattr(value, "_fields")


def is_omitted(value: Any) -> bool:
    """True for None and falsy scalars; empty containers and objects are kept."""
    if value is None:
        return True
    if isinstance(value, (bool, int, float, str, bytes)):
        return not value
    return False


def map_item(definition: MappingDefinition, source: Any) -> Any:
    destination = (
        definition.destination_factory() if definition.destination_factory is not None else {}
    )
    if definition.type_converter is not None:
        return definition.type_converter(
            ResolutionContext(source_value=source, destination_value=destination)
        )
    for name, value in iter_source_members(source):
        _map_property(definition, source, name, value, destination)
    return destination


def iter_source_members(source: Any) -> List[Tuple[Any, Any]]:
    """Own members of `source` as (name, value) pairs, in declaration order."""
    if source is None:
        return []
    if isinstance(source, Mapping):
        return list(source.items())
    if isinstance(source, BaseModel):
        return list(source)
    if _is_record(source):
        return list(source._asdict().items())
    if dataclasses.is_dataclass(source) and not isinstance(source, type):
        return [(f.name, getattr(source, f.name)) for f in dataclasses.fields(source)]
    try:
        return list(vars(source).items())
    except TypeError:
        return []


def _map_property(
    definition: MappingDefinition,
    source: Any,
    name: Any,
    value: Any,
    destination: Any,
) -> None:
    member = definition.member_mappings.get(name)
    if member is not None:
        resolved = _resolve_member_value(member, source, name, value)
        if resolved is _SKIP:
            return
        _set_value(definition, destination, member.destination_property, resolved)
        return

    destination_name = name
    profile = definition.profile
    if profile is not None:
        destination_name = transform_member_name(
            name,
            getattr(profile, "source_member_naming_convention", None),
            getattr(profile, "destination_member_naming_convention", None),
        )
    _set_value(definition, destination, destination_name, value)


def _resolve_member_value(member: MemberMapping, source: Any, name: Any, value: Any) -> Any:
    if member.ignore:
        return _SKIP
    if member.condition is not None and member.condition(source) is False:
        return _SKIP

    current: Any = value
    for value_or_function in member.values:
        if callable(value_or_function):
            result = value_or_function(
                MemberOptions(
                    source_object=source,
                    source_property_name=name,
                    destination_property_value=current,
                )
            )
            if result is not None:
                current = result
        else:
            current = value_or_function
    return current


def _set_value(definition: MappingDefinition, destination: Any, name: Any, value: Any) -> None:
    if definition.for_all_members:
        for handler in definition.for_all_members:
            handler(destination, name, value)
        return
    if isinstance(destination, MutableMapping):
        destination[name] = value
    else:
        setattr(destination, name, value)
