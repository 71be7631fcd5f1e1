"""Mutable data model for mapping definitions.

`MappingDefinition` holds the complete configured transformation for one
ordered (source_key, destination_key) pair. `MemberMapping` holds the rule for
one destination member. Both are plain dataclasses: they carry callables and
are mutated in place by the fluent builder, so they are not validated models.

Invariants maintained by the builder:
    - `member_mappings[key].source_property == key` for every entry
    - an ignored `MemberMapping` has an empty `values` list
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Dict, Hashable, List, Optional

if TYPE_CHECKING:
    from ..profile import Profile

__all__ = ["MemberMapping", "MappingDefinition"]

ForAllMembersHandler = Callable[[Any, str, Any], Any]


@dataclass
class MemberMapping:
    source_property: Any
    destination_property: Any
    # Literals and unary functions, folded left to right at mapping time.
    values: List[Any] = field(default_factory=list)
    ignore: bool = False
    condition: Optional[Callable[[Any], Any]] = None

    def clone(self) -> "MemberMapping":
        return MemberMapping(
            source_property=self.source_property,
            destination_property=self.destination_property,
            values=list(self.values),
            ignore=self.ignore,
            condition=self.condition,
        )


@dataclass
class MappingDefinition:
    source_key: Hashable
    destination_key: Hashable
    member_mappings: Dict[Any, MemberMapping] = field(default_factory=dict)
    for_all_members: List[ForAllMembersHandler] = field(default_factory=list)
    destination_factory: Optional[Callable[[], Any]] = None
    type_converter: Optional[Callable[[Any], Any]] = None
    profile: Optional["Profile"] = None

    def find_member(self, destination_property: Any) -> Optional[MemberMapping]:
        """Linear scan for the member mapping targeting `destination_property`.

        Definitions hold a few dozen members at most, so no reverse index is kept.
        """
        for member in self.member_mappings.values():
            if member.destination_property == destination_property:
                return member
        return None

    def put_member(self, member: MemberMapping, previous_key: Any = None) -> None:
        """Store `member` under its current source key, moving it from `previous_key`."""
        if previous_key is not None and previous_key != member.source_property:
            self.member_mappings.pop(previous_key, None)
        self.member_mappings[member.source_property] = member
