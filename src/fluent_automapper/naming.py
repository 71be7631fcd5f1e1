"""Member naming conventions used for automatic member mapping.

A naming convention knows how to split a member name into fragments
(`splitting_expression`) and how to join fragments back into a name
(`transform_property_name`). Profiles carry a source and a destination
convention; members without an explicit mapping are renamed by splitting with
the source convention and joining with the destination convention.

Built-in conventions:
    CamelCaseNamingConvention: fullName
    PascalCaseNamingConvention: FullName
    SnakeCaseNamingConvention: full_name
"""
from __future__ import annotations

import logging
import re
from typing import List, Optional, Pattern, Sequence

logger = logging.getLogger(__name__)

__all__ = [
    "NamingConvention",
    "CamelCaseNamingConvention",
    "PascalCaseNamingConvention",
    "SnakeCaseNamingConvention",
    "split_member_name",
    "transform_member_name",
]


class NamingConvention:
    """Base naming convention; subclasses provide the pattern and the join."""

    splitting_expression: Pattern[str] = re.compile(r"(?!)")
    separator_character: str = ""

    def transform_property_name(self, parts: Sequence[str]) -> str:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class CamelCaseNamingConvention(NamingConvention):
    splitting_expression = re.compile(r"(^[a-z]+(?=$|[A-Z]{1}[a-z0-9]+)|[A-Z]?[a-z0-9]+)")

    def transform_property_name(self, parts: Sequence[str]) -> str:
        result = ""
        for index, part in enumerate(parts):
            if index == 0:
                result += part[:1].lower() + part[1:]
            else:
                result += part[:1].upper() + part[1:]
        return result


class PascalCaseNamingConvention(NamingConvention):
    splitting_expression = re.compile(r"(^[A-Z]+(?=$|[A-Z]{1}[a-z0-9]+)|[A-Z]?[a-z0-9]+)")

    def transform_property_name(self, parts: Sequence[str]) -> str:
        return "".join(part[:1].upper() + part[1:] for part in parts)


class SnakeCaseNamingConvention(NamingConvention):
    splitting_expression = re.compile(r"_+")
    separator_character = "_"

    def transform_property_name(self, parts: Sequence[str]) -> str:
        return self.separator_character.join(part.lower() for part in parts)


def split_member_name(name: str, convention: NamingConvention) -> List[str]:
    """Split `name` with the convention's expression, dropping empty fragments.

    Capturing groups in the expression keep the matched fragments in the
    result of `re.split`; the text between matches is empty for well-formed
    names and is discarded.
    """
    return [part for part in convention.splitting_expression.split(name) if part]


def transform_member_name(
    name: str,
    source_convention: Optional[NamingConvention],
    destination_convention: Optional[NamingConvention],
) -> str:
    """Rename `name` from the source convention to the destination convention.

    Never raises: a missing convention, a failing convention or an empty result
    all fall back to the unmodified name.
    """
    if source_convention is None or destination_convention is None:
        return name
    try:
        parts = split_member_name(name, source_convention)
        transformed = destination_convention.transform_property_name(parts)
    except Exception as e:  # noqa: BLE001 - conventions are user supplied
        logger.debug("naming transform failed name=%s error=%s", name, e)
        return name
    if not isinstance(transformed, str) or not transformed:
        return name
    return transformed
