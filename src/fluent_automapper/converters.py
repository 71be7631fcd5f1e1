"""Type converter resolution for `convert_using`.

A type converter replaces all member-level mapping for a definition. Callers
may hand `convert_using` one of three shapes:

1. an object exposing a `convert` method (e.g. a `TypeConverter` instance),
2. a plain callable taking exactly one argument,
3. a class that can be instantiated without arguments and exposes `convert`.

`resolve_type_converter` classifies the value once, at configuration time,
into a `ResolvedConverter` carrying its `ConverterKind` and one canonical
single-argument callable. The executor only ever sees that callable.
"""
from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict

from .errors import InvalidConfiguration

logger = logging.getLogger(__name__)

__all__ = [
    "ConverterKind",
    "ResolutionContext",
    "ResolvedConverter",
    "TypeConverter",
    "positional_arity",
    "resolve_type_converter",
]


class ResolutionContext(BaseModel):
    """Argument passed to a type converter for each mapped item."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    source_value: Any = None
    destination_value: Any = None


class TypeConverter:
    """Base class for class-based type converters.

    Subclasses override `convert` and return the destination object.
    """

    def convert(self, resolution_context: ResolutionContext) -> Any:
        raise NotImplementedError(
            "TypeConverter.convert is abstract. Use a TypeConverter subclass instead."
        )


class ConverterKind(str, Enum):
    CONVERTER_CAPABILITY = "converter_capability"
    LITERAL_FUNCTION = "literal_function"
    CONVERTER_CONSTRUCTOR = "converter_constructor"


@dataclass(frozen=True)
class ResolvedConverter:
    kind: ConverterKind
    convert: Callable[[ResolutionContext], Any]


def positional_arity(func: Any) -> int:
    """Number of positional parameters `func` accepts, or -1 if unknown."""
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return -1
    count = 0
    for p in signature.parameters.values():
        if p.kind is inspect.Parameter.VAR_POSITIONAL:
            return -1
        if p.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
            count += 1
    return count


def _classify(value: Any) -> ResolvedConverter:
    if not isinstance(value, type) and callable(getattr(value, "convert", None)):
        return ResolvedConverter(ConverterKind.CONVERTER_CAPABILITY, value.convert)
    if not isinstance(value, type) and callable(value) and positional_arity(value) == 1:
        return ResolvedConverter(ConverterKind.LITERAL_FUNCTION, value)
    instance = value()
    return ResolvedConverter(ConverterKind.CONVERTER_CONSTRUCTOR, instance.convert)


def resolve_type_converter(value: Any) -> ResolvedConverter:
    """Normalize `value` into a single-argument converter callable.

    Raises:
        InvalidConfiguration: resolution failed or the resulting callable does
            not take exactly one positional argument.
    """
    try:
        resolved = _classify(value)
    except Exception as e:
        raise InvalidConfiguration(
            f"The value provided for convert_using is invalid. Exception: {e}"
        ) from e
    if not callable(resolved.convert) or positional_arity(resolved.convert) != 1:
        raise InvalidConfiguration(
            "The value provided for convert_using is invalid, because it does not "
            "provide exactly one (resolution_context) parameter."
        )
    logger.debug("resolved type converter kind=%s value=%r", resolved.kind.value, value)
    return resolved
