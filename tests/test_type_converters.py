from __future__ import annotations

import pytest

from fluent_automapper import InvalidConfiguration, TypeConverter, automapper
from fluent_automapper.converters import (
    ConverterKind,
    ResolutionContext,
    positional_arity,
    resolve_type_converter,
)


class _FixedConverter(TypeConverter):
    def convert(self, resolution_context):
        return {"converted": resolution_context.source_value["value"]}


class _TwoArgConverter:
    def convert(self, context, extra):
        return None


class _NeedsArguments:
    def __init__(self, required):
        self.required = required

    def convert(self, context):
        return None


def test_resolution_order_and_kinds():
    instance = _FixedConverter()
    assert resolve_type_converter(instance).kind is ConverterKind.CONVERTER_CAPABILITY
    assert resolve_type_converter(lambda ctx: ctx).kind is ConverterKind.LITERAL_FUNCTION
    resolved = resolve_type_converter(_FixedConverter)
    assert resolved.kind is ConverterKind.CONVERTER_CONSTRUCTOR
    assert resolved.convert(ResolutionContext(source_value={"value": 3})) == {"converted": 3}


@pytest.mark.parametrize(
    "value",
    [
        lambda a, b: None,
        _TwoArgConverter,
        _TwoArgConverter(),
        _NeedsArguments,
        42,
        None,
    ],
)
def test_invalid_converters_raise(value):
    with pytest.raises(InvalidConfiguration):
        resolve_type_converter(value)


def test_abstract_type_converter_raises_when_called():
    with pytest.raises(NotImplementedError):
        TypeConverter().convert(ResolutionContext())


def test_positional_arity():
    assert positional_arity(lambda ctx: None) == 1
    assert positional_arity(_FixedConverter().convert) == 1
    assert positional_arity(lambda *args: None) == -1


def test_convert_using_bypasses_member_configuration():
    automapper.create_map("a", "b").for_member("x", 99).convert_using(lambda ctx: {"fixed": True})
    assert automapper.map("a", "b", {"x": 1, "y": 2}) == {"fixed": True}
    assert automapper.map("a", "b", "anything") == {"fixed": True}


def test_convert_using_receives_source_and_constructed_destination():
    class Target:
        pass

    seen = {}

    def converter(ctx):
        seen["source"] = ctx.source_value
        seen["destination"] = ctx.destination_value
        ctx.destination_value.name = ctx.source_value["name"].title()
        return ctx.destination_value

    automapper.create_map("src", "dst").convert_to_type(Target).convert_using(converter)
    result = automapper.map("src", "dst", {"name": "john"})

    assert isinstance(result, Target)
    assert result.name == "John"
    assert seen["source"] == {"name": "john"}
    assert seen["destination"] is result


def test_convert_using_with_class_and_instance():
    automapper.create_map("a", "b").convert_using(_FixedConverter)
    automapper.create_map("a", "c").convert_using(_FixedConverter())
    assert automapper.map("a", "b", {"value": 1}) == {"converted": 1}
    assert automapper.map("a", "c", {"value": 2}) == {"converted": 2}


def test_convert_using_fails_fast():
    expression = automapper.create_map("a", "b")
    with pytest.raises(InvalidConfiguration):
        expression.convert_using(lambda a, b: None)
    assert expression.definition.type_converter is None
