"""
tests.test_descriptor

Contains tests for type descriptor parsing and the `PromptConfig` model.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from typedprompt.errors import DispatchError
from typedprompt.types import (
    ArgKind,
    BaseType,
    PromptConfig,
    TypeDescriptor,
    parse_descriptor,
)


def test_parse_simple_descriptor():
    descriptor = parse_descriptor("int")
    assert descriptor.base is BaseType.INT
    assert descriptor.args == ()
    assert descriptor.marker is False
    assert str(descriptor) == "int"


def test_parse_marker():
    descriptor = parse_descriptor("&float")
    assert descriptor.base is BaseType.FLOAT
    assert descriptor.marker is True
    assert descriptor.raw == "&float"


def test_parse_camel_case_names():
    assert parse_descriptor("hexColor").base is BaseType.HEX_COLOR
    assert parse_descriptor("creditCard").base is BaseType.CREDIT_CARD


def test_parse_enum_options():
    descriptor = parse_descriptor("enum:red|green|blue")
    assert descriptor.base is BaseType.ENUM
    assert descriptor.args == ("red", "green", "blue")


def test_parse_regex_keeps_pattern_whole():
    descriptor = parse_descriptor("regex:^(a|b):\\d+$")
    assert descriptor.args == ("^(a|b):\\d+$",)


def test_parse_compound_item_types():
    assert parse_descriptor("array").item_types == ()
    assert parse_descriptor("array:email").item_types == (BaseType.EMAIL,)
    assert parse_descriptor("tuple:int|str|bool").item_types == (
        BaseType.INT,
        BaseType.STR,
        BaseType.BOOL,
    )
    # not a compound type
    assert parse_descriptor("enum:a|b").item_types == ()


@pytest.mark.parametrize(
    "text",
    [
        "nope",
        "",
        "array:nope",
        "array:enum",
        "tuple:int|array",
        "array:int|str",
        "tuple",
        "int:5",
        "enum",
        "enum:a||b",
        "regex",
        "regex:(",
    ],
)
def test_parse_invalid_descriptors(text):
    with pytest.raises(DispatchError):
        parse_descriptor(text)


@pytest.mark.parametrize("value", [["int"], 5, None, b"int"])
def test_parse_rejects_non_string_descriptors(value):
    with pytest.raises(DispatchError, match="must be a string"):
        parse_descriptor(value)


@pytest.mark.parametrize(
    "fields",
    [
        {"base": BaseType.REGEX},
        {"base": BaseType.REGEX, "args": ("a", "b")},
        {"base": BaseType.REGEX, "args": ("(",)},
        {"base": BaseType.TUPLE},
        {"base": BaseType.ARRAY, "args": ("int", "str")},
        {"base": BaseType.ARRAY, "args": ("enum",)},
        {"base": BaseType.TUPLE, "args": ("int", "nope")},
        {"base": BaseType.ENUM},
        {"base": BaseType.ENUM, "args": ("a", "")},
        {"base": BaseType.INT, "args": ("x",)},
    ],
)
def test_descriptor_model_checks_arguments(fields):
    with pytest.raises(DispatchError):
        TypeDescriptor(**fields)


def test_descriptor_model_built_directly():
    descriptor = TypeDescriptor(base=BaseType.TUPLE, args=("int", "bool"))
    assert descriptor.item_types == (BaseType.INT, BaseType.BOOL)
    assert str(descriptor) == "tuple"
    assert TypeDescriptor(base=BaseType.ENUM, args=("a", "b")).args == ("a", "b")


def test_parse_is_cached():
    assert parse_descriptor("tuple:int|str") is parse_descriptor("tuple:int|str")


def test_arg_kinds():
    assert BaseType.ARRAY.arg_kind is ArgKind.TYPES
    assert BaseType.ENUM.arg_kind is ArgKind.OPTIONS
    assert BaseType.REGEX.arg_kind is ArgKind.PATTERN
    assert BaseType.STR.arg_kind is ArgKind.NONE
    assert BaseType.DATE.is_simple
    assert not BaseType.TUPLE.is_simple


# ------------------------------------------------------------------------------
# PromptConfig
# ------------------------------------------------------------------------------


def test_prompt_config_defaults():
    config = PromptConfig()
    assert config.has_default is False
    assert config.is_async is False
    assert config.coerce_items is False
    assert config.exit_token == "q"


def test_prompt_config_none_is_a_default():
    config = PromptConfig(default_value=None)
    assert config.has_default is True
    assert config.default_value is None


def test_prompt_config_exit_token_normalized():
    assert PromptConfig(exit_token=" QUIT ").exit_token == "quit"
    with pytest.raises(PydanticValidationError):
        PromptConfig(exit_token="   ")


def test_prompt_config_rejects_unknown_options():
    with pytest.raises(PydanticValidationError):
        PromptConfig(defaultValue="x")


if __name__ == "__main__":
    pytest.main([__file__])
