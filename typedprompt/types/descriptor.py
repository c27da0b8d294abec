"""typedprompt.types.descriptor

Contains the `BaseType` tag set and the `TypeDescriptor` model, which is
the parsed form of the type strings given to `prompt_input()`.

A type descriptor string has the form

```
[&]baseType[:arguments]
```

where `arguments` depends on the base type:

- `array:int` / `tuple:int|str|bool` : sub-type names, separated by `|`
- `enum:red|green|blue` : the allowed values, separated by `|`
- `regex:^[a-z]+:\\d+$` : a pattern, kept whole (it may contain `|` or `:`)
"""

from enum import Enum
from typing import Tuple

from cachetools import cached, LRUCache
from pydantic import BaseModel, ConfigDict, model_validator

from ..errors import DispatchError
from ..validators.text import compile_pattern

__all__ = (
    "ArgKind",
    "BaseType",
    "TypeDescriptor",
    "parse_descriptor",
    "MARKER",
)


MARKER = "&"
"""Optional leading marker on a type descriptor. Stripped and recorded."""


class ArgKind(str, Enum):
    """The kind of arguments a base type accepts after the `:`."""

    NONE = "none"
    TYPES = "types"
    OPTIONS = "options"
    PATTERN = "pattern"


class BaseType(str, Enum):
    """The closed set of types a prompt can ask for."""

    STR = "str"
    INT = "int"
    FLOAT = "float"
    NUM = "num"
    BOOL = "bool"
    DATE = "date"
    EMAIL = "email"
    URL = "url"
    UUID = "uuid"
    ARRAY = "array"
    TUPLE = "tuple"
    TIME = "time"
    IP = "ip"
    HEX_COLOR = "hexColor"
    CREDIT_CARD = "creditCard"
    ENUM = "enum"
    REGEX = "regex"
    POSITIVE = "positive"
    NEGATIVE = "negative"

    @property
    def arg_kind(self) -> ArgKind:
        return _ARG_KINDS.get(self, ArgKind.NONE)

    @property
    def is_simple(self) -> bool:
        """Whether this type takes no arguments, and so can be used as
        the item type of an `array` or `tuple`."""
        return self.arg_kind is ArgKind.NONE

    @classmethod
    def from_name(cls, name: str) -> "BaseType":
        try:
            return cls(name)
        except ValueError:
            raise DispatchError(
                f"Type handler for '{name}' is not a function."
            ) from None


_ARG_KINDS = {
    BaseType.ARRAY: ArgKind.TYPES,
    BaseType.TUPLE: ArgKind.TYPES,
    BaseType.ENUM: ArgKind.OPTIONS,
    BaseType.REGEX: ArgKind.PATTERN,
}


class TypeDescriptor(BaseModel):
    """
    A parsed type descriptor.

    Constructing one directly runs the same checks as `parse_descriptor()`,
    so every `TypeDescriptor` can be dispatched.

    Attributes:
        base : BaseType
            The type selecting the validator.
        args : Tuple[str, ...]
            Sub-type names, enum options, or a single pattern,
            depending on `base.arg_kind`.
        marker : bool
            Whether the descriptor carried the leading `&` marker.
        raw : str
            The descriptor string as given.

    Raises:
        DispatchError
            If `args` do not fit `base`.
    """

    model_config = ConfigDict(frozen=True)

    base: BaseType
    args: Tuple[str, ...] = ()
    marker: bool = False
    raw: str = ""

    @model_validator(mode="after")
    def check_arguments(self) -> "TypeDescriptor":
        kind = self.base.arg_kind
        if kind is ArgKind.NONE and self.args:
            raise DispatchError(
                f"Type '{self.base.value}' does not accept arguments, "
                f"got '{'|'.join(self.args)}'."
            )
        if kind is ArgKind.TYPES:
            _check_item_types(self.base, self.args)
        elif kind is ArgKind.OPTIONS:
            if not self.args or not all(self.args):
                raise DispatchError(
                    "Type 'enum' requires a list of options, e.g. 'enum:red|green'."
                )
        elif kind is ArgKind.PATTERN:
            if len(self.args) != 1 or not self.args[0]:
                raise DispatchError(
                    "Type 'regex' requires a pattern, e.g. 'regex:^[a-z]+$'."
                )
            compile_pattern(self.args[0])
        return self

    @property
    def item_types(self) -> Tuple[BaseType, ...]:
        """The sub-types of an `array` or `tuple` descriptor."""
        if self.base.arg_kind is not ArgKind.TYPES:
            return ()
        return tuple(BaseType.from_name(name) for name in self.args)

    def __str__(self) -> str:
        return self.raw or self.base.value


def _split_arguments(base: BaseType, text: str) -> Tuple[str, ...]:
    kind = base.arg_kind
    if kind is ArgKind.PATTERN:
        return (text,) if text else ()
    if kind in (ArgKind.TYPES, ArgKind.OPTIONS):
        return tuple(part.strip() for part in text.split("|")) if text else ()
    if text:
        raise DispatchError(
            f"Type '{base.value}' does not accept arguments, got '{text}'."
        )
    return ()


def _check_item_types(base: BaseType, names: Tuple[str, ...]) -> None:
    if base is BaseType.TUPLE and not names:
        raise DispatchError(
            "Type 'tuple' requires at least one item type, e.g. 'tuple:int|str'."
        )
    if base is BaseType.ARRAY and len(names) > 1:
        raise DispatchError(
            f"Type 'array' accepts a single item type, got {len(names)}."
        )
    for name in names:
        item = BaseType.from_name(name)
        if not item.is_simple:
            raise DispatchError(
                f"Unsupported item type '{name}' inside '{base.value}'."
            )


@cached(cache=LRUCache(maxsize=256))
def _parse_descriptor(text: str) -> TypeDescriptor:
    marker = text.startswith(MARKER)
    body = text[len(MARKER):] if marker else text
    name, _, arguments = body.partition(":")

    base = BaseType.from_name(name.strip())
    args = _split_arguments(base, arguments)
    return TypeDescriptor(base=base, args=args, marker=marker, raw=text)


def parse_descriptor(text: str) -> TypeDescriptor:
    """
    Parses a type descriptor string into a `TypeDescriptor`.

    Args:
        text : str
            The type descriptor, e.g. `"int"`, `"array:email"` or
            `"enum:red|green|blue"`.

    Returns:
        TypeDescriptor
            The parsed descriptor. Results are cached per string.

    Raises:
        DispatchError
            If the descriptor names an unknown type or its arguments
            are malformed.
    """
    if not isinstance(text, str):
        raise DispatchError(
            f"Type descriptor must be a string, got {type(text).__name__}."
        )
    return _parse_descriptor(text)
