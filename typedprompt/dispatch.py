"""typedprompt.dispatch

Contains the table mapping every `BaseType` to its validator, and the
`validate()` function that resolves a type descriptor against it.
"""

from types import MappingProxyType
from typing import Any, Callable, Mapping, Union

from .errors import DispatchError
from .logger import _get_logger
from .types.descriptor import ArgKind, BaseType, TypeDescriptor, parse_descriptor
from .validators import (
    validate_str,
    validate_int,
    validate_float,
    validate_num,
    validate_bool,
    validate_date,
    validate_email,
    validate_url,
    validate_uuid,
    validate_array,
    validate_tuple,
    validate_time,
    validate_ip,
    validate_hex_color,
    validate_credit_card,
    validate_enum,
    validate_regex,
    validate_positive,
    validate_negative,
)

logger = _get_logger(__name__)

__all__ = (
    "Validator",
    "VALIDATORS",
    "get_validator",
    "validate",
)


Validator = Callable[..., Any]


VALIDATORS: Mapping[BaseType, Validator] = MappingProxyType(
    {
        BaseType.STR: validate_str,
        BaseType.INT: validate_int,
        BaseType.FLOAT: validate_float,
        BaseType.NUM: validate_num,
        BaseType.BOOL: validate_bool,
        BaseType.DATE: validate_date,
        BaseType.EMAIL: validate_email,
        BaseType.URL: validate_url,
        BaseType.UUID: validate_uuid,
        BaseType.ARRAY: validate_array,
        BaseType.TUPLE: validate_tuple,
        BaseType.TIME: validate_time,
        BaseType.IP: validate_ip,
        BaseType.HEX_COLOR: validate_hex_color,
        BaseType.CREDIT_CARD: validate_credit_card,
        BaseType.ENUM: validate_enum,
        BaseType.REGEX: validate_regex,
        BaseType.POSITIVE: validate_positive,
        BaseType.NEGATIVE: validate_negative,
    }
)
"""Every `BaseType` mapped to its validator."""


_missing = [base.value for base in BaseType if base not in VALIDATORS]
if _missing:
    raise RuntimeError(f"No validator registered for: {', '.join(_missing)}")
del _missing


def get_validator(base: BaseType) -> Validator:
    try:
        return VALIDATORS[base]
    except KeyError:
        raise DispatchError(f"Type handler for '{base.value}' is not a function.") from None


def validate(
    descriptor: Union[TypeDescriptor, str],
    raw: str,
    *,
    coerce_items: bool = False,
) -> Any:
    """
    Validates a raw line of input against a type descriptor.

    Args:
        descriptor : Union[TypeDescriptor, str]
            A parsed descriptor or a descriptor string such as
            `"int"` or `"tuple:int|str"`.
        raw : str
            The raw line typed by the user.
        coerce_items : bool
            For `array` and `tuple`, return the coerced item values
            instead of the trimmed item strings.

    Returns:
        Any
            The coerced value.

    Raises:
        ValidationError
            If the input is not a valid value of the type.
        DispatchError
            If the descriptor cannot be resolved.
    """
    if not isinstance(descriptor, TypeDescriptor):
        descriptor = parse_descriptor(descriptor)

    base = descriptor.base
    validator = get_validator(base)

    if base.arg_kind is ArgKind.TYPES:
        item_validators = [get_validator(item) for item in descriptor.item_types]
        logger.debug(
            f"Resolved '{descriptor}' to {validator.__name__} with items "
            f"{[v.__name__ for v in item_validators]}"
        )
        if base is BaseType.ARRAY:
            return validator(
                raw,
                item_validators[0] if item_validators else None,
                coerce=coerce_items,
            )
        return validator(raw, item_validators, coerce=coerce_items)

    logger.debug(f"Resolved '{descriptor}' to {validator.__name__}")
    return validator(raw, *descriptor.args)
