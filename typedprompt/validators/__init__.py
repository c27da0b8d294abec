"""typedprompt.validators

Contains the validators for every type a prompt can ask for. Each
validator is a pure function taking the raw line (and any arguments
from the type descriptor) and either returning the coerced value or
raising `typedprompt.errors.ValidationError`."""

from .text import (
    compile_pattern,
    validate_str,
    validate_bool,
    validate_enum,
    validate_regex,
    validate_hex_color,
)
from .numeric import (
    luhn_checksum_valid,
    validate_int,
    validate_float,
    validate_num,
    validate_positive,
    validate_negative,
    validate_credit_card,
)
from .temporal import validate_date, validate_time
from .network import (
    normalize_email,
    validate_email,
    validate_url,
    validate_uuid,
    validate_ip,
)
from .compound import split_items, validate_array, validate_tuple

__all__ = (
    "compile_pattern",
    "luhn_checksum_valid",
    "normalize_email",
    "split_items",
    "validate_str",
    "validate_int",
    "validate_float",
    "validate_num",
    "validate_bool",
    "validate_date",
    "validate_email",
    "validate_url",
    "validate_uuid",
    "validate_array",
    "validate_tuple",
    "validate_time",
    "validate_ip",
    "validate_hex_color",
    "validate_credit_card",
    "validate_enum",
    "validate_regex",
    "validate_positive",
    "validate_negative",
)
