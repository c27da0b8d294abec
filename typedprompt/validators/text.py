"""typedprompt.validators.text

Validators for plain text tokens: `str`, `bool`, `enum`, `regex` and
`hexColor`."""

import re

from cachetools import cached, LRUCache

from ..errors import DispatchError, ValidationError

__all__ = (
    "compile_pattern",
    "validate_str",
    "validate_bool",
    "validate_enum",
    "validate_regex",
    "validate_hex_color",
)


HEX_COLOR_PATTERN = re.compile(r"^#([0-9A-Fa-f]{6}|[0-9A-Fa-f]{3})$")


@cached(cache=LRUCache(maxsize=128))
def compile_pattern(pattern: str) -> re.Pattern:
    """Compiles a user supplied pattern, raising `DispatchError` if it is
    not a valid regular expression."""
    try:
        return re.compile(pattern)
    except re.error as e:
        raise DispatchError(f"Invalid regex pattern '{pattern}': {e}") from e


def validate_str(raw: str) -> str:
    value = raw.strip()
    if not value:
        raise ValidationError("Invalid string. Please enter a non-empty string.")
    return value


def validate_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value == "true":
        return True
    if value == "false":
        return False
    raise ValidationError("Invalid boolean. Please enter 'true' or 'false'.")


def validate_enum(raw: str, *options: str) -> str:
    """
    Validates that the trimmed token is exactly one of `options`.

    Args:
        raw : str
            The raw token.
        *options : str
            The allowed values. Matching is case-sensitive.
    """
    if not options:
        raise DispatchError("Type 'enum' requires a list of options.")
    value = raw.strip()
    if value not in options:
        raise ValidationError(
            f"Invalid option. Valid options are: {', '.join(options)}."
        )
    return value


def validate_regex(raw: str, pattern: str) -> str:
    value = raw.strip()
    # search, not fullmatch: anchors are up to the pattern
    if compile_pattern(pattern).search(value) is None:
        raise ValidationError(
            "Input does not match the pattern. "
            "Please ensure the input matches the expected pattern."
        )
    return value


def validate_hex_color(raw: str) -> str:
    value = raw.strip()
    if not HEX_COLOR_PATTERN.match(value):
        raise ValidationError(
            "Invalid hex color code. "
            "Please enter a valid hex color code (e.g., #RRGGBB)."
        )
    return value
