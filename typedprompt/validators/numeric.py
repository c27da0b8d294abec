"""typedprompt.validators.numeric

Validators for numeric tokens: `int`, `float`, `num`, `positive`,
`negative` and `creditCard`, along with the Luhn checksum used by the
latter."""

import re

from ..errors import ValidationError

__all__ = (
    "luhn_checksum_valid",
    "validate_int",
    "validate_float",
    "validate_num",
    "validate_positive",
    "validate_negative",
    "validate_credit_card",
)


INT_PATTERN = re.compile(r"^[+-]?\d+$", re.ASCII)
FLOAT_PATTERN = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$", re.ASCII)
CREDIT_CARD_PATTERN = re.compile(r"^(\d{4}[- ]?){3}\d{4}$", re.ASCII)
NON_DIGITS = re.compile(r"\D", re.ASCII)


def _parse_float(raw: str) -> float | None:
    value = raw.strip()
    if not FLOAT_PATTERN.match(value):
        return None
    return float(value)


def luhn_checksum_valid(digits: str) -> bool:
    """
    Checks a digit string against the Luhn checksum.

    Starting from the rightmost digit, every second digit is doubled
    (subtracting 9 when the result exceeds 9) and all digits are summed;
    the number is valid when the sum is a multiple of 10.

    Args:
        digits : str
            A string of ASCII digits only.

    Returns:
        bool
            Whether the checksum holds.
    """
    total = 0
    for position, char in enumerate(reversed(digits)):
        digit = int(char)
        if position % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


def validate_int(raw: str) -> int:
    value = raw.strip()
    if not INT_PATTERN.match(value):
        raise ValidationError("Invalid integer. Please enter a valid integer.")
    return int(value)


def validate_float(raw: str) -> float:
    number = _parse_float(raw)
    if number is None:
        raise ValidationError(
            "Invalid float. Please enter a valid floating-point number."
        )
    return number


def validate_num(raw: str) -> float:
    number = _parse_float(raw)
    if number is None:
        raise ValidationError("Invalid number. Please enter a valid number.")
    return number


def validate_positive(raw: str) -> float:
    number = _parse_float(raw)
    if number is None or number <= 0:
        raise ValidationError(
            "Must be a positive number. Please enter a number greater than zero."
        )
    return number


def validate_negative(raw: str) -> float:
    number = _parse_float(raw)
    if number is None or number >= 0:
        raise ValidationError(
            "Must be a negative number. Please enter a number less than zero."
        )
    return number


def validate_credit_card(raw: str) -> str:
    """Strips everything but digits, then requires 16 digits passing
    the Luhn checksum. Returns the digits."""
    digits = NON_DIGITS.sub("", raw.strip())
    if not CREDIT_CARD_PATTERN.match(digits) or not luhn_checksum_valid(digits):
        raise ValidationError(
            "Invalid credit card number. "
            "Please enter a valid credit card number."
        )
    return digits
