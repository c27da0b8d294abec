"""typedprompt.validators.temporal

Validators for `date` and `time` tokens.

Dates are parsed with `dateutil`, which accepts ISO 8601 (`2024-03-01`,
`2024-03-01T10:30:00Z`) as well as common written forms such as
`March 1, 2024`, `2024/03/01` or `03/01/2024` (month first). Fields
missing from the input are taken from today's date."""

import re
from datetime import datetime

from dateutil.parser import parse as parse_datetime, ParserError

from ..errors import ValidationError

__all__ = (
    "validate_date",
    "validate_time",
)


TIME_PATTERN = re.compile(r"^([01]?[0-9]|2[0-3]):([0-5][0-9])(:([0-5][0-9]))?$")


def validate_date(raw: str) -> datetime:
    value = raw.strip()
    if not value:
        raise ValidationError("Invalid date. Please enter a valid date.")
    try:
        return parse_datetime(value)
    except (ParserError, ValueError, OverflowError) as e:
        raise ValidationError("Invalid date. Please enter a valid date.") from e


def validate_time(raw: str) -> str:
    value = raw.strip()
    if not TIME_PATTERN.match(value):
        raise ValidationError(
            "Invalid time format. Please enter time in HH:MM or HH:MM:SS format."
        )
    return value
