"""typedprompt.validators.compound

Validators for the compound `array` and `tuple` types. Both split the
token on commas and check each item against another validator.

By default items are returned as the trimmed strings the user typed;
item validators only check their shape. Passing `coerce=True` returns
the item validators' results instead."""

from typing import Any, Callable, List, Optional, Sequence, Tuple

from ..errors import ValidationError

__all__ = (
    "split_items",
    "validate_array",
    "validate_tuple",
)


ItemValidator = Callable[[str], Any]


def split_items(raw: str) -> List[str]:
    return [item.strip() for item in raw.strip().split(",")]


def validate_array(
    raw: str,
    item_validator: Optional[ItemValidator] = None,
    *,
    coerce: bool = False,
) -> List[Any]:
    """
    Validates a comma separated list.

    Args:
        raw : str
            The raw token.
        item_validator : Optional[ItemValidator]
            Validator every item must pass. If not given, any items
            are accepted.
        coerce : bool
            Return the validated item values instead of the strings.
    """
    items = split_items(raw)
    if item_validator is None:
        return items

    values = []
    for item in items:
        try:
            values.append(item_validator(item))
        except ValidationError as e:
            raise ValidationError(
                "Invalid array item. Ensure each item is correctly formatted."
            ) from e
    return values if coerce else items


def validate_tuple(
    raw: str,
    item_validators: Sequence[ItemValidator],
    *,
    coerce: bool = False,
) -> Tuple[Any, ...]:
    """
    Validates a comma separated, fixed length tuple where item `i` must
    pass `item_validators[i]`.
    """
    items = split_items(raw)
    if len(items) != len(item_validators):
        raise ValidationError(
            f"Invalid tuple. Expected a tuple of length {len(item_validators)}."
        )

    values = []
    for index, (item, validator) in enumerate(zip(items, item_validators)):
        try:
            values.append(validator(item))
        except ValidationError as e:
            raise ValidationError(
                f"Invalid item at index {index}. "
                "Ensure the item is correctly formatted."
            ) from e
    return tuple(values) if coerce else tuple(items)
