from typing import Union
from ...common.exceptions import ValidationError
from ...common.schemas.fields import INT_MAX

def parse_identity(value: Union[int, str]) -> int:
    """
    Turns caller supplied identity (int or ASCII numeric text) into a positive
    int that fits the id column. Anything else is a ValidationError, never a
    degenerate query.
    """
    if isinstance(value, bool):
        raise ValidationError(f"Invalid identity: {value!r}")
    if isinstance(value, int):
        identity = value
    elif isinstance(value, str) and value.strip().isascii() and value.strip().isdigit():
        identity = int(value.strip())
    else:
        raise ValidationError(f"Invalid identity: {value!r}")

    if identity <= 0:
        raise ValidationError(f"Identity must be a positive integer, got {identity}")
    if identity > INT_MAX:
        raise ValidationError(f"Identity out of range: {identity}")
    return identity

def parse_intensity(value: Union[int, str]) -> int:
    """
    Intensities may be any integer, negative and zero included. Values past
    the column range are kept; the matcher clamps its window instead.
    """
    if isinstance(value, bool):
        raise ValidationError(f"Invalid traffic intensity: {value!r}")
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if not text.isascii():
        raise ValidationError(f"Invalid traffic intensity: {value!r}")
    try:
        return int(text)
    except ValueError as e:
        raise ValidationError(f"Invalid traffic intensity: {value!r}") from e
