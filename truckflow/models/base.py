"""Base model for all record models in TruckFlow.

This module provides a base Pydantic model with common configuration plus
the lenient coercion helpers shared by records that arrive as loosely shaped
JSON from the hosted document store or from exported files.
"""

import math
from decimal import Decimal
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict

Number = Union[int, float]


class BaseDataModel(BaseModel):
    """Base class for all record models.

    Provides common configuration for:
    - Validation on assignment
    - Serialization to/from dictionaries
    - Keeping unknown keys (persistence ids, timestamps) on external records

    Example:
        >>> class Note(BaseDataModel):
        ...     text: str
        >>> note = Note(text="hello", id="abc")
        >>> note.model_dump()
        {'text': 'hello', 'id': 'abc'}
    """

    model_config = ConfigDict(
        # Allow arbitrary types like Decimal, date
        arbitrary_types_allowed=True,
        # Validate on assignment to catch errors early
        validate_assignment=True,
        strict=False,
        # External records carry store-specific keys we must round-trip
        extra="allow",
        frozen=False,
    )


def coerce_number(value: Any) -> Optional[Number]:
    """Coerce a loosely typed value to an int/float, or None when invalid.

    Args:
        value: Raw value from a JSON record

    Returns:
        The number, or None for missing, boolean, non-finite or non-numeric values

    Example:
        >>> coerce_number("300")
        300
        >>> coerce_number("12.5")
        12.5
        >>> coerce_number("abc") is None
        True
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, int):
        return value

    if isinstance(value, (float, Decimal)):
        number = float(value)
        return number if math.isfinite(number) else None

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        return number if math.isfinite(number) else None

    return None


def coerce_text(value: Any) -> Optional[str]:
    """Coerce a loosely typed value to text, keeping None as None."""
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return str(value)


def to_decimal(value: Any) -> Decimal:
    """Convert a record value to Decimal, treating absent/invalid as zero.

    Args:
        value: Number, numeric string, or anything else

    Returns:
        Decimal value (Decimal("0") when the value is missing or invalid)

    Example:
        >>> to_decimal(0.55)
        Decimal('0.55')
        >>> to_decimal(None)
        Decimal('0')
    """
    number = coerce_number(value)
    if number is None:
        return Decimal("0")
    return Decimal(str(number))
