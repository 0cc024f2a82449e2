"""Expense data model."""

from enum import Enum
from typing import Any, Optional

from pydantic import Field, field_validator

from truckflow.models.base import BaseDataModel, Number, coerce_number, coerce_text


class ExpenseCategory(str, Enum):
    """Expense categories offered by the expense form."""

    FUEL = "fuel"
    MAINTENANCE = "maintenance"
    INSURANCE = "insurance"
    TOLL = "toll"
    FOOD = "food"
    OTHER = "other"


class Expense(BaseDataModel):
    """A business expense.

    Attributes:
        amount: Expense amount (None when absent or malformed)
        category: One of the ExpenseCategory values
        date: ISO-ish date string
        description: Optional free text

    Example:
        >>> Expense(amount="45.10", category="fuel").amount
        45.1
    """

    amount: Optional[Number] = Field(default=None, description="Expense amount")
    category: Optional[str] = None
    date: Optional[str] = None
    description: Optional[str] = None

    @field_validator("category", "date", "description", mode="before")
    @classmethod
    def coerce_text_fields(cls, v: Any) -> Optional[str]:
        """Accept non-text values from loosely typed records."""
        return coerce_text(v)

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_amount(cls, v: Any) -> Optional[Number]:
        """Treat missing or malformed amounts as absent."""
        return coerce_number(v)
