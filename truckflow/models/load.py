"""Load data models.

This module defines the Load record as stored by the application and the
RawLoad record found in exported files that still need conversion.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import ConfigDict, Field, field_validator

from truckflow.models.base import BaseDataModel, Number, coerce_number, coerce_text
from truckflow.normalizers import resolve_state


class LoadStatus(str, Enum):
    """Lifecycle status of a load."""

    PENDING = "Pending"
    DELIVERED = "Delivered"


class Load(BaseDataModel):
    """A freight trip as stored by the application.

    All fields are optional because records come from a schemaless store.
    Invalid numbers are coerced to None and state fields are normalized to a
    valid 2-letter code or "" so downstream calculations never fail.

    Attributes:
        load_id: Broker/rate confirmation identifier
        broker_name: Broker the load was booked with
        pickup_city: Pickup city
        pickup_state: Pickup state code ("" when unresolved)
        delivery_city: Delivery city
        delivery_state: Delivery state code ("" when unresolved)
        pickup_date: ISO-ish pickup date string
        delivery_date: ISO-ish delivery date string
        loaded_miles: Paid miles
        deadhead_miles: Empty miles driven to reach the pickup
        gross_amount: Total linehaul paid by the broker
        notes: Free-text notes
        status: "Pending" or "Delivered"

    Example:
        >>> load = Load(gross_amount="2000", pickup_state="ohio")
        >>> load.gross_amount, load.pickup_state
        (2000, 'OH')
    """

    load_id: Optional[str] = None
    broker_name: Optional[str] = None
    pickup_city: Optional[str] = None
    pickup_state: Optional[str] = None
    delivery_city: Optional[str] = None
    delivery_state: Optional[str] = None
    pickup_date: Optional[str] = None
    delivery_date: Optional[str] = None
    loaded_miles: Optional[Number] = Field(default=None, description="Paid miles")
    deadhead_miles: Optional[Number] = Field(default=None, description="Empty miles")
    gross_amount: Optional[Number] = Field(default=None, description="Gross pay")
    notes: Optional[str] = None
    status: Optional[str] = None

    @field_validator(
        "load_id",
        "broker_name",
        "pickup_city",
        "delivery_city",
        "pickup_date",
        "delivery_date",
        "notes",
        "status",
        mode="before",
    )
    @classmethod
    def coerce_text_fields(cls, v: Any) -> Optional[str]:
        """Accept non-text values from loosely typed records."""
        return coerce_text(v)

    @field_validator("pickup_state", "delivery_state", mode="before")
    @classmethod
    def normalize_state(cls, v: Any) -> Optional[str]:
        """Normalize a state to a valid 2-letter code or "".

        Args:
            v: Raw state value

        Returns:
            None when absent, otherwise a valid code or ""
        """
        if v is None:
            return None
        return resolve_state(coerce_text(v))

    @field_validator("loaded_miles", "deadhead_miles", "gross_amount", mode="before")
    @classmethod
    def coerce_numbers(cls, v: Any) -> Optional[Number]:
        """Treat missing or malformed numbers as absent."""
        return coerce_number(v)


class RawLoad(BaseDataModel):
    """A load record from an exported file, before conversion.

    Field names follow the export format. Unknown keys are dropped.

    Example:
        >>> raw = RawLoad(loadId="L1", origin="Rittmann, oh", miles=300)
        >>> raw.load_id, raw.miles
        ('L1', 300)
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    load_id: Optional[str] = Field(default=None, alias="loadId")
    broker: Optional[str] = None
    origin: Optional[str] = None
    destination: Optional[str] = None
    pu_date: Optional[str] = Field(default=None, alias="puDate")
    do_date: Optional[str] = Field(default=None, alias="doDate")
    miles: Optional[Number] = None
    deadhead: Optional[Number] = None
    amount: Optional[Number] = None
    notes: Optional[str] = None

    @field_validator(
        "load_id",
        "broker",
        "origin",
        "destination",
        "pu_date",
        "do_date",
        "notes",
        mode="before",
    )
    @classmethod
    def coerce_text_fields(cls, v: Any) -> Optional[str]:
        """Accept non-text values from loosely typed records."""
        return coerce_text(v)

    @field_validator("miles", "deadhead", "amount", mode="before")
    @classmethod
    def coerce_numbers(cls, v: Any) -> Optional[Number]:
        """Treat missing or malformed numbers as absent."""
        return coerce_number(v)
