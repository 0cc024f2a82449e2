"""Pay profile (application settings) model.

The pay profile selects the formula used to derive driver earnings from a
load. It is stored as the single application settings record.
"""

from enum import Enum
from typing import Any, Mapping, Optional

from pydantic import Field, field_validator

from truckflow.models.base import BaseDataModel, Number, coerce_number, coerce_text


class EarningProfile(str, Enum):
    """Supported earning formulas."""

    OWNER_OPERATOR = "owner_operator"
    SOLO_PER_MILE = "solo_per_mile"
    TEAM_PER_MILE = "team_per_mile"
    SOLO_PERCENTAGE = "solo_percentage"
    TEAM_PERCENTAGE = "team_percentage"


PER_MILE_PROFILES = frozenset(
    {EarningProfile.SOLO_PER_MILE.value, EarningProfile.TEAM_PER_MILE.value}
)
PERCENTAGE_PROFILES = frozenset(
    {EarningProfile.SOLO_PERCENTAGE.value, EarningProfile.TEAM_PERCENTAGE.value}
)

DEFAULT_SETTINGS: Mapping[str, Any] = {
    "earning_profile": EarningProfile.OWNER_OPERATOR.value,
    "rate_per_mile": 0,
    "percentage_rate": 0,
    "dark_mode": False,
    "driver_name": "",
    "company_name": "",
}


class PayProfile(BaseDataModel):
    """Earning configuration plus the other stored settings fields.

    ``earning_profile`` is kept as plain text: an unknown or missing profile
    is not an error, earnings simply fall back to the gross amount.

    Attributes:
        earning_profile: One of the EarningProfile values (or None)
        rate_per_mile: Rate for the per-mile profiles
        percentage_rate: Percentage (0-100) for the percentage profiles
        driver_name: Display name of the driver
        company_name: Display name of the carrier
        dark_mode: UI preference, carried for round-tripping

    Example:
        >>> profile = PayProfile(earning_profile="solo_per_mile", rate_per_mile=0.55)
        >>> profile.is_per_mile
        True
    """

    earning_profile: Optional[str] = None
    rate_per_mile: Optional[Number] = Field(default=None, description="$/mile")
    percentage_rate: Optional[Number] = Field(default=None, description="% of gross")
    driver_name: Optional[str] = None
    company_name: Optional[str] = None
    dark_mode: Optional[bool] = None

    @field_validator("earning_profile", "driver_name", "company_name", mode="before")
    @classmethod
    def coerce_text_fields(cls, v: Any) -> Optional[str]:
        """Accept non-text values from loosely typed records."""
        if isinstance(v, Enum):
            return v.value
        return coerce_text(v)

    @field_validator("rate_per_mile", "percentage_rate", mode="before")
    @classmethod
    def coerce_rates(cls, v: Any) -> Optional[Number]:
        """Treat missing or malformed rates as absent."""
        return coerce_number(v)

    @field_validator("dark_mode", mode="before")
    @classmethod
    def coerce_flag(cls, v: Any) -> Optional[bool]:
        """Interpret any stored value as a boolean."""
        if v is None:
            return None
        return bool(v)

    @property
    def is_per_mile(self) -> bool:
        return self.earning_profile in PER_MILE_PROFILES

    @property
    def is_percentage(self) -> bool:
        return self.earning_profile in PERCENTAGE_PROFILES

    @classmethod
    def with_defaults(cls, record: Optional[Mapping[str, Any]] = None) -> "PayProfile":
        """Merge a stored settings record over the application defaults.

        Args:
            record: Stored settings (may be None or empty)

        Returns:
            PayProfile with defaults filled in for missing keys

        Example:
            >>> PayProfile.with_defaults({}).earning_profile
            'owner_operator'
        """
        merged = dict(DEFAULT_SETTINGS)
        if record:
            merged.update(record)
        return cls.model_validate(merged)
