"""Location normalizers for imported load records."""

from truckflow.normalizers.address_normalizer import (
    PARSE_STRATEGIES,
    CityState,
    parse_city_state,
    resolve_state,
    strip_zip,
)
from truckflow.normalizers.state_codes import STATE_NAME_TO_CODE, VALID_STATE_CODES

__all__ = [
    "CityState",
    "PARSE_STRATEGIES",
    "STATE_NAME_TO_CODE",
    "VALID_STATE_CODES",
    "parse_city_state",
    "resolve_state",
    "strip_zip",
]
