"""Address normalization for free-text "City, State [ZIP]" strings.

Exported load records store origin and destination as whatever the driver
typed. Observed formats include:

- "Rittmann, oh"
- "Melrose Park, Illinois"
- "Bolingbrook IL" (no comma)
- "Arrey, NM 87930" (ZIP after the state)
- "St. George, UT, 84790" (extra comma before the ZIP)
- "WINDSOR , CO" (space before the comma)

Parsing is an ordered chain of strategies. Each strategy either returns a
CityState or None, and the first match wins. Nothing here raises: input that
cannot be split degrades to the whole string as the city with an empty state.
"""

import re
from typing import Callable, List, NamedTuple, Optional

from truckflow.normalizers.state_codes import STATE_NAME_TO_CODE, VALID_STATE_CODES

_ZIP_SUFFIX = re.compile(r"[,\s]+\d{5}(-\d{4})?$")
_TWO_LETTERS = re.compile(r"^[A-Za-z]{2}$")


class CityState(NamedTuple):
    """A parsed location. ``state`` is "" when it could not be resolved."""

    city: str
    state: str


def resolve_state(raw: Optional[str]) -> str:
    """Normalize a raw state token to a 2-letter uppercase code.

    Args:
        raw: State abbreviation or full state name, any case

    Returns:
        Valid 2-letter code, or "" when the token cannot be resolved

    Example:
        >>> resolve_state("oh")
        'OH'
        >>> resolve_state("New Mexico")
        'NM'
        >>> resolve_state("ZZ")
        ''
    """
    if not raw:
        return ""

    trimmed = raw.strip()
    if not trimmed:
        return ""

    if _TWO_LETTERS.match(trimmed):
        upper = trimmed.upper()
        return upper if upper in VALID_STATE_CODES else ""

    return STATE_NAME_TO_CODE.get(trimmed.lower(), "")


def strip_zip(raw: str) -> str:
    """Remove a trailing 5-digit or ZIP+4 code and surrounding separators.

    Example:
        >>> strip_zip("St. George, UT, 84790")
        'St. George, UT'
    """
    return _ZIP_SUFFIX.sub("", raw.strip()).strip()


def _split_on_comma(cleaned: str) -> Optional[CityState]:
    if "," not in cleaned:
        return None

    parts = cleaned.split(",")
    city = parts[0].strip()

    # First non-empty segment after the city ("WINDSOR , CO", trailing commas)
    state_raw = next((p.strip() for p in parts[1:] if p.strip()), "")
    return CityState(city, resolve_state(state_raw))


def _split_on_last_token(cleaned: str) -> Optional[CityState]:
    tokens = cleaned.split()
    if len(tokens) < 2:
        return None

    state = resolve_state(tokens[-1])
    if not state:
        return None
    return CityState(" ".join(tokens[:-1]), state)


def _whole_string_as_city(cleaned: str) -> Optional[CityState]:
    return CityState(cleaned, "")


ParseStrategy = Callable[[str], Optional[CityState]]

PARSE_STRATEGIES: List[ParseStrategy] = [
    _split_on_comma,
    _split_on_last_token,
    _whole_string_as_city,
]


def parse_city_state(raw: Optional[str]) -> CityState:
    """Parse a free-text location into city and state code.

    Args:
        raw: Location string such as "Arrey, NM 87930"

    Returns:
        CityState with a trimmed city and a valid state code (or "")

    Example:
        >>> parse_city_state("Melrose Park, Illinois")
        CityState(city='Melrose Park', state='IL')
        >>> parse_city_state("Bolingbrook IL")
        CityState(city='Bolingbrook', state='IL')
        >>> parse_city_state("Somewhereville")
        CityState(city='Somewhereville', state='')
    """
    if not raw:
        return CityState("", "")

    cleaned = strip_zip(raw)

    for strategy in PARSE_STRATEGIES:
        result = strategy(cleaned)
        if result is not None:
            return result

    return CityState(cleaned, "")
