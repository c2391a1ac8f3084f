import logging
import re
from typing import Any, Callable, Dict, Optional

from .filters_catalog import (
    CONSTRUCTION_AGE_LABEL, FACING_LABEL, PROPERTY_TYPES,
)
from .schemas import SearchFilterState

logger = logging.getLogger(__name__)

SALE_TYPE_RE = re.compile(r"for\s+(sale|agent)", re.IGNORECASE)
BEDROOM_RE = re.compile(r"(\d+)\s*\+?\s*(bed|beds|bedroom|bedrooms)", re.IGNORECASE)
BATHROOM_RE = re.compile(r"(\d+)\s*\+?\s*(bath|baths|bathroom|bathrooms)", re.IGNORECASE)
FURNISHED_RE = re.compile(r"(furnished|unfurnished|semi-furnished)", re.IGNORECASE)
URGENT_RE = re.compile(r"urgent", re.IGNORECASE)
_PRICE = r"(\d+(?:,\d+)*(?:\.\d+)?\s*(?:lac|cr)?)"
PRICE_RANGE_RE = re.compile(rf"₹{_PRICE}\s*-\s*₹{_PRICE}", re.IGNORECASE)
AREA_RANGE_RE = re.compile(r"(\d+)\s*-\s*(\d+)\s*(sqft|sqyd|acres|gunta)", re.IGNORECASE)
LEADING_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?")

# "north-east" contains "east", so compound directions are tried first.
FACING_MATCH_ORDER = sorted(FACING_LABEL, key=len, reverse=True)

Updates = Dict[str, Any]
Matcher = Callable[[str, Updates], bool]

def parse_price(text: str) -> int:
    """Rupees for a price token: "1.5 Cr" -> 15000000, "50 Lac" -> 5000000, "75,000" -> 75000."""
    lower = text.lower()
    if "cr" in lower or "lac" in lower:
        number = float(LEADING_NUMBER_RE.match(lower.replace(",", "")).group(0))
        return round(number * (10_000_000 if "cr" in lower else 100_000))
    return int(float(text.replace(",", "").strip()))

def _match_property_type(segment: str, updates: Updates) -> bool:
    lower = segment.lower()
    for ptype in PROPERTY_TYPES:
        if ptype in lower:
            updates["property_type"] = ptype
            return True
    return False

def _match_sale_type(segment: str, updates: Updates) -> bool:
    m = SALE_TYPE_RE.search(segment)
    if not m:
        return False
    updates["sale_type"] = "Sale" if m.group(1).lower() == "sale" else "Agent"
    return True

def _match_bedrooms(segment: str, updates: Updates) -> bool:
    m = BEDROOM_RE.search(segment)
    if not m:
        return False
    updates["bedrooms"] = int(m.group(1))
    return True

def _match_bathrooms(segment: str, updates: Updates) -> bool:
    m = BATHROOM_RE.search(segment)
    if not m:
        return False
    updates["bathrooms"] = m.group(1)
    return True

def _match_furnished(segment: str, updates: Updates) -> bool:
    m = FURNISHED_RE.search(segment)
    if not m:
        return False
    updates["furnished_status"] = m.group(0).lower()
    return True

def _match_facing(segment: str, updates: Updates) -> bool:
    lower = segment.lower()
    for direction in FACING_MATCH_ORDER:
        if direction in lower:
            updates["facing"] = direction
            return True
    return False

def _match_construction_age(segment: str, updates: Updates) -> bool:
    lower = segment.lower()
    for value, label in CONSTRUCTION_AGE_LABEL.items():
        if value in lower or label.lower() in lower:
            updates["construction_age"] = value
            return True
    return False

def _match_urgent(segment: str, updates: Updates) -> bool:
    if not URGENT_RE.search(segment):
        return False
    updates["urgent_only"] = True
    return True

def _match_price_range(segment: str, updates: Updates) -> bool:
    m = PRICE_RANGE_RE.search(segment)
    if not m:
        return False
    updates["min_price"] = parse_price(m.group(1))
    updates["max_price"] = parse_price(m.group(2))
    return True

def _match_area_range(segment: str, updates: Updates) -> bool:
    m = AREA_RANGE_RE.search(segment)
    if not m:
        return False
    updates["area_range"] = (int(m.group(1)), int(m.group(2)))
    updates["area_unit"] = m.group(3).lower()
    return True

# Priority order; the first matcher that accepts a segment consumes it.
MATCHERS: tuple[Matcher, ...] = (
    _match_property_type,
    _match_sale_type,
    _match_bedrooms,
    _match_bathrooms,
    _match_furnished,
    _match_facing,
    _match_construction_age,
    _match_urgent,
    _match_price_range,
    _match_area_range,
)

def parse_search_input(text: str, current: Optional[SearchFilterState] = None) -> SearchFilterState:
    """
    Turn the comma-separated text of the search box into structured filters.

    Empty text resets everything to defaults. Otherwise filters not mentioned in
    the text keep their value from ``current``, except the location, which is
    always taken from the text. Unrecognised input is never an error; it only
    yields fewer filters.
    """
    if text == "":
        return SearchFilterState()

    base = current or SearchFilterState()
    updates: Updates = {"location": ""}

    for segment in (part.strip() for part in text.split(",")):
        if not segment:
            continue
        if any(match(segment, updates) for match in MATCHERS):
            continue
        if updates["location"]:
            logger.debug("Ignoring extra unmatched segment %r", segment)
        else:
            # Anything unrecognised is taken as a place name, digits included.
            updates["location"] = segment

    logger.debug("parse_search_input(%r) -> %s", text, updates)
    return base.model_copy(update=updates)
