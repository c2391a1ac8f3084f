from .filters_catalog import (
    CONSTRUCTION_AGE_LABEL, DEFAULT_MAX_AREA, DEFAULT_MAX_PRICE,
    DEFAULT_MIN_AREA, DEFAULT_MIN_PRICE,
)
from .schemas import SearchFilterState

CRORE = 10_000_000
LAKH = 100_000

SALE_TYPE_LABEL = {"Sale": "For Sale", "Agent": "For Agent"}

def format_price(value: int) -> str:
    if value >= CRORE:
        return f"₹{value / CRORE:.1f} Cr"
    if value >= LAKH:
        return f"₹{value / LAKH:.0f} Lac"
    return f"₹{value:,}"

def build_display_string(state: SearchFilterState) -> str:
    """
    Render the filters back into the text the search box shows, e.g.
    "Hyderabad, villa, For Sale, 3+ beds, ₹50 Lac-₹1.0 Cr".

    The order is fixed and mirrors what the parser understands, so feeding the
    result back through parse_search_input restores the same filters.
    """
    parts: list[str] = []

    if state.location:
        parts.append(state.location)
    if state.property_type:
        parts.append(state.property_type)
    if state.sale_type in SALE_TYPE_LABEL:
        parts.append(SALE_TYPE_LABEL[state.sale_type])
    if state.bedrooms > 0:
        parts.append(f"{state.bedrooms}+ beds")
    if state.bathrooms:
        parts.append(f"{state.bathrooms} bath")
    if state.furnished_status:
        parts.append(state.furnished_status)
    if state.facing:
        parts.append(f"Facing {state.facing}")
    if state.construction_age:
        parts.append(CONSTRUCTION_AGE_LABEL[state.construction_age])
    if state.urgent_only:
        parts.append("Urgent Sale")

    min_area, max_area = state.area_range
    if min_area > DEFAULT_MIN_AREA or max_area < DEFAULT_MAX_AREA:
        parts.append(f"{min_area}-{max_area} {state.area_unit}")
    if state.min_price > DEFAULT_MIN_PRICE or state.max_price < DEFAULT_MAX_PRICE:
        parts.append(f"{format_price(state.min_price)}-{format_price(state.max_price)}")

    return ", ".join(parts)
