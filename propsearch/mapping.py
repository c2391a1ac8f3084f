import logging
from typing import Any, List, Tuple
from .schemas import SearchFilterState
from .utils import qs, join_url
from .filters_catalog import (
    AMENITIES_CANON, DEFAULT_AREA_UNIT, DEFAULT_MAX_AREA, DEFAULT_MAX_PRICE,
    DEFAULT_MIN_AREA, DEFAULT_MIN_PRICE, PRESETS, canonize,
)
from .settings import settings
from .errors import MappingError

logger = logging.getLogger(__name__)

Params = List[Tuple[str, Any]]

def _amenity_tags(values: List[str]) -> List[str]:
    out: List[str] = []
    for v in values:
        # Unknown tags pass through so the listings backend still sees them.
        tag = canonize(v, AMENITIES_CANON) or v.strip()
        if tag and tag not in out:
            out.append(tag)
    return out

def filters_to_params(f: SearchFilterState) -> Params:
    """Listings query params, in the order the listings page expects them."""
    try:
        min_area, max_area = f.area_range
        amenities = _amenity_tags(f.amenities)

        params: Params = [
            ("city", f.location or None),
            ("propertyType", f.property_type or None),
            ("saleType", f.sale_type if f.sale_type != "all" else None),
            ("category", f.category),
            ("minPrice", f.min_price if f.min_price > DEFAULT_MIN_PRICE else None),
            ("maxPrice", f.max_price if f.max_price < DEFAULT_MAX_PRICE else None),
            ("minArea", min_area if min_area > DEFAULT_MIN_AREA else None),
            ("maxArea", max_area if max_area < DEFAULT_MAX_AREA else None),
            ("areaUnit", f.area_unit if f.area_unit != DEFAULT_AREA_UNIT else None),
            ("minBedrooms", f.bedrooms if f.bedrooms > 0 else None),
            ("bathrooms", f.bathrooms or None),
            ("furnishedStatus", f.furnished_status or None),
            ("facing", f.facing or None),
            ("constructionAge", f.construction_age or None),
            ("urgentOnly", True if f.urgent_only else None),
            ("amenities", ",".join(amenities) or None),
            ("includeFree", True),
        ]
        logger.debug("filters_to_params -> %s", params)
        return params
    except Exception as e:
        raise MappingError(f"Could not map filters to query params: {e}") from e

def build_query_string(filters: SearchFilterState) -> str:
    return qs(filters_to_params(filters))

def _results_url(query: str) -> str:
    base = str(settings.BASE_URL) if settings.BASE_URL else ""
    return join_url(base, settings.RESULTS_PATH, query)

def build_search_url(filters: SearchFilterState) -> str:
    url = _results_url(build_query_string(filters))
    logger.info("Search URL built: %s", url)
    return url

def preset_params(name: str) -> Params:
    try:
        params: Params = list(PRESETS[name])
    except KeyError:
        raise MappingError(f"Unknown quick filter '{name}'. Available: {', '.join(PRESETS)}") from None
    params.append(("includeFree", True))
    return params

def build_preset_url(name: str) -> str:
    url = _results_url(qs(preset_params(name)))
    logger.info("Preset URL built (%s): %s", name, url)
    return url
