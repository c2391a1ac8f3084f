import logging
from typing import Any, Optional

import httpx

from .errors import ExternalServiceError
from .settings import settings

logger = logging.getLogger(__name__)

# Most specific place name first.
ADDRESS_FIELDS = ("city", "town", "village", "suburb", "neighbourhood", "state")

def coordinates_label(lat: float, lon: float) -> str:
    return f"{lat:.4f}, {lon:.4f}"

def pick_place_name(address: Any) -> Optional[str]:
    if not isinstance(address, dict):
        return None
    for field in ADDRESS_FIELDS:
        value = address.get(field)
        if value:
            return value
    return None

async def reverse_geocode(lat: float, lon: float) -> str:
    """
    Resolve coordinates to the place name the search box should show.

    Falls back to the formatted coordinates when Nominatim answers with an error
    status or without a usable address. Network failures raise
    ExternalServiceError.
    """
    params = {
        "format": "json",
        "lat": lat,
        "lon": lon,
        "zoom": 18,
        "addressdetails": 1,
    }
    url = f"{settings.NOMINATIM_URL.rstrip('/')}/reverse"
    headers = {"User-Agent": settings.NOMINATIM_USER_AGENT}

    try:
        async with httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT) as client:
            response = await client.get(url, params=params, headers=headers)
    except httpx.HTTPError as e:
        logger.error("Nominatim reverse lookup failed: %s", e)
        raise ExternalServiceError("Unable to fetch your location details") from e

    if not response.is_success:
        logger.warning("Nominatim returned %s for (%s, %s)", response.status_code, lat, lon)
        return coordinates_label(lat, lon)

    try:
        data = response.json()
    except ValueError:
        logger.warning("Nominatim returned a non-JSON body for (%s, %s)", lat, lon)
        return coordinates_label(lat, lon)

    place = pick_place_name(data.get("address") if isinstance(data, dict) else None)
    return place or coordinates_label(lat, lon)
