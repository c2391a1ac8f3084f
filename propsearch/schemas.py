from pydantic import BaseModel, Field, conint, confloat
from typing import Literal, Optional

from .filters_catalog import (
    DEFAULT_AREA_UNIT, DEFAULT_CATEGORY, DEFAULT_MAX_AREA, DEFAULT_MAX_PRICE,
    DEFAULT_MIN_AREA, DEFAULT_MIN_PRICE,
)

PropertyType = Literal[
    "apartment", "villa", "independent-house", "plot",
    "commercial-office", "shop", "warehouse", "land",
]
SaleType = Literal["all", "Sale", "Agent"]
Category = Literal["residential", "commercial", "land"]
AreaUnit = Literal["sqft", "sqyd", "acres", "gunta"]
FurnishedStatus = Literal["furnished", "unfurnished", "semi-furnished"]
Facing = Literal[
    "east", "west", "north", "south",
    "north-east", "north-west", "south-east", "south-west",
]
ConstructionAge = Literal["new", "less-than-5", "5-to-10", "greater-than-10"]

class SearchFilterState(BaseModel):
    """Structured filters behind the search box. Empty string means unset."""

    location: str = ""
    property_type: PropertyType | Literal[""] = ""
    sale_type: SaleType = "all"
    category: Category = DEFAULT_CATEGORY

    bedrooms: conint(ge=0) = 0                              # 0 = any
    bathrooms: str = Field(default="", pattern=r"^(\d+\+?)?$")  # "1".."4+"
    furnished_status: FurnishedStatus | Literal[""] = ""
    facing: Facing | Literal[""] = ""
    construction_age: ConstructionAge | Literal[""] = ""
    urgent_only: bool = False

    # Inverted ranges are accepted as-is; the listings backend decides what they mean.
    min_price: conint(ge=0) = DEFAULT_MIN_PRICE
    max_price: conint(ge=0) = DEFAULT_MAX_PRICE
    area_range: tuple[conint(ge=0), conint(ge=0)] = (DEFAULT_MIN_AREA, DEFAULT_MAX_AREA)
    area_unit: AreaUnit = DEFAULT_AREA_UNIT

    amenities: list[str] = Field(default_factory=list)

class ParseRequest(BaseModel):
    q: str = Field(description="Text typed into the search box")
    current: Optional[SearchFilterState] = Field(
        default=None, description="Filters already applied; unmatched fields are kept"
    )

class SearchUrlResponse(BaseModel):
    query: str
    url: str

class ParseResponse(SearchUrlResponse):
    filters: SearchFilterState
    display: str

class DisplayResponse(BaseModel):
    display: str

class SuggestionsResponse(BaseModel):
    suggestions: list[str]

class ReverseGeocodeResponse(BaseModel):
    location: str

class EmiRequest(BaseModel):
    principal: confloat(ge=100_000, le=10_000_000) = 2_500_000
    annual_rate: confloat(ge=5, le=20) = 8.5           # percent per year
    years: conint(ge=1, le=30) = 20

class EmiMonth(BaseModel):
    month: int
    emi: float
    principal: float
    interest: float
    balance: float

class EmiSummary(BaseModel):
    emi: float
    total_payment: float
    total_interest: float
    principal_percentage: int
    interest_percentage: int
    breakdown: list[EmiMonth] = Field(default_factory=list)
