import pytest

from propsearch.errors import MappingError
from propsearch.mapping import build_query_string, build_search_url, build_preset_url
from propsearch.parser import parse_search_input
from propsearch.schemas import SearchFilterState
from propsearch.settings import settings

def test_default_filters_only_send_category_and_free(monkeypatch):
    monkeypatch.setattr(settings, "BASE_URL", None)
    monkeypatch.setattr(settings, "RESULTS_PATH", "/properties")
    assert build_search_url(SearchFilterState()) == "/properties?category=residential&includeFree=true"

def test_build_url_basic(monkeypatch):
    monkeypatch.setattr(settings, "BASE_URL", "https://example-realty.in/")
    monkeypatch.setattr(settings, "RESULTS_PATH", "properties")

    f = SearchFilterState(
        location="Banjara Hills",
        property_type="villa",
        sale_type="Sale",
        min_price=5_000_000,
        max_price=7_500_000,
        area_range=(500, 2000),
        area_unit="sqyd",
        bedrooms=3,
        bathrooms="4+",
        furnished_status="furnished",
        facing="east",
        construction_age="new",
        urgent_only=True,
        amenities=["Swimming Pool", "gym", "gym", "rooftop"],
    )
    url = build_search_url(f)
    assert url == (
        "https://example-realty.in/properties?city=Banjara+Hills&propertyType=villa"
        "&saleType=Sale&category=residential&minPrice=5000000&maxPrice=7500000"
        "&minArea=500&maxArea=2000&areaUnit=sqyd&minBedrooms=3&bathrooms=4%2B"
        "&furnishedStatus=furnished&facing=east&constructionAge=new&urgentOnly=true"
        "&amenities=swimming-pool%2Cgym%2Crooftop&includeFree=true"
    )

def test_default_bounds_are_not_sent():
    f = SearchFilterState(min_price=0, max_price=10_000_000, area_range=(0, 10_000), bedrooms=0)
    query = build_query_string(f)
    for name in ("minPrice", "maxPrice", "minArea", "maxArea", "areaUnit", "minBedrooms"):
        assert f"{name}=" not in query

def test_preset_url(monkeypatch):
    monkeypatch.setattr(settings, "BASE_URL", None)
    monkeypatch.setattr(settings, "RESULTS_PATH", "/properties")
    assert build_preset_url("plots") == "/properties?category=land&includeFree=true"
    assert build_preset_url("family-homes") == (
        "/properties?minBedrooms=3&amenities=play-area%2Cgarden%2Csecurity"
        "&category=residential&includeFree=true"
    )

def test_unknown_preset():
    with pytest.raises(MappingError):
        build_preset_url("penthouses")

def test_max_above_default_is_not_sent():
    query = build_query_string(SearchFilterState(max_price=15_000_000, area_range=(0, 20_000)))
    assert "maxPrice=" not in query
    assert "maxArea=" not in query

def test_inverted_ranges_pass_through():
    f = parse_search_input("₹1.5 Cr-₹50 Lac, 2000-500 sqft")
    query = build_query_string(f)
    assert "minPrice=15000000&maxPrice=5000000&minArea=2000&maxArea=500" in query
