from propsearch.parser import parse_search_input, parse_price
from propsearch.schemas import SearchFilterState

def test_parse_example_query():
    f = parse_search_input("Vijayawada, Villa, 3 beds, Urgent")
    assert f.location == "Vijayawada"
    assert f.property_type == "villa"
    assert f.bedrooms == 3
    assert f.urgent_only is True

def test_empty_input_resets_everything():
    current = SearchFilterState(
        location="Guntur", property_type="plot", bedrooms=4, urgent_only=True,
        min_price=100000, area_range=(10, 20), amenities=["gym"],
    )
    assert parse_search_input("", current) == SearchFilterState()

def test_parse_all_categories():
    f = parse_search_input(
        "Hyderabad, For Sale, 2 baths, semi-furnished, Facing north-east, "
        "Less than 5 Years, 1200-2400 sqyd, ₹50 Lac-₹1.5 Cr"
    )
    assert f.location == "Hyderabad"
    assert f.sale_type == "Sale"
    assert f.bathrooms == "2"
    assert f.furnished_status == "semi-furnished"
    assert f.facing == "north-east"
    assert f.construction_age == "less-than-5"
    assert f.area_range == (1200, 2400)
    assert f.area_unit == "sqyd"
    assert f.min_price == 5_000_000
    assert f.max_price == 15_000_000

def test_segment_consumed_by_first_matching_category():
    f = parse_search_input("Commercial-Office, For Agent")
    assert f.property_type == "commercial-office"
    assert f.sale_type == "Agent"
    assert f.location == ""

def test_unmentioned_filters_are_kept_but_location_is_replaced():
    current = SearchFilterState(location="Guntur", bedrooms=2, facing="south")
    f = parse_search_input("Villa", current)
    assert f.property_type == "villa"
    assert f.bedrooms == 2
    assert f.facing == "south"
    assert f.location == ""
    # the caller's state is not touched
    assert current.location == "Guntur"

def test_first_unmatched_segment_wins_location():
    assert parse_search_input("Banjara Hills, Tenali").location == "Banjara Hills"

def test_unmatched_numeric_segment_falls_back_to_location():
    assert parse_search_input("12345").location == "12345"
    assert parse_search_input("12345, Kondapur").location == "12345"

def test_malformed_input_degrades_without_errors():
    f = parse_search_input(",, ₹-₹, ???, --")
    assert f.location == "₹-₹"
    assert f.min_price == 0
    assert f.max_price == 10_000_000

def test_parse_price_units():
    assert parse_price("1.5 Cr") == 15_000_000
    assert parse_price("50 Lac") == 5_000_000
    assert parse_price("75,000") == 75_000
    assert parse_price("0") == 0

def test_inverted_ranges_are_kept():
    f = parse_search_input("₹1.5 Cr-₹50 Lac, 2000-500 sqft")
    assert f.min_price == 15_000_000
    assert f.max_price == 5_000_000
    assert f.area_range == (2000, 500)
    assert f.area_unit == "sqft"

def test_segment_matching_two_categories_counts_once():
    f = parse_search_input("Villa for sale")
    assert f.property_type == "villa"
    assert f.sale_type == "all"
