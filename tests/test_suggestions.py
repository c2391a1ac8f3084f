from propsearch.suggestions import generate_suggestions, MAX_SUGGESTIONS

def test_empty_input_has_no_suggestions():
    assert generate_suggestions("") == []

def test_case_insensitive_location_match():
    assert generate_suggestions("hyd") == ["Hyderabad"]

def test_sources_in_priority_order_and_capped():
    out = generate_suggestions("a")
    assert out == ["Vijayawada", "Visakhapatnam", "Tirupati", "Rajahmundry", "Kakinada"]

def test_property_types_and_filter_phrases():
    assert generate_suggestions("VILLA") == ["Villa"]
    assert generate_suggestions("sale") == ["For Sale", "Urgent Sale"]
    assert generate_suggestions("north") == ["Facing North"]

def test_never_more_than_five():
    for text in ["a", "e", "i", "n", " ", "r"]:
        assert len(generate_suggestions(text)) <= MAX_SUGGESTIONS
