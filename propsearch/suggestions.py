from .filters_catalog import FILTER_PHRASES, LOCATIONS, PROPERTY_TYPES, capitalize_label

MAX_SUGGESTIONS = 5

# Locations first, then property types, then canned filters.
SUGGESTION_SOURCES: list[str] = (
    list(LOCATIONS)
    + [capitalize_label(t) for t in PROPERTY_TYPES]
    + list(FILTER_PHRASES)
)

def generate_suggestions(text: str) -> list[str]:
    if not text:
        return []
    needle = text.lower()
    out: list[str] = []
    for candidate in SUGGESTION_SOURCES:
        if needle in candidate.lower():
            out.append(candidate)
            if len(out) == MAX_SUGGESTIONS:
                break
    return out
