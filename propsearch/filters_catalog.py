# Supported values for every search filter, plus the static autocomplete sources.

PROPERTY_TYPES = (
    "apartment",
    "villa",
    "independent-house",
    "plot",
    "commercial-office",
    "shop",
    "warehouse",
    "land",
)

SALE_TYPES = ("all", "Sale", "Agent")
CATEGORIES = ("residential", "commercial", "land")
AREA_UNITS = ("sqft", "sqyd", "acres", "gunta")

BEDROOM_OPTIONS = {
    "1": "1 Bedroom",
    "2": "2 Bedrooms",
    "3": "3 Bedrooms",
    "4": "4 Bedrooms",
    "5": "5 Bedrooms",
    "6+": "6+ Bedrooms",
}

BATHROOM_OPTIONS = {
    "1": "1 Bathroom",
    "2": "2 Bathrooms",
    "3": "3 Bathrooms",
    "4+": "4+ Bathrooms",
}

FURNISHED_LABEL = {
    "furnished": "Furnished",
    "unfurnished": "Unfurnished",
    "semi-furnished": "Semi-Furnished",
}

FACING_LABEL = {
    "east": "East",
    "west": "West",
    "north": "North",
    "south": "South",
    "north-east": "North-East",
    "north-west": "North-West",
    "south-east": "South-East",
    "south-west": "South-West",
}

CONSTRUCTION_AGE_LABEL = {
    "new": "New Construction",
    "less-than-5": "Less than 5 Years",
    "5-to-10": "5 to 10 Years",
    "greater-than-10": "Greater than 10 Years",
}

AMENITY_LABEL = {
    "power-backup": "Power Backup",
    "lift": "Lift",
    "security": "24/7 Security",
    "water-supply": "24/7 Water Supply",
    "parking": "Parking",
    "swimming-pool": "Swimming Pool",
    "gym": "Gym",
    "club-house": "Club House",
    "play-area": "Play Area",
    "garden": "Garden/Park",
    "wifi": "Wi-Fi",
    "modular-kitchen": "Modular Kitchen",
}

AMENITIES_CANON = {k: [k.replace("-", " "), AMENITY_LABEL[k].lower()] for k in AMENITY_LABEL.keys()}

DEFAULT_MIN_PRICE = 0
DEFAULT_MAX_PRICE = 10_000_000
DEFAULT_MIN_AREA = 0
DEFAULT_MAX_AREA = 10_000
DEFAULT_AREA_UNIT = "sqft"
DEFAULT_CATEGORY = "residential"

# Andhra Pradesh and Telangana cities, towns and localities
LOCATIONS = [
    # Andhra Pradesh
    "Vijayawada", "Visakhapatnam", "Guntur", "Nellore", "Kurnool", "Tirupati",
    "Rajahmundry", "Kakinada", "Anantapur", "Kadapa", "Eluru", "Ongole",
    "Srikakulam", "Chittoor", "Machilipatnam", "Tenali", "Adoni", "Hindupur",
    "Bhimavaram", "Madanapalle", "Proddatur", "Nandyal", "Tadepalligudem",
    "Gudivada", "Dharmavaram", "Narasaraopet", "Tadpatri", "Chilakaluripeta",
    # Telangana
    "Hyderabad", "Warangal", "Nizamabad", "Karimnagar", "Khammam", "Ramagundam",
    "Mahbubnagar", "Nalgonda", "Adilabad", "Suryapet", "Miryalaguda", "Jagtial",
    "Siddipet", "Sangareddy", "Kamareddy", "Wanaparthy", "Gadwal", "Vikarabad",
    "Mancherial", "Bhadrachalam", "Tandur", "Kothagudem", "Medak", "Peddapalli",
    # Localities
    "Kondapur", "Gachibowli", "Madhapur", "Banjara Hills", "Jubilee Hills",
    "Amaravathi", "Ponnur", "Mangalagiri", "Sattenapalle", "Puttaparthi",
]

FILTER_PHRASES = [
    "For Sale",
    "For Agent",
    "Urgent Sale",
    "3+ Bedrooms",
    "2 Bathrooms",
    "Furnished",
    "New Construction",
    "Facing North",
]

# Quick-filter shortcuts shown under the search box. Order inside each preset is
# the order the params land in the query string.
PRESETS: dict[str, list[tuple[str, str]]] = {
    "luxury": [
        ("minPrice", "10000000"),
        ("propertyType", "villa"),
        ("category", "residential"),
        ("amenities", "swimming-pool,gym,club-house,security"),
    ],
    "apartments": [
        ("propertyType", "apartment"),
        ("category", "residential"),
        ("saleType", "Sale"),
    ],
    "villas": [
        ("propertyType", "villa"),
        ("category", "residential"),
    ],
    "plots": [("category", "land")],
    "commercial": [("category", "commercial")],
    "new-constructions": [("constructionAge", "new")],
    "urgent-sale": [("urgentOnly", "true")],
    "family-homes": [
        ("minBedrooms", "3"),
        ("amenities", "play-area,garden,security"),
        ("category", "residential"),
    ],
    "upcoming": [
        ("projectStatus", "upcoming"),
        ("constructionAge", "new"),
        ("possessionDate", "future"),
        ("sortBy", "possessionDate"),
    ],
}

def capitalize_label(value: str) -> str:
    return value[:1].upper() + value[1:]

def canonize(value: str | None, table: dict[str, list[str]]) -> str | None:
    if not value:
        return None
    v = value.strip().lower()
    for canon, syns in table.items():
        if v == canon or v in syns:
            return canon
    return None

def filter_options() -> dict:
    """Values and labels for every filter control, keyed like the query params."""
    return {
        "propertyType": [{"value": t, "label": capitalize_label(t)} for t in PROPERTY_TYPES],
        "saleType": list(SALE_TYPES),
        "category": list(CATEGORIES),
        "areaUnit": list(AREA_UNITS),
        "bedrooms": [{"value": k, "label": v} for k, v in BEDROOM_OPTIONS.items()],
        "bathrooms": [{"value": k, "label": v} for k, v in BATHROOM_OPTIONS.items()],
        "furnishedStatus": [{"value": k, "label": v} for k, v in FURNISHED_LABEL.items()],
        "facing": [{"value": k, "label": v} for k, v in FACING_LABEL.items()],
        "constructionAge": [{"value": k, "label": v} for k, v in CONSTRUCTION_AGE_LABEL.items()],
        "amenities": [{"value": k, "label": v} for k, v in AMENITY_LABEL.items()],
        "presets": list(PRESETS),
        "defaults": {
            "minPrice": DEFAULT_MIN_PRICE,
            "maxPrice": DEFAULT_MAX_PRICE,
            "minArea": DEFAULT_MIN_AREA,
            "maxArea": DEFAULT_MAX_AREA,
            "areaUnit": DEFAULT_AREA_UNIT,
            "category": DEFAULT_CATEGORY,
        },
    }
