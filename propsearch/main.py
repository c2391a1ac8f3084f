from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware

from .settings import settings
from .logging_config import setup_logging
from .middleware import RequestIdMiddleware
from .error_handlers import init_error_handlers
from .schemas import (
    DisplayResponse, EmiRequest, EmiSummary, ParseRequest, ParseResponse,
    ReverseGeocodeResponse, SearchFilterState, SearchUrlResponse, SuggestionsResponse,
)
from .parser import parse_search_input
from .display import build_display_string
from .suggestions import generate_suggestions
from .mapping import build_query_string, build_search_url, build_preset_url, preset_params
from .utils import qs
from .geocoding import reverse_geocode
from .emi import calculate_emi
from .filters_catalog import filter_options

setup_logging(settings.LOG_LEVEL)

app = FastAPI(title="Property Search Assistant API", version="1.0.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True, allow_methods=["*"], allow_headers=["*"],
)
app.add_middleware(RequestIdMiddleware)
init_error_handlers(app)

@app.get("/health")
def health():
    return {"status": "ok"}

@app.post("/search/parse", response_model=ParseResponse)
def search_parse(req: ParseRequest):
    # 1) Free text -> filters
    filters = parse_search_input(req.q, req.current)

    # 2) Text the box shows once the input loses focus
    display = build_display_string(filters)

    # 3) Listings link
    return ParseResponse(
        filters=filters,
        display=display,
        query=build_query_string(filters),
        url=build_search_url(filters),
    )

@app.get("/search/options")
def search_options():
    return filter_options()

@app.get("/search/suggestions", response_model=SuggestionsResponse)
def search_suggestions(q: str = Query("", description="Partial input of the search box")):
    return SuggestionsResponse(suggestions=generate_suggestions(q))

@app.post("/search/display", response_model=DisplayResponse)
def search_display(filters: SearchFilterState):
    return DisplayResponse(display=build_display_string(filters))

@app.post("/search/url", response_model=SearchUrlResponse)
def search_url(filters: SearchFilterState):
    return SearchUrlResponse(query=build_query_string(filters), url=build_search_url(filters))

@app.get("/search/presets/{name}", response_model=SearchUrlResponse)
def search_preset(name: str):
    params = preset_params(name)
    return SearchUrlResponse(query=qs(params), url=build_preset_url(name))

@app.get("/geo/reverse", response_model=ReverseGeocodeResponse)
async def geo_reverse(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
):
    return ReverseGeocodeResponse(location=await reverse_geocode(lat, lon))

@app.post("/tools/emi", response_model=EmiSummary)
def tools_emi(req: EmiRequest):
    return calculate_emi(req.principal, req.annual_rate, req.years)
