import asyncio

import httpx
import pytest

from propsearch import geocoding
from propsearch.errors import ExternalServiceError

def _use_transport(monkeypatch, handler):
    real_client = httpx.AsyncClient

    def factory(*args, **kwargs):
        kwargs["transport"] = httpx.MockTransport(handler)
        return real_client(*args, **kwargs)

    monkeypatch.setattr(geocoding.httpx, "AsyncClient", factory)

def test_picks_most_specific_place(monkeypatch):
    seen = {}

    def handler(request: httpx.Request):
        seen["params"] = dict(request.url.params)
        seen["path"] = request.url.path
        return httpx.Response(200, json={"address": {"town": "Tenali", "state": "Andhra Pradesh"}})

    _use_transport(monkeypatch, handler)
    assert asyncio.run(geocoding.reverse_geocode(16.2379, 80.6444)) == "Tenali"
    assert seen["path"] == "/reverse"
    assert seen["params"]["format"] == "json"
    assert seen["params"]["zoom"] == "18"
    assert seen["params"]["addressdetails"] == "1"

def test_falls_back_to_coordinates_without_address(monkeypatch):
    _use_transport(monkeypatch, lambda request: httpx.Response(200, json={"error": "Unable to geocode"}))
    assert asyncio.run(geocoding.reverse_geocode(17.385, 78.4867)) == "17.3850, 78.4867"

def test_falls_back_to_coordinates_on_error_status(monkeypatch):
    _use_transport(monkeypatch, lambda request: httpx.Response(503))
    assert asyncio.run(geocoding.reverse_geocode(17.385, 78.4867)) == "17.3850, 78.4867"

def test_network_failure(monkeypatch):
    def handler(request: httpx.Request):
        raise httpx.ConnectError("connection refused", request=request)

    _use_transport(monkeypatch, handler)
    with pytest.raises(ExternalServiceError):
        asyncio.run(geocoding.reverse_geocode(17.385, 78.4867))

def test_non_object_address_falls_back_to_coordinates(monkeypatch):
    _use_transport(monkeypatch, lambda request: httpx.Response(200, json={"address": "Hyderabad"}))
    assert asyncio.run(geocoding.reverse_geocode(17.385, 78.4867)) == "17.3850, 78.4867"
