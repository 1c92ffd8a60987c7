"""Shared fixtures: test settings, a fake Amadeus upstream, and offer builders."""

from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest

from travel_data.config import Settings

TOKEN_URL = "https://auth.amadeus.test/v1/security/oauth2/token"
OFFERS_URL = "https://api.amadeus.test/v2/shopping/flight-offers"


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        amadeus_client_id="client-id",
        amadeus_client_secret="client-secret",
        amadeus_token_url=TOKEN_URL,
        amadeus_flight_offers_url=OFFERS_URL,
    )


def make_segment(
    dep: str = "CPH",
    arr: str = "BER",
    dep_at: str = "2025-04-25T10:00:00",
    arr_at: str = "2025-04-25T11:10:00",
    duration: str = "PT1H10M",
) -> dict:
    return {
        "departure": {"iataCode": dep, "at": dep_at},
        "arrival": {"iataCode": arr, "at": arr_at},
        "carrierCode": "SK",
        "duration": duration,
    }


def make_offer(
    itineraries: list[list[dict]] | None = None,
    total: str = "199.50",
    currency: str = "EUR",
    offer_id: str = "1",
) -> dict:
    """Build a raw flight offer; defaults to a CPH<->BER round trip."""
    if itineraries is None:
        itineraries = [
            [make_segment()],
            [make_segment("BER", "CPH", "2025-05-02T18:00:00", "2025-05-02T19:05:00", "PT1H5M")],
        ]
    return {
        "type": "flight-offer",
        "id": offer_id,
        "source": "GDS",
        "itineraries": [{"duration": segs[0]["duration"] if segs else None, "segments": segs} for segs in itineraries],
        "price": {"currency": currency, "total": total},
    }


class FakeAmadeus:
    """Records requests and answers token/search calls with canned responses."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.token_response = httpx.Response(200, json={"access_token": "tok-123", "expires_in": 1799})
        self.search_response = httpx.Response(200, json={"data": [make_offer()]})

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if str(request.url) == TOKEN_URL:
            return self.token_response
        if str(request.url).startswith(OFFERS_URL):
            return self.search_response
        return httpx.Response(404)

    def respond_search_json(self, payload: dict | list) -> None:
        self.search_response = httpx.Response(200, content=json.dumps(payload).encode())

    @property
    def search_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if str(r.url).startswith(OFFERS_URL)]

    @property
    def token_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if str(r.url) == TOKEN_URL]


@pytest.fixture
def fake_amadeus() -> FakeAmadeus:
    return FakeAmadeus()


@pytest.fixture
async def http_client(fake_amadeus: FakeAmadeus):
    client = httpx.AsyncClient(transport=httpx.MockTransport(fake_amadeus.handler))
    yield client
    await client.aclose()


@pytest.fixture
def offer_factory() -> Callable[..., dict]:
    return make_offer
