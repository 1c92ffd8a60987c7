"""Flight search — one authenticated Amadeus call, remapped to round trips."""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from travel_data.config import Settings, settings as default_settings
from travel_data.schemas.amadeus import FlightOffer, FlightSearchResponse, Itinerary
from travel_data.schemas.flight import FlightInfo, FlightSearchCriteria, RoundTripFlight
from travel_data.services.amadeus_auth import AmadeusAuthService
from travel_data.services.base import SearchProvider
from travel_data.services.errors import UpstreamError
from travel_data.services.http_client import get_http_client

logger = logging.getLogger(__name__)


class FlightSearchService(SearchProvider[FlightSearchCriteria, RoundTripFlight]):
    """Adapter for the Amadeus Flight Offers Search API."""

    def __init__(
        self,
        auth: AmadeusAuthService,
        client: httpx.AsyncClient | None = None,
        settings: Settings | None = None,
    ):
        self._auth = auth
        self._client = client
        self._settings = settings or default_settings

    async def search(self, criteria: FlightSearchCriteria) -> list[RoundTripFlight]:
        """Search round trips.

        Raises AuthError when no token could be obtained and UpstreamError when
        the search call fails; an empty list means the call worked but nothing
        matched.
        """
        token = await self._auth.acquire_token()
        client = self._client or get_http_client()

        logger.info(
            f"Flight search {criteria.origin}->{criteria.destination} "
            f"{criteria.departure_date}/{criteria.return_date}"
        )
        try:
            resp = await client.get(
                self._settings.amadeus_flight_offers_url,
                params=self.build_query_params(criteria),
                headers={"Authorization": f"Bearer {token}"},
            )
        except httpx.RequestError as e:
            logger.error(f"Amadeus request error: {e}")
            raise UpstreamError("Flight search request failed") from e

        if not resp.is_success:
            logger.error(f"Amadeus search error: {resp.status_code} {resp.text}")
            raise UpstreamError(
                "Flight search rejected",
                status_code=resp.status_code,
                details={"body": resp.text},
            )

        try:
            parsed = FlightSearchResponse.model_validate_json(resp.content)
        except ValidationError as e:
            logger.error(f"Amadeus response could not be parsed: {e}")
            raise UpstreamError("Malformed flight search response") from e

        if not parsed.data:
            logger.info("No flight offers returned")
            return []

        round_trips = []
        for offer in parsed.data:
            trip = self.map_offer(offer)
            if trip is None:
                logger.debug(f"Offer {offer.id} dropped: not a complete round trip")
                continue
            round_trips.append(trip)

        logger.info(f"Mapped {len(round_trips)} of {len(parsed.data)} offers")
        return round_trips

    def build_query_params(self, criteria: FlightSearchCriteria) -> dict[str, Any]:
        params: dict[str, Any] = {
            "originLocationCode": criteria.origin,
            "destinationLocationCode": criteria.destination,
            "departureDate": criteria.departure_date,
        }
        if criteria.return_date:
            params["returnDate"] = criteria.return_date
        params.update({
            "adults": criteria.adults,
            "children": criteria.children,
            "infants": criteria.infants,
            "nonStop": "true" if self._settings.flight_non_stop else "false",
            "max": self._settings.flight_max_results,
        })
        return params

    @classmethod
    def map_offer(cls, offer: FlightOffer) -> RoundTripFlight | None:
        """Map an offer to a round trip, or None if it lacks an outbound and inbound leg."""
        if len(offer.itineraries) < 2:
            return None

        outbound, inbound = offer.itineraries[0], offer.itineraries[1]
        if not outbound.segments or not inbound.segments:
            return None

        total = offer.price.total
        return RoundTripFlight(
            outbound=cls._map_leg(outbound, total),
            inbound=cls._map_leg(inbound, total),
            total_price=f"{total} {offer.price.currency}",
        )

    @staticmethod
    def _map_leg(itinerary: Itinerary, total_price: str) -> FlightInfo:
        # Connecting legs are not expanded; only the first hop is reported
        segment = itinerary.segments[0]
        return FlightInfo(
            departure_airport=segment.departure.iata_code,
            arrival_airport=segment.arrival.iata_code,
            departure_time=segment.departure.at,
            arrival_time=segment.arrival.at,
            duration=segment.duration,
            price=total_price,
        )
