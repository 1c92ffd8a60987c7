"""FastAPI dependency providers for the search services."""

from travel_data.services.accommodation_service import AccommodationSearchService
from travel_data.services.amadeus_auth import AmadeusAuthService
from travel_data.services.flight_service import FlightSearchService


def get_flight_service() -> FlightSearchService:
    return FlightSearchService(auth=AmadeusAuthService())


def get_accommodation_service() -> AccommodationSearchService:
    return AccommodationSearchService()
