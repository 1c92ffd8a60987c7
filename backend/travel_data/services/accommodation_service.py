"""Hotel search service — normalizes a static hotel result set.

There is no live hotel integration yet: the service answers every search from
HOTEL_FIXTURES, shaped like the Amadeus hotel response. A real upstream only
needs to produce the same HotelSearchResponse.
"""

import logging
from datetime import date
from decimal import Decimal

from travel_data.schemas.amadeus import HotelData, HotelSearchResponse
from travel_data.schemas.hotel import Accommodation, HotelSearchCriteria
from travel_data.services.base import SearchProvider

logger = logging.getLogger(__name__)

DEFAULT_IMAGE_URL = "default-image-url.jpg"
AVAILABLE_STATUS = "Available"
DEFAULT_ROOM_TYPE = "Standard"
DEFAULT_ROOM_TYPE_DESCRIPTION = "Standard room"

HOTEL_FIXTURES: list[dict] = [
    {
        "name": "Hotel XYZ",
        "address": {"country": "USA", "city": "New York", "line": "123 Example Street"},
        "ratePlan": {"price": {"total": 150}},
        "starRating": 4,
        "facilities": [{"name": "Wi-Fi"}, {"name": "Pool"}],
        "pictures": [
            {"uri": "https://imgservice.casai.com/500x245/moonlight-hotel-bar-resto-ht-hinche-bc-11653999-0.jpg"},
        ],
    },
    {
        "name": "Hotel ABC",
        "address": {"country": "France", "city": "Paris", "line": "456 Example Avenue"},
        "ratePlan": {"price": {"total": 200}},
        "starRating": 5,
        "facilities": [{"name": "Gym"}, {"name": "Restaurant"}],
        "pictures": [
            {"uri": "https://content.skyscnr.com/available/1395248305/1395248305_WxH.jpg"},
        ],
    },
]


class AccommodationSearchService(SearchProvider[HotelSearchCriteria, Accommodation]):
    """Fixture-backed hotel search. The requested city does not filter results."""

    def __init__(self, fixtures: list[dict] | None = None):
        self._fixtures = HOTEL_FIXTURES if fixtures is None else fixtures

    async def search(self, criteria: HotelSearchCriteria) -> list[Accommodation]:
        logger.info(
            f"Hotel search: city={criteria.city}, "
            f"check_in={criteria.check_in_date}, check_out={criteria.check_out_date}"
        )
        response = HotelSearchResponse.model_validate({"data": self._fixtures})
        if not response.data:
            logger.info("No hotels in result set")
            return []

        accommodations = [
            map_hotel(hotel, criteria.check_in_date, criteria.check_out_date)
            for hotel in response.data
        ]
        logger.info(f"Found {len(accommodations)} hotels")
        return accommodations


def map_hotel(hotel: HotelData, check_in: date, check_out: date) -> Accommodation:
    """Flatten one raw hotel record, filling in defaults for missing fields."""
    address = hotel.address
    price = hotel.rate_plan.price if hotel.rate_plan else None

    return Accommodation(
        country=(address.country if address else None) or "Unknown",
        city=(address.city if address else None) or "Unknown",
        address=(address.line if address else None) or "No address provided",
        accommodation_name=hotel.name or "No name available",
        price_per_night=price.total if price and price.total is not None else Decimal(0),
        star_rating=hotel.star_rating or 0,
        check_in_date=check_in,
        check_out_date=check_out,
        facilities=[f.name for f in hotel.facilities] if hotel.facilities else [],
        accommodation_image_url=hotel.pictures[0].uri if hotel.pictures else DEFAULT_IMAGE_URL,
        available_rooms_status=AVAILABLE_STATUS,
        # Not validated: an inverted range gives zero or negative nights
        length_of_stay=(check_out - check_in).days,
        room_type=DEFAULT_ROOM_TYPE,
        room_type_description=DEFAULT_ROOM_TYPE_DESCRIPTION,
    )
