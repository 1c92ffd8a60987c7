"""Raw Amadeus response shapes — parsed, mapped, then discarded."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class AmadeusModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


# --- Flight offers search (GET /v2/shopping/flight-offers) ---


class FlightPoint(AmadeusModel):
    iata_code: str
    at: str


class Segment(AmadeusModel):
    departure: FlightPoint
    arrival: FlightPoint
    carrier_code: str | None = None
    duration: str = ""


class Itinerary(AmadeusModel):
    duration: str | None = None
    segments: list[Segment] = []


class Price(AmadeusModel):
    currency: str
    total: str


class FlightOffer(AmadeusModel):
    type: str | None = None
    id: str | None = None
    source: str | None = None
    itineraries: list[Itinerary] = []
    price: Price


class FlightSearchResponse(AmadeusModel):
    data: list[FlightOffer] | None = None


# --- Hotel search (fixture-backed for now, same shape as the hotel offers API) ---


class HotelAddress(AmadeusModel):
    country: str | None = None
    city: str | None = None
    line: str | None = None


class HotelPrice(AmadeusModel):
    total: Decimal | None = None


class HotelRatePlan(AmadeusModel):
    price: HotelPrice | None = None


class HotelFacility(AmadeusModel):
    name: str


class HotelPicture(AmadeusModel):
    uri: str


class HotelData(AmadeusModel):
    name: str | None = None
    address: HotelAddress | None = None
    rate_plan: HotelRatePlan | None = None
    star_rating: int | None = None
    facilities: list[HotelFacility] | None = None
    pictures: list[HotelPicture] | None = None


class HotelSearchResponse(AmadeusModel):
    data: list[HotelData] | None = None
