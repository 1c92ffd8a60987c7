from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class FlightSearchCriteria(BaseModel):
    origin: str
    destination: str
    departure_date: str
    return_date: str | None = None
    adults: int = 1
    children: int = 0
    infants: int = 0

    model_config = ConfigDict(frozen=True)


class FlightInfo(BaseModel):
    """One direction of a round trip, taken from the itinerary's first segment."""
    id: str | None = None
    departure_airport: str
    arrival_airport: str
    departure_time: str
    arrival_time: str
    duration: str
    price: str

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RoundTripFlight(BaseModel):
    outbound: FlightInfo
    inbound: FlightInfo
    total_price: str

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
