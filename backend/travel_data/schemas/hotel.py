from datetime import date
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

# Clients read prices as JSON numbers, not pydantic's default decimal strings
JsonDecimal = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class HotelSearchCriteria(BaseModel):
    city: str
    check_in_date: date
    check_out_date: date

    model_config = ConfigDict(frozen=True)


class Accommodation(BaseModel):
    country: str
    city: str
    address: str
    accommodation_name: str
    price_per_night: JsonDecimal
    star_rating: int
    check_in_date: date
    check_out_date: date
    facilities: list[str]
    accommodation_image_url: str
    available_rooms_status: str
    length_of_stay: int
    room_type: str
    room_type_description: str

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
