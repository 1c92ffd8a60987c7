"""Hotel search router."""

import logging
from datetime import date, datetime

from fastapi import APIRouter, Depends, HTTPException, Query

from travel_data.dependencies import get_accommodation_service
from travel_data.schemas.hotel import Accommodation, HotelSearchCriteria
from travel_data.services.base import SearchProvider

logger = logging.getLogger(__name__)

router = APIRouter()

MISSING_DATES_DETAIL = "Both checkInDate and checkOutDate are required"


def _parse_date(value: str | None) -> date | None:
    """Parse a query date; None for absent, empty or default (0001-01-01) values."""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value).date()
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid date: {value}")
    if parsed == date.min:
        return None
    return parsed


@router.get("/search", response_model=list[Accommodation])
async def search_hotels(
    city: str = Query("", description="City name, e.g. Paris"),
    check_in_date: str | None = Query(None, alias="checkInDate", description="e.g. 2025-04-25"),
    check_out_date: str | None = Query(None, alias="checkOutDate", description="e.g. 2025-05-02"),
    service: SearchProvider = Depends(get_accommodation_service),
):
    """Search hotels for a stay."""
    check_in = _parse_date(check_in_date)
    check_out = _parse_date(check_out_date)
    if check_in is None or check_out is None:
        raise HTTPException(status_code=400, detail=MISSING_DATES_DETAIL)

    results = await service.search(
        HotelSearchCriteria(city=city, check_in_date=check_in, check_out_date=check_out)
    )
    if not results:
        raise HTTPException(status_code=404, detail="No hotels found")

    return results
