"""Flight search router — round-trip search against Amadeus."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from travel_data.dependencies import get_flight_service
from travel_data.schemas.flight import FlightSearchCriteria, RoundTripFlight
from travel_data.services.base import SearchProvider
from travel_data.services.errors import AuthError, UpstreamError

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND_DETAIL = "No flights found"


@router.get("/search", response_model=list[RoundTripFlight])
async def search_flights(
    origin: str = Query(..., description="Origin IATA code, e.g. CPH"),
    destination: str = Query(..., description="Destination IATA code, e.g. BER"),
    date: str = Query(..., description="Departure date, e.g. 2025-04-25"),
    return_date: str | None = Query(None, alias="returnDate", description="Return date, e.g. 2025-05-02"),
    adults: int = Query(1, ge=1),
    children: int = Query(0, ge=0),
    infants: int = Query(0, ge=0),
    service: SearchProvider = Depends(get_flight_service),
):
    """Search round-trip flights. One-way searches are rejected."""
    if not return_date:
        raise HTTPException(status_code=400, detail="returnDate is required for round-trip search")

    criteria = FlightSearchCriteria(
        origin=origin,
        destination=destination,
        departure_date=date,
        return_date=return_date,
        adults=adults,
        children=children,
        infants=infants,
    )

    # Auth and upstream failures answer the same as an empty result
    try:
        results = await service.search(criteria)
    except AuthError as e:
        logger.error(f"Flight search aborted, no access token: {e}")
        raise HTTPException(status_code=404, detail=NOT_FOUND_DETAIL)
    except UpstreamError as e:
        logger.error(f"Flight search aborted, upstream failure ({e.status_code}): {e}")
        raise HTTPException(status_code=404, detail=NOT_FOUND_DETAIL)

    if not results:
        raise HTTPException(status_code=404, detail=NOT_FOUND_DETAIL)

    return results
