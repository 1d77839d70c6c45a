"""Price endpoints — current search center and latest station prices."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from tanker_price.application.use_cases.refresh_prices import RefreshPricesUseCase
from tanker_price.domain.entities.station import Station
from tanker_price.infrastructure.api.dependencies import get_refresh_prices_uc

router = APIRouter(tags=["prices"])


@router.get("/location")
async def get_location(refresh: RefreshPricesUseCase = Depends(get_refresh_prices_uc)):
    """The resolved coordinate prices are searched around."""
    center = refresh.center
    return {
        "latitude": center.latitude,
        "longitude": center.longitude,
        "text": str(center),
    }


@router.get("/prices")
async def get_prices(refresh: RefreshPricesUseCase = Depends(get_refresh_prices_uc)):
    """Latest price snapshot, 503 until the first refresh succeeded."""
    snapshot = refresh.latest
    if snapshot is None:
        raise HTTPException(status_code=503, detail="No prices loaded yet")

    return {
        "location": str(snapshot.center),
        "radius_km": snapshot.radius_km,
        "updated_at": snapshot.updated_at.isoformat(),
        "total": len(snapshot.stations),
        "stations": [_serialize_station(s) for s in snapshot.stations],
    }


def _serialize_station(station: Station) -> dict:
    return {
        "id": station.id,
        "name": station.name,
        "brand": station.brand,
        "is_open": station.is_open,
        "distance_km": station.distance_km,
        "latitude": station.location.latitude,
        "longitude": station.location.longitude,
        "prices": {p.fuel_type.value: p.price for p in station.prices},
    }
