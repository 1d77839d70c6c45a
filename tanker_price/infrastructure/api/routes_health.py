"""Health check endpoint."""

from fastapi import APIRouter, Depends

from tanker_price.application.use_cases.refresh_prices import RefreshPricesUseCase
from tanker_price.infrastructure.api.dependencies import get_refresh_prices_uc

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(refresh: RefreshPricesUseCase = Depends(get_refresh_prices_uc)):
    """Report the search center and whether prices have been loaded."""
    latest = refresh.latest
    return {
        "status": "ok" if latest is not None else "starting",
        "location": str(refresh.center),
        "last_update": latest.updated_at.isoformat() if latest else None,
        "service": "tanker_price",
    }
