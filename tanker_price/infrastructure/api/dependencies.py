"""FastAPI dependency injection — wires adapters into use cases."""

from __future__ import annotations

from fastapi import HTTPException, Request

from tanker_price.adapters.geocoder.nominatim_adapter import NominatimAdapter
from tanker_price.adapters.metrics.prometheus_adapter import PrometheusPriceMetrics
from tanker_price.adapters.tankerkoenig.tankerkoenig_adapter import TankerkoenigAdapter
from tanker_price.application.ports.metrics_port import PriceMetricsPort
from tanker_price.application.use_cases.refresh_prices import RefreshPricesUseCase
from tanker_price.application.use_cases.resolve_location import ResolveLocationUseCase
from tanker_price.domain.value_objects.geo_point import GeoPoint

# Singleton adapters (stateless)
_geocoder_adapter = NominatimAdapter()
_price_adapter = TankerkoenigAdapter()


def get_resolve_location_uc() -> ResolveLocationUseCase:
    return ResolveLocationUseCase(geocoder=_geocoder_adapter)


def build_refresh_prices_uc(
    center: GeoPoint, radius_km: float, metrics: PriceMetricsPort | None = None
) -> RefreshPricesUseCase:
    return RefreshPricesUseCase(
        prices=_price_adapter, center=center, radius_km=radius_km, metrics=metrics
    )


def get_refresh_prices_uc(request: Request) -> RefreshPricesUseCase:
    """The use case created at startup, once the search center is resolved."""
    refresh = getattr(request.app.state, "refresh_prices", None)
    if refresh is None:
        raise HTTPException(status_code=503, detail="Search location not resolved yet")
    return refresh


def get_price_metrics(request: Request) -> PrometheusPriceMetrics:
    return request.app.state.price_metrics
