"""RefreshPricesUseCase — poll the price API and keep the latest snapshot."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from tanker_price.application.ports.metrics_port import PriceMetricsPort
from tanker_price.application.ports.price_port import FuelPricePort
from tanker_price.domain.entities.price_snapshot import PriceSnapshot
from tanker_price.domain.value_objects.geo_point import GeoPoint

logger = logging.getLogger(__name__)


class RefreshPricesUseCase:
    """Loads prices around a fixed center, remembers the last good result
    and publishes it to the metrics port when one is given."""

    def __init__(
        self,
        prices: FuelPricePort,
        center: GeoPoint,
        radius_km: float,
        metrics: PriceMetricsPort | None = None,
    ):
        self._prices = prices
        self._metrics = metrics
        self._center = center
        self._radius_km = radius_km
        self._latest: PriceSnapshot | None = None

    @property
    def center(self) -> GeoPoint:
        return self._center

    @property
    def latest(self) -> PriceSnapshot | None:
        """Most recent successful snapshot, None before the first refresh."""
        return self._latest

    async def execute(self) -> PriceSnapshot:
        """Fetch fresh prices.

        On PriceServiceError the exception propagates and the previous
        snapshot stays in place.
        """
        stations = await self._prices.load_prices(self._center, self._radius_km)
        snapshot = PriceSnapshot(
            center=self._center,
            radius_km=self._radius_km,
            stations=stations,
            updated_at=datetime.now(timezone.utc),
        )
        self._latest = snapshot
        if self._metrics is not None:
            self._metrics.publish(snapshot)
        logger.info(
            "Loaded prices for %d stations within %.1f km of %s",
            len(stations), self._radius_km, self._center,
        )
        for station in stations:
            logger.debug(
                "%s (%s, %.2f km, %s): %s",
                station.name,
                station.brand,
                station.distance_km,
                "open" if station.is_open else "closed",
                ", ".join(str(p) for p in station.prices),
            )
        return snapshot
