"""Prometheus metrics adapter — implements PriceMetricsPort.

Gauges (all prefixed with the configured namespace):

    <ns>_fuel_price{name,brand,id,fuel_type}
    <ns>_is_open{name,brand,id}
    <ns>_distance_km{name,brand,id}
    <ns>_location_lat{name,brand,id}
    <ns>_location_long{name,brand,id}
    <ns>_update                          unix time of the last successful refresh
"""

from __future__ import annotations

import logging

from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, Gauge, generate_latest

from tanker_price.application.ports.metrics_port import PriceMetricsPort
from tanker_price.config import settings
from tanker_price.domain.entities.price_snapshot import PriceSnapshot
from tanker_price.domain.value_objects.enums import FuelType

logger = logging.getLogger(__name__)

STATION_LABELS = ("name", "brand", "id")


class PrometheusPriceMetrics(PriceMetricsPort):
    """Keeps one gauge family per station attribute in its own registry."""

    content_type = CONTENT_TYPE_LATEST

    def __init__(self, namespace: str | None = None, registry: CollectorRegistry | None = None):
        self.namespace = namespace or settings.prometheus_namespace
        # own registry so several apps (e.g. in tests) don't collide on names
        self.registry = registry if registry is not None else CollectorRegistry()

        self._fuel_price = self._gauge(
            "fuel_price", "Price of each fuel type", (*STATION_LABELS, "fuel_type")
        )
        self._is_open = self._gauge("is_open", "Is gas station currently open?", STATION_LABELS)
        self._distance = self._gauge("distance_km", "Distance from reference point", STATION_LABELS)
        self._location_lat = self._gauge("location_lat", "Latitude of station", STATION_LABELS)
        self._location_long = self._gauge("location_long", "Longitude of station", STATION_LABELS)
        self._last_update = self._gauge("update", "Last update in seconds", ())

    def _gauge(self, name: str, documentation: str, labels: tuple[str, ...]) -> Gauge:
        return Gauge(
            name, documentation, labelnames=labels,
            namespace=self.namespace, registry=self.registry,
        )

    def publish(self, snapshot: PriceSnapshot) -> None:
        self._last_update.set(snapshot.updated_at.timestamp())

        for station in snapshot.stations:
            labels = (station.name, station.brand, station.id)
            self._is_open.labels(*labels).set(1.0 if station.is_open else 0.0)
            self._distance.labels(*labels).set(station.distance_km)
            self._location_lat.labels(*labels).set(station.location.latitude)
            self._location_long.labels(*labels).set(station.location.longitude)
            for fuel_type in FuelType:
                price = station.price_for(fuel_type)
                if price is not None:
                    self._fuel_price.labels(*labels, fuel_type.value).set(price)

        logger.debug("Published metrics for %d stations", len(snapshot.stations))

    def render(self) -> bytes:
        """Current metrics in the Prometheus text exposition format."""
        return generate_latest(self.registry)
