"""Port interface for publishing price snapshots as metrics."""

from abc import ABC, abstractmethod

from tanker_price.domain.entities.price_snapshot import PriceSnapshot


class PriceMetricsPort(ABC):
    @abstractmethod
    def publish(self, snapshot: PriceSnapshot) -> None:
        """Expose the stations of a fresh snapshot to the metrics backend."""
        ...
