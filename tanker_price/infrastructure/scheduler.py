"""Background price refresh loop."""

from __future__ import annotations

import asyncio
import logging

from tanker_price.application.use_cases.refresh_prices import RefreshPricesUseCase
from tanker_price.domain.errors import PriceServiceError

logger = logging.getLogger(__name__)


async def run_price_updates(
    refresh: RefreshPricesUseCase,
    interval_seconds: float,
    max_iterations: int | None = None,
) -> None:
    """Refresh prices every *interval_seconds* until cancelled.

    Any failed refresh is logged and the loop carries on with the next
    interval. *max_iterations* bounds the loop (used by tests).
    """
    iteration = 0
    while max_iterations is None or iteration < max_iterations:
        iteration += 1
        try:
            await refresh.execute()
        except PriceServiceError as e:
            logger.error("Unable to load prices: %s", e)
        except Exception:
            logger.exception("Unexpected error while refreshing prices")
        await asyncio.sleep(interval_seconds)
