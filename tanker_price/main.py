"""tanker_price — FastAPI application factory."""

import asyncio
import contextlib
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from tanker_price.adapters.metrics.prometheus_adapter import PrometheusPriceMetrics
from tanker_price.config import settings
from tanker_price.domain.errors import LocationError
from tanker_price.infrastructure.api.dependencies import (
    build_refresh_prices_uc,
    get_resolve_location_uc,
)
from tanker_price.infrastructure.api.routes_health import router as health_router
from tanker_price.infrastructure.api.routes_metrics import router as metrics_router
from tanker_price.infrastructure.api.routes_prices import router as prices_router
from tanker_price.infrastructure.scheduler import run_price_updates

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Resolve the search location, then keep prices fresh until shutdown.

    A location that can't be resolved aborts startup; there is no
    fallback coordinate.
    """
    if not settings.location.strip():
        raise RuntimeError("LOCATION is not set")

    try:
        center = await get_resolve_location_uc().execute_raw(settings.location)
    except LocationError:
        logger.exception("Unable to resolve location '%s'", settings.location)
        raise
    logger.info("Searching at location %s", center)

    refresh = build_refresh_prices_uc(center, settings.radius_km, app.state.price_metrics)
    app.state.refresh_prices = refresh
    updater = asyncio.create_task(run_price_updates(refresh, settings.update_interval_seconds))
    logger.info("System ready to receive requests")
    yield

    logger.info("Shutting down updater")
    updater.cancel()
    with contextlib.suppress(asyncio.CancelledError):
        await updater


def create_app() -> FastAPI:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s | %(message)s",
    )

    app = FastAPI(
        title="tanker_price",
        description="Fuel prices from the Tankerkönig API around a configurable location",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.price_metrics = PrometheusPriceMetrics(namespace=settings.prometheus_namespace)

    app.include_router(metrics_router)
    app.include_router(health_router, prefix="/api")
    app.include_router(prices_router, prefix="/api")

    @app.get("/", include_in_schema=False)
    async def index():
        return RedirectResponse(url="/metrics", status_code=308)

    return app


app = create_app()
