"""Prometheus scrape endpoint."""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from tanker_price.adapters.metrics.prometheus_adapter import PrometheusPriceMetrics
from tanker_price.infrastructure.api.dependencies import get_price_metrics

router = APIRouter(tags=["metrics"])


@router.get("/metrics")
async def metrics(price_metrics: PrometheusPriceMetrics = Depends(get_price_metrics)):
    return Response(content=price_metrics.render(), media_type=price_metrics.content_type)
