"""
Seller Health Router
API endpoint for scoring a seller metrics snapshot.
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Request

from app.config import settings
from app.core.rate_limit import limiter
from app.intelligence.schemas import SellerHealthResponse, SellerMetricsRequest
from app.intelligence.service import SellerHealthService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/intelligence", tags=["Intelligence"])


@router.post(
    "/seller-health",
    response_model=SellerHealthResponse,
    summary="Score seller health",
    description="Calculate the 0-100 seller health score, breakdown and top suggestions from a metrics snapshot.",
)
@limiter.limit(settings.seller_health_rate_limit)
async def score_seller_health(
    request: Request,
    payload: SellerMetricsRequest,
) -> SellerHealthResponse:
    """
    Score a seller metrics snapshot.

    The snapshot is scored as-is: counts that exceed their totals are
    capped rather than rejected.
    """
    result = SellerHealthService.calculate(payload.to_metrics())

    return SellerHealthResponse(
        **SellerHealthService.build_payload(result),
        calculated_at=datetime.now(timezone.utc).isoformat(),
    )
