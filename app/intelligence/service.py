"""
Seller Health Service
Composes a metrics provider with the pure Seller Health engine.
"""

import logging
from typing import Any, Protocol

from app.core.exceptions import MetricsUnavailableError
from app.intelligence.seller_health import (
    DIMENSIONS,
    compute_seller_health,
    dimension_level,
    get_health_label,
)
from app.intelligence.seller_metrics import SellerHealthResult, SellerRawMetrics

logger = logging.getLogger(__name__)


class SellerMetricsProvider(Protocol):
    """Gathers the raw counts for one shop (database layer, cache, fixture...)."""

    def get_seller_health_metrics(self, shop_id: str) -> SellerRawMetrics:
        ...


class SellerHealthService:
    """
    Service for seller health scoring.

    The engine only scores what it is given; fetching counts belongs to
    the provider passed in by the caller.
    """

    @staticmethod
    def calculate(metrics: SellerRawMetrics) -> SellerHealthResult:
        """
        Score a metrics snapshot.

        Args:
            metrics: Raw seller metrics

        Returns:
            SellerHealthResult
        """
        return compute_seller_health(metrics)

    @staticmethod
    def calculate_for_shop(
        shop_id: str,
        provider: SellerMetricsProvider,
    ) -> SellerHealthResult:
        """
        Fetch metrics for a shop and score them.

        Args:
            shop_id: Shop identifier passed through to the provider
            provider: Source of SellerRawMetrics

        Returns:
            SellerHealthResult

        Raises:
            MetricsUnavailableError: If the provider fails
        """
        try:
            metrics = provider.get_seller_health_metrics(shop_id)
        except Exception as e:
            logger.error("Failed to gather seller metrics for shop %s: %s", shop_id, e)
            raise MetricsUnavailableError(shop_id, str(e)) from e

        result = compute_seller_health(metrics)
        logger.info("Seller health for shop %s: %d", shop_id, result.score)
        return result

    @staticmethod
    def build_payload(result: SellerHealthResult) -> dict[str, Any]:
        """
        Build a display-ready payload.

        Adds the overall label and per-dimension detail (label, max points,
        level) to the serialized result.
        """
        breakdown = result.breakdown.to_dict()
        payload = result.to_dict()
        payload["label"] = get_health_label(result.score).value
        payload["dimensions"] = [
            {
                "key": key,
                "label": label,
                "points": breakdown[key],
                "max_points": max_points,
                "level": dimension_level(breakdown[key], max_points).value,
            }
            for key, label, max_points in DIMENSIONS
        ]
        return payload
