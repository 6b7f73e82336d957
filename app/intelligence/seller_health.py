"""
Seller Health Score Calculator

Calculates a Seller Health Score (0-100) from structured metrics:
- Completeness (25 points) - products with image, description, price, stock
- Inventory (20 points) - in-stock rate and low-stock share
- Reliability (20 points) - delivered, cancelled and stale pending orders
- Activity (15 points) - products added and orders received in 14 days
- Diversity (20 points) - catalog size and category spread

Pure computation: no database access, no side effects. Each dimension is
rounded on its own before summing, so the total can differ by a point or
two from rounding the unrounded sum. That is expected.
"""

import logging
from enum import Enum

from app.intelligence.seller_metrics import (
    SellerHealthBreakdown,
    SellerHealthResult,
    SellerRawMetrics,
)
from app.intelligence.seller_suggestions import generate_suggestions
from app.intelligence.utils import clamp, ratio, round_half_up
from app.intelligence.weights import (
    ACTIVITY,
    DIVERSITY,
    INVENTORY,
    LABEL_THRESHOLDS,
    RELIABILITY,
    WEIGHTS,
)

logger = logging.getLogger(__name__)


class HealthLabel(str, Enum):
    """Health Score labels."""
    EXCELLENT = "excellent"    # 75-100
    GOOD = "good"              # 50-74
    NEEDS_WORK = "needs_work"  # 25-49
    CRITICAL = "critical"      # <25


# Dashboard display metadata, in display order
DIMENSIONS: tuple[tuple[str, str, int], ...] = (
    ("completeness", "Product Quality", WEIGHTS["completeness"]),
    ("inventory", "Inventory", WEIGHTS["inventory"]),
    ("reliability", "Fulfillment", WEIGHTS["reliability"]),
    ("activity", "Activity", WEIGHTS["activity"]),
    ("diversity", "Catalog Breadth", WEIGHTS["diversity"]),
)


class SellerHealthCalculator:
    """
    Scores the five seller health dimensions.

    Every scorer takes the full snapshot and returns an integer in
    [0, weight]. Zero denominators route to fixed scores instead of raising.
    """

    @staticmethod
    def _score_completeness(m: SellerRawMetrics) -> int:
        """Completeness (25 pts max): average of the four completion rates."""
        if m.total_products == 0:
            return 0

        image_rate = ratio(m.products_with_images, m.total_products)
        desc_rate = ratio(m.products_with_description, m.total_products)
        price_rate = ratio(m.products_with_price, m.total_products)
        stock_rate = ratio(m.products_with_stock, m.total_products)

        avg_rate = (image_rate + desc_rate + price_rate + stock_rate) / 4
        return round_half_up(avg_rate * WEIGHTS["completeness"])

    @staticmethod
    def _score_inventory(m: SellerRawMetrics) -> int:
        """Inventory (20 pts max): 70% in-stock rate, 30% inverse low-stock share."""
        if m.total_variants == 0:
            return 0

        in_stock_rate = ratio(m.variants_in_stock, m.total_variants)
        low_stock_penalty = (
            ratio(m.variants_low_stock, m.variants_in_stock)
            if m.variants_in_stock > 0
            else 0.0
        )

        score = in_stock_rate * INVENTORY.in_stock + (1 - low_stock_penalty) * INVENTORY.low_stock
        return round_half_up(score * WEIGHTS["inventory"])

    @staticmethod
    def _score_reliability(m: SellerRawMetrics) -> int:
        """
        Reliability (20 pts max).

        Delivery rate 60%, inverse cancellation rate 20%, inverse stale
        pending rate 20%. No order history gives a neutral 10/20.
        """
        if m.total_orders == 0:
            return round_half_up(WEIGHTS["reliability"] * RELIABILITY.no_orders_baseline)

        delivery_rate = ratio(m.delivered_orders, m.total_orders)
        cancel_rate = 1 - ratio(m.cancelled_orders, m.total_orders)
        stale_rate = 1 - ratio(m.stale_pending_orders, m.total_orders)

        score = (
            delivery_rate * RELIABILITY.delivery
            + cancel_rate * RELIABILITY.cancellation
            + stale_rate * RELIABILITY.stale_pending
        )
        return round_half_up(score * WEIGHTS["reliability"])

    @staticmethod
    def _score_activity(m: SellerRawMetrics) -> int:
        """Activity (15 pts max): 3 products and 5 orders per window earn full marks."""
        product_activity = ratio(m.recent_products_added, ACTIVITY.target_products_added)
        order_activity = ratio(m.recent_orders_received, ACTIVITY.target_orders_received)

        score = product_activity * ACTIVITY.products_weight + order_activity * ACTIVITY.orders_weight
        return round_half_up(score * WEIGHTS["activity"])

    @staticmethod
    def _score_diversity(m: SellerRawMetrics) -> int:
        """Diversity (20 pts max): 10 active products and 3 categories earn full marks."""
        product_score = ratio(m.active_products, DIVERSITY.target_active_products)
        category_score = ratio(m.category_count, DIVERSITY.target_categories)

        score = product_score * DIVERSITY.products_weight + category_score * DIVERSITY.categories_weight
        return round_half_up(score * WEIGHTS["diversity"])

    @staticmethod
    def calculate_breakdown(metrics: SellerRawMetrics) -> SellerHealthBreakdown:
        """Run all five dimension scorers."""
        return SellerHealthBreakdown(
            completeness=SellerHealthCalculator._score_completeness(metrics),
            inventory=SellerHealthCalculator._score_inventory(metrics),
            reliability=SellerHealthCalculator._score_reliability(metrics),
            activity=SellerHealthCalculator._score_activity(metrics),
            diversity=SellerHealthCalculator._score_diversity(metrics),
        )

    @staticmethod
    def calculate_score(breakdown: SellerHealthBreakdown) -> int:
        """Sum the breakdown, clamped to [0, 100]."""
        return int(clamp(breakdown.total, 0, 100))


def compute_seller_health(metrics: SellerRawMetrics) -> SellerHealthResult:
    """
    Compute the Seller Health Score from raw metrics.

    Args:
        metrics: Counts gathered for one shop

    Returns:
        SellerHealthResult with score, breakdown and up to 3 suggestions
    """
    breakdown = SellerHealthCalculator.calculate_breakdown(metrics)
    score = SellerHealthCalculator.calculate_score(breakdown)
    suggestions = generate_suggestions(metrics, breakdown)

    logger.debug(
        "Seller health computed: score=%d breakdown=%s suggestions=%d",
        score,
        breakdown.to_dict(),
        len(suggestions),
    )

    return SellerHealthResult(
        score=score,
        breakdown=breakdown,
        suggestions=suggestions,
    )


def get_health_label(score: float) -> HealthLabel:
    """Get label from overall score."""
    if score >= LABEL_THRESHOLDS["excellent"]:
        return HealthLabel.EXCELLENT
    elif score >= LABEL_THRESHOLDS["good"]:
        return HealthLabel.GOOD
    elif score >= LABEL_THRESHOLDS["needs_work"]:
        return HealthLabel.NEEDS_WORK
    else:
        return HealthLabel.CRITICAL


def dimension_level(points: float, max_points: float) -> HealthLabel:
    """Band a single dimension by its share of max points."""
    pct = points / max_points * 100 if max_points > 0 else 0
    return get_health_label(pct)
