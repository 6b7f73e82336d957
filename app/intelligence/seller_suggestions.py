"""
Seller Suggestions

Generates up to 3 plain-language improvement tips from the seller's raw
metrics. Rules are a declarative table evaluated in order; matches are
stably sorted by priority (lower = shown first) so equal priorities keep
table order.
"""

import logging
from dataclasses import dataclass
from typing import Callable

from app.intelligence.seller_metrics import (
    SellerHealthBreakdown,
    SellerRawMetrics,
    SellerSuggestion,
)
from app.intelligence.utils import pluralize, ratio, round_half_up
from app.intelligence.weights import (
    CANCELLATION_MIN_ORDERS,
    CANCELLATION_RATE_THRESHOLD,
    CATALOG_TARGET_SIZE,
    LOW_STOCK_MAX_UNITS,
    LOW_STOCK_SHARE_THRESHOLD,
    MAX_SUGGESTIONS,
    OUT_OF_STOCK_PCT_THRESHOLD,
    SINGLE_CATEGORY_MIN_PRODUCTS,
    STALE_PENDING_HOURS,
)

logger = logging.getLogger(__name__)


ONBOARDING_SUGGESTIONS: tuple[SellerSuggestion, ...] = (
    SellerSuggestion(
        text="Add your first product to get started — even one product activates your health score.",
        href="products/new",
    ),
    SellerSuggestion(
        text="Upload a product photo, set a price, and add stock to make it visible in the marketplace.",
        href="products/new",
    ),
    SellerSuggestion(
        text="Organize products into categories to help buyers find what they need.",
        href="categories",
    ),
)

ALL_GOOD_SUGGESTION = SellerSuggestion(
    text="Your shop is in great shape! Keep adding products and fulfilling orders to maintain your score.",
    href="",
)


@dataclass(frozen=True)
class SuggestionRule:
    """One condition -> suggestion entry. render() is only called when applies() is true."""
    rule_id: str
    priority: int
    href: str
    applies: Callable[[SellerRawMetrics], bool]
    render: Callable[[SellerRawMetrics], str]


def _missing_images(m: SellerRawMetrics) -> int:
    return m.total_products - m.products_with_images


def _missing_descriptions(m: SellerRawMetrics) -> int:
    return m.total_products - m.products_with_description


def _missing_stock(m: SellerRawMetrics) -> int:
    return m.total_products - m.products_with_stock


def _out_of_stock_pct(m: SellerRawMetrics) -> int:
    out_of_stock = m.total_variants - m.variants_in_stock
    if out_of_stock <= 0 or m.total_variants <= 0:
        return 0
    return round_half_up(out_of_stock / m.total_variants * 100)


def _render_missing_images(m: SellerRawMetrics) -> str:
    n = _missing_images(m)
    return (
        f"Add photos to {n} {pluralize(n, 'product', 'products')}"
        " — listings with images get 3× more views."
    )


def _render_missing_descriptions(m: SellerRawMetrics) -> str:
    n = _missing_descriptions(m)
    return (
        f"Write descriptions for {n} {pluralize(n, 'product', 'products')}"
        " — buyers need to know sizes, materials, and details."
    )


def _render_missing_stock(m: SellerRawMetrics) -> str:
    n = _missing_stock(m)
    return (
        f"{n} {pluralize(n, 'product has', 'products have')} zero stock"
        " — update stock levels so buyers can order."
    )


def _render_low_stock(m: SellerRawMetrics) -> str:
    n = m.variants_low_stock
    return (
        f"{n} {pluralize(n, 'variant is', 'variants are')} running low (1–{LOW_STOCK_MAX_UNITS} units)"
        " — restock soon to avoid missed sales."
    )


def _render_out_of_stock(m: SellerRawMetrics) -> str:
    return (
        f"{_out_of_stock_pct(m)}% of your variants are out of stock"
        " — restocking will improve your health score."
    )


def _render_stale_orders(m: SellerRawMetrics) -> str:
    n = m.stale_pending_orders
    return (
        f"You have {n} pending {pluralize(n, 'order', 'orders')} older than {STALE_PENDING_HOURS} hours"
        " — confirm or update them."
    )


SUGGESTION_RULES: tuple[SuggestionRule, ...] = (
    # Product completeness
    SuggestionRule(
        rule_id="missing_images",
        priority=1,
        href="products",
        applies=lambda m: _missing_images(m) > 0,
        render=_render_missing_images,
    ),
    SuggestionRule(
        rule_id="missing_descriptions",
        priority=3,
        href="products",
        applies=lambda m: _missing_descriptions(m) > 0,
        render=_render_missing_descriptions,
    ),
    SuggestionRule(
        rule_id="zero_stock_products",
        priority=2,
        href="products",
        applies=lambda m: 0 < _missing_stock(m) < m.total_products,
        render=_render_missing_stock,
    ),
    # Inventory health
    SuggestionRule(
        rule_id="low_stock_variants",
        priority=4,
        href="products",
        applies=lambda m: (
            m.variants_low_stock > 0
            and m.variants_in_stock > 0
            and ratio(m.variants_low_stock, m.variants_in_stock) > LOW_STOCK_SHARE_THRESHOLD
        ),
        render=_render_low_stock,
    ),
    SuggestionRule(
        rule_id="out_of_stock_variants",
        priority=2,
        href="products",
        applies=lambda m: _out_of_stock_pct(m) >= OUT_OF_STOCK_PCT_THRESHOLD,
        render=_render_out_of_stock,
    ),
    # Order reliability
    SuggestionRule(
        rule_id="stale_pending_orders",
        priority=1,
        href="orders",
        applies=lambda m: m.stale_pending_orders > 0,
        render=_render_stale_orders,
    ),
    SuggestionRule(
        rule_id="high_cancellation_rate",
        priority=5,
        href="orders",
        applies=lambda m: (
            m.total_orders >= CANCELLATION_MIN_ORDERS
            and ratio(m.cancelled_orders, m.total_orders) > CANCELLATION_RATE_THRESHOLD
        ),
        render=lambda m: "Your cancellation rate is high — try to confirm orders quickly and keep stock accurate.",
    ),
    # Activity
    SuggestionRule(
        rule_id="grow_catalog",
        priority=6,
        href="products/new",
        applies=lambda m: m.recent_products_added == 0 and m.total_products < CATALOG_TARGET_SIZE,
        render=lambda m: f"Add more products to grow your catalog — aim for at least {CATALOG_TARGET_SIZE} active listings.",
    ),
    SuggestionRule(
        rule_id="refresh_catalog",
        priority=7,
        href="products/new",
        applies=lambda m: m.recent_products_added == 0 and m.total_products >= CATALOG_TARGET_SIZE,
        render=lambda m: "Keep your catalog fresh — adding new products regularly attracts repeat buyers.",
    ),
    # Catalog diversity
    SuggestionRule(
        rule_id="no_categories",
        priority=3,
        href="categories",
        applies=lambda m: m.category_count == 0 and m.total_products > 0,
        render=lambda m: "Create categories and organize your products — it helps buyers browse and boosts your score.",
    ),
    SuggestionRule(
        rule_id="single_category",
        priority=8,
        href="categories",
        applies=lambda m: m.category_count == 1 and m.total_products >= SINGLE_CATEGORY_MIN_PRODUCTS,
        render=lambda m: "You only have 1 category — adding more helps buyers find products faster.",
    ),
)


def generate_suggestions(
    metrics: SellerRawMetrics,
    breakdown: SellerHealthBreakdown,
) -> tuple[SellerSuggestion, ...]:
    """
    Generate up to 3 prioritized suggestions.

    Args:
        metrics: Raw seller metrics
        breakdown: Computed dimension scores (not used by the current rules)

    Returns:
        Onboarding tips for an empty shop, the all-good message when no
        rule matches, otherwise the top 3 matches by priority.
    """
    if metrics.total_products == 0:
        return ONBOARDING_SUGGESTIONS

    matched = [rule for rule in SUGGESTION_RULES if rule.applies(metrics)]

    if not matched:
        return (ALL_GOOD_SUGGESTION,)

    # sorted() is stable: ties keep table order
    top = sorted(matched, key=lambda rule: rule.priority)[:MAX_SUGGESTIONS]

    logger.debug(
        "Suggestion rules matched=%s selected=%s",
        [rule.rule_id for rule in matched],
        [rule.rule_id for rule in top],
    )

    return tuple(
        SellerSuggestion(text=rule.render(metrics), href=rule.href)
        for rule in top
    )
