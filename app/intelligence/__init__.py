"""
Intelligence Module
Seller Health scoring and improvement suggestions.
"""

from app.intelligence.seller_health import (
    DIMENSIONS,
    HealthLabel,
    SellerHealthCalculator,
    compute_seller_health,
    dimension_level,
    get_health_label,
)
from app.intelligence.seller_metrics import (
    SellerHealthBreakdown,
    SellerHealthResult,
    SellerRawMetrics,
    SellerSuggestion,
)
from app.intelligence.seller_suggestions import generate_suggestions

__all__ = [
    "DIMENSIONS",
    "HealthLabel",
    "SellerHealthBreakdown",
    "SellerHealthCalculator",
    "SellerHealthResult",
    "SellerRawMetrics",
    "SellerSuggestion",
    "compute_seller_health",
    "dimension_level",
    "generate_suggestions",
    "get_health_label",
]
