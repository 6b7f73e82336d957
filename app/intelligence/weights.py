"""
Seller Health Policy Table

Every tunable constant used by the scorer and the suggestion rules lives
here. Dimension weights sum to 100.
"""

from dataclasses import dataclass


# Dimension weights (max points per dimension)
WEIGHTS: dict[str, int] = {
    "completeness": 25,
    "inventory": 20,
    "reliability": 20,
    "activity": 15,
    "diversity": 20,
}


@dataclass(frozen=True)
class InventoryWeights:
    """Inventory sub-weights."""
    in_stock: float = 0.7
    low_stock: float = 0.3


@dataclass(frozen=True)
class ReliabilityWeights:
    """Reliability sub-weights. A shop with no orders gets the baseline share."""
    delivery: float = 0.6
    cancellation: float = 0.2
    stale_pending: float = 0.2
    no_orders_baseline: float = 0.5


@dataclass(frozen=True)
class ActivityPolicy:
    """Activity targets per 14-day window (the window itself is applied by the caller)."""
    target_products_added: int = 3
    target_orders_received: int = 5
    products_weight: float = 0.5
    orders_weight: float = 0.5


@dataclass(frozen=True)
class DiversityPolicy:
    """Catalog breadth targets."""
    target_active_products: int = 10
    target_categories: int = 3
    products_weight: float = 0.5
    categories_weight: float = 0.5


INVENTORY = InventoryWeights()
RELIABILITY = ReliabilityWeights()
ACTIVITY = ActivityPolicy()
DIVERSITY = DiversityPolicy()

# Order is "stale" once pending for longer than this
STALE_PENDING_HOURS = 48

# Variants with stock in [1, LOW_STOCK_MAX_UNITS] count as low stock
LOW_STOCK_MAX_UNITS = 3


# ============================================
# Suggestion thresholds
# ============================================
MAX_SUGGESTIONS = 3
LOW_STOCK_SHARE_THRESHOLD = 0.3       # low / in-stock, strictly greater
OUT_OF_STOCK_PCT_THRESHOLD = 40       # whole percent, inclusive
CANCELLATION_RATE_THRESHOLD = 0.2     # cancelled / total, strictly greater
CANCELLATION_MIN_ORDERS = 5
CATALOG_TARGET_SIZE = 10
SINGLE_CATEGORY_MIN_PRODUCTS = 5


# ============================================
# Presentation bands (score and per-dimension share)
# ============================================
LABEL_THRESHOLDS = {
    "excellent": 75,
    "good": 50,
    "needs_work": 25,
}
