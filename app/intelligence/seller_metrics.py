"""
Seller Metrics Contract

Pure data types for the Seller Health engine. Instances are created fresh
per call by whatever layer gathers the counts, and carry no identifiers
or timestamps.
"""

from dataclasses import asdict, dataclass, fields
from typing import Any


@dataclass(frozen=True)
class SellerRawMetrics:
    """
    Raw counts used for health scoring. All values are non-negative.

    "Recent" means the trailing 14-day window and "stale pending" means
    pending orders older than 48 hours; both are computed by the caller.
    """

    # Product completeness
    total_products: int = 0
    products_with_images: int = 0
    products_with_description: int = 0
    products_with_price: int = 0
    products_with_stock: int = 0

    # Inventory health
    total_variants: int = 0
    variants_in_stock: int = 0
    variants_low_stock: int = 0

    # Order reliability
    total_orders: int = 0
    delivered_orders: int = 0
    cancelled_orders: int = 0
    stale_pending_orders: int = 0

    # Activity
    recent_products_added: int = 0
    recent_orders_received: int = 0

    # Catalog size & diversity
    active_products: int = 0
    category_count: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SellerRawMetrics":
        """Build from a mapping, ignoring unknown keys and defaulting missing ones to 0."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: int(v) for k, v in data.items() if k in known and v is not None})

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class SellerHealthBreakdown:
    """Per-dimension points. Weights: 25 / 20 / 20 / 15 / 20."""

    completeness: int
    inventory: int
    reliability: int
    activity: int
    diversity: int

    @property
    def total(self) -> int:
        return (
            self.completeness
            + self.inventory
            + self.reliability
            + self.activity
            + self.diversity
        )

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class SellerSuggestion:
    """A single actionable tip. href is dashboard-relative, e.g. "orders"."""

    text: str
    href: str


@dataclass(frozen=True)
class SellerHealthResult:
    """Full result returned by compute_seller_health()."""

    score: int
    breakdown: SellerHealthBreakdown
    suggestions: tuple[SellerSuggestion, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "breakdown": self.breakdown.to_dict(),
            "suggestions": [asdict(s) for s in self.suggestions],
        }
