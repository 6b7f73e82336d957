"""
Seller Health Schemas
Pydantic models for seller health API requests and responses.
"""

from pydantic import BaseModel, ConfigDict, Field

from app.intelligence.seller_metrics import SellerRawMetrics

# Upper bound for any single count accepted over HTTP
MAX_COUNT = 1_000_000_000


class SellerMetricsRequest(BaseModel):
    """Raw seller metrics snapshot. Counts must be non-negative integers."""

    model_config = ConfigDict(extra="forbid")

    total_products: int = Field(0, ge=0, le=MAX_COUNT, description="Active products in the shop")
    products_with_images: int = Field(0, ge=0, le=MAX_COUNT, description="Products with at least one image")
    products_with_description: int = Field(0, ge=0, le=MAX_COUNT, description="Products with a description")
    products_with_price: int = Field(0, ge=0, le=MAX_COUNT, description="Products with a priced variant")
    products_with_stock: int = Field(0, ge=0, le=MAX_COUNT, description="Products with a variant in stock")

    total_variants: int = Field(0, ge=0, le=MAX_COUNT, description="Active variants across all products")
    variants_in_stock: int = Field(0, ge=0, le=MAX_COUNT, description="Variants with stock > 0")
    variants_low_stock: int = Field(0, ge=0, le=MAX_COUNT, description="Variants with stock between 1 and 3")

    total_orders: int = Field(0, ge=0, le=MAX_COUNT, description="Orders ever placed")
    delivered_orders: int = Field(0, ge=0, le=MAX_COUNT, description="Delivered orders")
    cancelled_orders: int = Field(0, ge=0, le=MAX_COUNT, description="Cancelled orders")
    stale_pending_orders: int = Field(0, ge=0, le=MAX_COUNT, description="Pending orders older than 48 hours")

    recent_products_added: int = Field(0, ge=0, le=MAX_COUNT, description="Products created in the last 14 days")
    recent_orders_received: int = Field(0, ge=0, le=MAX_COUNT, description="Orders received in the last 14 days")

    active_products: int = Field(0, ge=0, le=MAX_COUNT, description="Active products (same as total_products)")
    category_count: int = Field(0, ge=0, le=MAX_COUNT, description="Distinct categories with at least one product")

    def to_metrics(self) -> SellerRawMetrics:
        return SellerRawMetrics(**self.model_dump())


class SellerHealthBreakdownSchema(BaseModel):
    """Per-dimension points."""

    completeness: int = Field(..., ge=0, le=25, description="Product completeness (0-25)")
    inventory: int = Field(..., ge=0, le=20, description="Inventory health (0-20)")
    reliability: int = Field(..., ge=0, le=20, description="Order reliability (0-20)")
    activity: int = Field(..., ge=0, le=15, description="Recent activity (0-15)")
    diversity: int = Field(..., ge=0, le=20, description="Catalog size and diversity (0-20)")


class DimensionDetail(BaseModel):
    """Display detail for one dimension."""

    key: str
    label: str
    points: int
    max_points: int
    level: str = Field(..., description="excellent, good, needs_work, or critical")


class SellerSuggestionSchema(BaseModel):
    """Actionable suggestion."""

    text: str
    href: str = Field(..., description="Dashboard-relative path, empty when there is nothing to open")


class SellerHealthResponse(BaseModel):
    """Complete seller health response."""

    score: int = Field(..., ge=0, le=100, description="Overall score 0-100")
    label: str = Field(..., description="excellent, good, needs_work, or critical")
    breakdown: SellerHealthBreakdownSchema
    dimensions: list[DimensionDetail]
    suggestions: list[SellerSuggestionSchema] = Field(..., max_length=3)
    calculated_at: str = Field(..., description="ISO timestamp when the score was calculated")
