"""
Seller Health Exceptions
Custom exceptions raised around the Seller Health engine.
"""

from typing import Optional


class MetricsUnavailableError(Exception):
    """Exception for failures while gathering seller metrics."""

    def __init__(
        self,
        shop_id: str,
        message: str,
        source: Optional[str] = None,
    ):
        self.shop_id = shop_id
        self.message = message
        self.source = source
        super().__init__(self.message)
