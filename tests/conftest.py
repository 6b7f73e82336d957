"""
Pytest configuration and fixtures for Seller Health tests.

This file provides reusable metrics snapshots and the API test client.
"""

import pytest
from fastapi.testclient import TestClient

from app.intelligence import SellerRawMetrics
from app.main import app


PERFECT_SHOP = {
    "total_products": 10,
    "products_with_images": 10,
    "products_with_description": 10,
    "products_with_price": 10,
    "products_with_stock": 10,
    "total_variants": 20,
    "variants_in_stock": 20,
    "variants_low_stock": 0,
    "total_orders": 20,
    "delivered_orders": 20,
    "cancelled_orders": 0,
    "stale_pending_orders": 0,
    "recent_products_added": 3,
    "recent_orders_received": 5,
    "active_products": 10,
    "category_count": 3,
}


@pytest.fixture
def perfect_metrics():
    """
    Return a snapshot that scores 100 with no suggestions to make.
    """
    return SellerRawMetrics(**PERFECT_SHOP)


@pytest.fixture
def perfect_payload():
    """
    Return the perfect shop as a JSON request body.
    """
    return dict(PERFECT_SHOP)


@pytest.fixture
def empty_metrics():
    """
    Return a snapshot for a shop with nothing in it yet.
    """
    return SellerRawMetrics()


@pytest.fixture(scope="function")
def client():
    """
    Create a test client for the FastAPI app.
    """
    with TestClient(app) as test_client:
        yield test_client
