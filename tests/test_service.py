"""
Unit tests for SellerHealthService and the error mapping.
"""

import asyncio
import json
import logging

import pytest
from fastapi import status

from app.core.errors import (
    ERROR_MESSAGES,
    ErrorCode,
    get_error_code_for_exception,
    global_exception_handler,
)
from app.core.exceptions import MetricsUnavailableError
from app.intelligence.service import SellerHealthService


class StaticMetricsProvider:
    """Returns the same snapshot for every shop."""

    def __init__(self, metrics):
        self.metrics = metrics
        self.calls = []

    def get_seller_health_metrics(self, shop_id):
        self.calls.append(shop_id)
        return self.metrics


class BrokenMetricsProvider:
    """Fails like an unreachable database."""

    def get_seller_health_metrics(self, shop_id):
        raise ConnectionError("database unavailable")


class TestCalculateForShop:
    """Tests for provider composition."""

    def test_scores_provider_metrics(self, perfect_metrics):
        provider = StaticMetricsProvider(perfect_metrics)

        result = SellerHealthService.calculate_for_shop("shop_123", provider)

        assert provider.calls == ["shop_123"]
        assert result.score == 100

    def test_provider_failure_is_wrapped(self):
        with pytest.raises(MetricsUnavailableError) as exc_info:
            SellerHealthService.calculate_for_shop("shop_404", BrokenMetricsProvider())

        assert exc_info.value.shop_id == "shop_404"
        assert "database unavailable" in exc_info.value.message
        assert isinstance(exc_info.value.__cause__, ConnectionError)


class TestCalculate:
    """Tests for scoring a snapshot directly."""

    def test_calculate_logs_debug_line(self, perfect_metrics, caplog):
        caplog.set_level(logging.DEBUG, logger="app.intelligence.seller_health")

        result = SellerHealthService.calculate(perfect_metrics)

        assert result.score == 100
        assert "score=100" in caplog.text


class TestBuildPayload:
    """Tests for the display payload."""

    def test_perfect_shop_payload(self, perfect_metrics):
        payload = SellerHealthService.build_payload(SellerHealthService.calculate(perfect_metrics))

        assert payload["score"] == 100
        assert payload["label"] == "excellent"
        assert [d["label"] for d in payload["dimensions"]] == [
            "Product Quality", "Inventory", "Fulfillment", "Activity", "Catalog Breadth",
        ]
        assert all(d["level"] == "excellent" for d in payload["dimensions"])
        assert payload["suggestions"] == [
            {
                "text": "Your shop is in great shape! Keep adding products and fulfilling orders to maintain your score.",
                "href": "",
            }
        ]

    def test_empty_shop_payload(self, empty_metrics):
        payload = SellerHealthService.build_payload(SellerHealthService.calculate(empty_metrics))

        assert payload["label"] == "critical"
        reliability = next(d for d in payload["dimensions"] if d["key"] == "reliability")
        assert reliability == {
            "key": "reliability",
            "label": "Fulfillment",
            "points": 10,
            "max_points": 20,
            "level": "good",
        }
        assert len(payload["suggestions"]) == 3


class TestErrorMapping:
    """Tests for exception to error code mapping."""

    def test_metrics_unavailable_maps_to_bad_gateway(self):
        code, http_status = get_error_code_for_exception(MetricsUnavailableError("s1", "boom"))
        assert code == ErrorCode.METRICS_UNAVAILABLE
        assert http_status == status.HTTP_502_BAD_GATEWAY

    def test_unknown_error_is_internal(self):
        code, http_status = get_error_code_for_exception(RuntimeError("boom"))
        assert code == ErrorCode.INTERNAL_ERROR
        assert http_status == status.HTTP_500_INTERNAL_SERVER_ERROR

    def test_handler_returns_sanitized_bad_gateway(self):
        """Test that the handler hides provider details behind the metrics_unavailable code."""
        exc = MetricsUnavailableError("s1", "password=hunter2 leaked")

        response = asyncio.run(global_exception_handler(None, exc))

        assert response.status_code == status.HTTP_502_BAD_GATEWAY
        body = json.loads(response.body)
        assert body["error_code"] == "metrics_unavailable"
        assert "hunter2" not in body["message"]

    def test_every_error_code_has_a_message(self):
        assert {code.value for code in ErrorCode} == {"metrics_unavailable", "internal_error"}
        assert all(code in ERROR_MESSAGES for code in ErrorCode)
