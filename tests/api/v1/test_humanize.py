"""
Unit tests for humanize HTTP API endpoints.

This module contains tests for the GET and POST humanize endpoints and the
informational routes of the application.
"""

import pytest
from unittest.mock import patch
from decimal import InvalidOperation
from fastapi.testclient import TestClient

from humanize_scale.main import app
from humanize_scale.utils.decimal_utils import DecimalUtils
from humanize_scale.utils.fallbacks import group_thousands

client = TestClient(app)


@pytest.fixture(autouse=True)
def default_settings():
    """Pin the configurable defaults used by the endpoints."""
    with patch("humanize_scale.api.v1.endpoints.humanize.settings") as mock_settings:
        mock_settings.DEFAULT_MIN_VALUE = "10000"
        mock_settings.DEFAULT_SCALE_PRESET = "western"
        yield mock_settings


class TestGetHumanize:
    """Test cases for GET /api/v1/humanize."""

    def test_abbreviated_number(self):
        """Test a number that is abbreviated with the default preset."""
        response = client.get("/api/v1/humanize", params={"number": "1230000"})

        assert response.status_code == 200
        data = response.json()
        assert data["number"] == "1230000"
        assert data["minValue"] == "10000"
        assert data["formatted"] == "1.23 million"
        assert data["abbreviated"] is True

    def test_fallback_number_is_grouped(self):
        """Test that numbers that cannot be abbreviated are grouped."""
        response = client.get("/api/v1/humanize", params={"number": "1234500"})

        assert response.status_code == 200
        data = response.json()
        assert data["formatted"] == "1,234,500"
        assert data["abbreviated"] is False

    def test_indian_preset(self):
        """Test formatting with the Indian preset."""
        response = client.get(
            "/api/v1/humanize", params={"number": "15000000", "preset": "indian"}
        )

        assert response.status_code == 200
        assert response.json()["formatted"] == "1.5 crore"

    def test_min_value_parameter(self):
        """Test that minValue overrides the configured default."""
        response = client.get(
            "/api/v1/humanize", params={"number": "2000000", "minValue": "5000000"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["minValue"] == "5000000"
        assert data["formatted"] == "2,000,000"

    def test_configured_default_preset(self, default_settings):
        """Test that the configured preset is used when none is given."""
        default_settings.DEFAULT_SCALE_PRESET = "indian"

        response = client.get("/api/v1/humanize", params={"number": "100000"})

        assert response.json()["formatted"] == "1 lakh"

    def test_unknown_preset(self):
        """Test that an unknown preset returns 404."""
        response = client.get(
            "/api/v1/humanize", params={"number": "1230000", "preset": "roman"}
        )

        assert response.status_code == 404
        data = response.json()
        assert "roman" in data["detail"]
        assert data["status_code"] == 404

    def test_invalid_number(self):
        """Test that a malformed number returns 400."""
        response = client.get("/api/v1/humanize", params={"number": "abc000"})

        assert response.status_code == 400
        assert "invalid number" in response.json()["detail"]

    def test_invalid_min_value(self):
        """Test that a malformed minimum value returns 400."""
        response = client.get(
            "/api/v1/humanize", params={"number": "1000000", "minValue": "ten"}
        )

        assert response.status_code == 400
        assert "invalid min value" in response.json()["detail"]

    def test_missing_number(self):
        """Test that the number query parameter is required."""
        response = client.get("/api/v1/humanize")

        assert response.status_code == 422
        data = response.json()
        assert data["detail"] == "Validation error"
        assert data["status_code"] == 422
        assert data["errors"][0]["loc"] == ["query", "number"]

    def test_empty_min_value_is_not_replaced_by_default(self):
        """Test that an explicit empty minValue is rejected, not defaulted."""
        response = client.get(
            "/api/v1/humanize", params={"number": "1000000", "minValue": ""}
        )

        assert response.status_code == 400
        assert "invalid min value" in response.json()["detail"]

    @patch(
        "humanize_scale.api.v1.endpoints.humanize.group_thousands",
        wraps=group_thousands,
    )
    def test_fallback_called_once_for_grouped_result(self, mock_group):
        """Test that the fallback is not invoked again to compute the flag."""
        response = client.get("/api/v1/humanize", params={"number": "1234500"})

        assert response.json()["abbreviated"] is False
        mock_group.assert_called_once_with("1234500")

    @patch(
        "humanize_scale.api.v1.endpoints.humanize.group_thousands",
        wraps=group_thousands,
    )
    def test_fallback_not_called_for_abbreviated_result(self, mock_group):
        """Test that abbreviated results never call the fallback."""
        response = client.get("/api/v1/humanize", params={"number": "1230000"})

        assert response.json()["abbreviated"] is True
        mock_group.assert_not_called()

    def test_huge_exponent_response_stays_small(self):
        """Test that a short input with a huge exponent gives a short response."""
        response = client.get("/api/v1/humanize", params={"number": "1E+999000"})

        assert response.status_code == 200
        assert response.json()["formatted"] == "1E+998991 billion"
        assert len(response.content) < 500


class TestPostHumanize:
    """Test cases for POST /api/v1/humanize."""

    def test_custom_scales(self):
        """Test formatting with caller-supplied scales."""
        response = client.post(
            "/api/v1/humanize",
            json={
                "number": "15000000",
                "minValue": "10000",
                "scales": [
                    {"value": "10000000", "name": "crore"},
                    {"value": "100000", "name": "lakh"},
                ],
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["formatted"] == "1.5 crore"
        assert data["abbreviated"] is True

    def test_custom_scales_take_precedence_over_preset(self):
        """Test that scales win when both scales and preset are given."""
        response = client.post(
            "/api/v1/humanize",
            json={
                "number": "2000000",
                "preset": "western",
                "scales": [{"value": "1000", "name": "k"}],
            },
        )

        assert response.json()["formatted"] == "2000 k"

    def test_preset_without_scales(self):
        """Test that the preset is used when no scales are given."""
        response = client.post(
            "/api/v1/humanize", json={"number": "100000", "preset": "indian"}
        )

        assert response.status_code == 200
        assert response.json()["formatted"] == "1 lakh"

    def test_zero_divisor_returns_422(self):
        """Test that arithmetic failures return 422."""
        response = client.post(
            "/api/v1/humanize",
            json={
                "number": "1000000",
                "minValue": "0",
                "scales": [{"value": "0", "name": "zero"}],
            },
        )

        assert response.status_code == 422
        assert "division error" in response.json()["detail"]

    def test_rounding_failure_returns_422(self):
        """Test that rounding failures return 422."""
        with patch.object(
            DecimalUtils, "round_to_3_decimals", side_effect=InvalidOperation("boom")
        ):
            response = client.post("/api/v1/humanize", json={"number": "2000000"})

        assert response.status_code == 422
        assert "rounding error" in response.json()["detail"]

    def test_missing_number(self):
        """Test request body validation."""
        response = client.post("/api/v1/humanize", json={"preset": "western"})

        assert response.status_code == 422
        data = response.json()
        assert data["detail"] == "Validation error"
        assert data["status_code"] == 422
        assert data["errors"][0]["loc"] == ["body", "number"]


class TestInfoEndpoints:
    """Test the health and root endpoints."""

    def test_health_check(self):
        """Test the health check response."""
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "humanize-scale-api"

    def test_root(self):
        """Test the root API info response."""
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["message"] == "Humanize Scale API"
