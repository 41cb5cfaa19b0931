"""
Integration tests for API endpoints.

Tests the full HTTP request/response cycle against a per-test state store
and a mocked report client.
"""
import pytest
from unittest.mock import MagicMock

from app.main import app
from app.api.dependencies import get_traceability_service
from app.config import settings
from app.infrastructure.api_constants import ReportMessages
from app.services.application.traceability_service import TraceabilityService


# ============================================================
# Health Check Tests
# ============================================================

class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_root_endpoint(self, test_client):
        """Root endpoint should return healthy status."""
        response = test_client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "service" in data
        assert "version" in data

    def test_health_endpoint(self, test_client):
        """Health endpoint should return healthy status."""
        response = test_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


# ============================================================
# Area Endpoint Tests
# ============================================================

class TestAreaEndpoints:

    def test_list_areas_camel_case(self, test_client):
        response = test_client.get("/api/v1/areas")

        assert response.status_code == 200
        areas = response.json()
        assert [a["code"] for a in areas] == ["VN-DL-001", "VN-DL-002", "VN-DL-003"]
        assert areas[0]["areaSize"] == 15.5
        assert areas[0]["cropType"] == "Sầu riêng"

    def test_search_areas(self, test_client):
        response = test_client.get("/api/v1/areas", params={"search": "dl-003"})

        assert [a["id"] for a in response.json()] == ["3"]

    def test_create_area(self, test_client):
        response = test_client.post("/api/v1/areas", json={
            "code": "VN-DL-004", "name": "Vùng Lâm Hà D", "location": "Lâm Hà, Lâm Đồng",
            "areaSize": 6.0, "cropType": "Bơ",
        })

        assert response.status_code == 201
        created = response.json()
        assert created["status"] == "active"
        assert created["id"]
        assert test_client.get("/api/v1/areas").json()[-1]["id"] == created["id"]

    def test_create_area_missing_fields(self, test_client):
        response = test_client.post("/api/v1/areas", json={"code": "", "name": "N"})

        assert response.status_code == 400
        assert "code" in response.json()["detail"]
        assert "location" in response.json()["detail"]
        assert len(test_client.get("/api/v1/areas").json()) == 3

    def test_delete_area_idempotent(self, test_client):
        assert test_client.delete("/api/v1/areas/1").status_code == 204
        assert test_client.delete("/api/v1/areas/1").status_code == 204

        assert [a["id"] for a in test_client.get("/api/v1/areas").json()] == ["2", "3"]


# ============================================================
# Farmer Endpoint Tests
# ============================================================

class TestFarmerEndpoints:

    def test_list_farmers_with_area(self, test_client):
        farmers = test_client.get("/api/v1/farmers").json()

        assert farmers[0]["areaId"] == "1"
        assert farmers[0]["areaName"] == "Vùng Đạ Huoai A"
        assert farmers[0]["linked"] is True

    def test_deleting_area_leaves_farmers_unlinked(self, test_client):
        test_client.delete("/api/v1/areas/1")

        farmers = test_client.get("/api/v1/farmers").json()

        assert len(farmers) == 3
        assert [f["linked"] for f in farmers] == [False, False, True]
        assert [f["areaName"] for f in farmers] == ["unlinked", "unlinked", "Vùng Bảo Lộc B"]

    def test_create_farmer(self, test_client):
        response = test_client.post("/api/v1/farmers", json={
            "name": "Đỗ Thị E", "phone": "0933333333", "areaId": "3",
        })

        assert response.status_code == 201
        assert response.json()["areaId"] == "3"

    def test_create_farmer_missing_phone(self, test_client):
        response = test_client.post("/api/v1/farmers", json={"name": "X", "areaId": "1"})

        assert response.status_code == 400
        assert "phone" in response.json()["detail"]

    def test_delete_farmer(self, test_client):
        assert test_client.delete("/api/v1/farmers/f2").status_code == 204
        assert test_client.delete("/api/v1/farmers/missing").status_code == 204

        assert [f["id"] for f in test_client.get("/api/v1/farmers").json()] == ["f1", "f3"]


# ============================================================
# Purchase Endpoint Tests
# ============================================================

class TestPurchaseEndpoints:

    def test_history_newest_first(self, test_client):
        history = test_client.get("/api/v1/purchases").json()

        assert [p["date"] for p in history] == [
            "2023-11-05", "2023-10-20", "2023-10-16", "2023-10-15",
        ]
        assert history[0]["farmerName"] == "Lê Văn C"
        assert history[0]["note"] == "Cà phê tươi"

    def test_record_purchase_computes_total(self, test_client):
        response = test_client.post("/api/v1/purchases", json={
            "farmerId": "f2", "date": "2023-12-01", "weight": 200,
            "pricePerKg": 78000, "quality": "B",
        })

        assert response.status_code == 201
        assert response.json()["totalAmount"] == 200 * 78000
        assert test_client.get("/api/v1/purchases").json()[0]["date"] == "2023-12-01"

    def test_record_purchase_zero_weight_rejected(self, test_client):
        response = test_client.post("/api/v1/purchases", json={
            "farmerId": "f2", "weight": 0, "pricePerKg": 78000,
        })

        assert response.status_code == 400

    def test_invalid_quality_rejected(self, test_client):
        response = test_client.post("/api/v1/purchases", json={
            "farmerId": "f2", "weight": 1, "pricePerKg": 1, "quality": "D",
        })

        assert response.status_code == 422

    def test_deleted_farmer_purchases_still_listed(self, test_client):
        test_client.delete("/api/v1/farmers/f1")

        history = test_client.get("/api/v1/purchases").json()

        assert len(history) == 4
        assert {p["farmerName"] for p in history if p["farmerId"] == "f1"} == {"Unknown"}

    def test_no_delete_route(self, test_client):
        response = test_client.delete("/api/v1/purchases/p1")

        assert response.status_code in (404, 405)


# ============================================================
# Dashboard Endpoint Tests
# ============================================================

class TestDashboardEndpoint:

    def test_seed_dashboard(self, test_client):
        data = test_client.get("/api/v1/dashboard").json()

        assert data["summary"] == {
            "totalAreas": 3,
            "totalFarmers": 3,
            "totalVolume": 2400,
            "totalSpent": 156700000,
        }
        assert data["qualityDistribution"] == [
            {"grade": "A", "count": 3},
            {"grade": "B", "count": 1},
            {"grade": "C", "count": 0},
        ]
        assert data["monthlyVolume"] == [
            {"month": "2023-10", "weight": 1400},
            {"month": "2023-11", "weight": 1000},
        ]

    def test_dashboard_follows_mutations(self, test_client):
        test_client.delete("/api/v1/areas/3")
        test_client.post("/api/v1/purchases", json={
            "farmerId": "f1", "date": "2023-09-30", "weight": 100,
            "pricePerKg": 1000, "quality": "C",
        })

        data = test_client.get("/api/v1/dashboard").json()

        assert data["summary"]["totalAreas"] == 2
        assert data["qualityDistribution"][2] == {"grade": "C", "count": 1}
        assert [m["month"] for m in data["monthlyVolume"]] == ["2023-10", "2023-11", "2023-09"]

    def test_snapshot(self, test_client):
        data = test_client.get("/api/v1/snapshot").json()

        assert set(data) == {"areas", "farmers", "purchases"}
        assert data["purchases"][0]["pricePerKg"] == 80000


# ============================================================
# Report Endpoint Tests
# ============================================================

class TestReportEndpoint:

    def test_generate_report(self, test_client, mock_report_client):
        response = test_client.post("/api/v1/reports", json={"query": "Trend?"})

        assert response.status_code == 200
        assert response.json() == {"report": "## Report\n- All areas performing well"}
        args = mock_report_client.generate_report.await_args.args
        assert args[1] == "Trend?"
        assert len(args[0].purchases) == 4

    def test_fallback_message_is_a_normal_response(self, test_client, mock_report_client):
        mock_report_client.generate_report.return_value = ReportMessages.NOT_CONFIGURED

        response = test_client.post("/api/v1/reports", json={})

        assert response.status_code == 200
        assert response.json()["report"] == ReportMessages.NOT_CONFIGURED

    def test_report_in_flight_returns_409(self, test_client, report_slot, mock_report_client):
        report_slot._in_flight = True

        response = test_client.post("/api/v1/reports", json={})

        assert response.status_code == 409
        mock_report_client.generate_report.assert_not_awaited()

    def test_rate_limit_returns_429(self, test_client):
        limit = int(settings.report_rate_limit.split("/")[0])

        statuses = [
            test_client.post("/api/v1/reports", json={}).status_code
            for _ in range(limit + 1)
        ]

        assert statuses[:limit] == [200] * limit
        assert statuses[-1] == 429


# ============================================================
# Response Format Tests
# ============================================================

class TestResponseFormats:
    """Tests for API response formats."""

    def test_openapi_schema_available(self, test_client):
        response = test_client.get("/openapi.json")

        assert response.status_code == 200
        paths = response.json()["paths"]
        for path in ("/api/v1/areas", "/api/v1/farmers", "/api/v1/purchases",
                     "/api/v1/dashboard", "/api/v1/reports"):
            assert path in paths

    def test_rate_limit_documented_in_openapi(self, test_client):
        paths = test_client.get("/openapi.json").json()["paths"]

        assert "429" in paths["/api/v1/reports"]["post"]["responses"]

    def test_docs_endpoint_available(self, test_client):
        response = test_client.get("/docs")

        assert response.status_code == 200


# ============================================================
# Error Handling Tests
# ============================================================

class TestErrorHandling:
    """Tests for the global error handling middleware."""

    @pytest.fixture
    def failing_service(self):
        service = MagicMock(spec=TraceabilityService)
        app.dependency_overrides[get_traceability_service] = lambda: service
        return service

    def test_value_error_returns_400(self, test_client, failing_service):
        failing_service.list_areas.side_effect = ValueError("bad search term")

        response = test_client.get("/api/v1/areas")

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid request", "detail": "bad search term"}

    def test_unexpected_error_returns_500(self, test_client, failing_service):
        failing_service.list_areas.side_effect = RuntimeError("store corrupted")

        response = test_client.get("/api/v1/areas")

        assert response.status_code == 500
        assert response.json()["error"] == "Internal server error"
        assert "store corrupted" not in response.text


# ============================================================
# CORS Tests
# ============================================================

class TestCORS:

    def test_cors_headers_present(self, test_client):
        response = test_client.options(
            "/api/v1/areas",
            headers={
                "Origin": "http://example.com",
                "Access-Control-Request-Method": "GET",
            }
        )

        assert response.status_code in [200, 405, 400]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
