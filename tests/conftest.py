"""
Shared pytest fixtures for all tests.

This module provides common fixtures including:
- Sample areas, farmers and purchases
- A fresh state store per test
- Mock report client
- FastAPI test client wired to the fresh store
"""
import pytest
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient

from app.main import app
from app.api.dependencies import get_report_client
from app.domain.models import AppData, Farmer, PlantingArea, PurchaseRecord
from app.domain.seed import build_seed_data
from app.infrastructure.report_client import ReportClient
from app.middleware.rate_limit import limiter
from app.services.application.report_service import ReportRequestSlot, get_report_slot
from app.services.application.state_store import AppStateStore, get_state_store


# ============================================================
# Sample Data Fixtures
# ============================================================

@pytest.fixture
def sample_area() -> PlantingArea:
    return PlantingArea(
        id="a1",
        code="VN-DL-101",
        name="Vùng Thử Nghiệm",
        location="Lâm Hà, Lâm Đồng",
        area_size=4.5,
        crop_type="Cà phê",
    )


@pytest.fixture
def sample_farmer(sample_area) -> Farmer:
    return Farmer(id="fa1", name="Phạm Văn D", phone="0911111111", area_id=sample_area.id)


@pytest.fixture
def sample_purchases() -> list[PurchaseRecord]:
    """Three purchases across two months, recorded out of date order."""
    return [
        PurchaseRecord.create(id="p1", farmer_id="f1", date="2023-10-15",
                              weight=500, price_per_kg=80000, quality="A"),
        PurchaseRecord.create(id="p2", farmer_id="f1", date="2023-10-20",
                              weight=300, price_per_kg=75000, quality="A"),
        PurchaseRecord.create(id="p3", farmer_id="f2", date="2023-10-16",
                              weight=1000, price_per_kg=45000, quality="B"),
    ]


@pytest.fixture
def empty_data() -> AppData:
    return AppData()


@pytest.fixture
def seed_data() -> AppData:
    return build_seed_data()


# ============================================================
# Application State Fixtures
# ============================================================

@pytest.fixture
def state_store() -> AppStateStore:
    """A store seeded with the initial data, private to the test."""
    return AppStateStore(build_seed_data())


@pytest.fixture
def report_slot() -> ReportRequestSlot:
    return ReportRequestSlot()


@pytest.fixture
def mock_report_client():
    """Create a mock report client."""
    mock_client = AsyncMock(spec=ReportClient)
    mock_client.generate_report.return_value = "## Report\n- All areas performing well"
    return mock_client


# ============================================================
# FastAPI Test Client Fixtures
# ============================================================

@pytest.fixture
def test_client(state_store, report_slot, mock_report_client) -> TestClient:
    """Create a synchronous test client bound to per-test state."""
    app.dependency_overrides[get_state_store] = lambda: state_store
    app.dependency_overrides[get_report_slot] = lambda: report_slot
    app.dependency_overrides[get_report_client] = lambda: mock_report_client
    limiter.reset()
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
