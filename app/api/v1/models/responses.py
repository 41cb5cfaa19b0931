"""
API response models using Pydantic.
"""
from typing import List
from pydantic import Field

from app.api.v1.models.base import CamelModel
from app.domain.models import Farmer, PurchaseRecord


class FarmerRow(Farmer):
    """Farmer with its planting area resolved for display."""
    area_name: str = Field(
        description="Name of the linked area, or 'unlinked' when the area no longer exists"
    )
    linked: bool = Field(description="Whether area_id resolves to an existing area")


class PurchaseRow(PurchaseRecord):
    """Purchase record with the supplier name resolved for display."""
    farmer_name: str = Field(
        description="Farmer name, or 'Unknown' when the farmer no longer exists"
    )


class SummaryStatisticsResponse(CamelModel):
    total_areas: int
    total_farmers: int
    total_volume: float = Field(description="Sum of purchase weights in kg")
    total_spent: float = Field(description="Sum of purchase totals")


class QualityBucketResponse(CamelModel):
    grade: str = Field(examples=["A"])
    count: int


class MonthlyVolumeResponse(CamelModel):
    month: str = Field(description="YYYY-MM prefix of the purchase date", examples=["2023-10"])
    weight: float


class DashboardResponse(CamelModel):
    """Response model for the dashboard endpoint."""
    summary: SummaryStatisticsResponse
    quality_distribution: List[QualityBucketResponse] = Field(
        description="Always the A, B and C buckets in that order"
    )
    monthly_volume: List[MonthlyVolumeResponse] = Field(
        description="Weight per month in first-seen order"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "summary": {
                    "totalAreas": 3,
                    "totalFarmers": 3,
                    "totalVolume": 2400,
                    "totalSpent": 156700000,
                },
                "qualityDistribution": [
                    {"grade": "A", "count": 3},
                    {"grade": "B", "count": 1},
                    {"grade": "C", "count": 0},
                ],
                "monthlyVolume": [
                    {"month": "2023-10", "weight": 1400},
                    {"month": "2023-11", "weight": 1000},
                ],
            }
        }


class ReportResponse(CamelModel):
    """Generated report text, or a readable fallback message."""
    report: str
