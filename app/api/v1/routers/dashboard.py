"""
API router for the dashboard and the raw data snapshot.
"""
from fastapi import APIRouter

from app.api.dependencies import StateStoreDep
from app.api.v1.models.responses import (
    DashboardResponse,
    MonthlyVolumeResponse,
    QualityBucketResponse,
    SummaryStatisticsResponse,
)
from app.domain.models import AppData


router = APIRouter(tags=["dashboard"])


@router.get(
    "/dashboard",
    response_model=DashboardResponse,
    summary="Dashboard aggregates",
    description="""
    Summary statistics, purchase count per quality grade and purchased
    weight per month (months in the order first seen, not sorted).
    """,
)
async def get_dashboard(store: StateStoreDep) -> DashboardResponse:
    views = store.views()
    return DashboardResponse(
        summary=SummaryStatisticsResponse(
            total_areas=views.summary.total_areas,
            total_farmers=views.summary.total_farmers,
            total_volume=views.summary.total_volume,
            total_spent=views.summary.total_spent,
        ),
        quality_distribution=[
            QualityBucketResponse(grade=b.grade, count=b.count) for b in views.quality
        ],
        monthly_volume=[
            MonthlyVolumeResponse(month=m.month, weight=m.weight) for m in views.monthly
        ],
    )


@router.get(
    "/snapshot",
    response_model=AppData,
    summary="Full data snapshot",
)
async def get_snapshot(store: StateStoreDep) -> AppData:
    return store.snapshot
