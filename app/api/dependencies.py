"""
Dependency injection for FastAPI.
"""
from typing import Annotated
from fastapi import Depends

from app.infrastructure.report_client import ReportClient, get_report_client
from app.services.application.report_service import (
    ReportRequestSlot,
    ReportService,
    get_report_slot,
)
from app.services.application.state_store import AppStateStore, get_state_store
from app.services.application.traceability_service import TraceabilityService


def get_traceability_service(
    store: Annotated[AppStateStore, Depends(get_state_store)],
) -> TraceabilityService:
    """
    Dependency factory for TraceabilityService.

    Args:
        store: Application state store (injected)

    Returns:
        TraceabilityService instance
    """
    return TraceabilityService(store=store)


def get_report_service(
    report_client: Annotated[ReportClient, Depends(get_report_client)],
    store: Annotated[AppStateStore, Depends(get_state_store)],
    slot: Annotated[ReportRequestSlot, Depends(get_report_slot)],
) -> ReportService:
    """
    Dependency factory for ReportService.

    Args:
        report_client: Report API client (injected)
        store: Application state store (injected)
        slot: In-flight report tracker (injected)

    Returns:
        ReportService instance
    """
    return ReportService(report_client=report_client, store=store, slot=slot)


# Type aliases for cleaner route signatures
StateStoreDep = Annotated[AppStateStore, Depends(get_state_store)]
TraceabilityServiceDep = Annotated[TraceabilityService, Depends(get_traceability_service)]
ReportServiceDep = Annotated[ReportService, Depends(get_report_service)]
