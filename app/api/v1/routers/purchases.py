"""
API router for purchase record endpoints.

Purchases are append-only: there is no delete endpoint.
"""
from typing import List

from fastapi import APIRouter, HTTPException, status

from app.api.dependencies import TraceabilityServiceDep
from app.api.v1.models.requests import PurchaseCreateRequest
from app.api.v1.models.responses import PurchaseRow
from app.domain.models import PurchaseRecord
from app.services.application.traceability_service import FormValidationError
from app.services.domain.dashboard_metrics import farmer_display_name


router = APIRouter(
    prefix="/purchases",
    tags=["purchases"],
)


@router.get(
    "",
    response_model=List[PurchaseRow],
    summary="Purchase history",
    description="""
    All purchases, newest date first. Purchases on the same date keep the
    order they were recorded in. Purchases whose farmer was deleted are
    returned with farmerName 'Unknown'.
    """,
)
async def list_purchases(service: TraceabilityServiceDep) -> List[PurchaseRow]:
    data = service.data
    return [
        PurchaseRow(**record.model_dump(), farmer_name=farmer_display_name(data, record.farmer_id))
        for record in service.purchase_history()
    ]


@router.post(
    "",
    response_model=PurchaseRecord,
    status_code=status.HTTP_201_CREATED,
    summary="Record a purchase",
    responses={400: {"description": "Farmer, weight or price missing"}},
)
async def create_purchase(
    payload: PurchaseCreateRequest,
    service: TraceabilityServiceDep,
) -> PurchaseRecord:
    """
    Record a purchase.

    totalAmount is computed as weight * pricePerKg and never changes.
    """
    try:
        return service.record_purchase(
            farmer_id=payload.farmer_id,
            weight=payload.weight,
            price_per_kg=payload.price_per_kg,
            purchase_date=payload.date,
            quality=payload.quality,
            note=payload.note,
        )
    except FormValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
