"""
API router for farmer endpoints.
"""
from typing import List

from fastapi import APIRouter, HTTPException, Query, status

from app.api.dependencies import TraceabilityServiceDep
from app.api.v1.models.requests import FarmerCreateRequest
from app.api.v1.models.responses import FarmerRow
from app.domain.models import Farmer
from app.services.application.traceability_service import FormValidationError
from app.services.domain.dashboard_metrics import area_display_name, resolve_area


router = APIRouter(
    prefix="/farmers",
    tags=["farmers"],
)


@router.get(
    "",
    response_model=List[FarmerRow],
    summary="List farmers with their planting area",
    description="Farmers whose area was deleted are returned with areaName 'unlinked' and linked=false.",
)
async def list_farmers(
    service: TraceabilityServiceDep,
    search: str = Query(default="", description="Case-insensitive match on name"),
) -> List[FarmerRow]:
    data = service.data
    rows = []
    for farmer in service.list_farmers(search):
        rows.append(FarmerRow(
            **farmer.model_dump(),
            area_name=area_display_name(data, farmer.area_id),
            linked=resolve_area(data, farmer.area_id) is not None,
        ))
    return rows


@router.post(
    "",
    response_model=Farmer,
    status_code=status.HTTP_201_CREATED,
    summary="Register a farmer",
    responses={400: {"description": "Name, phone or area id missing"}},
)
async def create_farmer(
    payload: FarmerCreateRequest,
    service: TraceabilityServiceDep,
) -> Farmer:
    try:
        return service.register_farmer(
            name=payload.name,
            phone=payload.phone,
            area_id=payload.area_id,
        )
    except FormValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete(
    "/{farmer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a farmer",
    description="Idempotent. Purchases from the farmer stay in the history.",
)
async def delete_farmer(farmer_id: str, service: TraceabilityServiceDep) -> None:
    service.remove_farmer(farmer_id)
