"""
API router for planting area endpoints.
"""
from typing import List

from fastapi import APIRouter, HTTPException, Query, status

from app.api.dependencies import TraceabilityServiceDep
from app.api.v1.models.requests import AreaCreateRequest
from app.domain.models import PlantingArea
from app.services.application.traceability_service import FormValidationError


router = APIRouter(
    prefix="/areas",
    tags=["areas"],
)


@router.get(
    "",
    response_model=List[PlantingArea],
    summary="List planting areas",
)
async def list_areas(
    service: TraceabilityServiceDep,
    search: str = Query(default="", description="Case-insensitive match on name or code"),
) -> List[PlantingArea]:
    return service.list_areas(search)


@router.post(
    "",
    response_model=PlantingArea,
    status_code=status.HTTP_201_CREATED,
    summary="Register a planting area",
    responses={400: {"description": "Code, name or location missing"}},
)
async def create_area(
    payload: AreaCreateRequest,
    service: TraceabilityServiceDep,
) -> PlantingArea:
    """
    Register a planting area.

    The area code is not checked for uniqueness.
    """
    try:
        return service.register_area(
            code=payload.code,
            name=payload.name,
            location=payload.location,
            area_size=payload.area_size,
            crop_type=payload.crop_type,
        )
    except FormValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete(
    "/{area_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a planting area",
    description="Idempotent. Farmers of the area are kept and become unlinked.",
)
async def delete_area(area_id: str, service: TraceabilityServiceDep) -> None:
    service.remove_area(area_id)
