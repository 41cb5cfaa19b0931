"""
API request models using Pydantic.

Required fields are optional here on purpose: blank or missing values are
reported by the service layer as a 400 listing every missing field, the
same way the dashboard forms refuse to submit.
"""
from typing import Optional
from pydantic import Field

from app.api.v1.models.base import CamelModel
from app.domain.models import Quality
from app.services.application.traceability_service import DEFAULT_CROP_TYPE


class AreaCreateRequest(CamelModel):
    """Form payload for a new planting area."""
    code: Optional[str] = Field(default=None, examples=["VN-DL-004"])
    name: Optional[str] = None
    location: Optional[str] = None
    area_size: Optional[float] = Field(default=None, ge=0, description="Hectares")
    crop_type: Optional[str] = DEFAULT_CROP_TYPE


class FarmerCreateRequest(CamelModel):
    """Form payload for a new farmer."""
    name: Optional[str] = None
    phone: Optional[str] = None
    area_id: Optional[str] = None


class PurchaseCreateRequest(CamelModel):
    """Form payload for a new purchase record."""
    farmer_id: Optional[str] = None
    date: Optional[str] = Field(default=None, description="YYYY-MM-DD, defaults to today")
    weight: Optional[float] = Field(default=None, ge=0, description="Weight in kg")
    price_per_kg: Optional[float] = Field(default=None, ge=0, description="Price per kg")
    quality: Quality = "A"
    note: Optional[str] = None


class ReportRequest(CamelModel):
    """Report request; an empty query asks for the default analysis."""
    query: Optional[str] = Field(
        default=None,
        examples=["Which area had the best quality produce in October?"],
    )
