"""
Domain models for planting areas, farmers and purchase records.

These models represent the core domain entities and should be independent
of any infrastructure concerns (HTTP, report API clients, etc.).

All models are frozen: a change to the data is always a new ``AppData``
snapshot, never an in-place edit. Field names serialize to camelCase
(``areaSize``, ``farmerId``, ...) so the JSON shape matches what the
dashboard front-end consumes.
"""
from typing import Literal, Optional, Tuple
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


AreaStatus = Literal["active", "inactive"]
Quality = Literal["A", "B", "C"]

QUALITY_GRADES: Tuple[str, ...] = ("A", "B", "C")


class DomainModel(BaseModel):
    """Base for immutable camelCase domain records."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True


class PlantingArea(DomainModel):
    """A registered land parcel."""
    id: str
    code: str = Field(description="Business code, e.g. VN-DL-001 (not enforced unique)")
    name: str
    location: str
    area_size: float = Field(ge=0, description="Area in hectares")
    crop_type: str
    status: AreaStatus = "active"


class Farmer(DomainModel):
    """A produce supplier linked to one planting area."""
    id: str
    name: str
    phone: str
    area_id: str = Field(description="PlantingArea id; may dangle after the area is deleted")


class PurchaseRecord(DomainModel):
    """One purchase of produce from a farmer."""
    id: str
    farmer_id: str = Field(description="Farmer id; may dangle after the farmer is deleted")
    date: str = Field(description="Purchase date as YYYY-MM-DD")
    weight: float = Field(ge=0, description="Weight in kg")
    price_per_kg: float = Field(ge=0, description="Price per kg in VND")
    total_amount: float = Field(ge=0, description="weight * price_per_kg, fixed at creation")
    quality: Quality
    note: Optional[str] = None

    @classmethod
    def create(
        cls,
        id: str,
        farmer_id: str,
        date: str,
        weight: float,
        price_per_kg: float,
        quality: Quality = "A",
        note: Optional[str] = None,
    ) -> "PurchaseRecord":
        """Build a record with ``total_amount`` computed from weight and price."""
        return cls(
            id=id,
            farmer_id=farmer_id,
            date=date,
            weight=weight,
            price_per_kg=price_per_kg,
            total_amount=weight * price_per_kg,
            quality=quality,
            note=note,
        )


class AppData(DomainModel):
    """The aggregate root: every area, farmer and purchase of the session."""
    areas: Tuple[PlantingArea, ...] = ()
    farmers: Tuple[Farmer, ...] = ()
    purchases: Tuple[PurchaseRecord, ...] = ()
