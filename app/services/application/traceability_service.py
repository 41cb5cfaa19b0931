"""
Application service: create/delete flows for areas, farmers and purchases.
"""
import logging
import uuid
from datetime import date
from typing import List, Optional

from app.domain.models import AppData, Farmer, PlantingArea, PurchaseRecord, Quality
from app.services.application.state_store import AppStateStore
from app.services.domain import dashboard_metrics, mutations

logger = logging.getLogger(__name__)

DEFAULT_CROP_TYPE = "Sầu riêng"
FALLBACK_CROP_TYPE = "Khác"


class FormValidationError(ValueError):
    """Raised when a create form is missing required fields."""

    def __init__(self, entity: str, missing: List[str]):
        self.entity = entity
        self.missing = missing
        super().__init__(f"Missing required {entity} fields: {', '.join(missing)}")


def _blank(value) -> bool:
    # Zero weight or price is rejected like a missing value
    return value is None or value == "" or value == 0


def _require(entity: str, **fields) -> None:
    missing = [name for name, value in fields.items() if _blank(value)]
    if missing:
        raise FormValidationError(entity, missing)


def _new_id() -> str:
    return str(uuid.uuid4())


class TraceabilityService:
    """
    Application service for the traceability records.

    Plays the role of the create forms: checks required fields, generates
    ids, fills defaults and computes purchase totals before handing the
    finished entity to the non-validating domain mutations.
    """

    def __init__(self, store: AppStateStore):
        self.store = store

    @property
    def data(self) -> AppData:
        return self.store.snapshot

    # ------------------------------------------------------------------
    # Planting areas
    # ------------------------------------------------------------------

    def register_area(
        self,
        code: Optional[str],
        name: Optional[str],
        location: Optional[str],
        area_size: Optional[float] = None,
        crop_type: Optional[str] = DEFAULT_CROP_TYPE,
    ) -> PlantingArea:
        """
        Create a planting area.

        Raises:
            FormValidationError: If code, name or location is blank
        """
        _require("area", code=code, name=name, location=location)
        area = PlantingArea(
            id=_new_id(),
            code=code,
            name=name,
            location=location,
            area_size=area_size or 0,
            crop_type=crop_type or FALLBACK_CROP_TYPE,
            status="active",
        )
        self.store.apply(mutations.add_area, area)
        logger.info(f"Registered area {area.code} ({area.id})")
        return area

    def remove_area(self, area_id: str) -> None:
        self.store.apply(mutations.delete_area, area_id)
        logger.info(f"Deleted area {area_id}")

    def list_areas(self, search: str = "") -> List[PlantingArea]:
        return dashboard_metrics.search_areas(self.data, search)

    # ------------------------------------------------------------------
    # Farmers
    # ------------------------------------------------------------------

    def register_farmer(
        self,
        name: Optional[str],
        phone: Optional[str],
        area_id: Optional[str],
    ) -> Farmer:
        """
        Create a farmer linked to ``area_id``.

        The area is not required to exist.

        Raises:
            FormValidationError: If name, phone or area id is blank
        """
        _require("farmer", name=name, phone=phone, area_id=area_id)
        farmer = Farmer(id=_new_id(), name=name, phone=phone, area_id=area_id)
        self.store.apply(mutations.add_farmer, farmer)
        logger.info(f"Registered farmer {farmer.id} in area {area_id}")
        return farmer

    def remove_farmer(self, farmer_id: str) -> None:
        self.store.apply(mutations.delete_farmer, farmer_id)
        logger.info(f"Deleted farmer {farmer_id}")

    def list_farmers(self, search: str = "") -> List[Farmer]:
        return dashboard_metrics.search_farmers(self.data, search)

    # ------------------------------------------------------------------
    # Purchases
    # ------------------------------------------------------------------

    def record_purchase(
        self,
        farmer_id: Optional[str],
        weight: Optional[float],
        price_per_kg: Optional[float],
        purchase_date: Optional[str] = None,
        quality: Quality = "A",
        note: Optional[str] = None,
    ) -> PurchaseRecord:
        """
        Record a purchase; the total is computed here, once.

        A missing or empty ``purchase_date`` is recorded as today, the value
        the purchase form starts with. Any other string is stored as given.

        Raises:
            FormValidationError: If farmer id is blank or weight/price is missing or zero
        """
        _require("purchase", farmer_id=farmer_id, weight=weight, price_per_kg=price_per_kg)
        record = PurchaseRecord.create(
            id=_new_id(),
            farmer_id=farmer_id,
            date=purchase_date or date.today().isoformat(),
            weight=weight,
            price_per_kg=price_per_kg,
            quality=quality,
            note=note,
        )
        self.store.apply(mutations.add_purchase, record)
        logger.info(
            f"Recorded purchase {record.id}: {record.weight} kg from farmer {farmer_id}"
        )
        return record

    def purchase_history(self) -> List[PurchaseRecord]:
        return dashboard_metrics.purchase_history(self.data)
