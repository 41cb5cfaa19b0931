"""
Domain service: append and delete operations over the aggregate.

Every function returns a new ``AppData`` and leaves its input untouched.
Collections that are not affected are shared with the previous snapshot,
so ``old is not new`` is a reliable "something changed" signal and
``old.farmers is new.farmers`` tells which collection did.

None of these operations validate their input or fail. Required-field
checks belong to the form layer (see ``TraceabilityService``); an unknown
id on delete is a silent no-op.
"""
from app.domain.models import AppData, Farmer, PlantingArea, PurchaseRecord


def add_area(data: AppData, area: PlantingArea) -> AppData:
    return data.model_copy(update={"areas": data.areas + (area,)})


def add_farmer(data: AppData, farmer: Farmer) -> AppData:
    return data.model_copy(update={"farmers": data.farmers + (farmer,)})


def add_purchase(data: AppData, record: PurchaseRecord) -> AppData:
    """Append a purchase. ``record.total_amount`` must already be computed."""
    return data.model_copy(update={"purchases": data.purchases + (record,)})


def delete_area(data: AppData, area_id: str) -> AppData:
    """
    Remove the area with ``area_id``.

    Farmers linked to the area keep their ``area_id`` and show as unlinked.
    """
    remaining = tuple(a for a in data.areas if a.id != area_id)
    return data.model_copy(update={"areas": remaining})


def delete_farmer(data: AppData, farmer_id: str) -> AppData:
    """
    Remove the farmer with ``farmer_id``.

    Purchases from the farmer stay in the history with an unknown supplier.
    """
    remaining = tuple(f for f in data.farmers if f.id != farmer_id)
    return data.model_copy(update={"farmers": remaining})
