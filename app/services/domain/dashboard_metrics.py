"""
Domain service: dashboard aggregates, purchase history and reference lookups.

All functions here are pure and deterministic: they read an ``AppData``
snapshot and return plain values. They never raise on dangling references
or odd data:
- an ``area_id``/``farmer_id`` that no longer resolves falls back to a
  display placeholder
- an unrecognised quality grade is left out of the distribution
- a malformed purchase date is still grouped by its raw prefix and sorts
  after every valid date in the history
"""
from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Optional, Tuple

from app.domain.models import QUALITY_GRADES, AppData, Farmer, PlantingArea, PurchaseRecord


UNKNOWN_FARMER = "Unknown"
UNLINKED_AREA = "unlinked"


@dataclass(frozen=True)
class SummaryStatistics:
    """Headline numbers for the dashboard cards."""
    total_areas: int
    total_farmers: int
    total_volume: float
    total_spent: float


@dataclass(frozen=True)
class QualityBucket:
    grade: str
    count: int


@dataclass(frozen=True)
class MonthlyVolume:
    month: str
    weight: float


@dataclass(frozen=True)
class DashboardViews:
    """Everything the dashboard renders, computed from one snapshot."""
    summary: SummaryStatistics
    quality: List[QualityBucket]
    monthly: List[MonthlyVolume]


# ============================================================
# Aggregates
# ============================================================

def summary_statistics(data: AppData) -> SummaryStatistics:
    return SummaryStatistics(
        total_areas=len(data.areas),
        total_farmers=len(data.farmers),
        total_volume=sum(p.weight for p in data.purchases),
        total_spent=sum(p.total_amount for p in data.purchases),
    )


def quality_distribution(data: AppData) -> List[QualityBucket]:
    """
    Count purchases per quality grade.

    Always returns the A, B and C buckets in that order, zero-filled.
    """
    counts: Dict[str, int] = {grade: 0 for grade in QUALITY_GRADES}
    for purchase in data.purchases:
        if purchase.quality in counts:
            counts[purchase.quality] += 1
    return [QualityBucket(grade=grade, count=counts[grade]) for grade in QUALITY_GRADES]


def monthly_volume(data: AppData) -> List[MonthlyVolume]:
    """
    Sum purchase weight per calendar month.

    The month key is ``date[:7]`` taken as a raw substring, and groups come
    out in the order they are first seen in the purchase collection, not
    chronologically.
    """
    grouped: Dict[str, float] = {}
    for purchase in data.purchases:
        month = purchase.date[:7]
        grouped[month] = grouped.get(month, 0) + purchase.weight
    return [MonthlyVolume(month=month, weight=weight) for month, weight in grouped.items()]


def dashboard_views(data: AppData) -> DashboardViews:
    return DashboardViews(
        summary=summary_statistics(data),
        quality=quality_distribution(data),
        monthly=monthly_volume(data),
    )


# ============================================================
# Purchase history
# ============================================================

def _history_sort_key(purchase: PurchaseRecord) -> Tuple[bool, date]:
    try:
        return (True, date.fromisoformat(purchase.date))
    except ValueError:
        return (False, date.min)


def purchase_history(data: AppData) -> List[PurchaseRecord]:
    """
    Return all purchases, newest date first.

    Dates are compared as calendar dates. The sort is stable, so purchases
    on the same day keep their recorded order. Nothing is cached.
    """
    return sorted(data.purchases, key=_history_sort_key, reverse=True)


# ============================================================
# Reference resolution
# ============================================================

def resolve_area(data: AppData, area_id: str) -> Optional[PlantingArea]:
    return next((a for a in data.areas if a.id == area_id), None)


def resolve_farmer(data: AppData, farmer_id: str) -> Optional[Farmer]:
    return next((f for f in data.farmers if f.id == farmer_id), None)


def area_display_name(data: AppData, area_id: str) -> str:
    area = resolve_area(data, area_id)
    return area.name if area else UNLINKED_AREA


def farmer_display_name(data: AppData, farmer_id: str) -> str:
    farmer = resolve_farmer(data, farmer_id)
    return farmer.name if farmer else UNKNOWN_FARMER


# ============================================================
# Search
# ============================================================

def search_areas(data: AppData, term: str = "") -> List[PlantingArea]:
    """Areas whose name or code contains ``term``, case-insensitively."""
    needle = term.lower()
    return [
        a for a in data.areas
        if needle in a.name.lower() or needle in a.code.lower()
    ]


def search_farmers(data: AppData, term: str = "") -> List[Farmer]:
    """Farmers whose name contains ``term``, case-insensitively."""
    needle = term.lower()
    return [f for f in data.farmers if needle in f.name.lower()]
