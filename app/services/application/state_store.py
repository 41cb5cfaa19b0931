"""
Application state container for the session-scoped aggregate.
"""
import logging
from typing import Callable, Optional

from app.domain.models import AppData
from app.domain.seed import build_seed_data
from app.services.domain.dashboard_metrics import DashboardViews, dashboard_views

logger = logging.getLogger(__name__)


class AppStateStore:
    """
    Holds the current ``AppData`` snapshot.

    Mutations replace the snapshot with the new value returned by a domain
    mutation. Nothing is persisted; ``reset`` returns to the initial data.
    Dashboard views are memoised on the identity of the snapshot they were
    computed from.
    """

    def __init__(self, initial: Optional[AppData] = None):
        self._initial = initial if initial is not None else build_seed_data()
        self._snapshot = self._initial
        self._views_source: Optional[AppData] = None
        self._views: Optional[DashboardViews] = None

    @property
    def snapshot(self) -> AppData:
        return self._snapshot

    def apply(self, mutation: Callable[..., AppData], *args) -> AppData:
        """Run ``mutation(snapshot, *args)`` and keep its result."""
        self._snapshot = mutation(self._snapshot, *args)
        return self._snapshot

    def views(self) -> DashboardViews:
        if self._views is None or self._views_source is not self._snapshot:
            logger.debug("Recomputing dashboard views")
            self._views = dashboard_views(self._snapshot)
            self._views_source = self._snapshot
        return self._views

    def reset(self) -> None:
        self._snapshot = self._initial
        logger.info("Application state reset to initial data")


# Singleton instance
_state_store: Optional[AppStateStore] = None


def get_state_store() -> AppStateStore:
    """
    Get or create the singleton state store.

    Returns:
        AppStateStore seeded with the initial data
    """
    global _state_store
    if _state_store is None:
        _state_store = AppStateStore()
    return _state_store
