"""
Application service: report generation with at most one request in flight.
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from app.infrastructure.report_client import ReportClient
from app.services.application.state_store import AppStateStore

logger = logging.getLogger(__name__)


class ReportInProgressError(Exception):
    """Raised when a report is requested while another is still running."""
    pass


class ReportRequestSlot:
    """
    Single-slot tracker for the outstanding report request.

    Runs on one event loop, so a plain flag is enough: the check and the
    claim happen without an await in between.
    """

    def __init__(self):
        self._in_flight = False

    @property
    def busy(self) -> bool:
        return self._in_flight

    @asynccontextmanager
    async def claim(self) -> AsyncIterator[None]:
        if self._in_flight:
            raise ReportInProgressError("A report is already being generated")
        self._in_flight = True
        try:
            yield
        finally:
            self._in_flight = False


class ReportService:
    """
    Orchestrates report generation.

    Snapshots the current state, claims the request slot and delegates to
    the report client. The client already turns every failure into a
    message, so the only error raised here is ``ReportInProgressError``.
    """

    def __init__(
        self,
        report_client: ReportClient,
        store: AppStateStore,
        slot: ReportRequestSlot,
    ):
        self.report_client = report_client
        self.store = store
        self.slot = slot

    async def generate(self, query: Optional[str] = None) -> str:
        """
        Generate a report over the current data.

        Args:
            query: Optional operator question

        Returns:
            Report text or a fallback message

        Raises:
            ReportInProgressError: If another report is still running
        """
        async with self.slot.claim():
            data = self.store.snapshot
            logger.info(
                f"Generating report over {len(data.purchases)} purchases"
                + (" with custom query" if query else "")
            )
            return await self.report_client.generate_report(data, query)


# Singleton instance
_report_slot: Optional[ReportRequestSlot] = None


def get_report_slot() -> ReportRequestSlot:
    """
    Get or create the process-wide report request slot.

    Returns:
        ReportRequestSlot instance
    """
    global _report_slot
    if _report_slot is None:
        _report_slot = ReportRequestSlot()
    return _report_slot
