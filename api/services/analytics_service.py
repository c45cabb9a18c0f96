"""
Daily analytics over issued e-challans.

Aggregates the memos stored for the current UTC day and appends the result
to the analytics table, which acts as a cache for the dashboard.
"""

import logging
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional

from models.analytics import AnalyticsSnapshot, PaymentStats
from repositories.analytics_repository import AnalyticsRepository
from repositories.memo_repository import MemoRepository

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def violation_name(violation: Dict) -> str:
    """Label used in the breakdown: the violation name, else its id."""
    return violation.get("violation") or violation.get("id") or "Unknown"


def compute_analytics(memos: Iterable[Dict], day: Optional[str] = None) -> AnalyticsSnapshot:
    """Aggregate a set of memo rows.

    Args:
        memos: Memo rows with parsed ``violations`` lists
        day: The YYYY-MM-DD the memos were selected for

    Returns:
        AnalyticsSnapshot: counts, fine total, distinct officers and breakdowns
    """
    memos = list(memos)
    breakdown: Dict[str, int] = {}
    for memo in memos:
        for violation in memo.get("violations") or []:
            name = violation_name(violation)
            breakdown[name] = breakdown.get(name, 0) + 1

    payment_stats = PaymentStats(
        paid=sum(1 for m in memos if m.get("payment_status") == "paid"),
        pending=sum(1 for m in memos if m.get("payment_status") == "pending"),
        total=len(memos),
    )

    return AnalyticsSnapshot(
        date=day,
        today_violations=len(memos),
        total_fines=sum(m.get("total_fine") or 0 for m in memos),
        active_officers=len({m.get("officer_id") for m in memos}),
        violation_breakdown=breakdown,
        payment_stats=payment_stats,
    )


class AnalyticsService:
    """Computes and caches the daily analytics snapshot."""

    def __init__(self, memo_repo: MemoRepository = None, analytics_repo: AnalyticsRepository = None):
        self.memo_repo = memo_repo or MemoRepository()
        self.analytics_repo = analytics_repo or AnalyticsRepository()

    def compute_today(self) -> AnalyticsSnapshot:
        """Aggregate today's memos without storing anything."""
        today = utc_now().date().isoformat()
        memos: List[Dict] = self.memo_repo.find_by_date_prefix(today)
        return compute_analytics(memos, day=today)

    def refresh(self) -> AnalyticsSnapshot:
        """Recompute today's aggregate and append it as a new snapshot."""
        snapshot = self.compute_today()
        snapshot.last_updated = utc_now().isoformat()
        self.analytics_repo.create(snapshot)
        logger.info(
            f"Analytics refreshed for {snapshot.date}: "
            f"{snapshot.today_violations} memos, fines {snapshot.total_fines}"
        )
        return snapshot

    def get_current(self) -> AnalyticsSnapshot:
        """Latest stored snapshot, or a fresh unsaved aggregate when none exists."""
        latest = self.analytics_repo.find_latest()
        if latest is not None:
            return latest
        logger.debug("No analytics snapshot stored yet, computing fresh")
        return self.compute_today()
