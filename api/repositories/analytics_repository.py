# api/repositories/analytics_repository.py
import json
from typing import Dict, Optional

from database import BaseRepository
from models.analytics import AnalyticsSnapshot


class AnalyticsRepository(BaseRepository):
    """Append-only store of computed analytics snapshots"""

    def create(self, snapshot: AnalyticsSnapshot) -> Dict:
        """Append a snapshot row"""
        query = """
        INSERT INTO analytics (date, total_violations, total_fines, active_officers,
                               violation_breakdown, payment_stats, updated_at)
        VALUES (?, ?, ?, ?, ?, ?, ?)
        """
        summary = self.execute_write(query, (
            snapshot.date,
            snapshot.today_violations,
            snapshot.total_fines,
            snapshot.active_officers,
            json.dumps(snapshot.violation_breakdown),
            json.dumps(snapshot.payment_stats.model_dump()),
            snapshot.last_updated,
        ))
        return summary

    def find_latest(self) -> Optional[AnalyticsSnapshot]:
        """Most recently written snapshot"""
        query = """
        SELECT * FROM analytics
        ORDER BY updated_at DESC, id DESC
        LIMIT 1
        """
        result = self.execute_query(query)
        if not result:
            return None
        row = result[0]
        return AnalyticsSnapshot(
            date=row["date"],
            today_violations=row["total_violations"],
            total_fines=row["total_fines"],
            active_officers=row["active_officers"],
            violation_breakdown=json.loads(row["violation_breakdown"] or "{}"),
            payment_stats=json.loads(row["payment_stats"] or "{}"),
            last_updated=row["updated_at"],
        )
