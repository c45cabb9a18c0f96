# api/repositories/memo_repository.py
import json
from typing import Dict, List, Optional

from database import BaseRepository
from models.memo import Memo


class MemoRepository(BaseRepository):
    """Repository for issued e-challans.

    Memos are write-once: there is no update or delete path.
    """

    def _from_row(self, row: Dict) -> Dict:
        row["violations"] = json.loads(row["violations"]) if row.get("violations") else []
        return row

    def create(self, memo: Memo) -> Optional[Dict]:
        """Persist a memo and return the stored row"""
        query = """
        INSERT INTO memos (id, driver_id, officer_id, officer_name, location,
                           violations, total_fine, payment_status, date)
        VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
        """
        violations = [v.model_dump(exclude_none=True) for v in memo.violations]
        self.execute_write(query, (
            memo.id,
            memo.driver_id,
            memo.officer_id,
            memo.officer_name,
            memo.location,
            json.dumps(violations),
            memo.total_fine,
            memo.payment_status,
            memo.date,
        ))
        return self.get_by_id(memo.id)

    def get_by_id(self, memo_id: str) -> Optional[Dict]:
        result = self.execute_query("SELECT * FROM memos WHERE id = ?", (memo_id,))
        return self._from_row(result[0]) if result else None

    def find_by_driver(self, driver_id: str) -> List[Dict]:
        """Driver history, newest first"""
        result = self.execute_query(
            "SELECT * FROM memos WHERE driver_id = ? ORDER BY date DESC",
            (driver_id,)
        )
        return [self._from_row(row) for row in result]

    def find_by_date_prefix(self, day: str) -> List[Dict]:
        """Memos whose stored timestamp starts with the given YYYY-MM-DD string"""
        result = self.execute_query("SELECT * FROM memos WHERE date LIKE ?", (f"{day}%",))
        return [self._from_row(row) for row in result]
