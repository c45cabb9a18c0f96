# api/repositories/violation_repository.py
from typing import Dict, List

from database import BaseRepository
from models.violation import Violation


class ViolationRepository(BaseRepository):
    """Repository for the violation catalog"""

    def create_many(self, violations: List[Violation]) -> int:
        query = """
        INSERT INTO violations (id, code, category, violation, fine, description)
        VALUES (?, ?, ?, ?, ?, ?)
        """
        self.transaction_write([
            (query, (v.id, v.code, v.category, v.violation, v.fine, v.description))
            for v in violations
        ])
        return len(violations)

    def get_all(self) -> List[Dict]:
        return self.execute_query("SELECT * FROM violations ORDER BY id")

    def count_all(self) -> int:
        return self.count("violations")
