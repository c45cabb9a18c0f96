# api/repositories/camera_repository.py
import json
from typing import Dict, List

from database import BaseRepository
from models.camera import Camera


class CameraRepository(BaseRepository):
    """Repository for simulated camera feeds"""

    def create_many(self, cameras: List[Camera]) -> int:
        query = "INSERT INTO cameras (id, name, type, feeds) VALUES (?, ?, ?, ?)"
        self.transaction_write([
            (query, (c.id, c.name, c.type, json.dumps(c.feeds))) for c in cameras
        ])
        return len(cameras)

    def get_all(self) -> List[Dict]:
        result = self.execute_query("SELECT * FROM cameras ORDER BY id")
        for row in result:
            row["feeds"] = json.loads(row["feeds"]) if row.get("feeds") else []
        return result

    def count_all(self) -> int:
        return self.count("cameras")
