# api/repositories/driver_repository.py
import json
import logging
from typing import Dict, List, Optional

from database import BaseRepository
from models.driver import Driver

logger = logging.getLogger(__name__)


DRIVER_COLUMNS = [
    "id", "name", "is_driver", "govt_id_type", "govt_id_number", "license_number",
    "vehicle_number", "vehicle_type", "father_name", "dob", "blood_group",
    "address", "city", "phone", "license_expiry", "photo", "face_descriptor",
]


def decode_descriptor(raw) -> Optional[List[float]]:
    """Decode a stored face descriptor.

    Accepts a JSON array or an index-keyed JSON object ({"0": 0.1, ...}),
    which is how typed float arrays serialize in the browser.
    """
    if raw is None or raw == "":
        return None
    value = json.loads(raw) if isinstance(raw, str) else raw
    if isinstance(value, dict):
        return [float(value[key]) for key in sorted(value, key=int)]
    return [float(v) for v in value]


class DriverRepository(BaseRepository):
    """Repository for Driver entity operations"""

    def _to_row(self, driver: Driver) -> tuple:
        params = driver.model_dump()
        params["is_driver"] = 1 if params["is_driver"] else 0
        if params["face_descriptor"] is not None:
            params["face_descriptor"] = json.dumps(params["face_descriptor"])
        return tuple(params[column] for column in DRIVER_COLUMNS)

    def _from_row(self, row: Dict) -> Dict:
        row["is_driver"] = bool(row.get("is_driver"))
        row["face_descriptor"] = decode_descriptor(row.get("face_descriptor"))
        return row

    def create_many(self, drivers: List[Driver]) -> int:
        """Insert drivers in a single transaction"""
        placeholders = ", ".join("?" for _ in DRIVER_COLUMNS)
        query = f"INSERT INTO drivers ({', '.join(DRIVER_COLUMNS)}) VALUES ({placeholders})"
        self.transaction_write([(query, self._to_row(driver)) for driver in drivers])
        logger.info(f"Inserted {len(drivers)} drivers")
        return len(drivers)

    def get_by_id(self, driver_id: str) -> Optional[Dict]:
        """Get a driver by their ID"""
        result = self.execute_query("SELECT * FROM drivers WHERE id = ?", (driver_id,))
        return self._from_row(result[0]) if result else None

    def list_basic(self) -> List[Dict]:
        """Minimal projection of every driver for client side matching"""
        result = self.execute_query(
            "SELECT id, name, city, photo, face_descriptor FROM drivers ORDER BY id"
        )
        for row in result:
            row["face_descriptor"] = decode_descriptor(row.get("face_descriptor"))
        return result

    def count_all(self) -> int:
        return self.count("drivers")
