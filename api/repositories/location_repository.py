# api/repositories/location_repository.py
from typing import Dict, List, Optional, Tuple

from database import BaseRepository
from models.location import LocationHierarchy


class LocationRepository(BaseRepository):
    """Repository for the district -> city hierarchy"""

    def create_district(self, name: str, cities: List[Tuple[str, Optional[float], Optional[float]]]) -> int:
        """Insert a district and its cities, returning the district id"""
        with self.db.get_session() as session:
            cursor = session.execute("INSERT INTO districts (name) VALUES (?)", (name,))
            district_id = cursor.lastrowid
            session.executemany(
                "INSERT INTO cities (district_id, name, latitude, longitude) VALUES (?, ?, ?, ?)",
                [(district_id, city, lat, lng) for city, lat, lng in cities]
            )
            return district_id

    def get_districts(self) -> List[Dict]:
        return self.execute_query("SELECT * FROM districts ORDER BY name")

    def get_cities(self) -> List[Dict]:
        return self.execute_query("SELECT * FROM cities ORDER BY name")

    def get_hierarchy(self) -> LocationHierarchy:
        """Districts with their city names, plus known city coordinates"""
        districts = self.get_districts()
        names_by_id = {d["id"]: d["name"] for d in districts}
        hierarchy = LocationHierarchy(districts={d["name"]: [] for d in districts})

        for city in self.get_cities():
            district_name = names_by_id.get(city["district_id"])
            if district_name is None:
                continue
            hierarchy.districts[district_name].append(city["name"])
            if city["latitude"] is not None and city["longitude"] is not None:
                hierarchy.city_coordinates[city["name"]] = [city["latitude"], city["longitude"]]

        return hierarchy

    def count_all(self) -> int:
        return self.count("districts")
