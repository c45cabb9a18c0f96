from typing import Dict, List

from pydantic import BaseModel, Field


class LocationHierarchy(BaseModel):
    """Districts mapped to their cities, plus coordinates for the cities that have them."""
    districts: Dict[str, List[str]] = Field(default_factory=dict)
    city_coordinates: Dict[str, List[float]] = Field(default_factory=dict)
