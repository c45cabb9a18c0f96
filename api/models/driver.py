from typing import List, Optional

from pydantic import BaseModel, Field


class Driver(BaseModel):
    """Driver record as seeded into the record store.

    The face descriptor is optional; seeded drivers start without one and
    the kiosk falls back to the demo driver for them.
    """

    # Identifiers
    id: str = Field(..., description="Driver identifier", example="GJ001")
    name: str
    is_driver: bool = True

    # Government ID
    govt_id_type: Optional[str] = None
    govt_id_number: Optional[str] = None

    # License & Vehicle
    license_number: Optional[str] = None
    vehicle_number: Optional[str] = None
    vehicle_type: Optional[str] = None
    license_expiry: Optional[str] = None

    # Personal
    father_name: Optional[str] = None
    dob: Optional[str] = None
    blood_group: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    phone: Optional[str] = None
    photo: Optional[str] = None

    # Face recognition
    face_descriptor: Optional[List[float]] = None


class DriverBasic(BaseModel):
    """Minimal driver projection sent to the kiosk matcher."""
    id: str
    name: str
    city: Optional[str] = None
    photo: Optional[str] = None
    face_descriptor: Optional[List[float]] = None
