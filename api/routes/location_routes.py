# api/routes/location_routes.py
from typing import Dict

from fastapi import APIRouter

from repositories.camera_repository import CameraRepository
from repositories.location_repository import LocationRepository


router = APIRouter(prefix="/api", tags=["locations"])
location_repo = LocationRepository()
camera_repo = CameraRepository()


@router.get("/locations", response_model=Dict)
async def get_locations():
    """District -> cities hierarchy with known city coordinates"""
    return location_repo.get_hierarchy().model_dump()


@router.get("/cameras", response_model=Dict)
async def get_cameras():
    """Simulated camera feeds keyed by camera id"""
    cameras = camera_repo.get_all()
    return {
        "camera_feeds": {c["id"]: c["feeds"] for c in cameras},
        "camera_names": {c["id"]: c["name"] for c in cameras},
    }
