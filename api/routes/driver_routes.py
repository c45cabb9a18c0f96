# api/routes/driver_routes.py
from typing import Dict, List

from fastapi import APIRouter, HTTPException, status

from models.driver import DriverBasic
from repositories.driver_repository import DriverRepository


router = APIRouter(
    prefix="/api",
    tags=["drivers"],
    responses={404: {"description": "Driver not found"}}
)
driver_repo = DriverRepository()


@router.get("/drivers-basic", response_model=List[DriverBasic])
async def list_drivers_basic():
    """Id, name, city, photo and face descriptor of every driver for client side matching"""
    return driver_repo.list_basic()


@router.get("/drivers/{driver_id}", response_model=Dict)
async def get_driver(driver_id: str):
    """Get a driver by ID"""
    driver = driver_repo.get_by_id(driver_id)
    if not driver:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Driver not found"
        )
    return driver
