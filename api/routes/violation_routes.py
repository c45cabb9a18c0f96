# api/routes/violation_routes.py
from typing import Dict, List

from fastapi import APIRouter

from repositories.violation_repository import ViolationRepository


router = APIRouter(prefix="/api", tags=["violations"])
violation_repo = ViolationRepository()


@router.get("/violations", response_model=List[Dict])
async def list_violations():
    """Full violation catalog with fines"""
    return violation_repo.get_all()
