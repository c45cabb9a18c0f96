# api/routes/auth_routes.py
import logging
from typing import Dict

from fastapi import APIRouter, HTTPException, status

from config import settings
from models.officer import LoginRequest, Officer

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["auth"],
    responses={401: {"description": "Invalid credentials"}}
)


@router.post("/login", response_model=Dict)
async def login(credentials: LoginRequest):
    """Mock officer login.

    Any non-empty officer id and password is accepted; the profile comes
    from configuration.
    """
    if not credentials.officer_id or not credentials.password:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials"
        )

    officer = Officer(
        id=credentials.officer_id,
        name=settings.officer_name,
        badge_number=credentials.officer_id,
        rank=settings.officer_rank,
        station=settings.officer_station,
    )
    logger.info(f"Officer {officer.id} logged in")
    return {"success": True, "officer": officer.model_dump()}
