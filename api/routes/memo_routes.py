# api/routes/memo_routes.py
import logging
import sqlite3
import time
import uuid
from datetime import datetime, timezone
from typing import Dict, List

from fastapi import APIRouter, HTTPException, status

from models.memo import Memo, MemoCreate
from repositories.memo_repository import MemoRepository
from services.analytics_service import AnalyticsService
from services.challan_service import challan_total

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/memos",
    tags=["memos"],
    responses={400: {"description": "Missing required fields"}}
)
memo_repo = MemoRepository()
analytics_service = AnalyticsService()


def generate_memo_id() -> str:
    """MEMO-<epoch ms>-<random suffix>"""
    return f"MEMO-{int(time.time() * 1000)}-{uuid.uuid4().hex[:6]}"


@router.post("", response_model=Dict)
async def create_memo(request: MemoCreate):
    """Issue an e-challan.

    The total fine is computed here from the violations' fines; a missing
    fine counts as zero. Today's analytics are recomputed afterwards.
    """
    if not request.driver_id or not request.officer_id or not request.violations:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing required fields: driver_id, officer_id, or violations"
        )

    memo = Memo(
        id=generate_memo_id(),
        driver_id=request.driver_id,
        officer_id=request.officer_id,
        officer_name=request.officer_name or "Unknown Officer",
        location=request.location or "Unknown Location",
        violations=request.violations,
        total_fine=challan_total([v.model_dump() for v in request.violations]),
        payment_status=request.payment_status or "pending",
        date=datetime.now(timezone.utc).isoformat(),
    )

    try:
        memo_repo.create(memo)
    except sqlite3.Error as e:
        logger.error(f"Failed to store memo {memo.id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create memo"
        )

    try:
        analytics_service.refresh()
    except sqlite3.Error as e:
        logger.error(f"Analytics refresh after memo {memo.id} failed: {e}")

    return {
        "success": True,
        "message": "Memo generated successfully",
        "memo": {
            "id": memo.id,
            "date": memo.date,
            "total_fine": memo.total_fine,
            "payment_status": memo.payment_status,
        },
    }


@router.get("/driver/{driver_id}", response_model=List[Dict])
async def get_driver_memos(driver_id: str):
    """A driver's memo history, newest first"""
    return memo_repo.find_by_driver(driver_id)
