from typing import Dict, Optional, Union

from pydantic import BaseModel, Field


class PaymentStats(BaseModel):
    paid: int = 0
    pending: int = 0
    total: int = 0


class AnalyticsSnapshot(BaseModel):
    """Aggregate over the memos issued on a single (UTC) day."""
    date: Optional[str] = None
    today_violations: int = 0
    total_fines: Union[int, float] = 0
    active_officers: int = 0
    violation_breakdown: Dict[str, int] = Field(default_factory=dict)
    payment_stats: PaymentStats = Field(default_factory=PaymentStats)
    last_updated: Optional[str] = None
