"""
E-challan rendering and mock payment.

The printable challan is plain text so it can be sent straight to a receipt
printer or saved next to the memo.
"""

import logging
import time
from datetime import datetime
from typing import Dict, List, Optional, Union

from pydantic import BaseModel

logger = logging.getLogger(__name__)

PAYMENT_METHODS = ("upi", "card", "netbanking")
CHALLAN_WIDTH = 48


class PaymentReceipt(BaseModel):
    transaction_id: str
    challan_no: str
    amount: int
    method: str
    status: str = "paid"
    paid_at: datetime


def challan_total(violations: List[Dict]) -> Union[int, float]:
    return sum(v.get("fine") or 0 for v in violations)


def render_challan(
    driver: Dict,
    violations: List[Dict],
    issued_at: datetime,
    challan_no: Optional[str] = None
) -> str:
    """Render the printable e-challan for a driver.

    Args:
        driver: Driver record (name and vehicle number are printed)
        violations: Selected violations with ``violation`` and ``fine``
        issued_at: Issue time shown on the challan
        challan_no: Memo id, when the memo has already been stored

    Returns:
        str: The challan text
    """
    lines = [
        "E-CHALLAN".center(CHALLAN_WIDTH),
        "=" * CHALLAN_WIDTH,
    ]
    if challan_no:
        lines.append(f"Challan No: {challan_no}")
    lines.extend([
        f"Driver: {driver.get('name', '')}",
        f"Vehicle: {driver.get('vehicle_number') or '-'}",
        f"Date: {issued_at.strftime('%d/%m/%Y, %H:%M:%S')}",
        "-" * CHALLAN_WIDTH,
        f"{'#':<4}{'Violation':<32}{'Fine':>12}",
    ])
    for index, violation in enumerate(violations, start=1):
        name = violation.get("violation") or violation.get("id") or ""
        fine = f"₹{violation.get('fine') or 0}"
        lines.append(f"{index:<4}{name[:31]:<32}{fine:>12}")
    lines.append("-" * CHALLAN_WIDTH)
    lines.append(f"Total: ₹{challan_total(violations)}".rjust(CHALLAN_WIDTH))
    return "\n".join(lines)


def simulate_payment(challan_no: str, amount: int, method: str) -> PaymentReceipt:
    """Pretend to collect a fine through the payment gateway.

    Nothing is written to the record store; memos keep their original status.

    Raises:
        ValueError: On an unknown method or a non-positive amount
    """
    if method not in PAYMENT_METHODS:
        raise ValueError(f"Unsupported payment method: {method}")
    if amount <= 0:
        raise ValueError("Payment amount must be positive")

    receipt = PaymentReceipt(
        transaction_id=f"TXN{int(time.time() * 1000)}",
        challan_no=challan_no,
        amount=amount,
        method=method,
        paid_at=datetime.now(),
    )
    logger.info(f"Simulated {method} payment of {amount} for {challan_no}: {receipt.transaction_id}")
    return receipt
