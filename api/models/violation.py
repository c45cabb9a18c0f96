from typing import Optional

from pydantic import BaseModel


class Violation(BaseModel):
    # Identifiers
    id: str
    code: Optional[str] = None

    # Violation Details
    category: Optional[str] = None
    violation: str
    description: Optional[str] = None

    # Fine in rupees
    fine: int = 0
