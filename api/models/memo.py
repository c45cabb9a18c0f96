from typing import List, Literal, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


PaymentStatus = Literal["pending", "paid"]


class MemoViolation(BaseModel):
    """A violation reference as selected by the operator.

    Carries the catalog fields the kiosk already has so the memo keeps the
    fine that applied when it was issued.
    """
    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    code: Optional[str] = None
    category: Optional[str] = None
    violation: Optional[str] = None
    fine: Optional[Union[int, float]] = None


class MemoCreate(BaseModel):
    """Request body for issuing an e-challan.

    Required fields are optional here so that missing values are reported
    as 400 by the route rather than as schema errors.
    """
    model_config = ConfigDict(coerce_numbers_to_str=True)

    driver_id: Optional[str] = Field(
        None, validation_alias=AliasChoices("driver_id", "driverId")
    )
    officer_id: Optional[str] = Field(
        None, validation_alias=AliasChoices("officer_id", "officerId")
    )
    officer_name: Optional[str] = Field(
        None, validation_alias=AliasChoices("officer_name", "officerName")
    )
    location: Optional[str] = None
    violations: Optional[List[MemoViolation]] = None
    payment_status: Optional[PaymentStatus] = Field(
        None, validation_alias=AliasChoices("payment_status", "paymentStatus")
    )


class Memo(BaseModel):
    # Identifiers
    id: str
    driver_id: str

    # Issuer
    officer_id: str
    officer_name: str = "Unknown Officer"
    location: str = "Unknown Location"

    # Charges
    violations: List[MemoViolation] = Field(default_factory=list)
    total_fine: Union[int, float] = 0
    payment_status: PaymentStatus = "pending"

    # UTC ISO-8601 timestamp
    date: str
