from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """Officer credentials. Both fields may be absent; the route rejects them."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    officer_id: Optional[str] = Field(
        None, validation_alias=AliasChoices("officer_id", "officerId")
    )
    password: Optional[str] = None


class Officer(BaseModel):
    id: str
    name: str
    badge_number: str
    rank: str
    station: str
