from typing import List

from pydantic import BaseModel, Field


class Camera(BaseModel):
    id: str
    name: str
    type: str = "Simulation"
    feeds: List[str] = Field(default_factory=list)
