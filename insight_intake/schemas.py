from pydantic import BaseModel
from typing import Any, Optional


class Insight(BaseModel):
    type: str
    event: str
    data: Any

    class Config:
        extra = "ignore"


class ValidationResult(BaseModel):
    valid: bool
    reason: Optional[str] = None


class IntakeResult(BaseModel):
    accepted: bool
    insight: Optional[Insight] = None
    reason: Optional[str] = None
