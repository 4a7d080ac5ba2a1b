from pydantic import Field, field_validator
from typing import Optional
from datetime import datetime
from .base_schemas import CamelModel
from focushub.utils.validation_utils import validate_date_key


class WaterIntakeCreate(CamelModel):
    amount: int = Field(..., gt=0, description="Amount in ml")
    date: Optional[str] = Field(None, description="YYYY-MM-DD, defaults to today")

    @field_validator("date")
    @classmethod
    def check_date(cls, v):
        return validate_date_key(v)


class WaterIntakeResponse(CamelModel):
    id: str
    user_id: str
    amount: int
    date: str
    timestamp: datetime
