from typing import ClassVar
from datetime import datetime
from pydantic import Field
from .base_model import StoreBaseModel
from focushub.utils.datetime_utils import get_utc_now, today_key


class WaterIntake(StoreBaseModel):
    amount: int = Field(..., gt=0, description="Amount in ml")
    date: str = Field(default_factory=today_key, description="YYYY-MM-DD")
    timestamp: datetime = Field(default_factory=get_utc_now)

    collection_name: ClassVar[str] = "water_intake"
