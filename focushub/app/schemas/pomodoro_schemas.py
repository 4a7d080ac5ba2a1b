from pydantic import Field
from typing import Optional
from datetime import datetime
from .base_schemas import CamelModel
from focushub.data_layer.models.pomodoro_model import PomodoroType


class PomodoroSessionCreate(CamelModel):
    type: PomodoroType
    duration: int = Field(..., gt=0)
    completed: bool = False


class PomodoroSessionUpdate(CamelModel):
    type: Optional[PomodoroType] = None
    duration: Optional[int] = Field(None, gt=0)
    completed: Optional[bool] = None
    end_time: Optional[datetime] = None


class PomodoroSessionResponse(CamelModel):
    id: str
    user_id: str
    type: PomodoroType
    duration: int
    completed: bool
    start_time: datetime
    end_time: Optional[datetime] = None
