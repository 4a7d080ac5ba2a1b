from typing import Optional, ClassVar, Literal
from datetime import datetime
from pydantic import Field
from .base_model import StoreBaseModel

TaskPriority = Literal["high", "medium", "low"]
TaskStatus = Literal["pending", "in_progress", "completed"]


class Task(StoreBaseModel):
    title: str = Field(..., min_length=1, description="Task title")
    description: Optional[str] = Field(None, description="Task description")
    priority: TaskPriority = Field("medium", description="high|medium|low")
    status: TaskStatus = Field(
        "pending", description="pending|in_progress|completed")
    due_date: Optional[datetime] = Field(None, description="Due date")
    estimated_time: Optional[int] = Field(
        None, ge=0, description="Estimated time in minutes")
    category: Optional[str] = Field(None, description="Free-form category")
    completed_at: Optional[datetime] = Field(
        None, description="Set when the task is completed")

    collection_name: ClassVar[str] = "tasks"
