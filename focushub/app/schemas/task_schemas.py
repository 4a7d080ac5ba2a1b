from pydantic import Field
from typing import Optional
from datetime import datetime
from .base_schemas import CamelModel
from focushub.data_layer.models.task_model import TaskPriority, TaskStatus


class TaskBase(CamelModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    priority: TaskPriority = "medium"
    status: TaskStatus = "pending"
    due_date: Optional[datetime] = None
    estimated_time: Optional[int] = Field(None, ge=0)
    category: Optional[str] = None


class TaskCreate(TaskBase):
    pass


class TaskUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    priority: Optional[TaskPriority] = None
    status: Optional[TaskStatus] = None
    due_date: Optional[datetime] = None
    estimated_time: Optional[int] = Field(None, ge=0)
    category: Optional[str] = None


class TaskResponse(TaskBase):
    id: str
    user_id: str
    created_at: datetime
    completed_at: Optional[datetime] = None
