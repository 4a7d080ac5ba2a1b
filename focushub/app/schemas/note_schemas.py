from pydantic import Field
from typing import Optional, List
from datetime import datetime
from .base_schemas import CamelModel


class NoteBase(CamelModel):
    title: str = Field(..., min_length=1)
    content: str = ""
    tags: List[str] = []
    attachments: List[str] = []


class NoteCreate(NoteBase):
    pass


class NoteUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = None
    tags: Optional[List[str]] = None
    attachments: Optional[List[str]] = None


class NoteResponse(NoteBase):
    id: str
    user_id: str
    created_at: datetime
    updated_at: datetime
