from pydantic import Field
from typing import Optional
from datetime import datetime
from .base_schemas import CamelModel


class DistractionSiteBase(CamelModel):
    url: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    is_blocked: bool = True


class DistractionSiteCreate(DistractionSiteBase):
    pass


class DistractionSiteUpdate(CamelModel):
    url: Optional[str] = Field(None, min_length=1)
    name: Optional[str] = Field(None, min_length=1)
    is_blocked: Optional[bool] = None


class DistractionSiteResponse(DistractionSiteBase):
    id: str
    user_id: str
    created_at: datetime
