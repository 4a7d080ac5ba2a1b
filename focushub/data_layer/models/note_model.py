from typing import List, ClassVar
from datetime import datetime
from pydantic import Field
from .base_model import StoreBaseModel
from focushub.utils.datetime_utils import get_utc_now


class Note(StoreBaseModel):
    title: str = Field(..., min_length=1, description="Note title")
    content: str = Field("", description="Note body")
    tags: List[str] = Field(default_factory=list)
    attachments: List[str] = Field(
        default_factory=list, description="Attachment file names")
    updated_at: datetime = Field(default_factory=get_utc_now)

    collection_name: ClassVar[str] = "notes"
