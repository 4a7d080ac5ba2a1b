from typing import ClassVar
from pydantic import Field
from .base_model import StoreBaseModel


class DistractionSite(StoreBaseModel):
    url: str = Field(..., min_length=1, description="Site URL or domain")
    name: str = Field(..., min_length=1, description="Display name")
    is_blocked: bool = Field(True, description="Blocked or allowed")

    collection_name: ClassVar[str] = "distraction_sites"
