from typing import Optional, Any, Dict, ClassVar, TypeVar
from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime
import copy
import uuid

from focushub.utils.datetime_utils import get_utc_now


def new_id() -> str:
    """Generate an opaque, server-side record id."""
    return str(uuid.uuid4())


class StoreBaseModel(BaseModel):
    """Base model for in-memory documents with automatic ID generation and timestamps."""

    id: str = Field(default_factory=new_id)
    user_id: str = Field(..., description="Owner user ID")
    created_at: datetime = Field(default_factory=get_utc_now)

    # Metadata for the collection name
    collection_name: ClassVar[str] = "base"

    # Config for Pydantic model
    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True,
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "id": "3f0c5a2e-9d1b-4f7a-8a61-2f3c1b7d9e10",
                "user_id": "mock-user-123",
                "created_at": "2024-01-01T00:00:00+00:00"
            }
        }
    )

    def dict_for_store(self) -> Dict[str, Any]:
        """Convert to a detached dict suitable for the in-memory store."""
        return copy.deepcopy(self.model_dump())

    @classmethod
    def from_store(cls, data: Dict[str, Any]) -> Optional["StoreBaseModel"]:
        """Create model instance from a stored document."""
        if not data:
            return None
        return cls(**copy.deepcopy(data))


# Type variable for generic repositories
T = TypeVar('T', bound=StoreBaseModel)
