from focushub.data_layer.models.event_model import Event
from focushub.data_layer.memory.store import MemoryStore
from .base_repo import BaseMemoryRepository
from typing import Optional, List


class EventRepository(BaseMemoryRepository[Event]):
    def __init__(self, store: MemoryStore):
        super().__init__(store, Event)

    def find_by_user(self, user_id: str) -> List[Event]:
        return self.find_many({"user_id": user_id})

    def create_event(self, event: Event) -> str:
        return self.insert(event)

    def update_event(self, event_id: str, data: dict) -> Optional[Event]:
        return self.update(event_id, data)

    def delete_event(self, event_id: str) -> bool:
        return self.delete(event_id)
