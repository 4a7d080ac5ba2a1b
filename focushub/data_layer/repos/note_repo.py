from focushub.data_layer.models.note_model import Note
from focushub.data_layer.memory.store import MemoryStore
from .base_repo import BaseMemoryRepository
from typing import Optional, List


class NoteRepository(BaseMemoryRepository[Note]):
    def __init__(self, store: MemoryStore):
        super().__init__(store, Note)

    def find_by_user(self, user_id: str) -> List[Note]:
        return self.find_many({"user_id": user_id})

    def create_note(self, note: Note) -> str:
        return self.insert(note)

    def update_note(self, note_id: str, data: dict) -> Optional[Note]:
        # updated_at is refreshed by the base repository
        return self.update(note_id, data)

    def delete_note(self, note_id: str) -> bool:
        return self.delete(note_id)
