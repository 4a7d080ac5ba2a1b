from focushub.data_layer.models.pomodoro_model import PomodoroSession
from focushub.data_layer.memory.store import MemoryStore
from focushub.utils.datetime_utils import get_utc_now, to_date_key
from .base_repo import BaseMemoryRepository
from typing import Optional, List


class PomodoroSessionRepository(BaseMemoryRepository[PomodoroSession]):
    def __init__(self, store: MemoryStore):
        super().__init__(store, PomodoroSession)

    def find_by_user(self, user_id: str, date: Optional[str] = None) -> List[PomodoroSession]:
        """List a user's sessions, optionally only those started on ``date`` (UTC)."""
        if date:
            return self.find_many(
                lambda s: s.user_id == user_id and to_date_key(s.start_time) == date)
        return self.find_many({"user_id": user_id})

    def count_completed(self, user_id: str, date: str) -> int:
        return sum(1 for s in self.find_by_user(user_id, date) if s.completed)

    def create_session(self, session: PomodoroSession) -> str:
        return self.insert(session)

    def update_session(self, session_id: str, data: dict) -> Optional[PomodoroSession]:
        """Update a session; finishing it without an explicit end time stamps now."""
        existing = self.find_by_id(session_id)
        if not existing:
            return None
        data = dict(data)
        if data.get("completed") and not existing.completed and not data.get("end_time"):
            data["end_time"] = get_utc_now()
        return self.update(session_id, data)
