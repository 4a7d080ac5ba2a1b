from focushub.data_layer.models.habit_model import Habit, HabitEntry
from focushub.data_layer.memory.store import MemoryStore
from .base_repo import BaseMemoryRepository
from typing import Optional, List
import logging

logger = logging.getLogger(__name__)


class HabitRepository(BaseMemoryRepository[Habit]):
    def __init__(self, store: MemoryStore):
        super().__init__(store, Habit)

    def find_by_user(self, user_id: str) -> List[Habit]:
        return self.find_many({"user_id": user_id})

    def find_active(self, user_id: str) -> List[Habit]:
        return self.find_many({"user_id": user_id, "is_active": True})

    def create_habit(self, habit: Habit) -> str:
        return self.insert(habit)

    def update_habit(self, habit_id: str, data: dict) -> Optional[Habit]:
        return self.update(habit_id, data)

    def delete_habit(self, habit_id: str) -> bool:
        return self.delete(habit_id)


class HabitEntryRepository(BaseMemoryRepository[HabitEntry]):
    def __init__(self, store: MemoryStore):
        super().__init__(store, HabitEntry)

    def find_by_user(self, user_id: str, date: str) -> List[HabitEntry]:
        return self.find_many({"user_id": user_id, "date": date})

    def find_for_habit(self, user_id: str, habit_id: str, date: str) -> Optional[HabitEntry]:
        return self.find_one({"user_id": user_id, "habit_id": habit_id, "date": date})

    def upsert_entry(self, entry: HabitEntry, fields: Optional[set] = None) -> HabitEntry:
        """Keep at most one entry per (user, habit, date).

        When an entry already exists for the day, the supplied ``fields`` of
        ``entry`` are merged over it instead of inserting a duplicate.
        ``None`` merges both ``completed`` and ``count``; an empty set leaves
        the existing entry unchanged.
        """
        existing = self.find_for_habit(entry.user_id, entry.habit_id, entry.date)
        if existing:
            if fields is None:
                fields = {"completed", "count"}
            if not fields:
                return existing
            data = entry.model_dump(include=fields)
            logger.info(
                f"Habit entry for habit {entry.habit_id} on {entry.date} exists, updating {existing.id}")
            return self.update(existing.id, data)
        entry_id = self.insert(entry)
        return self.find_by_id(entry_id)

    def update_entry(self, entry_id: str, data: dict) -> Optional[HabitEntry]:
        return self.update(entry_id, data)
