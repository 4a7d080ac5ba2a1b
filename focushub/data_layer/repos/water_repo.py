from focushub.data_layer.models.water_model import WaterIntake
from focushub.data_layer.memory.store import MemoryStore
from .base_repo import BaseMemoryRepository
from typing import List


class WaterIntakeRepository(BaseMemoryRepository[WaterIntake]):
    """Water entries are append-only; the API exposes no update for them."""

    def __init__(self, store: MemoryStore):
        super().__init__(store, WaterIntake)

    def find_by_user(self, user_id: str, date: str) -> List[WaterIntake]:
        return self.find_many({"user_id": user_id, "date": date})

    def add_intake(self, intake: WaterIntake) -> str:
        return self.insert(intake)

    def total_for_day(self, user_id: str, date: str) -> int:
        return sum(i.amount for i in self.find_by_user(user_id, date))
