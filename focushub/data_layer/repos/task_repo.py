from focushub.data_layer.models.task_model import Task
from focushub.data_layer.memory.store import MemoryStore
from focushub.utils.datetime_utils import get_utc_now
from .base_repo import BaseMemoryRepository
from typing import Optional, List


class TaskRepository(BaseMemoryRepository[Task]):
    def __init__(self, store: MemoryStore):
        super().__init__(store, Task)

    def find_by_user(self, user_id: str) -> List[Task]:
        return self.find_many({"user_id": user_id})

    def create_task(self, task: Task) -> str:
        return self.insert(task)

    def update_task(self, task_id: str, data: dict) -> Optional[Task]:
        """Update a task, keeping ``completed_at`` in step with ``status``.

        ``completed_at`` is stamped when the status moves to completed and
        cleared when it moves away from completed.
        """
        existing = self.find_by_id(task_id)
        if not existing:
            return None
        data = dict(data)
        new_status = data.get("status")
        if new_status == "completed" and existing.status != "completed":
            data["completed_at"] = get_utc_now()
        elif new_status is not None and new_status != "completed":
            data["completed_at"] = None
        return self.update(task_id, data)

    def delete_task(self, task_id: str) -> bool:
        return self.delete(task_id)
