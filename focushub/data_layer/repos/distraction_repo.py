from focushub.data_layer.models.distraction_model import DistractionSite
from focushub.data_layer.memory.store import MemoryStore
from .base_repo import BaseMemoryRepository
from typing import Optional, List


class DistractionSiteRepository(BaseMemoryRepository[DistractionSite]):
    def __init__(self, store: MemoryStore):
        super().__init__(store, DistractionSite)

    def find_by_user(self, user_id: str) -> List[DistractionSite]:
        return self.find_many({"user_id": user_id})

    def find_blocked(self, user_id: str) -> List[DistractionSite]:
        return self.find_many({"user_id": user_id, "is_blocked": True})

    def create_site(self, site: DistractionSite) -> str:
        return self.insert(site)

    def update_site(self, site_id: str, data: dict) -> Optional[DistractionSite]:
        return self.update(site_id, data)

    def delete_site(self, site_id: str) -> bool:
        return self.delete(site_id)
