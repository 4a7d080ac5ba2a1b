from focushub.data_layer.models.settings_model import UserSettings
from focushub.data_layer.memory.store import MemoryStore
from .base_repo import BaseMemoryRepository
import logging

logger = logging.getLogger(__name__)


class UserSettingsRepository(BaseMemoryRepository[UserSettings]):
    def __init__(self, store: MemoryStore):
        super().__init__(store, UserSettings)

    def get_user_settings(self, user_id: str) -> UserSettings:
        """Get a user's settings, creating default settings if none exist"""
        settings = self.find_one({"user_id": user_id})
        if not settings:
            logger.info(f"Creating default settings for user {user_id}")
            settings = UserSettings(user_id=user_id)
            self.insert(settings)
        return settings

    def update_settings(self, user_id: str, settings_data: dict) -> UserSettings:
        """Update a user's settings, creating them first if needed"""
        settings = self.get_user_settings(user_id)
        return self.update(settings.id, settings_data)
