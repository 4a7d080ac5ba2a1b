from typing import Any, Dict, List
import logging

logger = logging.getLogger(__name__)

# Collections created up front; others are created lazily on first access
DEFAULT_COLLECTIONS = [
    "tasks",
    "events",
    "pomodoro_sessions",
    "notes",
    "water_intake",
    "habits",
    "habit_entries",
    "distraction_sites",
    "user_settings",
]

Collection = Dict[str, Dict[str, Any]]


class MemoryStore:
    """Process-local document store: one ``id -> document`` map per collection.

    A single instance is built when the application is created and handed to
    request handlers through dependencies. Documents are plain dicts; the
    repositories own the conversion to and from record models.
    """

    def __init__(self, collections: List[str] = None):
        self._collections: Dict[str, Collection] = {}
        for name in collections or DEFAULT_COLLECTIONS:
            self._collections[name] = {}
        logger.info(
            f"Initialized in-memory store with collections: {self.collection_names()}")

    def get_collection(self, name: str) -> Collection:
        """Get a collection by name, creating it if it does not exist."""
        if name not in self._collections:
            logger.info(f"Creating collection: {name}")
            self._collections[name] = {}
        return self._collections[name]

    def collection_names(self) -> List[str]:
        return list(self._collections.keys())

    def stats(self) -> Dict[str, int]:
        """Document count per collection."""
        return {name: len(docs) for name, docs in self._collections.items()}

    def reset(self) -> None:
        """Drop every document, keeping the collections."""
        for docs in self._collections.values():
            docs.clear()
        logger.info("In-memory store reset")
