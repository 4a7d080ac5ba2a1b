from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


def get_owned_or_404(repo, record_id: str, user_id: str, entity: str):
    """Load a record owned by ``user_id`` or raise a 404 naming ``entity``."""
    existing = repo.find_by_id(record_id)
    if not existing or existing.user_id != user_id:
        logger.warning(f"{entity} {record_id} not found for user {user_id}")
        raise HTTPException(status_code=404, detail=f"{entity} not found")
    return existing
