from focushub.core.config import settings
import logging

logger = logging.getLogger(__name__)


def get_current_user_id() -> str:
    """Return the mock identity every request runs as.

    There is no authentication model; routes depend on this function so the
    identity source stays in one place.
    """
    user_id = settings.mock_user_id
    logger.debug(f"Resolved request user_id: {user_id}")
    return user_id
