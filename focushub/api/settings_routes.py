from fastapi import APIRouter, Depends, HTTPException
from focushub.app.schemas.settings_schemas import UserSettingsUpdate, UserSettingsResponse
from focushub.data_layer.repos.settings_repo import UserSettingsRepository
from focushub.api.dependencies import get_settings_repo
from focushub.utils.auth import get_current_user_id
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/settings", tags=["Settings"])


@router.get("", response_model=UserSettingsResponse)
def get_settings(user_id: str = Depends(get_current_user_id),
                 settings_repo: UserSettingsRepository = Depends(get_settings_repo)):
    """Get user settings, creating defaults on first read"""
    try:
        user_settings = settings_repo.get_user_settings(user_id)
    except Exception as e:
        logger.error(f"Error fetching settings: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to fetch settings")
    return UserSettingsResponse(**user_settings.model_dump())


@router.put("", response_model=UserSettingsResponse)
def update_settings(data: UserSettingsUpdate, user_id: str = Depends(get_current_user_id),
                    settings_repo: UserSettingsRepository = Depends(get_settings_repo)):
    """Update user settings"""
    # Filter out None values to only update provided fields
    update_data = {k: v for k, v in data.model_dump().items() if v is not None}

    if not update_data:
        raise HTTPException(
            status_code=400, detail="No valid settings provided")

    updated_settings = settings_repo.update_settings(user_id, update_data)
    if not updated_settings:
        raise HTTPException(status_code=404, detail="Settings not found")
    logger.info(f"Updated settings for user {user_id}: {sorted(update_data)}")
    return UserSettingsResponse(**updated_settings.model_dump())
