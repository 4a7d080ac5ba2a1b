from fastapi import APIRouter, Depends, HTTPException
from typing import List
from focushub.app.schemas.water_schemas import WaterIntakeCreate, WaterIntakeResponse
from focushub.data_layer.repos.water_repo import WaterIntakeRepository
from focushub.data_layer.models.water_model import WaterIntake
from focushub.api.dependencies import get_water_repo, day_or_today
from focushub.utils.auth import get_current_user_id
from focushub.utils.datetime_utils import today_key
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/water", tags=["Water"])


@router.get("", response_model=List[WaterIntakeResponse])
def list_water_intake(day: str = Depends(day_or_today),
                      user_id: str = Depends(get_current_user_id),
                      water_repo: WaterIntakeRepository = Depends(get_water_repo)):
    try:
        entries = water_repo.find_by_user(user_id, day)
    except Exception as e:
        logger.error(f"Error fetching water intake: {str(e)}")
        raise HTTPException(
            status_code=500, detail="Failed to fetch water intake")
    return [WaterIntakeResponse(**i.model_dump()) for i in entries]


@router.post("", response_model=WaterIntakeResponse)
def add_water_intake(data: WaterIntakeCreate, user_id: str = Depends(get_current_user_id),
                     water_repo: WaterIntakeRepository = Depends(get_water_repo)):
    intake = WaterIntake(user_id=user_id, amount=data.amount,
                         date=data.date or today_key())
    intake_id = water_repo.add_intake(intake)
    created = water_repo.find_by_id(intake_id)
    if not created:
        raise HTTPException(
            status_code=500, detail="Failed to record water intake")
    logger.info(
        f"Recorded {created.amount}ml of water on {created.date} for user {user_id}")
    return WaterIntakeResponse(**created.model_dump())
