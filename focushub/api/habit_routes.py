from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List
from focushub.app.schemas.habit_schemas import (
    HabitCreate, HabitUpdate, HabitResponse,
    HabitEntryCreate, HabitEntryUpdate, HabitEntryResponse)
from focushub.app.schemas.base_schemas import MessageResponse
from focushub.data_layer.repos.habit_repo import HabitRepository, HabitEntryRepository
from focushub.data_layer.models.habit_model import Habit, HabitEntry
from focushub.api.dependencies import get_habit_repo, get_habit_entry_repo, day_or_today
from focushub.api.route_utils import get_owned_or_404
from focushub.utils.auth import get_current_user_id
from focushub.utils.datetime_utils import today_key
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/habits", tags=["Habits"])


@router.get("", response_model=List[HabitResponse])
def list_habits(active: bool = Query(False, description="Only habits that are still tracked"),
                user_id: str = Depends(get_current_user_id),
                habit_repo: HabitRepository = Depends(get_habit_repo)):
    try:
        if active:
            habits = habit_repo.find_active(user_id)
        else:
            habits = habit_repo.find_by_user(user_id)
    except Exception as e:
        logger.error(f"Error fetching habits: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to fetch habits")
    return [HabitResponse(**h.model_dump()) for h in habits]


@router.post("", response_model=HabitResponse)
def create_habit(habit: HabitCreate, user_id: str = Depends(get_current_user_id),
                 habit_repo: HabitRepository = Depends(get_habit_repo)):
    habit_data = habit.model_dump()
    habit_data["user_id"] = user_id
    habit_id = habit_repo.create_habit(Habit(**habit_data))
    created = habit_repo.find_by_id(habit_id)
    if not created:
        raise HTTPException(status_code=500, detail="Habit creation failed")
    logger.info(f"Created habit {habit_id} for user {user_id}")
    return HabitResponse(**created.model_dump())


# Entry routes are registered before /{habit_id} so "entries" is not read as an id

@router.get("/entries", response_model=List[HabitEntryResponse])
def list_habit_entries(day: str = Depends(day_or_today),
                       user_id: str = Depends(get_current_user_id),
                       entry_repo: HabitEntryRepository = Depends(get_habit_entry_repo)):
    try:
        entries = entry_repo.find_by_user(user_id, day)
    except Exception as e:
        logger.error(f"Error fetching habit entries: {str(e)}")
        raise HTTPException(
            status_code=500, detail="Failed to fetch habit entries")
    return [HabitEntryResponse(**e.model_dump()) for e in entries]


@router.post("/entries", response_model=HabitEntryResponse)
def record_habit_entry(data: HabitEntryCreate, user_id: str = Depends(get_current_user_id),
                       habit_repo: HabitRepository = Depends(get_habit_repo),
                       entry_repo: HabitEntryRepository = Depends(get_habit_entry_repo)):
    get_owned_or_404(habit_repo, data.habit_id, user_id, "Habit")
    entry = HabitEntry(
        user_id=user_id,
        habit_id=data.habit_id,
        date=data.date or today_key(),
        completed=data.completed,
        count=data.count,
    )
    # Only fields the client sent overwrite an existing entry for the day
    fields = data.model_fields_set & {"completed", "count"}
    saved = entry_repo.upsert_entry(entry, fields=fields)
    if not saved:
        raise HTTPException(
            status_code=500, detail="Failed to record habit entry")
    return HabitEntryResponse(**saved.model_dump())


@router.put("/entries/{entry_id}", response_model=HabitEntryResponse)
def update_habit_entry(entry_id: str, data: HabitEntryUpdate,
                       user_id: str = Depends(get_current_user_id),
                       entry_repo: HabitEntryRepository = Depends(get_habit_entry_repo)):
    get_owned_or_404(entry_repo, entry_id, user_id, "Habit entry")
    updated = entry_repo.update_entry(entry_id, data.model_dump(exclude_unset=True))
    if not updated:
        raise HTTPException(status_code=404, detail="Habit entry not found")
    return HabitEntryResponse(**updated.model_dump())


@router.get("/{habit_id}", response_model=HabitResponse)
def get_habit(habit_id: str, user_id: str = Depends(get_current_user_id),
              habit_repo: HabitRepository = Depends(get_habit_repo)):
    habit = get_owned_or_404(habit_repo, habit_id, user_id, "Habit")
    return HabitResponse(**habit.model_dump())


@router.put("/{habit_id}", response_model=HabitResponse)
def update_habit(habit_id: str, habit: HabitUpdate, user_id: str = Depends(get_current_user_id),
                 habit_repo: HabitRepository = Depends(get_habit_repo)):
    get_owned_or_404(habit_repo, habit_id, user_id, "Habit")
    updated = habit_repo.update_habit(habit_id, habit.model_dump(exclude_unset=True))
    if not updated:
        raise HTTPException(status_code=404, detail="Habit not found")
    return HabitResponse(**updated.model_dump())


@router.delete("/{habit_id}", response_model=MessageResponse)
def delete_habit(habit_id: str, user_id: str = Depends(get_current_user_id),
                 habit_repo: HabitRepository = Depends(get_habit_repo)):
    get_owned_or_404(habit_repo, habit_id, user_id, "Habit")
    if not habit_repo.delete_habit(habit_id):
        raise HTTPException(status_code=404, detail="Habit not found")
    logger.info(f"Deleted habit {habit_id}")
    return MessageResponse(message="Habit deleted successfully")
