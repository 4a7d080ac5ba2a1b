"""
FastAPI providers for the store, repositories and services.

The store lives on ``app.state`` and is created together with the app, so
every provider below resolves against the application handling the request.
"""
from fastapi import Depends, HTTPException, Query, Request

from focushub.data_layer.memory.store import MemoryStore
from focushub.data_layer.repos.task_repo import TaskRepository
from focushub.data_layer.repos.event_repo import EventRepository
from focushub.data_layer.repos.pomodoro_repo import PomodoroSessionRepository
from focushub.data_layer.repos.note_repo import NoteRepository
from focushub.data_layer.repos.water_repo import WaterIntakeRepository
from focushub.data_layer.repos.habit_repo import HabitRepository, HabitEntryRepository
from focushub.data_layer.repos.distraction_repo import DistractionSiteRepository
from focushub.data_layer.repos.settings_repo import UserSettingsRepository
from focushub.services.analytics.analytics_service import AnalyticsService
from focushub.utils.datetime_utils import today_key
from focushub.utils.validation_utils import validate_date_key


def get_store(request: Request) -> MemoryStore:
    return request.app.state.store


def get_task_repo(store: MemoryStore = Depends(get_store)) -> TaskRepository:
    return TaskRepository(store)


def get_event_repo(store: MemoryStore = Depends(get_store)) -> EventRepository:
    return EventRepository(store)


def get_pomodoro_repo(store: MemoryStore = Depends(get_store)) -> PomodoroSessionRepository:
    return PomodoroSessionRepository(store)


def get_note_repo(store: MemoryStore = Depends(get_store)) -> NoteRepository:
    return NoteRepository(store)


def get_water_repo(store: MemoryStore = Depends(get_store)) -> WaterIntakeRepository:
    return WaterIntakeRepository(store)


def get_habit_repo(store: MemoryStore = Depends(get_store)) -> HabitRepository:
    return HabitRepository(store)


def get_habit_entry_repo(store: MemoryStore = Depends(get_store)) -> HabitEntryRepository:
    return HabitEntryRepository(store)


def get_distraction_repo(store: MemoryStore = Depends(get_store)) -> DistractionSiteRepository:
    return DistractionSiteRepository(store)


def get_settings_repo(store: MemoryStore = Depends(get_store)) -> UserSettingsRepository:
    return UserSettingsRepository(store)


def get_analytics_service(store: MemoryStore = Depends(get_store)) -> AnalyticsService:
    return AnalyticsService(store)


def optional_day(date: str = Query(None, description="YYYY-MM-DD")):
    """Optional ``date`` query parameter, validated but left as given."""
    if date is None:
        return None
    try:
        return validate_date_key(date)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid date format")


def day_or_today(day: str = Depends(optional_day)) -> str:
    """``date`` query parameter, defaulting to today (UTC)."""
    return day or today_key()
