from focushub.data_layer.repos.base_repo import BaseMemoryRepository, InvalidUpdateError
from focushub.data_layer.repos.task_repo import TaskRepository
from focushub.data_layer.repos.event_repo import EventRepository
from focushub.data_layer.repos.pomodoro_repo import PomodoroSessionRepository
from focushub.data_layer.repos.note_repo import NoteRepository
from focushub.data_layer.repos.water_repo import WaterIntakeRepository
from focushub.data_layer.repos.habit_repo import HabitRepository, HabitEntryRepository
from focushub.data_layer.repos.distraction_repo import DistractionSiteRepository
from focushub.data_layer.repos.settings_repo import UserSettingsRepository


__all__ = [
    'BaseMemoryRepository',
    'InvalidUpdateError',
    'TaskRepository',
    'EventRepository',
    'PomodoroSessionRepository',
    'NoteRepository',
    'WaterIntakeRepository',
    'HabitRepository',
    'HabitEntryRepository',
    'DistractionSiteRepository',
    'UserSettingsRepository',
]
