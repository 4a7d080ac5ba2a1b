from focushub.data_layer.models.base_model import StoreBaseModel
from focushub.data_layer.models.task_model import Task
from focushub.data_layer.models.event_model import Event
from focushub.data_layer.models.pomodoro_model import PomodoroSession
from focushub.data_layer.models.note_model import Note
from focushub.data_layer.models.water_model import WaterIntake
from focushub.data_layer.models.habit_model import Habit, HabitEntry
from focushub.data_layer.models.distraction_model import DistractionSite
from focushub.data_layer.models.settings_model import UserSettings

__all__ = [
    'StoreBaseModel',
    'Task',
    'Event',
    'PomodoroSession',
    'Note',
    'WaterIntake',
    'Habit',
    'HabitEntry',
    'DistractionSite',
    'UserSettings',
]
