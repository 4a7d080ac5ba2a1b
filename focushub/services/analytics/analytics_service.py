from typing import Dict, Any, Optional
import logging

from focushub.core.config import settings
from focushub.data_layer.memory.store import MemoryStore
from focushub.data_layer.repos.task_repo import TaskRepository
from focushub.data_layer.repos.pomodoro_repo import PomodoroSessionRepository
from focushub.data_layer.repos.water_repo import WaterIntakeRepository
from focushub.data_layer.repos.habit_repo import HabitEntryRepository
from focushub.data_layer.repos.settings_repo import UserSettingsRepository
from focushub.services.scoring.scoring_service import (
    ActivityData,
    POINTS_PER_POMODORO,
    MAX_SCORE,
    calculate_scores,
    get_score_tier,
    get_score_color,
    get_score_label,
    get_motivational_message,
    generate_productivity_insights,
    round_half_up,
)

logger = logging.getLogger(__name__)


class AnalyticsService:
    """Aggregates stored activity for one user and day into scores."""

    def __init__(self, store: MemoryStore):
        self.task_repo = TaskRepository(store)
        self.pomodoro_repo = PomodoroSessionRepository(store)
        self.water_repo = WaterIntakeRepository(store)
        self.habit_entry_repo = HabitEntryRepository(store)
        self.settings_repo = UserSettingsRepository(store)

    def _collect_counts(self, user_id: str, day: str) -> Dict[str, int]:
        """Raw counts shared by the dashboard and the weighted report.

        Tasks are not filtered by day: the whole task list counts.
        """
        tasks = self.task_repo.find_by_user(user_id)
        entries = self.habit_entry_repo.find_by_user(user_id, day)
        user_settings = self.settings_repo.get_user_settings(user_id)
        return {
            "completed_tasks": sum(1 for t in tasks if t.status == "completed"),
            "total_tasks": len(tasks),
            "completed_pomodoros": self.pomodoro_repo.count_completed(user_id, day),
            "water_intake": self.water_repo.total_for_day(user_id, day),
            "water_goal": user_settings.water_daily_goal,
            "completed_habits": sum(1 for e in entries if e.completed),
            "total_habits": len(entries),
        }

    def build_activity_data(self, user_id: str, day: str,
                            blocking_minutes: Optional[int] = None) -> ActivityData:
        counts = self._collect_counts(user_id, day)
        if blocking_minutes is None:
            blocking_minutes = settings.default_blocking_minutes
        return ActivityData(distraction_blocking_minutes=blocking_minutes, **counts)

    def get_dashboard(self, user_id: str, day: str) -> Dict[str, Any]:
        """Today's dashboard summary.

        Uses a plain average of four sub-scores, separate from the weighted
        overall score of the scoring engine. The blocker score is a
        configured constant and does not enter the average.
        """
        counts = self._collect_counts(user_id, day)
        completed, total = counts["completed_tasks"], counts["total_tasks"]
        water_total, water_goal = counts["water_intake"], counts["water_goal"]

        task_score = round_half_up(completed / total * 100) if total > 0 else 0
        pomodoro_score = min(
            counts["completed_pomodoros"] * POINTS_PER_POMODORO, MAX_SCORE)
        water_score = min(round_half_up(water_total / water_goal * 100),
                          MAX_SCORE) if water_goal > 0 else 0
        habit_score = round_half_up(
            counts["completed_habits"] / counts["total_habits"] * 100) if counts["total_habits"] > 0 else 0
        overall = round_half_up(
            (task_score + pomodoro_score + water_score + habit_score) / 4)

        logger.debug(
            f"Dashboard for {user_id} on {day}: overall {overall}")
        return {
            "tasks_completed": f"{completed}/{total}",
            "pomodoros_today": counts["completed_pomodoros"],
            "water_intake": f"{water_total / 1000:.1f}L / {water_goal / 1000:.1f}L",
            "daily_score": f"{overall}/100",
            "scores": {
                "tasks": task_score,
                "pomodoro": pomodoro_score,
                "water": water_score,
                "habits": habit_score,
                "blocker": settings.dashboard_blocker_score,
                "overall": overall,
            },
        }

    def get_weekly(self) -> Dict[str, Any]:
        """Seven-day productivity series; fixed values, not derived from history."""
        return {
            "productivity": list(settings.weekly_productivity),
            "labels": list(settings.weekly_labels),
        }

    def get_daily_report(self, user_id: str, day: str,
                         blocking_minutes: Optional[int] = None) -> Dict[str, Any]:
        """Weighted scores, tier presentation and insights for one day."""
        activity = self.build_activity_data(user_id, day, blocking_minutes)
        scores = calculate_scores(activity)
        overall = scores.overall
        return {
            "date": day,
            "activity": activity,
            "scores": scores,
            "tier": get_score_tier(overall),
            "label": get_score_label(overall),
            "color": get_score_color(overall),
            "message": get_motivational_message(overall),
            "insights": generate_productivity_insights(activity),
        }
