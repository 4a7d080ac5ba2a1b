"""
Productivity scoring: turns one day of activity counts into 0-100 sub-scores,
a weighted overall score, tier labels and textual insights.

All functions here are pure; the analytics service gathers the counts.
"""
from typing import Iterator, List
import math
import logging

from pydantic import Field

from focushub.app.schemas.base_schemas import CamelModel

logger = logging.getLogger(__name__)

# Overall score weights, must sum to 1.0
SCORE_WEIGHTS = {
    "tasks": 0.30,
    "pomodoro": 0.25,
    "water": 0.15,
    "habits": 0.20,
    "focus": 0.10,
}

POINTS_PER_POMODORO = 12
BLOCKING_MINUTES_PER_POINT = 10
MAX_SCORE = 100

# Lower bounds of each tier, highest first
TIER_THRESHOLDS = [
    (90, "excellent"),
    (75, "good"),
    (60, "average"),
    (40, "below-average"),
]
LOWEST_TIER = "needs-improvement"

TIER_LABELS = {
    "excellent": "Excellent",
    "good": "Good",
    "average": "Average",
    "below-average": "Below Average",
    "needs-improvement": "Needs Improvement",
}

TIER_COLORS = {
    "excellent": "text-green-600 dark:text-green-400",
    "good": "text-blue-600 dark:text-blue-400",
    "average": "text-yellow-600 dark:text-yellow-400",
    "below-average": "text-orange-600 dark:text-orange-400",
    "needs-improvement": "text-red-600 dark:text-red-400",
}

TIER_MESSAGES = {
    "excellent": "Outstanding work! You're crushing your productivity goals! 🚀",
    "good": "Great job! You're making excellent progress! 💪",
    "average": "Good effort! Keep pushing to reach your potential! 📈",
    "below-average": "You're on the right track, let's boost that productivity! 💡",
    "needs-improvement": "Every small step counts. Let's build momentum together! 🌱",
}

INSIGHT_TASKS_GOOD = "You have excellent task completion rates! 🎯"
INSIGHT_TASKS_LOW = "Consider breaking down larger tasks into smaller, manageable chunks."
INSIGHT_POMODORO_GOOD = "Your focus sessions are on point! Great time management! ⏰"
INSIGHT_POMODORO_LOW = "Try incorporating more focused work sessions with the Pomodoro technique."
INSIGHT_WATER_GOOD = "Excellent hydration! Your body and mind thank you! 💧"
INSIGHT_WATER_LOW = "Remember to stay hydrated for optimal cognitive performance."
INSIGHT_HABITS_GOOD = "Your habit consistency is impressive! Building strong routines! 🔄"


class ActivityData(CamelModel):
    completed_tasks: int = Field(0, ge=0)
    total_tasks: int = Field(0, ge=0)
    completed_pomodoros: int = Field(0, ge=0)
    water_intake: int = Field(0, ge=0, description="ml consumed")
    water_goal: int = Field(0, ge=0, description="ml target")
    completed_habits: int = Field(0, ge=0)
    total_habits: int = Field(0, ge=0)
    distraction_blocking_minutes: int = Field(0, ge=0)


class ScoreMetrics(CamelModel):
    tasks: int
    pomodoro: int
    water: int
    habits: int
    focus: int
    overall: int


def round_half_up(value: float) -> int:
    """Round halves upwards (2.5 -> 3), unlike the built-in banker's round."""
    return int(math.floor(value + 0.5))


def _percentage(part: int, whole: int) -> int:
    if whole <= 0:
        return 0
    return round_half_up(part / whole * 100)


def calculate_scores(data: ActivityData) -> ScoreMetrics:
    """Compute the five sub-scores and the weighted overall score."""
    tasks = _percentage(data.completed_tasks, data.total_tasks)
    pomodoro = min(data.completed_pomodoros * POINTS_PER_POMODORO, MAX_SCORE)
    water = min(_percentage(data.water_intake, data.water_goal), MAX_SCORE)
    habits = _percentage(data.completed_habits, data.total_habits)
    focus = min(round_half_up(
        data.distraction_blocking_minutes / BLOCKING_MINUTES_PER_POINT), MAX_SCORE)

    overall = round_half_up(
        tasks * SCORE_WEIGHTS["tasks"]
        + pomodoro * SCORE_WEIGHTS["pomodoro"]
        + water * SCORE_WEIGHTS["water"]
        + habits * SCORE_WEIGHTS["habits"]
        + focus * SCORE_WEIGHTS["focus"]
    )

    return ScoreMetrics(
        tasks=tasks,
        pomodoro=pomodoro,
        water=water,
        habits=habits,
        focus=focus,
        overall=overall,
    )


def get_score_tier(score: int) -> str:
    for threshold, tier in TIER_THRESHOLDS:
        if score >= threshold:
            return tier
    return LOWEST_TIER


def get_score_color(score: int) -> str:
    return TIER_COLORS[get_score_tier(score)]


def get_score_label(score: int) -> str:
    return TIER_LABELS[get_score_tier(score)]


def get_motivational_message(score: int) -> str:
    return TIER_MESSAGES[get_score_tier(score)]


def iter_productivity_insights(data: ActivityData) -> Iterator[str]:
    """Yield insights lazily, in fixed order, one per triggered condition.

    Task and habit ratios with a zero denominator mean there is not enough
    data, so those groups yield nothing.
    """
    if data.total_tasks > 0:
        task_ratio = data.completed_tasks / data.total_tasks
        if task_ratio > 0.8:
            yield INSIGHT_TASKS_GOOD
        elif task_ratio < 0.5:
            yield INSIGHT_TASKS_LOW

    if data.completed_pomodoros >= 6:
        yield INSIGHT_POMODORO_GOOD
    elif data.completed_pomodoros < 3:
        yield INSIGHT_POMODORO_LOW

    if data.water_intake >= data.water_goal * 0.9:
        yield INSIGHT_WATER_GOOD
    elif data.water_intake < data.water_goal * 0.6:
        yield INSIGHT_WATER_LOW

    if data.total_habits > 0 and data.completed_habits / data.total_habits > 0.8:
        yield INSIGHT_HABITS_GOOD


def generate_productivity_insights(data: ActivityData) -> List[str]:
    insights = list(iter_productivity_insights(data))
    logger.debug(f"Generated {len(insights)} productivity insights")
    return insights
