from typing import List
from .base_schemas import CamelModel
from focushub.services.scoring.scoring_service import ActivityData, ScoreMetrics


class DashboardScores(CamelModel):
    tasks: int
    pomodoro: int
    water: int
    habits: int
    blocker: int
    overall: int


class DashboardResponse(CamelModel):
    tasks_completed: str
    pomodoros_today: int
    water_intake: str
    daily_score: str
    scores: DashboardScores


class WeeklyResponse(CamelModel):
    productivity: List[int]
    labels: List[str]


class DailyScoreReport(CamelModel):
    date: str
    activity: ActivityData
    scores: ScoreMetrics
    tier: str
    label: str
    color: str
    message: str
    insights: List[str]
