from focushub.services.scoring.scoring_service import (
    ActivityData,
    ScoreMetrics,
    SCORE_WEIGHTS,
    calculate_scores,
    get_score_tier,
    get_score_color,
    get_score_label,
    get_motivational_message,
    iter_productivity_insights,
    generate_productivity_insights,
)

__all__ = [
    'ActivityData',
    'ScoreMetrics',
    'SCORE_WEIGHTS',
    'calculate_scores',
    'get_score_tier',
    'get_score_color',
    'get_score_label',
    'get_motivational_message',
    'iter_productivity_insights',
    'generate_productivity_insights',
]
