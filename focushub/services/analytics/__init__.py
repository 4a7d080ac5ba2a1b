from focushub.services.analytics.analytics_service import AnalyticsService

__all__ = [
    'AnalyticsService',
]
