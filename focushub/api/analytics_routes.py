from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Optional
from focushub.app.schemas.analytics_schemas import DashboardResponse, WeeklyResponse, DailyScoreReport
from focushub.services.analytics.analytics_service import AnalyticsService
from focushub.api.dependencies import get_analytics_service, day_or_today
from focushub.utils.auth import get_current_user_id
from focushub.utils.datetime_utils import today_key
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/analytics", tags=["Analytics"])


@router.get("/dashboard", response_model=DashboardResponse)
def get_dashboard(user_id: str = Depends(get_current_user_id),
                  analytics: AnalyticsService = Depends(get_analytics_service)):
    """Today's summary with the simple-average daily score"""
    try:
        return analytics.get_dashboard(user_id, today_key())
    except Exception as e:
        logger.error(f"Error building dashboard analytics: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to fetch analytics")


@router.get("/weekly", response_model=WeeklyResponse)
def get_weekly(analytics: AnalyticsService = Depends(get_analytics_service)):
    try:
        return analytics.get_weekly()
    except Exception as e:
        logger.error(f"Error building weekly analytics: {str(e)}")
        raise HTTPException(
            status_code=500, detail="Failed to fetch weekly analytics")


@router.get("/scores", response_model=DailyScoreReport)
def get_daily_scores(day: str = Depends(day_or_today),
                     blocking_minutes: Optional[int] = Query(
                         None, ge=0, alias="blockingMinutes"),
                     user_id: str = Depends(get_current_user_id),
                     analytics: AnalyticsService = Depends(get_analytics_service)):
    """Weighted productivity scores, label and insights for one day"""
    try:
        return analytics.get_daily_report(user_id, day, blocking_minutes)
    except Exception as e:
        logger.error(f"Error building daily scores: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to fetch scores")
