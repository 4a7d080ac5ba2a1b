from fastapi import APIRouter, Depends, HTTPException
from typing import List, Optional
from focushub.app.schemas.pomodoro_schemas import (
    PomodoroSessionCreate, PomodoroSessionUpdate, PomodoroSessionResponse)
from focushub.data_layer.repos.pomodoro_repo import PomodoroSessionRepository
from focushub.data_layer.models.pomodoro_model import PomodoroSession
from focushub.api.dependencies import get_pomodoro_repo, optional_day
from focushub.api.route_utils import get_owned_or_404
from focushub.utils.auth import get_current_user_id
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pomodoro", tags=["Pomodoro"])


@router.get("/sessions", response_model=List[PomodoroSessionResponse])
def list_sessions(day: Optional[str] = Depends(optional_day),
                  user_id: str = Depends(get_current_user_id),
                  repo: PomodoroSessionRepository = Depends(get_pomodoro_repo)):
    try:
        sessions = repo.find_by_user(user_id, day)
    except Exception as e:
        logger.error(f"Error fetching pomodoro sessions: {str(e)}")
        raise HTTPException(
            status_code=500, detail="Failed to fetch pomodoro sessions")
    return [PomodoroSessionResponse(**s.model_dump()) for s in sessions]


@router.post("/sessions", response_model=PomodoroSessionResponse)
def start_session(data: PomodoroSessionCreate, user_id: str = Depends(get_current_user_id),
                  repo: PomodoroSessionRepository = Depends(get_pomodoro_repo)):
    # start_time is assigned by the server when the session starts
    session_obj = PomodoroSession(user_id=user_id, **data.model_dump())
    session_id = repo.create_session(session_obj)
    session = repo.find_by_id(session_id)
    if not session:
        raise HTTPException(
            status_code=500, detail="Failed to create pomodoro session")
    logger.info(
        f"Started {session.type} session {session_id} ({session.duration} min) for user {user_id}")
    return PomodoroSessionResponse(**session.model_dump())


@router.put("/sessions/{session_id}", response_model=PomodoroSessionResponse)
def update_session(session_id: str, data: PomodoroSessionUpdate,
                   user_id: str = Depends(get_current_user_id),
                   repo: PomodoroSessionRepository = Depends(get_pomodoro_repo)):
    get_owned_or_404(repo, session_id, user_id, "Session")
    updated = repo.update_session(session_id, data.model_dump(exclude_unset=True))
    if not updated:
        raise HTTPException(status_code=404, detail="Session not found")
    if updated.completed:
        logger.info(f"Pomodoro session {session_id} completed")
    return PomodoroSessionResponse(**updated.model_dump())
