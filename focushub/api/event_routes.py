from fastapi import APIRouter, Depends, HTTPException
from typing import List
from focushub.app.schemas.event_schemas import EventCreate, EventUpdate, EventResponse
from focushub.app.schemas.base_schemas import MessageResponse
from focushub.data_layer.repos.event_repo import EventRepository
from focushub.data_layer.models.event_model import Event
from focushub.api.dependencies import get_event_repo
from focushub.api.route_utils import get_owned_or_404
from focushub.utils.auth import get_current_user_id
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/events", tags=["Events"])


@router.get("", response_model=List[EventResponse])
def list_events(user_id: str = Depends(get_current_user_id),
                event_repo: EventRepository = Depends(get_event_repo)):
    try:
        events = event_repo.find_by_user(user_id)
    except Exception as e:
        logger.error(f"Error fetching events: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to fetch events")
    return [EventResponse(**e.model_dump()) for e in events]


@router.get("/{event_id}", response_model=EventResponse)
def get_event(event_id: str, user_id: str = Depends(get_current_user_id),
              event_repo: EventRepository = Depends(get_event_repo)):
    event = get_owned_or_404(event_repo, event_id, user_id, "Event")
    return EventResponse(**event.model_dump())


@router.post("", response_model=EventResponse)
def create_event(event: EventCreate, user_id: str = Depends(get_current_user_id),
                 event_repo: EventRepository = Depends(get_event_repo)):
    event_data = event.model_dump()
    event_data["user_id"] = user_id
    event_id = event_repo.create_event(Event(**event_data))
    created = event_repo.find_by_id(event_id)
    if not created:
        raise HTTPException(status_code=500, detail="Event creation failed")
    logger.info(f"Created event {event_id} for user {user_id}")
    return EventResponse(**created.model_dump())


@router.put("/{event_id}", response_model=EventResponse)
def update_event(event_id: str, event: EventUpdate, user_id: str = Depends(get_current_user_id),
                 event_repo: EventRepository = Depends(get_event_repo)):
    get_owned_or_404(event_repo, event_id, user_id, "Event")
    updated = event_repo.update_event(event_id, event.model_dump(exclude_unset=True))
    if not updated:
        raise HTTPException(status_code=404, detail="Event not found")
    return EventResponse(**updated.model_dump())


@router.delete("/{event_id}", response_model=MessageResponse)
def delete_event(event_id: str, user_id: str = Depends(get_current_user_id),
                 event_repo: EventRepository = Depends(get_event_repo)):
    get_owned_or_404(event_repo, event_id, user_id, "Event")
    if not event_repo.delete_event(event_id):
        raise HTTPException(status_code=404, detail="Event not found")
    logger.info(f"Deleted event {event_id}")
    return MessageResponse(message="Event deleted successfully")
