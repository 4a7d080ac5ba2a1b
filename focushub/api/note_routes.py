from fastapi import APIRouter, Depends, HTTPException
from typing import List
from focushub.app.schemas.note_schemas import NoteCreate, NoteUpdate, NoteResponse
from focushub.app.schemas.base_schemas import MessageResponse
from focushub.data_layer.repos.note_repo import NoteRepository
from focushub.data_layer.models.note_model import Note
from focushub.api.dependencies import get_note_repo
from focushub.api.route_utils import get_owned_or_404
from focushub.utils.auth import get_current_user_id
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notes", tags=["Notes"])


@router.get("", response_model=List[NoteResponse])
def list_notes(user_id: str = Depends(get_current_user_id),
               note_repo: NoteRepository = Depends(get_note_repo)):
    try:
        notes = note_repo.find_by_user(user_id)
    except Exception as e:
        logger.error(f"Error fetching notes: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to fetch notes")
    return [NoteResponse(**n.model_dump()) for n in notes]


@router.get("/{note_id}", response_model=NoteResponse)
def get_note(note_id: str, user_id: str = Depends(get_current_user_id),
             note_repo: NoteRepository = Depends(get_note_repo)):
    note = get_owned_or_404(note_repo, note_id, user_id, "Note")
    return NoteResponse(**note.model_dump())


@router.post("", response_model=NoteResponse)
def create_note(note: NoteCreate, user_id: str = Depends(get_current_user_id),
                note_repo: NoteRepository = Depends(get_note_repo)):
    note_data = note.model_dump()
    note_data["user_id"] = user_id
    new_note = Note(**note_data)
    new_note.updated_at = new_note.created_at
    note_id = note_repo.create_note(new_note)
    created = note_repo.find_by_id(note_id)
    if not created:
        raise HTTPException(status_code=500, detail="Note creation failed")
    logger.info(f"Created note {note_id} for user {user_id}")
    return NoteResponse(**created.model_dump())


@router.put("/{note_id}", response_model=NoteResponse)
def update_note(note_id: str, note: NoteUpdate, user_id: str = Depends(get_current_user_id),
                note_repo: NoteRepository = Depends(get_note_repo)):
    get_owned_or_404(note_repo, note_id, user_id, "Note")
    updated = note_repo.update_note(note_id, note.model_dump(exclude_unset=True))
    if not updated:
        raise HTTPException(status_code=404, detail="Note not found")
    return NoteResponse(**updated.model_dump())


@router.delete("/{note_id}", response_model=MessageResponse)
def delete_note(note_id: str, user_id: str = Depends(get_current_user_id),
                note_repo: NoteRepository = Depends(get_note_repo)):
    get_owned_or_404(note_repo, note_id, user_id, "Note")
    if not note_repo.delete_note(note_id):
        raise HTTPException(status_code=404, detail="Note not found")
    logger.info(f"Deleted note {note_id}")
    return MessageResponse(message="Note deleted successfully")
