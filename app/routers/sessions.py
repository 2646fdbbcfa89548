from fastapi import APIRouter, Body, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List, Optional

from app.database import get_db
from app.schemas.session import (
    SessionCreate,
    SessionCancel,
    SessionDelete,
    SessionResponse,
    SessionDetailResponse,
    ParticipantResponse,
    MessageResponse,
)
from app.services.auth import get_current_user
from app.services.session_capacity import SessionCapacityManager
from app.services.session_errors import SessionError
from app.services.session_queries import SessionQueryService
from app.models.user import User

router = APIRouter()


@router.get("/", response_model=List[SessionDetailResponse])
def read_sessions(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return SessionQueryService(db).list_sessions()


@router.post(
    "/", response_model=SessionResponse, status_code=status.HTTP_201_CREATED
)
def create_session(
    session: SessionCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        return SessionCapacityManager(db).create(session, current_user)
    except SessionError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/my-created", response_model=List[SessionDetailResponse])
def read_my_created_sessions(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return SessionQueryService(db).list_created_by(current_user.id)


@router.get("/my-joined", response_model=List[SessionDetailResponse])
def read_my_joined_sessions(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return SessionQueryService(db).list_joined_by(current_user.id)


@router.post("/{session_id}/join", response_model=MessageResponse)
def join_session(
    session_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        SessionCapacityManager(db).join(session_id, current_user)
    except SessionError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return {"message": "Successfully joined session"}


@router.delete("/{session_id}/leave", response_model=MessageResponse)
def leave_session(
    session_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    # Leaving a session the user never joined is a no-op
    SessionCapacityManager(db).leave(session_id, current_user)
    return {"message": "Successfully left session"}


@router.put("/{session_id}/cancel", response_model=SessionResponse)
def cancel_session(
    session_id: int,
    payload: Optional[SessionCancel] = Body(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    reason = payload.cancellation_reason if payload else None
    try:
        return SessionCapacityManager(db).cancel(session_id, current_user, reason)
    except SessionError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.delete("/{session_id}", response_model=MessageResponse)
def delete_session(
    session_id: int,
    payload: Optional[SessionDelete] = Body(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Delete a session and expel all of its participants.
    Allowed for the creator and for admins; a deletion reason is required.
    """
    reason = payload.deletion_reason if payload else None
    try:
        SessionCapacityManager(db).delete(session_id, current_user, reason)
    except SessionError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return {"message": "Session deleted successfully"}


@router.get("/{session_id}/participants", response_model=List[ParticipantResponse])
def read_session_participants(
    session_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return SessionQueryService(db).list_participants(session_id)
