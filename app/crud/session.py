from sqlalchemy.orm import Session
from typing import Optional

from app.models.session import SportSession
from app.models.session_participant import SessionParticipant


def get_session_for_update(db: Session, session_id: int) -> Optional[SportSession]:
    """
    Fetch the session and lock its row until commit or rollback.
    Serializes concurrent joins on the same session.
    """
    return (
        db.query(SportSession)
        .filter(SportSession.id == session_id)
        .populate_existing()
        .with_for_update(nowait=False)
        .first()
    )


def get_participant(
    db: Session, session_id: int, user_id: int
) -> Optional[SessionParticipant]:
    return (
        db.query(SessionParticipant)
        .filter(
            SessionParticipant.session_id == session_id,
            SessionParticipant.user_id == user_id,
        )
        .first()
    )
