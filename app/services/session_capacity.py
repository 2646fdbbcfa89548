"""
Session capacity manager.

Every mutation of a session's membership runs as one transaction on the
injected database session, so `current_participants` always matches the
number of rows in `session_participants` once the transaction ends.
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.crud import session as session_crud
from app.crud import sport as sport_crud
from app.models.session import SportSession, SessionStatus
from app.models.session_participant import SessionParticipant
from app.models.user import User
from app.schemas.session import SessionCreate
from app.services.session_errors import (
    SessionError,
    NotFound,
    InvalidOperation,
    CapacityExceeded,
    DuplicateMembership,
    NotAuthorized,
)
from app.utils.permissions import can_manage, is_admin

logger = logging.getLogger(__name__)

REQUIRED_SESSION_FIELDS = (
    "sport_id",
    "title",
    "venue",
    "date",
    "time",
    "team_a",
    "team_b",
    "max_participants",
)


class SessionCapacityManager:
    """Create, join, leave, cancel and delete sessions"""

    def __init__(self, db: Session, clock: Callable[[], datetime] = datetime.now):
        self.db = db
        self.clock = clock

    def create(self, data: SessionCreate, user: User) -> SportSession:
        for field in REQUIRED_SESSION_FIELDS:
            value = getattr(data, field)
            if value is None or (isinstance(value, str) and not value.strip()):
                raise InvalidOperation("All required fields must be provided")

        if data.max_participants <= 0:
            raise InvalidOperation("max_participants must be a positive integer")

        if not sport_crud.get_sport(self.db, data.sport_id):
            raise InvalidOperation("Sport not found")

        db_session = SportSession(
            sport_id=data.sport_id,
            title=data.title,
            description=data.description or "",
            venue=data.venue,
            date=data.date,
            time=data.time,
            team_a=data.team_a,
            team_b=data.team_b,
            max_participants=data.max_participants,
            current_participants=0,
            created_by=user.id,
            status=SessionStatus.ACTIVE,
        )
        try:
            self.db.add(db_session)
            self.db.commit()
        except Exception:
            self.db.rollback()
            logger.exception("Error creating session | user=%s", user.id)
            raise

        self.db.refresh(db_session)
        logger.info("Session %s created by user %s", db_session.id, user.id)
        return db_session

    def join(self, session_id: int, user: User) -> None:
        try:
            # Row lock held until commit/rollback
            session = session_crud.get_session_for_update(self.db, session_id)

            if (
                not session
                or session.status != SessionStatus.ACTIVE
                or session.starts_at <= self.clock()
            ):
                raise NotFound("Session not found, inactive, or already in the past")

            if session.created_by == user.id and not is_admin(user):
                raise InvalidOperation("You cannot join your own session")

            if session.current_participants >= session.max_participants:
                raise CapacityExceeded()

            if session_crud.get_participant(self.db, session_id, user.id):
                raise DuplicateMembership()

            # Guarded increment: re-checks the bound at write time
            claimed = (
                self.db.query(SportSession)
                .filter(
                    SportSession.id == session_id,
                    SportSession.current_participants
                    < SportSession.max_participants,
                )
                .update(
                    {
                        SportSession.current_participants: SportSession.current_participants
                        + 1
                    },
                    synchronize_session=False,
                )
            )
            if not claimed:
                raise CapacityExceeded()

            self.db.add(SessionParticipant(session_id=session_id, user_id=user.id))
            try:
                self.db.flush()
            except IntegrityError:
                raise DuplicateMembership()

            self.db.commit()
        except SessionError as e:
            self.db.rollback()
            logger.warning(
                "Join rejected | session=%s | user=%s | reason=%s",
                session_id,
                user.id,
                e.message,
            )
            raise
        except Exception:
            self.db.rollback()
            logger.exception("Error joining session %s | user=%s", session_id, user.id)
            raise

        logger.info("User %s joined session %s", user.id, session_id)

    def leave(self, session_id: int, user: User) -> bool:
        """
        Remove the user's membership and release its slot.

        Returns False when the user was not a member; the counter is only
        decremented when a membership row was actually deleted.
        """
        try:
            removed = (
                self.db.query(SessionParticipant)
                .filter(
                    SessionParticipant.session_id == session_id,
                    SessionParticipant.user_id == user.id,
                )
                .delete(synchronize_session=False)
            )

            if removed:
                self.db.query(SportSession).filter(
                    SportSession.id == session_id,
                    SportSession.current_participants > 0,
                ).update(
                    {
                        SportSession.current_participants: SportSession.current_participants
                        - 1
                    },
                    synchronize_session=False,
                )

            self.db.commit()
        except Exception:
            self.db.rollback()
            logger.exception("Error leaving session %s | user=%s", session_id, user.id)
            raise

        if removed:
            logger.info("User %s left session %s", user.id, session_id)
        else:
            logger.info(
                "User %s left session %s without being a member", user.id, session_id
            )
        return bool(removed)

    def cancel(
        self, session_id: int, user: User, reason: Optional[str]
    ) -> SportSession:
        if not reason:
            raise InvalidOperation("Cancellation reason is required")

        try:
            session = session_crud.get_session_for_update(self.db, session_id)

            # Missing and foreign sessions look the same to the caller
            if not session or session.created_by != user.id:
                raise NotFound("Session not found or not authorized")

            session.status = SessionStatus.CANCELLED
            session.cancellation_reason = reason
            self.db.commit()
        except SessionError as e:
            self.db.rollback()
            logger.warning(
                "Cancel rejected | session=%s | user=%s | reason=%s",
                session_id,
                user.id,
                e.message,
            )
            raise
        except Exception:
            self.db.rollback()
            logger.exception(
                "Error cancelling session %s | user=%s", session_id, user.id
            )
            raise

        self.db.refresh(session)
        logger.info(
            "Session %s cancelled by user %s: %s", session_id, user.id, reason
        )
        return session

    def delete(self, session_id: int, user: User, reason: Optional[str]) -> int:
        """
        Hard-delete a session together with its memberships.

        The reason is only written to the log. Returns the number of
        participants expelled.
        """
        if not reason or not reason.strip():
            raise InvalidOperation("Deletion reason is required")

        try:
            session = session_crud.get_session_for_update(self.db, session_id)
            if not session:
                raise NotFound()

            if not can_manage(session, user):
                raise NotAuthorized("Not authorized to delete this session")

            expelled = (
                self.db.query(SessionParticipant)
                .filter(SessionParticipant.session_id == session_id)
                .delete(synchronize_session=False)
            )
            self.db.query(SportSession).filter(SportSession.id == session_id).delete(
                synchronize_session=False
            )
            self.db.commit()
        except SessionError as e:
            self.db.rollback()
            logger.warning(
                "Delete rejected | session=%s | user=%s | reason=%s",
                session_id,
                user.id,
                e.message,
            )
            raise
        except Exception:
            self.db.rollback()
            logger.exception("Error deleting session %s | user=%s", session_id, user.id)
            raise

        logger.info(
            "Session deleted | session=%s | by=%s | role=%s | participants_removed=%s | reason=%s",
            session_id,
            user.id,
            user.role.value,
            expelled,
            reason.strip(),
        )
        return expelled
