"""
Read side of sessions: listings, per-user views and admin reports.
"""

from datetime import datetime, date
from typing import Callable, List, Optional

from sqlalchemy import and_, case, func, or_
from sqlalchemy.orm import Session, joinedload, selectinload

from app.models.session import SportSession, SessionStatus
from app.models.session_participant import SessionParticipant
from app.models.sport import Sport
from app.models.user import User


def session_to_dict(session: SportSession) -> dict:
    return {
        column.name: getattr(session, column.name)
        for column in SportSession.__table__.columns
    }


class SessionQueryService:
    def __init__(self, db: Session, clock: Callable[[], datetime] = datetime.now):
        self.db = db
        self.clock = clock

    def list_sessions(self) -> List[dict]:
        """All sessions with sport, creator and participant names"""
        sessions = (
            self.db.query(SportSession)
            .options(
                joinedload(SportSession.sport),
                joinedload(SportSession.creator),
                selectinload(SportSession.participants).joinedload(
                    SessionParticipant.user
                ),
            )
            .order_by(SportSession.date.asc(), SportSession.time.asc())
            .all()
        )

        result = []
        for session in sessions:
            data = session_to_dict(session)
            data["sport_name"] = session.sport.name
            data["created_by_name"] = session.creator.name
            data["participants"] = sorted(p.user.name for p in session.participants)
            result.append(data)
        return result

    def list_created_by(self, user_id: int) -> List[dict]:
        rows = (
            self.db.query(SportSession, Sport.name)
            .join(Sport, SportSession.sport_id == Sport.id)
            .filter(SportSession.created_by == user_id)
            .order_by(SportSession.date.asc(), SportSession.time.asc())
            .all()
        )
        return [dict(session_to_dict(session), sport_name=name) for session, name in rows]

    def list_joined_by(self, user_id: int) -> List[dict]:
        rows = (
            self.db.query(SportSession, Sport.name, User.name)
            .join(Sport, SportSession.sport_id == Sport.id)
            .join(User, SportSession.created_by == User.id)
            .join(SessionParticipant, SessionParticipant.session_id == SportSession.id)
            .filter(SessionParticipant.user_id == user_id)
            .order_by(SportSession.date.asc(), SportSession.time.asc())
            .all()
        )
        return [
            dict(
                session_to_dict(session),
                sport_name=sport_name,
                created_by_name=creator_name,
            )
            for session, sport_name, creator_name in rows
        ]

    def list_participants(self, session_id: int) -> List[dict]:
        rows = (
            self.db.query(User.id, User.name, User.email)
            .join(SessionParticipant, SessionParticipant.user_id == User.id)
            .filter(SessionParticipant.session_id == session_id)
            .order_by(User.name.asc())
            .all()
        )
        return [{"id": row.id, "name": row.name, "email": row.email} for row in rows]

    def _date_filters(
        self, start_date: Optional[date], end_date: Optional[date]
    ) -> list:
        filters = []
        if start_date:
            filters.append(SportSession.date >= start_date)
        if end_date:
            filters.append(SportSession.date <= end_date)
        return filters

    def _is_past(self):
        now = self.clock()
        return or_(
            SportSession.date < now.date(),
            and_(SportSession.date == now.date(), SportSession.time <= now.time()),
        )

    def stats(
        self, start_date: Optional[date] = None, end_date: Optional[date] = None
    ) -> dict:
        filters = self._date_filters(start_date, end_date)
        is_past = self._is_past()
        is_active = SportSession.status == SessionStatus.ACTIVE

        session_stats = (
            self.db.query(
                func.count(SportSession.id).label("total_sessions"),
                func.count(case((and_(is_active, is_past), 1))).label(
                    "completed_sessions"
                ),
                func.count(
                    case((SportSession.status == SessionStatus.CANCELLED, 1))
                ).label("cancelled_sessions"),
                func.count(case((and_(is_active, ~is_past), 1))).label(
                    "upcoming_sessions"
                ),
            )
            .filter(*filters)
            .one()
        )

        total_participants = (
            self.db.query(func.count(SessionParticipant.id))
            .join(SportSession, SessionParticipant.session_id == SportSession.id)
            .filter(*filters)
            .scalar()
        )
        total_sports = self.db.query(func.count(Sport.id)).scalar()

        return {
            "total_sessions": session_stats.total_sessions or 0,
            "completed_sessions": session_stats.completed_sessions or 0,
            "cancelled_sessions": session_stats.cancelled_sessions or 0,
            "upcoming_sessions": session_stats.upcoming_sessions or 0,
            "total_participants": total_participants or 0,
            "total_sports": total_sports or 0,
        }

    def sport_popularity(
        self, start_date: Optional[date] = None, end_date: Optional[date] = None
    ) -> List[dict]:
        """Sessions per sport, sports without sessions included"""
        filters = self._date_filters(start_date, end_date)
        session_count = func.count(SportSession.id).label("count")

        rows = (
            self.db.query(Sport.name, session_count)
            .outerjoin(SportSession, and_(SportSession.sport_id == Sport.id, *filters))
            .group_by(Sport.id, Sport.name)
            .order_by(session_count.desc(), Sport.name.asc())
            .all()
        )
        return [{"name": name, "count": count} for name, count in rows]

    def sessions_by_date(
        self, start_date: Optional[date] = None, end_date: Optional[date] = None
    ) -> List[dict]:
        filters = self._date_filters(start_date, end_date)
        session_count = func.count(SportSession.id).label("count")

        rows = (
            self.db.query(SportSession.date, session_count)
            .filter(*filters)
            .group_by(SportSession.date)
            .order_by(SportSession.date.asc())
            .all()
        )
        return [{"date": day, "count": count} for day, count in rows]
