from sqlalchemy import (
    Column,
    Integer,
    String,
    Text,
    Date,
    Time,
    DateTime,
    ForeignKey,
    Enum,
    CheckConstraint,
    Index,
)
from sqlalchemy.orm import relationship
from datetime import datetime
import enum

from app.database import Base


class SessionStatus(enum.Enum):
    ACTIVE = "active"
    CANCELLED = "cancelled"


class SportSession(Base):
    __tablename__ = "sessions"
    __table_args__ = (
        CheckConstraint(
            "max_participants > 0", name="check_session_max_participants_positive"
        ),
        CheckConstraint(
            "current_participants >= 0",
            name="check_session_current_participants_non_negative",
        ),
        CheckConstraint(
            "current_participants <= max_participants",
            name="check_session_current_lte_max",
        ),
        Index("idx_sessions_date", "date"),
        Index("idx_sessions_status", "status"),
        {"extend_existing": True},
    )

    id = Column(Integer, primary_key=True, index=True)
    sport_id = Column(
        Integer, ForeignKey("sports.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = Column(String, nullable=False)
    description = Column(Text, default="")
    venue = Column(String, nullable=False)
    date = Column(Date, nullable=False)
    time = Column(Time, nullable=False)
    team_a = Column(String, nullable=False)
    team_b = Column(String, nullable=False)
    max_participants = Column(Integer, nullable=False, default=10)
    current_participants = Column(Integer, nullable=False, default=0)
    created_by = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    status = Column(
        Enum(SessionStatus, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=SessionStatus.ACTIVE,
    )
    cancellation_reason = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    sport = relationship("app.models.sport.Sport", back_populates="sessions")
    creator = relationship(
        "app.models.user.User", back_populates="created_sessions"
    )
    participants = relationship(
        "app.models.session_participant.SessionParticipant",
        back_populates="session",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    @property
    def starts_at(self) -> datetime:
        return datetime.combine(self.date, self.time)

    def __repr__(self) -> str:
        return (
            f"<SportSession(id={self.id}, title={self.title}, "
            f"participants={self.current_participants}/{self.max_participants})>"
        )
