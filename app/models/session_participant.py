from sqlalchemy import Column, Integer, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from datetime import datetime

from app.database import Base


class SessionParticipant(Base):
    __tablename__ = "session_participants"
    __table_args__ = (
        # A user joins a given session at most once
        UniqueConstraint("session_id", "user_id", name="uq_session_participant"),
        {"extend_existing": True},
    )

    id = Column(Integer, primary_key=True, index=True)
    session_id = Column(
        Integer,
        ForeignKey("sessions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    joined_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    session = relationship(
        "app.models.session.SportSession", back_populates="participants"
    )
    user = relationship("app.models.user.User", back_populates="memberships")
