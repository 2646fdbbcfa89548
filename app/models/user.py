from sqlalchemy import Column, Integer, String, DateTime, Enum
from sqlalchemy.orm import relationship
from app.database import Base
from datetime import datetime
import enum


class UserRole(enum.Enum):
    ADMIN = "admin"
    PLAYER = "player"


class User(Base):
    __tablename__ = "users"
    __table_args__ = {"extend_existing": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    email = Column(String, unique=True, nullable=False, index=True)
    hashed_password = Column(String, nullable=False)
    role = Column(
        Enum(UserRole, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=UserRole.PLAYER,
    )
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    created_sessions = relationship(
        "app.models.session.SportSession", back_populates="creator"
    )
    memberships = relationship(
        "app.models.session_participant.SessionParticipant",
        back_populates="user",
        cascade="all, delete-orphan",
    )
