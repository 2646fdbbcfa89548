from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from datetime import datetime

from app.database import Base


class Sport(Base):
    __tablename__ = "sports"
    __table_args__ = (
        CheckConstraint("max_players > 0", name="check_sport_max_players_positive"),
        {"extend_existing": True},
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)
    description = Column(Text, nullable=False)
    max_players = Column(Integer, nullable=False, default=10)
    created_by = Column(
        Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    sessions = relationship(
        "app.models.session.SportSession",
        back_populates="sport",
        cascade="all, delete-orphan",
    )
