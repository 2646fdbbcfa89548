from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import List, Optional

from app.models.sport import Sport
from app.schemas.sport import SportCreate, SportUpdate


def get_sport(db: Session, sport_id: int) -> Optional[Sport]:
    return db.query(Sport).filter(Sport.id == sport_id).first()


def get_sport_by_name(db: Session, name: str) -> Optional[Sport]:
    return db.query(Sport).filter(Sport.name == name).first()


def get_sports(db: Session, created_by: Optional[int] = None) -> List[Sport]:
    query = db.query(Sport)

    if created_by:
        query = query.filter(Sport.created_by == created_by)

    return query.order_by(Sport.created_at.desc(), Sport.id.desc()).all()


def create_sport(db: Session, sport: SportCreate, created_by: Optional[int]) -> Sport:
    """Raises IntegrityError when another sport already holds the name"""
    db_sport = Sport(**sport.model_dump(), created_by=created_by)
    db.add(db_sport)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise
    db.refresh(db_sport)
    return db_sport


def update_sport(db: Session, sport_id: int, sport: SportUpdate) -> Optional[Sport]:
    db_sport = get_sport(db, sport_id)
    if not db_sport:
        return None

    update_data = sport.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(db_sport, field, value)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise
    db.refresh(db_sport)
    return db_sport
