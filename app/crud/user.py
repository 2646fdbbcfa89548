from sqlalchemy.orm import Session
from typing import Optional

from app.models.user import User, UserRole


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def create_user(
    db: Session,
    email: str,
    name: str,
    hashed_password: str,
    role: UserRole = UserRole.PLAYER,
) -> User:
    db_user = User(
        email=email,
        name=name,
        hashed_password=hashed_password,
        role=role,
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user
