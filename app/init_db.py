from sqlalchemy.orm import Session
from app.models.user import User, UserRole
from app.models.sport import Sport
from app.services.auth import get_password_hash
from dotenv import load_dotenv
import logging
import os

load_dotenv()

logger = logging.getLogger(__name__)

SAMPLE_SPORTS = [
    ("Basketball", "Fast-paced team sport played on a court with hoops", 10),
    ("Football", "Popular team sport played with an oval ball", 22),
    ("Tennis", "Racket sport played on a rectangular court", 4),
    ("Volleyball", "Team sport played with a net and ball", 12),
    ("Badminton", "Racket sport played with a shuttlecock", 4),
]


def create_initial_admin(db: Session):
    """
    Creates the initial admin user if the users table is empty.
    """
    if db.query(User).count() > 0:
        logger.info("Users already exist, skipping initial admin.")
        return

    email = os.getenv("INITIAL_ADMIN_EMAIL", "admin@example.com")
    db_user = User(
        name=os.getenv("INITIAL_ADMIN_NAME", "Admin User"),
        email=email,
        hashed_password=get_password_hash(
            os.getenv("INITIAL_ADMIN_PASSWORD", "admin123")
        ),
        role=UserRole.ADMIN,
    )
    db.add(db_user)
    db.commit()
    logger.info(f"Admin created: {email}")


def create_sample_sports(db: Session):
    if db.query(Sport).count() > 0:
        return

    for name, description, max_players in SAMPLE_SPORTS:
        db.add(Sport(name=name, description=description, max_players=max_players))

    db.commit()
    logger.info("Sample sports data inserted")


def init_db(db: Session):
    create_initial_admin(db)
    create_sample_sports(db)
