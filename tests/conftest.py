"""
Shared pytest configuration
"""
import pytest
from datetime import date, time, timedelta
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base

# Import every model so SQLAlchemy can resolve the relationships
from app.models.user import User, UserRole
from app.models.sport import Sport
from app.models.session import SportSession, SessionStatus
from app.models.session_participant import SessionParticipant


# In-memory database for tests
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db():
    """Create the test database and drop it afterwards"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


def make_user(db, name, email, role=UserRole.PLAYER):
    user = User(name=name, email=email, hashed_password="hashed", role=role)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def admin(db):
    return make_user(db, "Admin", "admin@example.com", UserRole.ADMIN)


@pytest.fixture
def creator(db):
    return make_user(db, "Carla Creator", "creator@example.com")


@pytest.fixture
def alice(db):
    return make_user(db, "Alice", "alice@example.com")


@pytest.fixture
def bob(db):
    return make_user(db, "Bob", "bob@example.com")


@pytest.fixture
def charlie(db):
    return make_user(db, "Charlie", "charlie@example.com")


@pytest.fixture
def sport(db):
    sport = Sport(name="Basketball", description="Hoops", max_players=10)
    db.add(sport)
    db.commit()
    db.refresh(sport)
    return sport


@pytest.fixture
def make_session(db, sport, creator):
    """Factory for sessions; defaults to an active session a week from now"""

    def _make_session(
        max_participants=10,
        days_ahead=7,
        start=time(18, 0),
        created_by=None,
        status=SessionStatus.ACTIVE,
        title="Friday pickup",
    ):
        session = SportSession(
            sport_id=sport.id,
            title=title,
            description="",
            venue="Downtown court",
            date=date.today() + timedelta(days=days_ahead),
            time=start,
            team_a="Red",
            team_b="Blue",
            max_participants=max_participants,
            current_participants=0,
            created_by=created_by or creator.id,
            status=status,
        )
        db.add(session)
        db.commit()
        db.refresh(session)
        return session

    return _make_session


@pytest.fixture
def membership_count(db):
    """Number of membership rows of a session"""

    def _count(session_id):
        return (
            db.query(SessionParticipant)
            .filter(SessionParticipant.session_id == session_id)
            .count()
        )

    return _count


@pytest.fixture
def make_players(db):
    def _make_players(count):
        return [
            make_user(db, f"Player {i}", f"player{i}@example.com")
            for i in range(1, count + 1)
        ]

    return _make_players
