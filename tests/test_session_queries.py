"""
Tests for session listings and report aggregates
"""
import pytest
from datetime import date, datetime, time, timedelta

from app.models.sport import Sport
from app.models.session import SessionStatus
from app.models.session_participant import SessionParticipant
from app.services.session_capacity import SessionCapacityManager
from app.services.session_queries import SessionQueryService


NOON = time(12, 0)


def fixed_clock():
    return datetime.combine(date.today(), NOON)


def add_member(db, session, user):
    db.add(SessionParticipant(session_id=session.id, user_id=user.id))
    session.current_participants += 1
    db.commit()


def test_list_sessions_ordered_and_annotated(db, make_session, alice, bob, creator, sport):
    later = make_session(days_ahead=5, title="Later")
    sooner_evening = make_session(days_ahead=1, start=time(20, 0), title="Evening")
    sooner_morning = make_session(days_ahead=1, start=time(8, 0), title="Morning")
    manager = SessionCapacityManager(db)
    manager.join(later.id, bob)
    manager.join(later.id, alice)

    sessions = SessionQueryService(db).list_sessions()

    assert [s["title"] for s in sessions] == ["Morning", "Evening", "Later"]
    assert sessions[2]["participants"] == ["Alice", "Bob"]
    assert sessions[0]["participants"] == []
    assert sessions[0]["sport_name"] == sport.name
    assert sessions[0]["created_by_name"] == creator.name
    assert sessions[2]["current_participants"] == 2


def test_list_created_and_joined(db, make_session, alice, creator):
    second = make_session(days_ahead=4, title="Second")
    first = make_session(days_ahead=2, title="First")
    make_session(days_ahead=3, created_by=alice.id, title="Alice's")
    manager = SessionCapacityManager(db)
    manager.join(second.id, alice)
    manager.join(first.id, alice)

    service = SessionQueryService(db)
    created = service.list_created_by(creator.id)
    joined = service.list_joined_by(alice.id)

    assert [s["title"] for s in created] == ["First", "Second"]
    assert all(s["sport_name"] == "Basketball" for s in created)
    assert [s["title"] for s in joined] == ["First", "Second"]
    assert joined[0]["created_by_name"] == creator.name
    assert service.list_joined_by(creator.id) == []


def test_list_participants_sorted_by_name(db, make_session, alice, bob, charlie):
    session = make_session()
    manager = SessionCapacityManager(db)
    for user in (charlie, alice, bob):
        manager.join(session.id, user)

    participants = SessionQueryService(db).list_participants(session.id)

    assert [p["name"] for p in participants] == ["Alice", "Bob", "Charlie"]
    assert participants[0] == {"id": alice.id, "name": "Alice", "email": alice.email}


def test_list_participants_after_delete_is_empty(db, make_session, creator, alice):
    session = make_session()
    session_id = session.id
    manager = SessionCapacityManager(db)
    manager.join(session_id, alice)
    manager.delete(session_id, creator, "Season over")

    assert SessionQueryService(db).list_participants(session_id) == []


@pytest.fixture
def report_data(db, make_session, alice, bob):
    past = make_session(days_ahead=-2, title="Past")
    earlier_today = make_session(days_ahead=0, start=time(10, 0), title="Earlier today")
    later_today = make_session(days_ahead=0, start=time(15, 0), title="Later today")
    upcoming = make_session(days_ahead=3, title="Upcoming")
    cancelled = make_session(days_ahead=5, status=SessionStatus.CANCELLED, title="Off")

    add_member(db, past, alice)
    add_member(db, past, bob)
    add_member(db, upcoming, alice)
    add_member(db, cancelled, bob)
    return {
        "past": past,
        "earlier_today": earlier_today,
        "later_today": later_today,
        "upcoming": upcoming,
        "cancelled": cancelled,
    }


def test_stats_without_range(db, report_data):
    stats = SessionQueryService(db, clock=fixed_clock).stats()

    assert stats == {
        "total_sessions": 5,
        "completed_sessions": 2,
        "cancelled_sessions": 1,
        "upcoming_sessions": 2,
        "total_participants": 4,
        "total_sports": 1,
    }


def test_stats_with_range(db, report_data):
    today = date.today()
    stats = SessionQueryService(db, clock=fixed_clock).stats(
        start_date=today, end_date=today + timedelta(days=3)
    )

    assert stats["total_sessions"] == 3
    assert stats["completed_sessions"] == 1
    assert stats["upcoming_sessions"] == 2
    assert stats["cancelled_sessions"] == 0
    assert stats["total_participants"] == 1
    # Sports are not filtered by date
    assert stats["total_sports"] == 1


def test_stats_on_empty_database(db):
    stats = SessionQueryService(db).stats()

    assert all(value == 0 for value in stats.values())


def test_sport_popularity_includes_unused_sports(db, sport, make_session):
    tennis = Sport(name="Tennis", description="Racket sport", max_players=4)
    chess = Sport(name="Chess", description="Board game", max_players=2)
    db.add_all([tennis, chess])
    db.commit()
    make_session(days_ahead=1)
    make_session(days_ahead=2)
    make_session(days_ahead=30)

    service = SessionQueryService(db)
    popularity = service.sport_popularity()
    ranged = service.sport_popularity(
        start_date=date.today(), end_date=date.today() + timedelta(days=7)
    )

    assert popularity == [
        {"name": "Basketball", "count": 3},
        {"name": "Chess", "count": 0},
        {"name": "Tennis", "count": 0},
    ]
    assert ranged[0] == {"name": "Basketball", "count": 2}
    assert len(ranged) == 3


def test_sessions_by_date(db, make_session):
    make_session(days_ahead=2)
    make_session(days_ahead=1)
    make_session(days_ahead=2, start=time(9, 0))
    make_session(days_ahead=10)

    service = SessionQueryService(db)
    by_date = service.sessions_by_date()
    ranged = service.sessions_by_date(end_date=date.today() + timedelta(days=5))

    assert by_date == [
        {"date": date.today() + timedelta(days=1), "count": 1},
        {"date": date.today() + timedelta(days=2), "count": 2},
        {"date": date.today() + timedelta(days=10), "count": 1},
    ]
    assert [row["count"] for row in ranged] == [1, 2]
