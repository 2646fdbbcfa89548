from app.models.session import SportSession
from app.models.user import User, UserRole


def is_admin(user: User) -> bool:
    return user.role == UserRole.ADMIN


def can_manage(session: SportSession, user: User) -> bool:
    """Creator of the session or admin"""
    return session.created_by == user.id or is_admin(user)
