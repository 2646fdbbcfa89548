"""
Domain errors raised by the session capacity manager.

Each error carries the message shown to the caller and the HTTP status the
routers answer with.
"""


class SessionError(Exception):
    status_code = 400
    default_message = "Invalid session operation"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFound(SessionError):
    status_code = 404
    default_message = "Session not found"


class InvalidOperation(SessionError):
    status_code = 400
    default_message = "Operation not allowed"


class CapacityExceeded(SessionError):
    status_code = 400
    default_message = "Session is full"


class DuplicateMembership(SessionError):
    status_code = 400
    default_message = "Already joined this session"


class NotAuthorized(SessionError):
    status_code = 403
    default_message = "Not authorized to manage this session"
