from app.models.user import User
from app.models.sport import Sport
from app.models.session import SportSession
from app.models.session_participant import SessionParticipant

# This makes the models directory a Python package and ensures all models are loaded
