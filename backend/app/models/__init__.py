"""SQLAlchemy ORM models."""

from app.models.user import User
from app.models.class_ import Class
from app.models.thread import Thread
from app.models.message import Message
from app.models.material import Material

__all__ = [
    "User",
    "Class",
    "Thread",
    "Message",
    "Material",
]
