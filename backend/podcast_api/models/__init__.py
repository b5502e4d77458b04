"""
Database Models Module
Contains SQLAlchemy ORM models for all database tables.

All models must be imported here to be registered with SQLAlchemy
and created during Base.metadata.create_all().
"""

from podcast_api.db.base import Base
from podcast_api.models.base import BaseModel
from podcast_api.models.user import User, UserRole
from podcast_api.models.podcast import Podcast, Episode

__all__ = [
    "Base",
    "BaseModel",
    "User",
    "UserRole",
    "Podcast",
    "Episode",
]
