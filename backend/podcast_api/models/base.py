"""
Base Model Class
Provides common fields and functionality for all database models.

All application models should inherit from BaseModel instead of Base directly.
This ensures a consistent integer ID and automatic timestamp tracking.
"""

from sqlalchemy import Column, DateTime, Integer, func

from podcast_api.db.base import Base


class BaseModel(Base):
    """
    Abstract base model with common fields for all tables.

    Provides:
    - Integer autoincrement primary key
    - created_at timestamp (automatically set on insert)
    - updated_at timestamp (automatically updated on modification)

    Example:
        class Podcast(BaseModel):
            __tablename__ = "podcasts"
            title = Column(String(255))
            # id, created_at, updated_at are inherited automatically
    """

    # Make this an abstract base class (no table created for BaseModel itself)
    __abstract__ = True

    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    # Timestamp: Record Creation
    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )

    # Timestamp: Last Update
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False
    )

    def __repr__(self):
        return f"<{self.__class__.__name__}(id={self.id})>"
