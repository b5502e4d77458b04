"""
Podcast and Episode Models
A podcast exclusively owns its episodes.

Features:
- Optional rating, constrained to 1..5 by the service layer
- Episodes are loaded together with their podcast (selectin), so the
  collection is readable without further IO under asyncio
- Deleting a podcast deletes its episodes (ORM cascade + ON DELETE CASCADE)
"""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from podcast_api.models.base import BaseModel


class Podcast(BaseModel):
    """
    Podcast Model

    Fields:
        id (int): Primary key
        title (str): Podcast title
        category (str): Free-form category name
        rating (int): Optional rating between 1 and 5
        episodes (list[Episode]): Owned episodes
    """
    __tablename__ = "podcasts"

    title = Column(String(255), nullable=False)
    category = Column(String(255), nullable=False)
    rating = Column(Integer, nullable=True)

    episodes = relationship(
        "Episode",
        back_populates="podcast",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
    )

    def __repr__(self):
        return f"<Podcast(id={self.id}, title={self.title})>"


class Episode(BaseModel):
    """
    Episode Model

    An episode belongs to exactly one podcast and is only ever looked up
    through the (podcast_id, episode_id) pair.
    """
    __tablename__ = "episodes"

    title = Column(String(255), nullable=False)
    category = Column(String(255), nullable=False)

    podcast_id = Column(
        Integer,
        ForeignKey("podcasts.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    podcast = relationship("Podcast", back_populates="episodes")

    def __repr__(self):
        return f"<Episode(id={self.id}, title={self.title}, podcast_id={self.podcast_id})>"
