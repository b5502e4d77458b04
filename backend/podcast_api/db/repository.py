"""
Generic Repository
Entity-agnostic data access used by the services.

Services never build queries themselves: they receive one Repository per
entity (User, Podcast, Episode) and only call the operations below.
Each call is its own unit of work; nothing here spans two calls in a
transaction.
"""

from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from podcast_api.db.base import Base


ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    """
    Async CRUD operations for a single model class.

    Example:
        podcasts = Repository(db, Podcast)
        podcast = await podcasts.find_one(id=1)
    """

    def __init__(self, session: AsyncSession, model: Type[ModelT]):
        self.session = session
        self.model = model

    async def find(self, **filters: Any) -> List[ModelT]:
        """Return every row matching the filters (all rows when none given)."""
        result = await self.session.execute(select(self.model).filter_by(**filters))
        return list(result.scalars().all())

    async def find_one(self, **filters: Any) -> Optional[ModelT]:
        """Return the first matching row, or None."""
        result = await self.session.execute(
            select(self.model).filter_by(**filters).limit(1)
        )
        return result.scalars().first()

    async def find_one_or_fail(self, **filters: Any) -> ModelT:
        """
        Return the matching row.

        Raises:
            sqlalchemy.exc.NoResultFound: If nothing matches
        """
        result = await self.session.execute(
            select(self.model).filter_by(**filters).limit(1)
        )
        return result.scalars().one()

    def create(self, **fields: Any) -> ModelT:
        """Build an unsaved instance. Nothing is written until save()."""
        return self.model(**fields)

    async def save(self, entity: ModelT) -> ModelT:
        """Insert or update the entity and reload generated columns."""
        self.session.add(entity)
        await self.session.commit()
        await self.session.refresh(entity)
        return entity

    async def delete(self, entity_id: Any) -> None:
        """Delete by primary key. Owned rows follow the model's cascade rules."""
        entity = await self.session.get(self.model, entity_id)
        if entity is None:
            return None
        await self.session.delete(entity)
        await self.session.commit()
