"""Shared persistence operations for HRIS tables keyed by an integer id."""

from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from hris_api.models.orm.base import Base

T = TypeVar("T", bound=Base)


class BaseRepository(Generic[T]):
    """CRUD over one ORM model.

    Writes flush but never commit; the request session commits. Subclasses
    set ``model`` and may set ``ordering`` for ``get_all``.
    """

    model: type[T]
    # Empty means newest rows first
    ordering: ClassVar[tuple[Any, ...]] = ()

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session."""
        self.session = session

    async def get_by_id(self, id: int) -> T | None:
        """Get a row by surrogate id, or None."""
        result = await self.session.execute(select(self.model).where(self.model.id == id))
        return result.scalar_one_or_none()

    async def get_all(self) -> list[T]:
        """Get every row in the repository's list order."""
        order = self.ordering or (self.model.created_at.desc(), self.model.id.desc())
        result = await self.session.execute(select(self.model).order_by(*order))
        return list(result.scalars().all())

    async def count(self) -> int:
        """Count rows of the table."""
        result = await self.session.execute(select(func.count()).select_from(self.model))
        return result.scalar_one()

    async def create(self, **kwargs: Any) -> T:
        """Insert a row and return it with its generated id and timestamps."""
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def update(self, id: int, **kwargs: Any) -> T | None:
        """Update a row by id.

        Returns:
            Updated row or None if the id is unknown
        """
        instance = await self.get_by_id(id)
        if instance is None:
            return None
        return await self.apply(instance, **kwargs)

    async def apply(self, instance: T, **kwargs: Any) -> T:
        """Set columns on an already loaded row and flush.

        Unknown keys are ignored, so DTO dumps can be passed straight through.
        Explicit None values are written, which clears nullable columns.
        """
        for key, value in kwargs.items():
            if hasattr(instance, key):
                setattr(instance, key, value)

        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def delete(self, id: int) -> bool:
        """Delete a row by id.

        Returns:
            True if a row was deleted, False if the id is unknown
        """
        instance = await self.get_by_id(id)
        if instance is None:
            return False

        await self.session.delete(instance)
        await self.session.flush()
        return True
