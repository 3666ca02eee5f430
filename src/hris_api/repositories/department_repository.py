"""Department repository."""

from sqlalchemy import func, select

from hris_api.models.orm.department import DepartmentORM
from hris_api.repositories.base import BaseRepository


class DepartmentRepository(BaseRepository[DepartmentORM]):
    """Repository for department operations."""

    model = DepartmentORM

    async def name_exists(self, name: str, exclude_id: int | None = None) -> bool:
        """Check if a department name is taken (case-insensitive)."""
        query = select(DepartmentORM.id).where(func.lower(DepartmentORM.name) == name.lower())
        if exclude_id is not None:
            query = query.where(DepartmentORM.id != exclude_id)
        result = await self.session.execute(query)
        return result.first() is not None
