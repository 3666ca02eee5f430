"""Employee document repository."""

from sqlalchemy import select

from hris_api.models.orm.employee import EmployeeDocumentORM
from hris_api.repositories.base import BaseRepository


class EmployeeDocumentRepository(BaseRepository[EmployeeDocumentORM]):
    """Repository for employee document operations."""

    model = EmployeeDocumentORM

    async def get_by_employee(self, employee_id: str) -> list[EmployeeDocumentORM]:
        """Get documents of one employee, newest first."""
        result = await self.session.execute(
            select(EmployeeDocumentORM)
            .where(EmployeeDocumentORM.employee_id == employee_id)
            .order_by(EmployeeDocumentORM.created_at.desc(), EmployeeDocumentORM.id.desc())
        )
        return list(result.scalars().all())
