"""Employee repository."""

from sqlalchemy import func, or_, select

from hris_api.models.domain.employee import EmploymentStatus
from hris_api.models.orm.employee import EmployeeORM
from hris_api.repositories.base import BaseRepository
from hris_api.utils.validation import escape_like_wildcards


class EmployeeRepository(BaseRepository[EmployeeORM]):
    """Repository for employee operations."""

    model = EmployeeORM

    async def get_by_employee_id(self, employee_id: str) -> EmployeeORM | None:
        """Get employee by business key.

        Args:
            employee_id: Business key, e.g. EMP001

        Returns:
            EmployeeORM or None if not found
        """
        result = await self.session.execute(
            select(EmployeeORM).where(EmployeeORM.employee_id == employee_id)
        )
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> EmployeeORM | None:
        """Get employee by email (case-insensitive)."""
        result = await self.session.execute(
            select(EmployeeORM).where(func.lower(EmployeeORM.email) == email.lower())
        )
        return result.scalar_one_or_none()

    async def exists(self, employee_id: str) -> bool:
        """Check whether an employee with this business key exists."""
        result = await self.session.execute(
            select(EmployeeORM.id).where(EmployeeORM.employee_id == employee_id)
        )
        return result.scalar_one_or_none() is not None

    async def get_all_with_filters(
        self,
        search: str | None = None,
        status: EmploymentStatus | None = None,
        department: str | None = None,
    ) -> list[EmployeeORM]:
        """Get employees with optional filters.

        Args:
            search: Case-insensitive substring of name, email or employee_id
            status: Filter by employment status
            department: Filter by department label

        Returns:
            Matching employees, most recently created first
        """
        query = select(EmployeeORM)

        if status:
            query = query.where(EmployeeORM.employment_status == status)
        if department:
            query = query.where(EmployeeORM.department == department)
        if search:
            pattern = f"%{escape_like_wildcards(search)}%"
            query = query.where(
                or_(
                    EmployeeORM.full_name.ilike(pattern, escape="\\"),
                    EmployeeORM.email.ilike(pattern, escape="\\"),
                    EmployeeORM.employee_id.ilike(pattern, escape="\\"),
                )
            )

        query = query.order_by(EmployeeORM.created_at.desc(), EmployeeORM.id.desc())
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get_by_status(self, status: EmploymentStatus) -> list[EmployeeORM]:
        """Get employees with a given status, ordered by business key."""
        result = await self.session.execute(
            select(EmployeeORM)
            .where(EmployeeORM.employment_status == status)
            .order_by(EmployeeORM.employee_id)
        )
        return list(result.scalars().all())

    async def get_direct_reports(self, manager_id: str) -> list[EmployeeORM]:
        """Get employees whose manager_id is the given business key."""
        result = await self.session.execute(
            select(EmployeeORM)
            .where(EmployeeORM.manager_id == manager_id)
            .order_by(EmployeeORM.employee_id)
        )
        return list(result.scalars().all())

    async def count_by_status(self) -> dict[str, int]:
        """Count employees per employment status.

        Returns:
            Dict mapping status value to count
        """
        result = await self.session.execute(
            select(EmployeeORM.employment_status, func.count())
            .group_by(EmployeeORM.employment_status)
        )
        return {str(row[0]): row[1] for row in result.all()}

    async def employee_id_exists(self, employee_id: str, exclude_id: int | None = None) -> bool:
        """Check if a business key is taken by another employee."""
        query = select(EmployeeORM.id).where(EmployeeORM.employee_id == employee_id)
        if exclude_id is not None:
            query = query.where(EmployeeORM.id != exclude_id)
        result = await self.session.execute(query)
        return result.first() is not None

    async def email_exists(self, email: str, exclude_id: int | None = None) -> bool:
        """Check if an email is taken by another employee (case-insensitive)."""
        query = select(EmployeeORM.id).where(func.lower(EmployeeORM.email) == email.lower())
        if exclude_id is not None:
            query = query.where(EmployeeORM.id != exclude_id)
        result = await self.session.execute(query)
        return result.first() is not None
