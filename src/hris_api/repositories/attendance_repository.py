"""Attendance repository."""

from collections.abc import Collection
from datetime import datetime

from sqlalchemy import func, select

from hris_api.models.orm.attendance import AttendanceORM
from hris_api.repositories.base import BaseRepository


class AttendanceRepository(BaseRepository[AttendanceORM]):
    """Repository for attendance operations.

    Time windows are half-open: ``start <= check_in_time < end``.
    """

    model = AttendanceORM

    async def get_by_employee(self, employee_id: str) -> list[AttendanceORM]:
        """Get all check-ins of an employee, most recent first."""
        result = await self.session.execute(
            select(AttendanceORM)
            .where(AttendanceORM.employee_id == employee_id)
            .order_by(AttendanceORM.check_in_time.desc(), AttendanceORM.id.desc())
        )
        return list(result.scalars().all())

    async def get_in_window(
        self,
        start: datetime,
        end: datetime,
        employee_id: str | None = None,
        limit: int | None = None,
        newest_first: bool = False,
    ) -> list[AttendanceORM]:
        """Get check-ins inside a time window.

        Args:
            start: Window start (inclusive)
            end: Window end (exclusive)
            employee_id: Optional employee filter
            limit: Optional maximum number of rows
            newest_first: Order by check-in time descending instead of ascending

        Returns:
            List of attendance records
        """
        query = select(AttendanceORM).where(
            AttendanceORM.check_in_time >= start,
            AttendanceORM.check_in_time < end,
        )
        if employee_id is not None:
            query = query.where(AttendanceORM.employee_id == employee_id)
        if newest_first:
            query = query.order_by(AttendanceORM.check_in_time.desc(), AttendanceORM.id.desc())
        else:
            query = query.order_by(AttendanceORM.check_in_time, AttendanceORM.id)
        if limit is not None:
            query = query.limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def count_in_window(
        self,
        start: datetime,
        end: datetime,
        employee_ids: Collection[str] | None = None,
    ) -> int:
        """Count check-in rows inside a time window.

        Repeated check-ins of one employee count separately. With
        ``employee_ids`` only those employees' rows are counted.
        """
        query = (
            select(func.count())
            .select_from(AttendanceORM)
            .where(AttendanceORM.check_in_time >= start, AttendanceORM.check_in_time < end)
        )
        if employee_ids is not None:
            if not employee_ids:
                return 0
            query = query.where(AttendanceORM.employee_id.in_(list(employee_ids)))
        result = await self.session.execute(query)
        return result.scalar_one()

    async def get_present_employee_ids(
        self,
        start: datetime,
        end: datetime,
        employee_ids: Collection[str],
    ) -> set[str]:
        """Get which of the given employees checked in inside the window."""
        if not employee_ids:
            return set()
        result = await self.session.execute(
            select(AttendanceORM.employee_id)
            .where(
                AttendanceORM.check_in_time >= start,
                AttendanceORM.check_in_time < end,
                AttendanceORM.employee_id.in_(list(employee_ids)),
            )
            .distinct()
        )
        return set(result.scalars().all())
