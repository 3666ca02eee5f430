"""Leave request and leave balance repositories."""

from collections.abc import Collection

from sqlalchemy import func, select

from hris_api.models.domain.leave import LeaveStatus
from hris_api.models.orm.leave import LeaveBalanceORM, LeaveRequestORM
from hris_api.repositories.base import BaseRepository


class LeaveRequestRepository(BaseRepository[LeaveRequestORM]):
    """Repository for leave request operations."""

    model = LeaveRequestORM

    async def get_by_employee(self, employee_id: str) -> list[LeaveRequestORM]:
        """Get leave requests of one employee, newest first."""
        result = await self.session.execute(
            select(LeaveRequestORM)
            .where(LeaveRequestORM.employee_id == employee_id)
            .order_by(LeaveRequestORM.created_at.desc(), LeaveRequestORM.id.desc())
        )
        return list(result.scalars().all())

    async def get_by_status(self, status: LeaveStatus) -> list[LeaveRequestORM]:
        """Get leave requests with a status, oldest first (approval queue order)."""
        result = await self.session.execute(
            select(LeaveRequestORM)
            .where(LeaveRequestORM.status == status)
            .order_by(LeaveRequestORM.created_at, LeaveRequestORM.id)
        )
        return list(result.scalars().all())

    async def count_pending(self, employee_ids: Collection[str] | None = None) -> int:
        """Count pending requests, optionally restricted to some employees."""
        query = (
            select(func.count())
            .select_from(LeaveRequestORM)
            .where(LeaveRequestORM.status == LeaveStatus.PENDING)
        )
        if employee_ids is not None:
            if not employee_ids:
                return 0
            query = query.where(LeaveRequestORM.employee_id.in_(list(employee_ids)))
        result = await self.session.execute(query)
        return result.scalar_one()

    async def count_pending_by_employee(self, employee_ids: Collection[str]) -> dict[str, int]:
        """Count pending requests per employee.

        Returns:
            Dict mapping employee_id to count (absent when zero)
        """
        if not employee_ids:
            return {}
        result = await self.session.execute(
            select(LeaveRequestORM.employee_id, func.count())
            .where(
                LeaveRequestORM.status == LeaveStatus.PENDING,
                LeaveRequestORM.employee_id.in_(list(employee_ids)),
            )
            .group_by(LeaveRequestORM.employee_id)
        )
        return {row[0]: row[1] for row in result.all()}


class LeaveBalanceRepository(BaseRepository[LeaveBalanceORM]):
    """Repository for leave balance operations."""

    model = LeaveBalanceORM

    async def get_by_employee_id(self, employee_id: str) -> LeaveBalanceORM | None:
        """Get the balance row of an employee."""
        result = await self.session.execute(
            select(LeaveBalanceORM).where(LeaveBalanceORM.employee_id == employee_id)
        )
        return result.scalar_one_or_none()
