"""Performance goal and review repositories."""

from collections.abc import Collection
from datetime import date

from sqlalchemy import func, select

from hris_api.models.domain.performance import GoalStatus
from hris_api.models.orm.performance import PerformanceGoalORM, PerformanceReviewORM
from hris_api.repositories.base import BaseRepository


def _overdue_clause(today: date):
    """Past due date and not completed. Canceled goals count as overdue."""
    return (
        PerformanceGoalORM.due_date.is_not(None),
        PerformanceGoalORM.due_date < today,
        PerformanceGoalORM.status != GoalStatus.COMPLETED,
    )


class PerformanceGoalRepository(BaseRepository[PerformanceGoalORM]):
    """Repository for performance goal operations."""

    model = PerformanceGoalORM

    async def get_by_employee(self, employee_id: str) -> list[PerformanceGoalORM]:
        """Get goals of one employee, newest first."""
        result = await self.session.execute(
            select(PerformanceGoalORM)
            .where(PerformanceGoalORM.employee_id == employee_id)
            .order_by(PerformanceGoalORM.created_at.desc(), PerformanceGoalORM.id.desc())
        )
        return list(result.scalars().all())

    async def get_by_status(self, status: GoalStatus) -> list[PerformanceGoalORM]:
        """Get goals with a status, newest first."""
        result = await self.session.execute(
            select(PerformanceGoalORM)
            .where(PerformanceGoalORM.status == status)
            .order_by(PerformanceGoalORM.created_at.desc(), PerformanceGoalORM.id.desc())
        )
        return list(result.scalars().all())

    async def get_overdue(self, today: date) -> list[PerformanceGoalORM]:
        """Get overdue goals, earliest due date first."""
        result = await self.session.execute(
            select(PerformanceGoalORM)
            .where(*_overdue_clause(today))
            .order_by(PerformanceGoalORM.due_date, PerformanceGoalORM.id)
        )
        return list(result.scalars().all())

    async def count_overdue(
        self,
        today: date,
        employee_ids: Collection[str] | None = None,
    ) -> int:
        """Count overdue goals, optionally restricted to some employees."""
        query = select(func.count()).select_from(PerformanceGoalORM).where(*_overdue_clause(today))
        if employee_ids is not None:
            if not employee_ids:
                return 0
            query = query.where(PerformanceGoalORM.employee_id.in_(list(employee_ids)))
        result = await self.session.execute(query)
        return result.scalar_one()

    async def count_by_status_for_employee(self, employee_id: str) -> dict[str, int]:
        """Count goals of one employee per status."""
        result = await self.session.execute(
            select(PerformanceGoalORM.status, func.count())
            .where(PerformanceGoalORM.employee_id == employee_id)
            .group_by(PerformanceGoalORM.status)
        )
        return {str(row[0]): row[1] for row in result.all()}


class PerformanceReviewRepository(BaseRepository[PerformanceReviewORM]):
    """Repository for performance review operations."""

    model = PerformanceReviewORM

    async def get_by_employee(self, employee_id: str) -> list[PerformanceReviewORM]:
        """Get reviews of one employee, latest review date first."""
        result = await self.session.execute(
            select(PerformanceReviewORM)
            .where(PerformanceReviewORM.employee_id == employee_id)
            .order_by(PerformanceReviewORM.review_date.desc(), PerformanceReviewORM.id.desc())
        )
        return list(result.scalars().all())

    async def get_by_reviewer(self, reviewer_id: str) -> list[PerformanceReviewORM]:
        """Get reviews written by one reviewer, latest review date first."""
        result = await self.session.execute(
            select(PerformanceReviewORM)
            .where(PerformanceReviewORM.reviewer_id == reviewer_id)
            .order_by(PerformanceReviewORM.review_date.desc(), PerformanceReviewORM.id.desc())
        )
        return list(result.scalars().all())

    async def get_rating_summary(
        self,
        employee_ids: Collection[str] | None = None,
    ) -> tuple[float | None, int]:
        """Get mean rating and review count.

        Args:
            employee_ids: Restrict to reviews of these employees (all when None)

        Returns:
            Tuple of (average rating or None when no reviews, review count)
        """
        query = select(
            func.avg(PerformanceReviewORM.overall_rating),
            func.count(PerformanceReviewORM.id),
        )
        if employee_ids is not None:
            if not employee_ids:
                return None, 0
            query = query.where(PerformanceReviewORM.employee_id.in_(list(employee_ids)))
        row = (await self.session.execute(query)).one()
        average = float(row[0]) if row[0] is not None else None
        return average, row[1]
