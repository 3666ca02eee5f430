"""Performance service for goals and reviews."""

import logging
from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from hris_api.exceptions import (
    EmployeeNotFoundError,
    PerformanceGoalNotFoundError,
    PerformanceReviewNotFoundError,
    ReviewerNotFoundError,
)
from hris_api.models.domain.performance import GoalStatus
from hris_api.models.dto.common import DeleteResponse
from hris_api.models.dto.performance import (
    AverageRatingResponse,
    PerformanceGoalCreate,
    PerformanceGoalResponse,
    PerformanceGoalUpdate,
    PerformanceReviewCreate,
    PerformanceReviewResponse,
    PerformanceReviewUpdate,
)
from hris_api.repositories.employee_repository import EmployeeRepository
from hris_api.repositories.performance_repository import (
    PerformanceGoalRepository,
    PerformanceReviewRepository,
)

logger = logging.getLogger(__name__)


class PerformanceService:
    """Service for performance goals and reviews."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session."""
        self.session = session
        self.goal_repo = PerformanceGoalRepository(session)
        self.review_repo = PerformanceReviewRepository(session)
        self.employee_repo = EmployeeRepository(session)

    async def _require_employee(self, employee_id: str) -> None:
        if not await self.employee_repo.exists(employee_id):
            logger.warning(f"Performance record for unknown employee {employee_id}")
            raise EmployeeNotFoundError(employee_id, f"Employee with ID {employee_id} not found")

    # =========================================================================
    # Goals
    # =========================================================================

    async def create_goal(self, data: PerformanceGoalCreate) -> PerformanceGoalResponse:
        """Create a performance goal.

        Raises:
            EmployeeNotFoundError: If the employee does not exist
        """
        await self._require_employee(data.employee_id)
        goal = await self.goal_repo.create(**data.model_dump())
        return PerformanceGoalResponse.model_validate(goal)

    async def list_goals(self) -> list[PerformanceGoalResponse]:
        """List all goals, newest first."""
        goals = await self.goal_repo.get_all()
        return [PerformanceGoalResponse.model_validate(g) for g in goals]

    async def get_goals_by_employee(self, employee_id: str) -> list[PerformanceGoalResponse]:
        """List goals of one employee."""
        goals = await self.goal_repo.get_by_employee(employee_id)
        return [PerformanceGoalResponse.model_validate(g) for g in goals]

    async def get_goal(self, id: int) -> PerformanceGoalResponse | None:
        """Get a goal by id."""
        goal = await self.goal_repo.get_by_id(id)
        if goal is None:
            return None
        return PerformanceGoalResponse.model_validate(goal)

    async def update_goal(self, id: int, data: PerformanceGoalUpdate) -> PerformanceGoalResponse:
        """Update a goal.

        Raises:
            PerformanceGoalNotFoundError: If the goal does not exist
        """
        goal = await self.goal_repo.get_by_id(id)
        if goal is None:
            logger.warning(f"Update of unknown performance goal {id}")
            raise PerformanceGoalNotFoundError(id)
        update_data = data.changes()
        if update_data:
            goal = await self.goal_repo.apply(goal, **update_data)
        return PerformanceGoalResponse.model_validate(goal)

    async def delete_goal(self, id: int) -> DeleteResponse:
        """Delete a goal."""
        return DeleteResponse(success=await self.goal_repo.delete(id))

    async def get_overdue_goals(self, today: date | None = None) -> list[PerformanceGoalResponse]:
        """List goals past their due date that are not completed."""
        goals = await self.goal_repo.get_overdue(today or date.today())
        return [PerformanceGoalResponse.model_validate(g) for g in goals]

    async def get_goals_by_status(self, status: GoalStatus) -> list[PerformanceGoalResponse]:
        """List goals with a status."""
        goals = await self.goal_repo.get_by_status(status)
        return [PerformanceGoalResponse.model_validate(g) for g in goals]

    # =========================================================================
    # Reviews
    # =========================================================================

    async def create_review(self, data: PerformanceReviewCreate) -> PerformanceReviewResponse:
        """Record a performance review.

        Raises:
            EmployeeNotFoundError: If the reviewed employee does not exist
            ReviewerNotFoundError: If the reviewer does not exist
        """
        await self._require_employee(data.employee_id)
        if not await self.employee_repo.exists(data.reviewer_id):
            logger.warning(f"Review by unknown reviewer {data.reviewer_id}")
            raise ReviewerNotFoundError(data.reviewer_id)
        review = await self.review_repo.create(**data.model_dump())
        return PerformanceReviewResponse.model_validate(review)

    async def list_reviews(self) -> list[PerformanceReviewResponse]:
        """List all reviews, newest first."""
        reviews = await self.review_repo.get_all()
        return [PerformanceReviewResponse.model_validate(r) for r in reviews]

    async def get_reviews_by_employee(self, employee_id: str) -> list[PerformanceReviewResponse]:
        """List reviews of one employee."""
        reviews = await self.review_repo.get_by_employee(employee_id)
        return [PerformanceReviewResponse.model_validate(r) for r in reviews]

    async def get_reviews_by_reviewer(self, reviewer_id: str) -> list[PerformanceReviewResponse]:
        """List reviews written by one reviewer."""
        reviews = await self.review_repo.get_by_reviewer(reviewer_id)
        return [PerformanceReviewResponse.model_validate(r) for r in reviews]

    async def get_review(self, id: int) -> PerformanceReviewResponse | None:
        """Get a review by id."""
        review = await self.review_repo.get_by_id(id)
        if review is None:
            return None
        return PerformanceReviewResponse.model_validate(review)

    async def update_review(
        self, id: int, data: PerformanceReviewUpdate
    ) -> PerformanceReviewResponse:
        """Update a review. Ratings are validated to 1..5 by the request model.

        Raises:
            PerformanceReviewNotFoundError: If the review does not exist
        """
        review = await self.review_repo.get_by_id(id)
        if review is None:
            logger.warning(f"Update of unknown performance review {id}")
            raise PerformanceReviewNotFoundError(id)
        update_data = data.changes()
        if update_data:
            review = await self.review_repo.apply(review, **update_data)
        return PerformanceReviewResponse.model_validate(review)

    async def delete_review(self, id: int) -> DeleteResponse:
        """Delete a review."""
        return DeleteResponse(success=await self.review_repo.delete(id))

    async def get_average_rating(self, employee_id: str) -> AverageRatingResponse:
        """Mean overall rating of an employee, 0 when never reviewed."""
        average, count = await self.review_repo.get_rating_summary([employee_id])
        return AverageRatingResponse(
            employee_id=employee_id,
            average_rating=round(average, 2) if average is not None else 0.0,
            review_count=count,
        )
