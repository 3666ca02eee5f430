"""Performance goal and review DTOs."""

from datetime import date, datetime
from typing import ClassVar

from pydantic import BaseModel, Field

from hris_api.models.domain.performance import GoalStatus
from hris_api.models.dto.common import PartialUpdate


class PerformanceGoalCreate(BaseModel):
    """DTO for creating a performance goal."""

    employee_id: str = Field(min_length=1, max_length=50)
    title: str = Field(min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=5000)
    due_date: date | None = None
    status: GoalStatus = GoalStatus.NOT_STARTED


class PerformanceGoalUpdate(PartialUpdate):
    """DTO for updating a performance goal."""

    non_nullable_fields: ClassVar[frozenset[str]] = frozenset({"title", "status"})

    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=5000)
    due_date: date | None = None
    status: GoalStatus | None = None


class PerformanceGoalResponse(BaseModel):
    """Performance goal response DTO."""

    id: int
    employee_id: str
    title: str
    description: str | None = None
    due_date: date | None = None
    status: GoalStatus
    created_at: datetime
    updated_at: datetime

    class Config:
        """Pydantic config."""

        from_attributes = True


class PerformanceReviewCreate(BaseModel):
    """DTO for recording a performance review."""

    employee_id: str = Field(min_length=1, max_length=50)
    reviewer_id: str = Field(min_length=1, max_length=50)
    review_date: date
    overall_rating: int = Field(ge=1, le=5)
    comments: str | None = Field(default=None, max_length=5000)


class PerformanceReviewUpdate(PartialUpdate):
    """DTO for updating a performance review."""

    non_nullable_fields: ClassVar[frozenset[str]] = frozenset({"review_date", "overall_rating"})

    review_date: date | None = None
    overall_rating: int | None = Field(default=None, ge=1, le=5)
    comments: str | None = Field(default=None, max_length=5000)


class PerformanceReviewResponse(BaseModel):
    """Performance review response DTO."""

    id: int
    employee_id: str
    reviewer_id: str
    review_date: date
    overall_rating: int
    comments: str | None = None
    created_at: datetime

    class Config:
        """Pydantic config."""

        from_attributes = True


class AverageRatingResponse(BaseModel):
    """Mean review rating for one employee."""

    employee_id: str
    average_rating: float
    review_count: int
