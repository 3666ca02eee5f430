"""Performance goal and review ORM models."""

from datetime import date

from sqlalchemy import CheckConstraint, Date, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from hris_api.models.domain.performance import GoalStatus
from hris_api.models.orm.base import Base, IdMixin, TimestampMixin, str_enum


class PerformanceGoalORM(Base, IdMixin, TimestampMixin):
    """Performance goal database model."""

    __tablename__ = "performance_goals"

    employee_id: Mapped[str] = mapped_column(String(50), nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    due_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    status: Mapped[GoalStatus] = mapped_column(
        str_enum(GoalStatus, "goal_status"),
        nullable=False,
        default=GoalStatus.NOT_STARTED,
    )

    __table_args__ = (
        Index("idx_performance_goals_employee_id", "employee_id"),
        Index("idx_performance_goals_status_due", "status", "due_date"),
    )


class PerformanceReviewORM(Base, IdMixin, TimestampMixin):
    """Performance review database model."""

    __tablename__ = "performance_reviews"

    employee_id: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    reviewer_id: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    review_date: Mapped[date] = mapped_column(Date, nullable=False)
    overall_rating: Mapped[int] = mapped_column(Integer, nullable=False)
    comments: Mapped[str | None] = mapped_column(Text, nullable=True)

    __table_args__ = (
        CheckConstraint(
            "overall_rating >= 1 AND overall_rating <= 5",
            name="ck_performance_reviews_rating",
        ),
    )
