"""Leave request and balance ORM models."""

from datetime import date

from sqlalchemy import CheckConstraint, Date, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from hris_api.models.domain.leave import LeaveStatus, LeaveType
from hris_api.models.orm.base import Base, IdMixin, TimestampMixin, str_enum


class LeaveRequestORM(Base, IdMixin, TimestampMixin):
    """Leave request database model."""

    __tablename__ = "leave_requests"

    employee_id: Mapped[str] = mapped_column(String(50), nullable=False)
    leave_type: Mapped[LeaveType] = mapped_column(str_enum(LeaveType, "leave_type"), nullable=False)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    reason: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[LeaveStatus] = mapped_column(
        str_enum(LeaveStatus, "leave_status"),
        nullable=False,
        default=LeaveStatus.PENDING,
    )

    __table_args__ = (
        Index("idx_leave_requests_employee_id", "employee_id"),
        Index("idx_leave_requests_status", "status"),
    )


class LeaveBalanceORM(Base, IdMixin, TimestampMixin):
    """Remaining leave days per employee."""

    __tablename__ = "leave_balances"

    employee_id: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    annual_leave_balance: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    sick_leave_balance: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    personal_leave_balance: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (
        CheckConstraint("annual_leave_balance >= 0", name="ck_leave_balances_annual"),
        CheckConstraint("sick_leave_balance >= 0", name="ck_leave_balances_sick"),
        CheckConstraint("personal_leave_balance >= 0", name="ck_leave_balances_personal"),
    )
