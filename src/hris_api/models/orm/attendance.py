"""Attendance ORM model."""

from datetime import datetime

from sqlalchemy import DateTime, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from hris_api.models.orm.base import Base, IdMixin, TimestampMixin


class AttendanceORM(Base, IdMixin, TimestampMixin):
    """One check-in (and optional check-out) of an employee.

    Check-in and check-out times are server-local wall-clock timestamps.
    """

    __tablename__ = "attendance"

    employee_id: Mapped[str] = mapped_column(String(50), nullable=False)
    check_in_time: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    check_out_time: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    __table_args__ = (
        Index("idx_attendance_employee_check_in", "employee_id", "check_in_time"),
        Index("idx_attendance_check_in", "check_in_time"),
    )
