"""Attendance DTOs."""

from datetime import datetime
from typing import ClassVar

from pydantic import BaseModel, Field

from hris_api.models.dto.common import PartialUpdate


class AttendanceCreate(BaseModel):
    """DTO for recording a check-in."""

    employee_id: str = Field(min_length=1, max_length=50)
    check_in_time: datetime
    check_out_time: datetime | None = None


class AttendanceUpdate(PartialUpdate):
    """DTO for updating an attendance record, typically to set check-out."""

    non_nullable_fields: ClassVar[frozenset[str]] = frozenset({"check_in_time"})

    check_in_time: datetime | None = None
    check_out_time: datetime | None = None


class AttendanceResponse(BaseModel):
    """Attendance response DTO."""

    id: int
    employee_id: str
    check_in_time: datetime
    check_out_time: datetime | None = None
    created_at: datetime

    class Config:
        """Pydantic config."""

        from_attributes = True
