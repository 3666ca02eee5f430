"""Attendance service for check-in and check-out records."""

import logging
from datetime import date, datetime, timedelta

from sqlalchemy.ext.asyncio import AsyncSession

from hris_api.exceptions import (
    AttendanceNotFoundError,
    EmployeeNotFoundError,
    InvalidDateRangeError,
)
from hris_api.models.dto.attendance import (
    AttendanceCreate,
    AttendanceResponse,
    AttendanceUpdate,
)
from hris_api.repositories.attendance_repository import AttendanceRepository
from hris_api.repositories.employee_repository import EmployeeRepository
from hris_api.utils.dates import day_window, to_local_naive

logger = logging.getLogger(__name__)


class AttendanceService:
    """Service for attendance records.

    Timestamps are stored as server-local wall-clock time; timezone-aware
    input is converted on the way in.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session."""
        self.session = session
        self.repo = AttendanceRepository(session)
        self.employee_repo = EmployeeRepository(session)

    async def create_attendance(self, data: AttendanceCreate) -> AttendanceResponse:
        """Record a check-in.

        Raises:
            EmployeeNotFoundError: If the employee does not exist
            InvalidDateRangeError: If check-out precedes check-in
        """
        if not await self.employee_repo.exists(data.employee_id):
            logger.warning(f"Attendance for unknown employee {data.employee_id}")
            raise EmployeeNotFoundError(data.employee_id)

        check_in = to_local_naive(data.check_in_time)
        check_out = to_local_naive(data.check_out_time) if data.check_out_time else None
        if check_out is not None and check_out < check_in:
            logger.warning(f"Check-out before check-in for employee {data.employee_id}")
            raise InvalidDateRangeError(check_in, check_out)

        record = await self.repo.create(
            employee_id=data.employee_id,
            check_in_time=check_in,
            check_out_time=check_out,
        )
        return AttendanceResponse.model_validate(record)

    async def update_attendance(self, id: int, data: AttendanceUpdate) -> AttendanceResponse:
        """Update an attendance record, typically to set check-out time.

        Raises:
            AttendanceNotFoundError: If the record does not exist
            InvalidDateRangeError: If check-out would precede check-in
        """
        record = await self.repo.get_by_id(id)
        if record is None:
            logger.warning(f"Update of unknown attendance record {id}")
            raise AttendanceNotFoundError(id)

        update_data = {
            key: to_local_naive(value) if value is not None else None
            for key, value in data.changes().items()
        }
        check_in = update_data.get("check_in_time", record.check_in_time)
        check_out = update_data.get("check_out_time", record.check_out_time)
        if check_out is not None and check_out < check_in:
            logger.warning(f"Check-out before check-in on attendance record {id}")
            raise InvalidDateRangeError(check_in, check_out)

        if update_data:
            record = await self.repo.apply(record, **update_data)
        return AttendanceResponse.model_validate(record)

    async def get_attendance_by_employee(self, employee_id: str) -> list[AttendanceResponse]:
        """List check-ins of an employee, most recent first."""
        records = await self.repo.get_by_employee(employee_id)
        return [AttendanceResponse.model_validate(r) for r in records]

    async def get_today_attendance(self, today: date | None = None) -> list[AttendanceResponse]:
        """List check-ins of the current local day."""
        start, end = day_window(today or date.today())
        records = await self.repo.get_in_window(start, end)
        return [AttendanceResponse.model_validate(r) for r in records]

    async def get_attendance_in_range(
        self,
        employee_id: str,
        start_date: date,
        end_date: date,
    ) -> list[AttendanceResponse]:
        """List check-ins of an employee over inclusive calendar days.

        Raises:
            InvalidDateRangeError: If end_date precedes start_date
        """
        if end_date < start_date:
            raise InvalidDateRangeError(start_date, end_date)
        start = datetime.combine(start_date, datetime.min.time())
        end = datetime.combine(end_date + timedelta(days=1), datetime.min.time())
        records = await self.repo.get_in_window(start, end, employee_id=employee_id)
        return [AttendanceResponse.model_validate(r) for r in records]
