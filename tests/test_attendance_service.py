"""Attendance service tests."""

from datetime import date, datetime

import pytest

from hris_api.exceptions import AttendanceNotFoundError, EmployeeNotFoundError, InvalidDateRangeError
from hris_api.models.dto.attendance import AttendanceCreate, AttendanceUpdate
from hris_api.services.attendance_service import AttendanceService


class TestCheckIns:
    """Recording and correcting check-ins."""

    @pytest.mark.asyncio
    async def test_check_out_later(self, db_session, make_employee) -> None:
        await make_employee("EMP001")
        service = AttendanceService(db_session)
        record = await service.create_attendance(
            AttendanceCreate(employee_id="EMP001", check_in_time=datetime(2024, 4, 2, 8, 55))
        )
        assert record.check_out_time is None

        updated = await service.update_attendance(
            record.id, AttendanceUpdate(check_out_time=datetime(2024, 4, 2, 17, 30))
        )

        assert updated.check_out_time == datetime(2024, 4, 2, 17, 30)
        assert updated.check_in_time == datetime(2024, 4, 2, 8, 55)

    @pytest.mark.asyncio
    async def test_check_out_before_check_in(self, db_session, make_employee) -> None:
        await make_employee("EMP001")
        service = AttendanceService(db_session)

        with pytest.raises(InvalidDateRangeError):
            await service.create_attendance(
                AttendanceCreate(
                    employee_id="EMP001",
                    check_in_time=datetime(2024, 4, 2, 9, 0),
                    check_out_time=datetime(2024, 4, 2, 8, 0),
                )
            )

    @pytest.mark.asyncio
    async def test_unknown_employee(self, db_session) -> None:
        service = AttendanceService(db_session)

        with pytest.raises(EmployeeNotFoundError):
            await service.create_attendance(
                AttendanceCreate(employee_id="EMP404", check_in_time=datetime(2024, 4, 2, 9, 0))
            )

    @pytest.mark.asyncio
    async def test_update_unknown_record(self, db_session) -> None:
        service = AttendanceService(db_session)

        with pytest.raises(AttendanceNotFoundError):
            await service.update_attendance(1, AttendanceUpdate(check_out_time=datetime(2024, 4, 2)))


class TestWindows:
    """Day windows are half-open on local midnight."""

    @pytest.mark.asyncio
    async def test_today_excludes_next_midnight(self, db_session, make_employee) -> None:
        await make_employee("EMP001")
        service = AttendanceService(db_session)
        inside = await service.create_attendance(
            AttendanceCreate(employee_id="EMP001", check_in_time=datetime(2024, 4, 2, 0, 0))
        )
        await service.create_attendance(
            AttendanceCreate(employee_id="EMP001", check_in_time=datetime(2024, 4, 3, 0, 0))
        )
        await service.create_attendance(
            AttendanceCreate(employee_id="EMP001", check_in_time=datetime(2024, 4, 1, 23, 59))
        )

        today = await service.get_today_attendance(today=date(2024, 4, 2))

        assert [r.id for r in today] == [inside.id]

    @pytest.mark.asyncio
    async def test_range_is_inclusive(self, db_session, make_employee) -> None:
        await make_employee("EMP001")
        service = AttendanceService(db_session)
        for day in (1, 2, 3, 4):
            await service.create_attendance(
                AttendanceCreate(employee_id="EMP001", check_in_time=datetime(2024, 4, day, 23, 0))
            )

        records = await service.get_attendance_in_range("EMP001", date(2024, 4, 2), date(2024, 4, 3))

        assert sorted(r.check_in_time.day for r in records) == [2, 3]

    @pytest.mark.asyncio
    async def test_range_end_before_start(self, db_session) -> None:
        service = AttendanceService(db_session)

        with pytest.raises(InvalidDateRangeError):
            await service.get_attendance_in_range("EMP001", date(2024, 4, 3), date(2024, 4, 2))
