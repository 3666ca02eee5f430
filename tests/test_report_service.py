"""Statistics report tests."""

from datetime import date, datetime, time
from decimal import Decimal

import pytest

from hris_api.exceptions import InvalidDateRangeError
from hris_api.models.domain.employee import EmploymentStatus, Gender
from hris_api.models.orm import AttendanceORM, PayslipORM
from hris_api.services.report_service import ReportService, age_bracket, department_label


def _payslip(employee_id: str, start: date, end: date, gross: str, deductions: str) -> PayslipORM:
    gross_amount = Decimal(gross)
    deduction_amount = Decimal(deductions)
    return PayslipORM(
        employee_id=employee_id,
        pay_period_start=start,
        pay_period_end=end,
        gross_salary=gross_amount,
        total_allowances=gross_amount,
        total_deductions=deduction_amount,
        net_salary=gross_amount - deduction_amount,
    )


class TestHelpers:
    """Grouping helpers."""

    @pytest.mark.parametrize(
        ("age", "expected"),
        [(17, None), (18, "18-25"), (25, "18-25"), (26, "26-35"), (55, "46-55"), (56, "56+"), (90, "56+")],
    )
    def test_age_bracket(self, age: int, expected: str | None) -> None:
        assert age_bracket(age) == expected

    @pytest.mark.parametrize(("label", "expected"), [(None, "Unassigned"), ("  ", "Unassigned"), ("Sales", "Sales")])
    def test_department_label(self, label: str | None, expected: str) -> None:
        assert department_label(label) == expected


class TestAttendanceStats:
    """Attendance rates over a working week."""

    @pytest.mark.asyncio
    async def test_week(self, db_session, make_employee) -> None:
        await make_employee("EMP001", department="Engineering")
        await make_employee("EMP002", department="Engineering")
        await make_employee("EMP003")
        await make_employee("EMP004", department="Sales", employment_status=EmploymentStatus.TERMINATED)
        db_session.add_all(
            [
                AttendanceORM(employee_id="EMP001", check_in_time=datetime(2024, 6, 10, 8, 30)),
                AttendanceORM(employee_id="EMP001", check_in_time=datetime(2024, 6, 10, 13, 0)),
                AttendanceORM(employee_id="EMP001", check_in_time=datetime(2024, 6, 11, 9, 0)),
                AttendanceORM(employee_id="EMP002", check_in_time=datetime(2024, 6, 10, 9, 15)),
                AttendanceORM(employee_id="EMP004", check_in_time=datetime(2024, 6, 10, 8, 0)),
                # Outside the range
                AttendanceORM(employee_id="EMP001", check_in_time=datetime(2024, 6, 15, 8, 0)),
            ]
        )
        await db_session.flush()
        service = ReportService(db_session, late_arrival_cutoff=time(9, 0))

        stats = await service.get_attendance_stats(date(2024, 6, 10), date(2024, 6, 14))

        assert stats.working_days == 5
        assert stats.active_employees == 3
        assert stats.total_records == 5
        assert stats.attendance_rate == 33.33
        assert [(d.department, d.active_employees, d.attendance_count, d.attendance_rate) for d in stats.by_department] == [
            ("Engineering", 2, 4, 40.0),
            ("Unassigned", 1, 0, 0.0),
        ]
        assert [(d.day.day, d.present, d.absent, d.late) for d in stats.daily] == [
            (10, 4, 0, 2),
            (11, 1, 2, 1),
            (12, 0, 3, 0),
            (13, 0, 3, 0),
            (14, 0, 3, 0),
        ]

    @pytest.mark.asyncio
    async def test_repeated_check_ins_all_count(self, db_session, make_employee) -> None:
        await make_employee("EMP001")
        db_session.add_all(
            [
                AttendanceORM(employee_id="EMP001", check_in_time=datetime(2024, 6, 10, 8, 0)),
                AttendanceORM(employee_id="EMP001", check_in_time=datetime(2024, 6, 10, 13, 0)),
            ]
        )
        await db_session.flush()
        service = ReportService(db_session, late_arrival_cutoff=time(9, 0))

        stats = await service.get_attendance_stats(date(2024, 6, 10), date(2024, 6, 10))

        assert stats.total_records == 2
        assert [(d.present, d.absent, d.late) for d in stats.daily] == [(2, 0, 1)]

    @pytest.mark.asyncio
    async def test_weekend_range_has_zero_rate(self, db_session, make_employee) -> None:
        await make_employee("EMP001")
        db_session.add(AttendanceORM(employee_id="EMP001", check_in_time=datetime(2024, 6, 15, 10, 0)))
        await db_session.flush()

        stats = await ReportService(db_session).get_attendance_stats(date(2024, 6, 15), date(2024, 6, 16))

        assert stats.working_days == 0
        assert stats.attendance_rate == 0.0

    @pytest.mark.asyncio
    async def test_end_before_start(self, db_session) -> None:
        with pytest.raises(InvalidDateRangeError):
            await ReportService(db_session).get_attendance_stats(date(2024, 6, 14), date(2024, 6, 10))


class TestPayrollStats:
    """Monthly payroll totals."""

    @pytest.mark.asyncio
    async def test_month(self, db_session, make_employee) -> None:
        await make_employee("EMP001", department="Engineering")
        await make_employee("EMP002", department="Engineering")
        may = (date(2024, 5, 1), date(2024, 5, 31))
        db_session.add_all(
            [
                _payslip("EMP001", *may, "1000", "100"),
                _payslip("EMP002", *may, "2000", "0"),
                _payslip("EMP404", *may, "500", "0"),
                _payslip("EMP001", date(2024, 4, 1), date(2024, 4, 30), "1000", "100"),
                _payslip("EMP002", date(2024, 5, 15), date(2024, 6, 14), "900", "0"),
            ]
        )
        await db_session.flush()

        stats = await ReportService(db_session).get_payroll_stats(2024, 5)

        assert stats.payslip_count == 3
        assert stats.total_gross == Decimal("3500.00")
        assert stats.total_deductions == Decimal("100.00")
        assert stats.total_net == Decimal("3400.00")
        assert stats.average_salary == Decimal("1133.33")
        assert [(d.department, d.total_gross, d.total_net, d.employee_count) for d in stats.by_department] == [
            ("Engineering", Decimal("3000.00"), Decimal("2900.00"), 2),
            ("Unassigned", Decimal("500.00"), Decimal("500.00"), 1),
        ]

    @pytest.mark.asyncio
    async def test_empty_month(self, db_session) -> None:
        stats = await ReportService(db_session).get_payroll_stats(2024, 2)

        assert stats.payslip_count == 0
        assert stats.average_salary == Decimal("0.00")
        assert stats.by_department == []


class TestHRMetrics:
    """Headcount, turnover and distributions."""

    @pytest.mark.asyncio
    async def test_metrics(self, db_session, make_employee) -> None:
        await make_employee(
            "EMP001",
            gender=Gender.MALE,
            date_of_birth=date(1990, 1, 1),
            start_date=date(2020, 6, 15),
            department="Engineering",
        )
        await make_employee(
            "EMP002",
            gender=Gender.FEMALE,
            date_of_birth=date(2000, 6, 15),
            start_date=date(2024, 6, 3),
            department="Engineering",
        )
        await make_employee(
            "EMP003",
            start_date=date(2019, 1, 1),
            termination_date=date(2024, 6, 10),
            employment_status=EmploymentStatus.TERMINATED,
        )
        await make_employee(
            "EMP004",
            gender=Gender.OTHER,
            start_date=date(2018, 1, 1),
            termination_date=date(2024, 5, 20),
            employment_status=EmploymentStatus.TERMINATED,
            department="Sales",
        )
        await make_employee(
            "EMP005",
            gender=Gender.FEMALE,
            employment_status=EmploymentStatus.ON_LEAVE,
            department="Sales",
        )

        metrics = await ReportService(db_session).get_hr_metrics(today=date(2024, 6, 15))

        assert metrics.total_employees == 5
        assert metrics.active_employees == 2
        assert metrics.new_hires_this_month == 1
        assert metrics.terminations_this_month == 1
        assert metrics.turnover_rate == 33.33
        assert metrics.average_tenure_days == 736
        assert metrics.gender_distribution == {"Male": 1, "Female": 2, "Other": 1, "Unspecified": 1}
        assert metrics.age_distribution == {"18-25": 1, "26-35": 1, "36-45": 0, "46-55": 0, "56+": 0}
        assert metrics.department_distribution == {"Engineering": 2, "Unassigned": 1, "Sales": 2}

    @pytest.mark.asyncio
    async def test_no_employees(self, db_session) -> None:
        metrics = await ReportService(db_session).get_hr_metrics(today=date(2024, 6, 15))

        assert metrics.total_employees == 0
        assert metrics.turnover_rate == 0.0
        assert metrics.average_tenure_days == 0
        assert metrics.gender_distribution == {}
