"""Dashboard service tests."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from hris_api.exceptions import EmployeeNotFoundError
from hris_api.models.domain.employee import EmploymentStatus
from hris_api.models.domain.leave import LeaveStatus, LeaveType
from hris_api.models.domain.performance import GoalStatus
from hris_api.models.domain.recruitment import VacancyStatus
from hris_api.models.orm import (
    AttendanceORM,
    DepartmentORM,
    JobVacancyORM,
    LeaveBalanceORM,
    LeaveRequestORM,
    PayslipORM,
    PerformanceGoalORM,
    PerformanceReviewORM,
)
from hris_api.services.dashboard_service import DashboardService

TODAY = date(2024, 6, 12)


def _leave(employee_id: str, status: LeaveStatus = LeaveStatus.PENDING) -> LeaveRequestORM:
    return LeaveRequestORM(
        employee_id=employee_id,
        leave_type=LeaveType.ANNUAL,
        start_date=date(2024, 7, 1),
        end_date=date(2024, 7, 2),
        status=status,
    )


class TestOverview:
    """Organisation-wide counters."""

    @pytest.mark.asyncio
    async def test_empty_database(self, db_session) -> None:
        overview = await DashboardService(db_session).get_overview(today=TODAY)

        assert overview.model_dump() == {
            "total_employees": 0,
            "active_employees": 0,
            "employees_on_leave": 0,
            "total_departments": 0,
            "pending_leave_requests": 0,
            "today_attendance": 0,
            "open_vacancies": 0,
            "total_applicants": 0,
            "overdue_goals": 0,
            "average_rating": 0.0,
        }

    @pytest.mark.asyncio
    async def test_counts(self, db_session, make_employee) -> None:
        await make_employee("EMP001")
        await make_employee("EMP002", employment_status=EmploymentStatus.ON_LEAVE)
        await make_employee("EMP003", employment_status=EmploymentStatus.TERMINATED)
        db_session.add_all(
            [
                DepartmentORM(name="Engineering"),
                _leave("EMP001"),
                _leave("EMP002", LeaveStatus.APPROVED),
                AttendanceORM(employee_id="EMP001", check_in_time=datetime(2024, 6, 12, 9, 5)),
                AttendanceORM(employee_id="EMP002", check_in_time=datetime(2024, 6, 11, 9, 5)),
                JobVacancyORM(title="SRE", status=VacancyStatus.OPEN, posted_date=TODAY),
                JobVacancyORM(title="Old", status=VacancyStatus.CLOSED, posted_date=TODAY),
                PerformanceGoalORM(
                    employee_id="EMP001",
                    title="Late",
                    due_date=date(2024, 6, 1),
                    status=GoalStatus.IN_PROGRESS,
                ),
                PerformanceReviewORM(
                    employee_id="EMP001", reviewer_id="EMP002", review_date=TODAY, overall_rating=4
                ),
                PerformanceReviewORM(
                    employee_id="EMP002", reviewer_id="EMP001", review_date=TODAY, overall_rating=3
                ),
            ]
        )
        await db_session.flush()

        overview = await DashboardService(db_session).get_overview(today=TODAY)

        assert overview.total_employees == 3
        assert overview.active_employees == 1
        assert overview.employees_on_leave == 1
        assert overview.total_departments == 1
        assert overview.pending_leave_requests == 1
        assert overview.today_attendance == 1
        assert overview.open_vacancies == 1
        assert overview.overdue_goals == 1
        assert overview.average_rating == 3.5


class TestEmployeeDashboard:
    """Self-service dashboard."""

    @pytest.mark.asyncio
    async def test_unknown_employee(self, db_session) -> None:
        with pytest.raises(EmployeeNotFoundError):
            await DashboardService(db_session).get_employee_dashboard("EMP404", today=TODAY)

    @pytest.mark.asyncio
    async def test_without_history(self, db_session, make_employee) -> None:
        await make_employee("EMP001", full_name="Jane Doe")

        dashboard = await DashboardService(db_session).get_employee_dashboard("EMP001", today=TODAY)

        assert dashboard.profile.full_name == "Jane Doe"
        assert dashboard.profile.position == ""
        assert dashboard.leave_balance.annual == 0
        assert dashboard.recent_attendance == []
        assert dashboard.latest_payslip is None

    @pytest.mark.asyncio
    async def test_recent_activity(self, db_session, make_employee) -> None:
        await make_employee("EMP001", position="Engineer", department="Engineering")
        db_session.add_all(
            [
                LeaveBalanceORM(
                    employee_id="EMP001",
                    annual_leave_balance=12,
                    sick_leave_balance=5,
                    personal_leave_balance=2,
                ),
                AttendanceORM(employee_id="EMP001", check_in_time=datetime(2024, 6, 12, 8, 0)),
                AttendanceORM(employee_id="EMP001", check_in_time=datetime(2024, 6, 6, 8, 0)),
                # Outside the seven-day window
                AttendanceORM(employee_id="EMP001", check_in_time=datetime(2024, 6, 5, 23, 0)),
                _leave("EMP001"),
                _leave("EMP001", LeaveStatus.REJECTED),
                PerformanceGoalORM(employee_id="EMP001", title="A", status=GoalStatus.IN_PROGRESS),
                PerformanceGoalORM(employee_id="EMP001", title="B", status=GoalStatus.COMPLETED),
                PerformanceGoalORM(employee_id="EMP001", title="C", status=GoalStatus.COMPLETED),
                PayslipORM(
                    employee_id="EMP001",
                    pay_period_start=date(2024, 4, 1),
                    pay_period_end=date(2024, 4, 30),
                    gross_salary=Decimal("1000.00"),
                    total_allowances=Decimal("1000.00"),
                    total_deductions=Decimal("0.00"),
                    net_salary=Decimal("1000.00"),
                ),
                PayslipORM(
                    employee_id="EMP001",
                    pay_period_start=date(2024, 5, 1),
                    pay_period_end=date(2024, 5, 31),
                    gross_salary=Decimal("1100.00"),
                    total_allowances=Decimal("1100.00"),
                    total_deductions=Decimal("100.00"),
                    net_salary=Decimal("1000.00"),
                ),
            ]
        )
        await db_session.flush()

        dashboard = await DashboardService(db_session).get_employee_dashboard("EMP001", today=TODAY)

        assert dashboard.leave_balance.annual == 12
        assert dashboard.leave_balance.personal == 2
        assert [r.check_in_time.day for r in dashboard.recent_attendance] == [12, 6]
        assert dashboard.pending_leave_requests == 1
        assert dashboard.goals_in_progress == 1
        assert dashboard.goals_completed == 2
        assert dashboard.latest_payslip.period == "2024-05-01 - 2024-05-31"


class TestManagerDashboard:
    """Team dashboard over direct reports."""

    @pytest.mark.asyncio
    async def test_unknown_manager_has_empty_team(self, db_session) -> None:
        dashboard = await DashboardService(db_session).get_manager_dashboard("MGR404", today=TODAY)

        assert dashboard.team_size == 0
        assert dashboard.present_today == 0
        assert dashboard.average_team_rating == 0.0
        assert dashboard.direct_reports == []

    @pytest.mark.asyncio
    async def test_team(self, db_session, make_employee) -> None:
        await make_employee("MGR001")
        await make_employee("EMP001", manager_id="MGR001")
        await make_employee("EMP002", manager_id="MGR001")
        await make_employee("EMP003")
        db_session.add_all(
            [
                AttendanceORM(employee_id="EMP001", check_in_time=datetime(2024, 6, 12, 9, 0)),
                AttendanceORM(employee_id="EMP003", check_in_time=datetime(2024, 6, 12, 9, 0)),
                _leave("EMP002"),
                _leave("EMP002"),
                _leave("EMP003"),
                PerformanceReviewORM(
                    employee_id="EMP001", reviewer_id="MGR001", review_date=TODAY, overall_rating=5
                ),
                PerformanceReviewORM(
                    employee_id="EMP002", reviewer_id="MGR001", review_date=TODAY, overall_rating=2
                ),
                PerformanceReviewORM(
                    employee_id="EMP003", reviewer_id="MGR001", review_date=TODAY, overall_rating=1
                ),
            ]
        )
        await db_session.flush()

        dashboard = await DashboardService(db_session).get_manager_dashboard("MGR001", today=TODAY)

        assert dashboard.team_size == 2
        assert dashboard.present_today == 1
        assert dashboard.pending_leave_approvals == 2
        assert dashboard.average_team_rating == 3.5
        reports = {r.employee_id: r for r in dashboard.direct_reports}
        assert reports["EMP001"].checked_in_today is True
        assert reports["EMP002"].checked_in_today is False
        assert reports["EMP002"].pending_leave_requests == 2

    @pytest.mark.asyncio
    async def test_repeated_check_ins_count_as_attendance(self, db_session, make_employee) -> None:
        await make_employee("MGR001")
        await make_employee("EMP001", manager_id="MGR001")
        await make_employee("EMP002", manager_id="MGR001")
        db_session.add_all(
            [
                AttendanceORM(employee_id="EMP001", check_in_time=datetime(2024, 6, 12, 8, 30)),
                AttendanceORM(employee_id="EMP001", check_in_time=datetime(2024, 6, 12, 13, 0)),
                AttendanceORM(employee_id="EMP002", check_in_time=datetime(2024, 6, 11, 8, 30)),
            ]
        )
        await db_session.flush()
        service = DashboardService(db_session)

        dashboard = await service.get_manager_dashboard("MGR001", today=TODAY)
        overview = await service.get_overview(today=TODAY)

        assert dashboard.present_today == 2
        assert dashboard.present_today == overview.today_attendance
        reports = {r.employee_id: r for r in dashboard.direct_reports}
        assert reports["EMP001"].checked_in_today is True
        assert reports["EMP002"].checked_in_today is False
