"""Dashboard service: organisation overview, employee and manager dashboards."""

import logging
from datetime import date, timedelta

from sqlalchemy.ext.asyncio import AsyncSession

from hris_api.exceptions import EmployeeNotFoundError
from hris_api.models.domain.employee import EmploymentStatus
from hris_api.models.domain.performance import GoalStatus
from hris_api.models.domain.recruitment import VacancyStatus
from hris_api.models.dto.attendance import AttendanceResponse
from hris_api.models.dto.dashboard import (
    DirectReportSummary,
    EmployeeDashboardResponse,
    EmployeeProfileSummary,
    LeaveBalanceSummary,
    ManagerDashboardResponse,
    OverviewResponse,
    PayslipSummary,
)
from hris_api.repositories.attendance_repository import AttendanceRepository
from hris_api.repositories.department_repository import DepartmentRepository
from hris_api.repositories.employee_repository import EmployeeRepository
from hris_api.repositories.leave_repository import LeaveBalanceRepository, LeaveRequestRepository
from hris_api.repositories.payroll_repository import PayslipRepository
from hris_api.repositories.performance_repository import (
    PerformanceGoalRepository,
    PerformanceReviewRepository,
)
from hris_api.repositories.recruitment_repository import ApplicantRepository, JobVacancyRepository
from hris_api.utils.dates import day_window

logger = logging.getLogger(__name__)

# Days of attendance history shown on the employee dashboard
RECENT_ATTENDANCE_DAYS = 7


class DashboardService:
    """Service for dashboard data. All methods are read-only."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session."""
        self.session = session
        self.employee_repo = EmployeeRepository(session)
        self.department_repo = DepartmentRepository(session)
        self.attendance_repo = AttendanceRepository(session)
        self.leave_repo = LeaveRequestRepository(session)
        self.balance_repo = LeaveBalanceRepository(session)
        self.payslip_repo = PayslipRepository(session)
        self.goal_repo = PerformanceGoalRepository(session)
        self.review_repo = PerformanceReviewRepository(session)
        self.vacancy_repo = JobVacancyRepository(session)
        self.applicant_repo = ApplicantRepository(session)

    async def get_overview(self, today: date | None = None) -> OverviewResponse:
        """Get organisation-wide counters.

        Args:
            today: Reference day (defaults to the current local date)

        Returns:
            OverviewResponse
        """
        today = today or date.today()
        day_start, day_end = day_window(today)

        status_counts = await self.employee_repo.count_by_status()
        average_rating, _ = await self.review_repo.get_rating_summary()

        return OverviewResponse(
            total_employees=sum(status_counts.values()),
            active_employees=status_counts.get(EmploymentStatus.ACTIVE, 0),
            employees_on_leave=status_counts.get(EmploymentStatus.ON_LEAVE, 0),
            total_departments=await self.department_repo.count(),
            pending_leave_requests=await self.leave_repo.count_pending(),
            today_attendance=await self.attendance_repo.count_in_window(day_start, day_end),
            open_vacancies=await self.vacancy_repo.count_by_status(VacancyStatus.OPEN),
            total_applicants=await self.applicant_repo.count(),
            overdue_goals=await self.goal_repo.count_overdue(today),
            average_rating=round(average_rating, 2) if average_rating is not None else 0.0,
        )

    async def get_employee_dashboard(
        self,
        employee_id: str,
        today: date | None = None,
    ) -> EmployeeDashboardResponse:
        """Get the self-service dashboard of one employee.

        Args:
            employee_id: Employee business key
            today: Reference day (defaults to the current local date)

        Returns:
            EmployeeDashboardResponse

        Raises:
            EmployeeNotFoundError: If the employee does not exist
        """
        today = today or date.today()
        employee = await self.employee_repo.get_by_employee_id(employee_id)
        if employee is None:
            logger.warning(f"Dashboard requested for unknown employee {employee_id}")
            raise EmployeeNotFoundError(employee_id)

        balance = await self.balance_repo.get_by_employee_id(employee_id)
        leave_balance = (
            LeaveBalanceSummary(
                annual=balance.annual_leave_balance,
                sick=balance.sick_leave_balance,
                personal=balance.personal_leave_balance,
            )
            if balance
            else LeaveBalanceSummary()
        )

        window_start, _ = day_window(today - timedelta(days=RECENT_ATTENDANCE_DAYS - 1))
        _, window_end = day_window(today)
        recent = await self.attendance_repo.get_in_window(
            window_start,
            window_end,
            employee_id=employee_id,
            limit=RECENT_ATTENDANCE_DAYS,
            newest_first=True,
        )

        goal_counts = await self.goal_repo.count_by_status_for_employee(employee_id)

        latest = await self.payslip_repo.get_latest_for_employee(employee_id)
        latest_payslip = None
        if latest is not None:
            latest_payslip = PayslipSummary(
                period=f"{latest.pay_period_start.isoformat()} - {latest.pay_period_end.isoformat()}",
                pay_period_start=latest.pay_period_start,
                pay_period_end=latest.pay_period_end,
                net_salary=latest.net_salary,
            )

        return EmployeeDashboardResponse(
            profile=EmployeeProfileSummary(
                employee_id=employee.employee_id,
                full_name=employee.full_name,
                position=employee.position or "",
                department=employee.department or "",
                employment_status=employee.employment_status,
            ),
            leave_balance=leave_balance,
            recent_attendance=[AttendanceResponse.model_validate(r) for r in recent],
            pending_leave_requests=await self.leave_repo.count_pending([employee_id]),
            goals_in_progress=goal_counts.get(GoalStatus.IN_PROGRESS, 0),
            goals_completed=goal_counts.get(GoalStatus.COMPLETED, 0),
            latest_payslip=latest_payslip,
        )

    async def get_manager_dashboard(
        self,
        manager_id: str,
        today: date | None = None,
    ) -> ManagerDashboardResponse:
        """Get the team dashboard over a manager's direct reports.

        An unknown manager or one without reports yields an empty team.

        Args:
            manager_id: Manager's employee business key
            today: Reference day (defaults to the current local date)

        Returns:
            ManagerDashboardResponse
        """
        today = today or date.today()
        day_start, day_end = day_window(today)

        reports = await self.employee_repo.get_direct_reports(manager_id)
        report_ids = [r.employee_id for r in reports]

        present = await self.attendance_repo.get_present_employee_ids(
            day_start, day_end, report_ids
        )
        present_today = await self.attendance_repo.count_in_window(day_start, day_end, report_ids)
        pending_by_employee = await self.leave_repo.count_pending_by_employee(report_ids)
        average_rating, _ = await self.review_repo.get_rating_summary(report_ids)

        return ManagerDashboardResponse(
            manager_id=manager_id,
            team_size=len(reports),
            present_today=present_today,
            pending_leave_approvals=sum(pending_by_employee.values()),
            overdue_goals=await self.goal_repo.count_overdue(today, report_ids),
            average_team_rating=round(average_rating, 2) if average_rating is not None else 0.0,
            direct_reports=[
                DirectReportSummary(
                    employee_id=r.employee_id,
                    full_name=r.full_name,
                    position=r.position or "",
                    checked_in_today=r.employee_id in present,
                    pending_leave_requests=pending_by_employee.get(r.employee_id, 0),
                )
                for r in reports
            ],
        )
