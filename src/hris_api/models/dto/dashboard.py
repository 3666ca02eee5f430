"""Dashboard DTOs."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel

from hris_api.models.domain.employee import EmploymentStatus
from hris_api.models.dto.attendance import AttendanceResponse


class OverviewResponse(BaseModel):
    """Organisation-wide dashboard counters."""

    total_employees: int
    active_employees: int
    employees_on_leave: int
    total_departments: int
    pending_leave_requests: int
    today_attendance: int
    open_vacancies: int
    total_applicants: int
    overdue_goals: int
    average_rating: float


class EmployeeProfileSummary(BaseModel):
    """Profile projection shown on the employee dashboard."""

    employee_id: str
    full_name: str
    position: str
    department: str
    employment_status: EmploymentStatus


class LeaveBalanceSummary(BaseModel):
    """Leave balance counters, zero when not provisioned."""

    annual: int = 0
    sick: int = 0
    personal: int = 0


class PayslipSummary(BaseModel):
    """Latest payslip shown on the employee dashboard."""

    period: str
    pay_period_start: date
    pay_period_end: date
    net_salary: Decimal


class EmployeeDashboardResponse(BaseModel):
    """Self-service dashboard for one employee."""

    profile: EmployeeProfileSummary
    leave_balance: LeaveBalanceSummary
    recent_attendance: list[AttendanceResponse]
    pending_leave_requests: int
    goals_in_progress: int
    goals_completed: int
    latest_payslip: PayslipSummary | None = None


class DirectReportSummary(BaseModel):
    """Direct report entry on the manager dashboard."""

    employee_id: str
    full_name: str
    position: str
    checked_in_today: bool
    pending_leave_requests: int


class ManagerDashboardResponse(BaseModel):
    """Team dashboard for a manager's direct reports."""

    manager_id: str
    team_size: int
    present_today: int
    pending_leave_approvals: int
    overdue_goals: int
    average_team_rating: float
    direct_reports: list[DirectReportSummary]
