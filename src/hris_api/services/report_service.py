"""Report service for attendance, payroll and HR statistics."""

import logging
from collections import defaultdict
from datetime import date, datetime, time, timedelta
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from hris_api.config import get_settings
from hris_api.exceptions import InvalidDateRangeError
from hris_api.models.domain.employee import EmploymentStatus
from hris_api.models.dto.report import (
    AttendanceStatsResponse,
    DailyAttendance,
    DepartmentAttendance,
    DepartmentPayroll,
    HRMetricsResponse,
    PayrollStatsResponse,
)
from hris_api.repositories.attendance_repository import AttendanceRepository
from hris_api.repositories.employee_repository import EmployeeRepository
from hris_api.repositories.payroll_repository import PayslipRepository
from hris_api.utils.dates import (
    age_in_years,
    count_working_days,
    iter_days,
    month_bounds,
    one_year_before,
)
from hris_api.utils.money import ZERO, round_rate, sum_money, to_money

logger = logging.getLogger(__name__)

UNASSIGNED_DEPARTMENT = "Unassigned"

# (label, lowest age, highest age or None for open-ended)
AGE_BRACKETS: list[tuple[str, int, int | None]] = [
    ("18-25", 18, 25),
    ("26-35", 26, 35),
    ("36-45", 36, 45),
    ("46-55", 46, 55),
    ("56+", 56, None),
]


def department_label(department: str | None) -> str:
    """Department label used for grouping; blank labels are Unassigned."""
    if department is None or not department.strip():
        return UNASSIGNED_DEPARTMENT
    return department


def age_bracket(age: int) -> str | None:
    """Bracket label for an age, None below the lowest bracket."""
    for label, low, high in AGE_BRACKETS:
        if age >= low and (high is None or age <= high):
            return label
    return None


class ReportService:
    """Service for statistics reports. All methods are read-only."""

    def __init__(self, session: AsyncSession, late_arrival_cutoff: time | None = None) -> None:
        """Initialize service with database session.

        Args:
            session: Database session
            late_arrival_cutoff: Check-ins at or after this time are late
                (defaults to the configured cut-off)
        """
        self.session = session
        self.employee_repo = EmployeeRepository(session)
        self.attendance_repo = AttendanceRepository(session)
        self.payslip_repo = PayslipRepository(session)
        self.late_arrival_cutoff = late_arrival_cutoff or get_settings().late_arrival_cutoff

    async def get_attendance_stats(self, start_date: date, end_date: date) -> AttendanceStatsResponse:
        """Attendance statistics over inclusive calendar days.

        The attendance rate relates check-in rows to the number of active
        employees times the weekdays in the range.

        Args:
            start_date: First day
            end_date: Last day

        Returns:
            AttendanceStatsResponse

        Raises:
            InvalidDateRangeError: If end_date precedes start_date
        """
        if end_date < start_date:
            logger.warning(f"Attendance stats with end {end_date} before start {start_date}")
            raise InvalidDateRangeError(start_date, end_date)

        working_days = count_working_days(start_date, end_date)
        active = await self.employee_repo.get_by_status(EmploymentStatus.ACTIVE)
        records = await self.attendance_repo.get_in_window(
            datetime.combine(start_date, time.min),
            datetime.combine(end_date + timedelta(days=1), time.min),
        )

        # Department breakdown over active employees only
        department_members: dict[str, set[str]] = defaultdict(set)
        for employee in active:
            department_members[department_label(employee.department)].add(employee.employee_id)
        rows_per_employee: dict[str, int] = defaultdict(int)
        for record in records:
            rows_per_employee[record.employee_id] += 1

        by_department = []
        for label in sorted(department_members):
            members = department_members[label]
            count = sum(rows_per_employee[employee_id] for employee_id in members)
            by_department.append(
                DepartmentAttendance(
                    department=label,
                    active_employees=len(members),
                    attendance_count=count,
                    attendance_rate=round_rate(count, len(members) * working_days),
                )
            )

        # Daily breakdown; every check-in row counts, repeats included
        check_ins_per_day: dict[date, list[time]] = defaultdict(list)
        for record in records:
            check_ins_per_day[record.check_in_time.date()].append(record.check_in_time.time())

        daily = []
        for day in iter_days(start_date, end_date):
            check_ins = check_ins_per_day.get(day, [])
            present = len(check_ins)
            daily.append(
                DailyAttendance(
                    day=day,
                    present=present,
                    absent=max(len(active) - present, 0),
                    late=sum(1 for t in check_ins if t >= self.late_arrival_cutoff),
                )
            )

        return AttendanceStatsResponse(
            start_date=start_date,
            end_date=end_date,
            working_days=working_days,
            active_employees=len(active),
            total_records=len(records),
            attendance_rate=round_rate(len(records), len(active) * working_days),
            by_department=by_department,
            daily=daily,
        )

    async def get_payroll_stats(self, year: int, month: int) -> PayrollStatsResponse:
        """Payroll totals for payslips whose period lies inside a calendar month.

        Args:
            year: Calendar year
            month: Calendar month (1-12)

        Returns:
            PayrollStatsResponse
        """
        month_start, month_end = month_bounds(year, month)
        rows = await self.payslip_repo.get_within_with_department(month_start, month_end)

        gross: dict[str, list[Decimal]] = defaultdict(list)
        net: dict[str, list[Decimal]] = defaultdict(list)
        members: dict[str, set[str]] = defaultdict(set)
        for payslip, department in rows:
            label = department_label(department)
            gross[label].append(payslip.gross_salary)
            net[label].append(payslip.net_salary)
            members[label].add(payslip.employee_id)

        payslips = [payslip for payslip, _ in rows]
        total_net = sum_money(p.net_salary for p in payslips)
        average = to_money(total_net / len(payslips)) if payslips else ZERO

        return PayrollStatsResponse(
            year=year,
            month=month,
            payslip_count=len(payslips),
            total_gross=sum_money(p.gross_salary for p in payslips),
            total_allowances=sum_money(p.total_allowances for p in payslips),
            total_deductions=sum_money(p.total_deductions for p in payslips),
            total_net=total_net,
            average_salary=average,
            by_department=[
                DepartmentPayroll(
                    department=label,
                    total_gross=sum_money(gross[label]),
                    total_net=sum_money(net[label]),
                    employee_count=len(members[label]),
                )
                for label in sorted(members)
            ],
        )

    async def get_hr_metrics(self, today: date | None = None) -> HRMetricsResponse:
        """Headcount, turnover, tenure and demographic distributions.

        Args:
            today: Reference day (defaults to the current local date)

        Returns:
            HRMetricsResponse
        """
        today = today or date.today()
        month_start = today.replace(day=1)
        year_ago = one_year_before(today)

        employees = await self.employee_repo.get_all()

        active_count = 0
        tenure_days: list[int] = []
        new_hires = 0
        terminations = 0
        turnover_base = 0
        gender_distribution: dict[str, int] = defaultdict(int)
        age_distribution: dict[str, int] = {label: 0 for label, _, _ in AGE_BRACKETS}
        department_distribution: dict[str, int] = defaultdict(int)

        for employee in employees:
            is_active = employee.employment_status == EmploymentStatus.ACTIVE
            if is_active:
                active_count += 1

            if employee.start_date is not None:
                if employee.start_date >= month_start:
                    new_hires += 1
                if employee.start_date < year_ago:
                    turnover_base += 1
                if is_active:
                    tenure_days.append((today - employee.start_date).days)

            if (
                employee.employment_status == EmploymentStatus.TERMINATED
                and employee.termination_date is not None
                and employee.termination_date >= month_start
            ):
                terminations += 1

            gender_distribution[str(employee.gender) if employee.gender else "Unspecified"] += 1

            if employee.date_of_birth is not None:
                bracket = age_bracket(age_in_years(employee.date_of_birth, today))
                if bracket is not None:
                    age_distribution[bracket] += 1

            department_distribution[department_label(employee.department)] += 1

        return HRMetricsResponse(
            total_employees=len(employees),
            active_employees=active_count,
            turnover_rate=round_rate(terminations, turnover_base),
            average_tenure_days=sum(tenure_days) // len(tenure_days) if tenure_days else 0,
            new_hires_this_month=new_hires,
            terminations_this_month=terminations,
            gender_distribution=dict(gender_distribution),
            age_distribution=age_distribution,
            department_distribution=dict(department_distribution),
        )
