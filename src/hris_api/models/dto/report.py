"""Report DTOs for attendance, payroll and HR statistics."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel


class DepartmentAttendance(BaseModel):
    """Attendance rate of one department label."""

    department: str
    active_employees: int
    attendance_count: int
    attendance_rate: float


class DailyAttendance(BaseModel):
    """Presence counters for one calendar day."""

    day: date
    present: int
    absent: int
    late: int


class AttendanceStatsResponse(BaseModel):
    """Attendance statistics over an inclusive date range."""

    start_date: date
    end_date: date
    working_days: int
    active_employees: int
    total_records: int
    attendance_rate: float
    by_department: list[DepartmentAttendance]
    daily: list[DailyAttendance]


class DepartmentPayroll(BaseModel):
    """Payroll totals of one department label."""

    department: str
    total_gross: Decimal
    total_net: Decimal
    employee_count: int


class PayrollStatsResponse(BaseModel):
    """Payroll statistics for one calendar month."""

    year: int
    month: int
    payslip_count: int
    total_gross: Decimal
    total_allowances: Decimal
    total_deductions: Decimal
    total_net: Decimal
    average_salary: Decimal
    by_department: list[DepartmentPayroll]


class HRMetricsResponse(BaseModel):
    """Headcount, turnover and demographic distributions."""

    total_employees: int
    active_employees: int
    turnover_rate: float
    average_tenure_days: int
    new_hires_this_month: int
    terminations_this_month: int
    gender_distribution: dict[str, int]
    age_distribution: dict[str, int]
    department_distribution: dict[str, int]
