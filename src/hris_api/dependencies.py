"""Centralized dependency injection factories for FastAPI.

Each factory binds a service to the request-scoped database session.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hris_api.database import get_db
from hris_api.services.attendance_service import AttendanceService
from hris_api.services.dashboard_service import DashboardService
from hris_api.services.department_service import DepartmentService
from hris_api.services.employee_service import EmployeeService
from hris_api.services.leave_service import LeaveService
from hris_api.services.payroll_service import PayrollService
from hris_api.services.performance_service import PerformanceService
from hris_api.services.recruitment_service import RecruitmentService
from hris_api.services.report_service import ReportService


# =============================================================================
# Entity Service Factories
# =============================================================================


def get_employee_service(db: AsyncSession = Depends(get_db)) -> EmployeeService:
    """Get EmployeeService instance."""
    return EmployeeService(db)


def get_department_service(db: AsyncSession = Depends(get_db)) -> DepartmentService:
    """Get DepartmentService instance."""
    return DepartmentService(db)


def get_attendance_service(db: AsyncSession = Depends(get_db)) -> AttendanceService:
    """Get AttendanceService instance."""
    return AttendanceService(db)


def get_leave_service(db: AsyncSession = Depends(get_db)) -> LeaveService:
    """Get LeaveService instance."""
    return LeaveService(db)


def get_payroll_service(db: AsyncSession = Depends(get_db)) -> PayrollService:
    """Get PayrollService instance."""
    return PayrollService(db)


def get_performance_service(db: AsyncSession = Depends(get_db)) -> PerformanceService:
    """Get PerformanceService instance."""
    return PerformanceService(db)


def get_recruitment_service(db: AsyncSession = Depends(get_db)) -> RecruitmentService:
    """Get RecruitmentService instance."""
    return RecruitmentService(db)


# =============================================================================
# Reporting Service Factories
# =============================================================================


def get_dashboard_service(db: AsyncSession = Depends(get_db)) -> DashboardService:
    """Get DashboardService instance."""
    return DashboardService(db)


def get_report_service(db: AsyncSession = Depends(get_db)) -> ReportService:
    """Get ReportService instance."""
    return ReportService(db)
