"""Repositories package."""

from hris_api.repositories.attendance_repository import AttendanceRepository
from hris_api.repositories.base import BaseRepository
from hris_api.repositories.department_repository import DepartmentRepository
from hris_api.repositories.employee_document_repository import EmployeeDocumentRepository
from hris_api.repositories.employee_repository import EmployeeRepository
from hris_api.repositories.leave_repository import LeaveBalanceRepository, LeaveRequestRepository
from hris_api.repositories.payroll_repository import (
    PayrollComponentRepository,
    PayslipRepository,
    SalaryStructureRepository,
)
from hris_api.repositories.performance_repository import (
    PerformanceGoalRepository,
    PerformanceReviewRepository,
)
from hris_api.repositories.recruitment_repository import (
    ApplicantRepository,
    JobVacancyRepository,
)

__all__ = [
    "ApplicantRepository",
    "AttendanceRepository",
    "BaseRepository",
    "DepartmentRepository",
    "EmployeeDocumentRepository",
    "EmployeeRepository",
    "JobVacancyRepository",
    "LeaveBalanceRepository",
    "LeaveRequestRepository",
    "PayrollComponentRepository",
    "PayslipRepository",
    "PerformanceGoalRepository",
    "PerformanceReviewRepository",
    "SalaryStructureRepository",
]
