"""SQLAlchemy ORM models package."""

from hris_api.models.orm.attendance import AttendanceORM
from hris_api.models.orm.base import Base
from hris_api.models.orm.department import DepartmentORM
from hris_api.models.orm.employee import EmployeeDocumentORM, EmployeeORM
from hris_api.models.orm.leave import LeaveBalanceORM, LeaveRequestORM
from hris_api.models.orm.payroll import EmployeeSalaryStructureORM, PayrollComponentORM, PayslipORM
from hris_api.models.orm.performance import PerformanceGoalORM, PerformanceReviewORM
from hris_api.models.orm.recruitment import ApplicantORM, JobVacancyORM

__all__ = [
    "Base",
    "ApplicantORM",
    "AttendanceORM",
    "DepartmentORM",
    "EmployeeDocumentORM",
    "EmployeeORM",
    "EmployeeSalaryStructureORM",
    "JobVacancyORM",
    "LeaveBalanceORM",
    "LeaveRequestORM",
    "PayrollComponentORM",
    "PayslipORM",
    "PerformanceGoalORM",
    "PerformanceReviewORM",
]
