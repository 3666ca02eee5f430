"""Domain models package."""

from hris_api.models.domain.employee import EmployeeRole, EmploymentStatus, Gender, MaritalStatus
from hris_api.models.domain.leave import LeaveStatus, LeaveType
from hris_api.models.domain.payroll import ComponentType
from hris_api.models.domain.performance import GoalStatus
from hris_api.models.domain.recruitment import ApplicantStatus, VacancyStatus

__all__ = [
    "ApplicantStatus",
    "ComponentType",
    "EmployeeRole",
    "EmploymentStatus",
    "Gender",
    "GoalStatus",
    "LeaveStatus",
    "LeaveType",
    "MaritalStatus",
    "VacancyStatus",
]
