"""Data Transfer Objects package."""

from hris_api.models.dto.common import DeleteResponse, PartialUpdate
from hris_api.models.dto.dashboard import (
    EmployeeDashboardResponse,
    ManagerDashboardResponse,
    OverviewResponse,
)
from hris_api.models.dto.employee import EmployeeCreate, EmployeeResponse, EmployeeUpdate
from hris_api.models.dto.payroll import PayslipResponse
from hris_api.models.dto.report import (
    AttendanceStatsResponse,
    HRMetricsResponse,
    PayrollStatsResponse,
)

__all__ = [
    "AttendanceStatsResponse",
    "DeleteResponse",
    "EmployeeCreate",
    "EmployeeDashboardResponse",
    "EmployeeResponse",
    "EmployeeUpdate",
    "HRMetricsResponse",
    "ManagerDashboardResponse",
    "OverviewResponse",
    "PartialUpdate",
    "PayrollStatsResponse",
    "PayslipResponse",
]
