"""Dashboard router."""

from typing import Annotated

from fastapi import APIRouter, Depends

from hris_api.dependencies import get_dashboard_service
from hris_api.models.dto.dashboard import (
    EmployeeDashboardResponse,
    ManagerDashboardResponse,
    OverviewResponse,
)
from hris_api.services.dashboard_service import DashboardService

router = APIRouter()


@router.get("/overview", response_model=OverviewResponse)
async def get_overview(
    service: Annotated[DashboardService, Depends(get_dashboard_service)],
) -> OverviewResponse:
    """Organisation-wide counters."""
    return await service.get_overview()


@router.get("/employee/{employee_id}", response_model=EmployeeDashboardResponse)
async def get_employee_dashboard(
    employee_id: str,
    service: Annotated[DashboardService, Depends(get_dashboard_service)],
) -> EmployeeDashboardResponse:
    """Personal dashboard of an employee."""
    return await service.get_employee_dashboard(employee_id)


@router.get("/manager/{manager_id}", response_model=ManagerDashboardResponse)
async def get_manager_dashboard(
    manager_id: str,
    service: Annotated[DashboardService, Depends(get_dashboard_service)],
) -> ManagerDashboardResponse:
    """Team dashboard of a manager."""
    return await service.get_manager_dashboard(manager_id)
