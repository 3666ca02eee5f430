"""Employees router."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from hris_api.dependencies import get_employee_service
from hris_api.models.domain.employee import EmploymentStatus
from hris_api.models.dto.common import DeleteResponse
from hris_api.models.dto.employee import EmployeeCreate, EmployeeResponse, EmployeeUpdate
from hris_api.services.employee_service import EmployeeService

router = APIRouter()


@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
async def create_employee(
    body: EmployeeCreate,
    service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> EmployeeResponse:
    """Create an employee."""
    return await service.create_employee(body)


@router.get("", response_model=list[EmployeeResponse])
async def list_employees(
    service: Annotated[EmployeeService, Depends(get_employee_service)],
    search: str | None = Query(default=None, max_length=200, description="Name, email or employee ID"),
    employment_status: EmploymentStatus | None = Query(default=None, alias="status"),
    department: str | None = Query(default=None, max_length=100),
) -> list[EmployeeResponse]:
    """List employees with optional filters."""
    return await service.list_employees(
        search=search,
        status=employment_status,
        department=department,
    )


@router.get("/by-employee-id/{employee_id}", response_model=EmployeeResponse)
async def get_employee_by_employee_id(
    employee_id: str,
    service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> EmployeeResponse:
    """Get an employee by business key."""
    employee = await service.get_employee_by_employee_id(employee_id)
    if employee is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    return employee


@router.get("/{id}", response_model=EmployeeResponse)
async def get_employee(
    id: int,
    service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> EmployeeResponse:
    """Get an employee by id."""
    employee = await service.get_employee(id)
    if employee is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    return employee


@router.patch("/{id}", response_model=EmployeeResponse)
async def update_employee(
    id: int,
    body: EmployeeUpdate,
    service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> EmployeeResponse:
    """Update the fields present in the request body."""
    return await service.update_employee(id, body)


@router.delete("/{id}", response_model=DeleteResponse)
async def delete_employee(
    id: int,
    service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> DeleteResponse:
    """Delete an employee."""
    return await service.delete_employee(id)
