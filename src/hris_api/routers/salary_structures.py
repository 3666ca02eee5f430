"""Employee salary structure router."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from hris_api.dependencies import get_payroll_service
from hris_api.models.dto.common import DeleteResponse
from hris_api.models.dto.payroll import (
    SalaryStructureCreate,
    SalaryStructureResponse,
    SalaryStructureUpdate,
)
from hris_api.services.payroll_service import PayrollService

router = APIRouter()


@router.post("", response_model=SalaryStructureResponse, status_code=status.HTTP_201_CREATED)
async def create_salary_structure(
    body: SalaryStructureCreate,
    service: Annotated[PayrollService, Depends(get_payroll_service)],
) -> SalaryStructureResponse:
    """Assign a payroll component to an employee."""
    return await service.create_salary_structure(body)


@router.get("/employee/{employee_id}", response_model=list[SalaryStructureResponse])
async def get_salary_structure(
    employee_id: str,
    service: Annotated[PayrollService, Depends(get_payroll_service)],
) -> list[SalaryStructureResponse]:
    """List the salary structure of an employee."""
    return await service.get_salary_structure(employee_id)


@router.patch("/{id}", response_model=SalaryStructureResponse)
async def update_salary_structure(
    id: int,
    body: SalaryStructureUpdate,
    service: Annotated[PayrollService, Depends(get_payroll_service)],
) -> SalaryStructureResponse:
    """Change the amount of an assigned component."""
    return await service.update_salary_structure(id, body.amount)


@router.delete("/{id}", response_model=DeleteResponse)
async def delete_salary_structure(
    id: int,
    service: Annotated[PayrollService, Depends(get_payroll_service)],
) -> DeleteResponse:
    """Remove a component assignment."""
    return await service.delete_salary_structure(id)
