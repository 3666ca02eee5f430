"""Payslips router."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from hris_api.dependencies import get_payroll_service
from hris_api.models.dto.payroll import (
    MonthlyPayslipRequest,
    PayslipCreate,
    PayslipGenerateRequest,
    PayslipResponse,
)
from hris_api.services.payroll_service import PayrollService

router = APIRouter()


@router.post("", response_model=PayslipResponse, status_code=status.HTTP_201_CREATED)
async def create_payslip(
    body: PayslipCreate,
    service: Annotated[PayrollService, Depends(get_payroll_service)],
) -> PayslipResponse:
    """Record a payslip with explicit amounts."""
    return await service.create_payslip(body)


@router.post("/generate", response_model=PayslipResponse)
async def generate_payslip(
    body: PayslipGenerateRequest,
    service: Annotated[PayrollService, Depends(get_payroll_service)],
) -> PayslipResponse:
    """Generate a payslip from the salary structure, or return the existing one."""
    return await service.generate_payslip(
        body.employee_id, body.pay_period_start, body.pay_period_end
    )


@router.post("/generate-monthly", response_model=list[PayslipResponse])
async def generate_monthly_payslips(
    body: MonthlyPayslipRequest,
    service: Annotated[PayrollService, Depends(get_payroll_service)],
) -> list[PayslipResponse]:
    """Generate payslips of a month for every active employee."""
    return await service.generate_monthly_payslips(body.year, body.month)


@router.get("", response_model=list[PayslipResponse])
async def list_payslips(
    service: Annotated[PayrollService, Depends(get_payroll_service)],
) -> list[PayslipResponse]:
    """List all payslips, latest period first."""
    return await service.list_payslips()


@router.get("/employee/{employee_id}", response_model=list[PayslipResponse])
async def list_employee_payslips(
    employee_id: str,
    service: Annotated[PayrollService, Depends(get_payroll_service)],
) -> list[PayslipResponse]:
    """List payslips of an employee."""
    return await service.get_payslips_by_employee(employee_id)


@router.get("/{id}", response_model=PayslipResponse)
async def get_payslip(
    id: int,
    service: Annotated[PayrollService, Depends(get_payroll_service)],
) -> PayslipResponse:
    """Get a payslip by id."""
    payslip = await service.get_payslip(id)
    if payslip is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Payslip not found")
    return payslip
