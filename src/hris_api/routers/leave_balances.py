"""Leave balances router."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from hris_api.dependencies import get_leave_service
from hris_api.models.dto.leave import LeaveBalanceCreate, LeaveBalanceDeduct, LeaveBalanceResponse
from hris_api.services.leave_service import LeaveService

router = APIRouter()


@router.post("", response_model=LeaveBalanceResponse, status_code=status.HTTP_201_CREATED)
async def create_leave_balance(
    body: LeaveBalanceCreate,
    service: Annotated[LeaveService, Depends(get_leave_service)],
) -> LeaveBalanceResponse:
    """Provision the leave balance of an employee."""
    return await service.create_leave_balance(body)


@router.get("/{employee_id}", response_model=LeaveBalanceResponse)
async def get_leave_balance(
    employee_id: str,
    service: Annotated[LeaveService, Depends(get_leave_service)],
) -> LeaveBalanceResponse:
    """Get the leave balance of an employee."""
    balance = await service.get_leave_balance(employee_id)
    if balance is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Leave balance not found")
    return balance


@router.post("/{employee_id}/deduct", response_model=LeaveBalanceResponse)
async def deduct_leave_balance(
    employee_id: str,
    body: LeaveBalanceDeduct,
    service: Annotated[LeaveService, Depends(get_leave_service)],
) -> LeaveBalanceResponse:
    """Deduct days from the counter of a leave type, floored at zero."""
    return await service.deduct_leave_balance(employee_id, body.leave_type, body.days)
