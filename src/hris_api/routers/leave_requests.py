"""Leave requests router."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from hris_api.dependencies import get_leave_service
from hris_api.models.dto.common import DeleteResponse
from hris_api.models.dto.leave import LeaveRequestCreate, LeaveRequestResponse, LeaveStatusUpdate
from hris_api.services.leave_service import LeaveService

router = APIRouter()


@router.post("", response_model=LeaveRequestResponse, status_code=status.HTTP_201_CREATED)
async def create_leave_request(
    body: LeaveRequestCreate,
    service: Annotated[LeaveService, Depends(get_leave_service)],
) -> LeaveRequestResponse:
    """Submit a leave request."""
    return await service.create_leave_request(body)


@router.get("", response_model=list[LeaveRequestResponse])
async def list_leave_requests(
    service: Annotated[LeaveService, Depends(get_leave_service)],
) -> list[LeaveRequestResponse]:
    """List all leave requests."""
    return await service.list_leave_requests()


@router.get("/pending", response_model=list[LeaveRequestResponse])
async def list_pending_leave_requests(
    service: Annotated[LeaveService, Depends(get_leave_service)],
) -> list[LeaveRequestResponse]:
    """List pending leave requests, oldest first."""
    return await service.get_pending_leave_requests()


@router.get("/employee/{employee_id}", response_model=list[LeaveRequestResponse])
async def list_employee_leave_requests(
    employee_id: str,
    service: Annotated[LeaveService, Depends(get_leave_service)],
) -> list[LeaveRequestResponse]:
    """List leave requests of an employee."""
    return await service.get_leave_requests_by_employee(employee_id)


@router.patch("/{id}/status", response_model=LeaveRequestResponse)
async def update_leave_request_status(
    id: int,
    body: LeaveStatusUpdate,
    service: Annotated[LeaveService, Depends(get_leave_service)],
) -> LeaveRequestResponse:
    """Approve or reject a leave request."""
    return await service.update_leave_request_status(id, body.status)


@router.delete("/{id}", response_model=DeleteResponse)
async def delete_leave_request(
    id: int,
    service: Annotated[LeaveService, Depends(get_leave_service)],
) -> DeleteResponse:
    """Delete a leave request."""
    return await service.delete_leave_request(id)
