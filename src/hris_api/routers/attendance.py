"""Attendance router."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from hris_api.dependencies import get_attendance_service
from hris_api.models.dto.attendance import AttendanceCreate, AttendanceResponse, AttendanceUpdate
from hris_api.services.attendance_service import AttendanceService

router = APIRouter()


@router.post("", response_model=AttendanceResponse, status_code=status.HTTP_201_CREATED)
async def create_attendance(
    body: AttendanceCreate,
    service: Annotated[AttendanceService, Depends(get_attendance_service)],
) -> AttendanceResponse:
    """Record a check-in."""
    return await service.create_attendance(body)


@router.get("/today", response_model=list[AttendanceResponse])
async def get_today_attendance(
    service: Annotated[AttendanceService, Depends(get_attendance_service)],
) -> list[AttendanceResponse]:
    """List check-ins of the current day."""
    return await service.get_today_attendance()


@router.get("/employee/{employee_id}", response_model=list[AttendanceResponse])
async def get_employee_attendance(
    employee_id: str,
    service: Annotated[AttendanceService, Depends(get_attendance_service)],
    start_date: date | None = Query(default=None),
    end_date: date | None = Query(default=None),
) -> list[AttendanceResponse]:
    """List check-ins of an employee, optionally limited to inclusive dates."""
    if start_date is None and end_date is None:
        return await service.get_attendance_by_employee(employee_id)
    if start_date is None or end_date is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Both start_date and end_date are required for a date range",
        )
    return await service.get_attendance_in_range(employee_id, start_date, end_date)


@router.patch("/{id}", response_model=AttendanceResponse)
async def update_attendance(
    id: int,
    body: AttendanceUpdate,
    service: Annotated[AttendanceService, Depends(get_attendance_service)],
) -> AttendanceResponse:
    """Update an attendance record, e.g. to record check-out."""
    return await service.update_attendance(id, body)
