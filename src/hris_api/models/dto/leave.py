"""Leave request and leave balance DTOs."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from hris_api.models.domain.leave import LeaveStatus, LeaveType


class LeaveRequestCreate(BaseModel):
    """DTO for submitting a leave request."""

    employee_id: str = Field(min_length=1, max_length=50)
    leave_type: LeaveType
    start_date: date
    end_date: date
    reason: str | None = Field(default=None, max_length=2000)


class LeaveStatusUpdate(BaseModel):
    """DTO for deciding a leave request."""

    status: LeaveStatus


class LeaveRequestResponse(BaseModel):
    """Leave request response DTO."""

    id: int
    employee_id: str
    leave_type: LeaveType
    start_date: date
    end_date: date
    reason: str | None = None
    status: LeaveStatus
    created_at: datetime

    class Config:
        """Pydantic config."""

        from_attributes = True


class LeaveBalanceCreate(BaseModel):
    """DTO for provisioning an employee's leave balance."""

    employee_id: str = Field(min_length=1, max_length=50)
    annual_leave_balance: int = Field(default=0, ge=0)
    sick_leave_balance: int = Field(default=0, ge=0)
    personal_leave_balance: int = Field(default=0, ge=0)


class LeaveBalanceDeduct(BaseModel):
    """DTO for drawing down a leave balance counter.

    leave_type is free text so that types without a counter surface as a
    domain error rather than a schema error.
    """

    leave_type: str = Field(min_length=1, max_length=50)
    days: int = Field(ge=0, le=366)


class LeaveBalanceResponse(BaseModel):
    """Leave balance response DTO."""

    id: int
    employee_id: str
    annual_leave_balance: int
    sick_leave_balance: int
    personal_leave_balance: int
    updated_at: datetime

    class Config:
        """Pydantic config."""

        from_attributes = True
