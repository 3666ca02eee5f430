"""Leave service for leave requests and leave balances."""

import logging
from typing import assert_never

from sqlalchemy.ext.asyncio import AsyncSession

from hris_api.exceptions import (
    EmployeeNotFoundError,
    InvalidDateRangeError,
    InvalidLeaveTypeError,
    InvalidStatusTransitionError,
    LeaveBalanceAlreadyExistsError,
    LeaveBalanceNotFoundError,
    LeaveRequestNotFoundError,
)
from hris_api.models.domain.leave import BALANCE_FIELDS, LeaveStatus, LeaveType
from hris_api.models.dto.common import DeleteResponse
from hris_api.models.dto.leave import (
    LeaveBalanceCreate,
    LeaveBalanceResponse,
    LeaveRequestCreate,
    LeaveRequestResponse,
)
from hris_api.repositories.employee_repository import EmployeeRepository
from hris_api.repositories.leave_repository import LeaveBalanceRepository, LeaveRequestRepository

logger = logging.getLogger(__name__)


def can_transition(current: LeaveStatus, requested: LeaveStatus) -> bool:
    """Check a leave request status change.

    Pending requests may be decided either way. Decided requests are final;
    re-applying the same status is accepted as a no-op.
    """
    match current:
        case LeaveStatus.PENDING:
            return True
        case LeaveStatus.APPROVED | LeaveStatus.REJECTED:
            return requested == current
        case _:
            assert_never(current)


class LeaveService:
    """Service for leave requests and balances."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session."""
        self.session = session
        self.request_repo = LeaveRequestRepository(session)
        self.balance_repo = LeaveBalanceRepository(session)
        self.employee_repo = EmployeeRepository(session)

    # =========================================================================
    # Leave requests
    # =========================================================================

    async def create_leave_request(self, data: LeaveRequestCreate) -> LeaveRequestResponse:
        """Submit a leave request in Pending status.

        Raises:
            EmployeeNotFoundError: If the employee does not exist
            InvalidDateRangeError: If end_date precedes start_date
        """
        if not await self.employee_repo.exists(data.employee_id):
            logger.warning(f"Leave request for unknown employee {data.employee_id}")
            raise EmployeeNotFoundError(data.employee_id)
        if data.end_date < data.start_date:
            logger.warning(f"Leave request with end before start for {data.employee_id}")
            raise InvalidDateRangeError(data.start_date, data.end_date)

        leave_request = await self.request_repo.create(
            employee_id=data.employee_id,
            leave_type=data.leave_type,
            start_date=data.start_date,
            end_date=data.end_date,
            reason=data.reason,
            status=LeaveStatus.PENDING,
        )
        return LeaveRequestResponse.model_validate(leave_request)

    async def list_leave_requests(self) -> list[LeaveRequestResponse]:
        """List all leave requests, newest first."""
        requests = await self.request_repo.get_all()
        return [LeaveRequestResponse.model_validate(r) for r in requests]

    async def get_leave_requests_by_employee(self, employee_id: str) -> list[LeaveRequestResponse]:
        """List leave requests of one employee, newest first."""
        requests = await self.request_repo.get_by_employee(employee_id)
        return [LeaveRequestResponse.model_validate(r) for r in requests]

    async def get_pending_leave_requests(self) -> list[LeaveRequestResponse]:
        """List pending leave requests, oldest first."""
        requests = await self.request_repo.get_by_status(LeaveStatus.PENDING)
        return [LeaveRequestResponse.model_validate(r) for r in requests]

    async def update_leave_request_status(
        self, id: int, status: LeaveStatus
    ) -> LeaveRequestResponse:
        """Decide a leave request.

        Balances are not touched; deductions go through deduct_leave_balance.

        Raises:
            LeaveRequestNotFoundError: If the request does not exist
            InvalidStatusTransitionError: If the request was already decided otherwise
        """
        leave_request = await self.request_repo.get_by_id(id)
        if leave_request is None:
            logger.warning(f"Status update of unknown leave request {id}")
            raise LeaveRequestNotFoundError(id)

        if not can_transition(leave_request.status, status):
            logger.warning(
                f"Rejected leave request {id} transition {leave_request.status} -> {status}"
            )
            raise InvalidStatusTransitionError(leave_request.status, status)

        if leave_request.status != status:
            leave_request = await self.request_repo.apply(leave_request, status=status)
            logger.info(f"Leave request {id} set to {status}")
        return LeaveRequestResponse.model_validate(leave_request)

    async def delete_leave_request(self, id: int) -> DeleteResponse:
        """Delete a leave request."""
        return DeleteResponse(success=await self.request_repo.delete(id))

    # =========================================================================
    # Leave balances
    # =========================================================================

    async def create_leave_balance(self, data: LeaveBalanceCreate) -> LeaveBalanceResponse:
        """Provision the leave balance of an employee.

        Raises:
            EmployeeNotFoundError: If the employee does not exist
            LeaveBalanceAlreadyExistsError: If the employee already has one
        """
        if not await self.employee_repo.exists(data.employee_id):
            logger.warning(f"Leave balance for unknown employee {data.employee_id}")
            raise EmployeeNotFoundError(data.employee_id)
        if await self.balance_repo.get_by_employee_id(data.employee_id) is not None:
            logger.warning(f"Duplicate leave balance for employee {data.employee_id}")
            raise LeaveBalanceAlreadyExistsError(data.employee_id)

        balance = await self.balance_repo.create(**data.model_dump())
        return LeaveBalanceResponse.model_validate(balance)

    async def get_leave_balance(self, employee_id: str) -> LeaveBalanceResponse | None:
        """Get the leave balance of an employee."""
        balance = await self.balance_repo.get_by_employee_id(employee_id)
        if balance is None:
            return None
        return LeaveBalanceResponse.model_validate(balance)

    async def deduct_leave_balance(
        self,
        employee_id: str,
        leave_type: str,
        days: int,
    ) -> LeaveBalanceResponse:
        """Subtract days from the counter matching a leave type.

        The counter never goes below zero.

        Args:
            employee_id: Employee business key
            leave_type: Annual Leave, Sick Leave or Personal Leave
            days: Number of days to deduct

        Returns:
            Updated LeaveBalanceResponse

        Raises:
            InvalidLeaveTypeError: If the leave type has no counter
            LeaveBalanceNotFoundError: If the employee has no balance row
        """
        try:
            field = BALANCE_FIELDS.get(LeaveType(leave_type))
        except ValueError:
            field = None
        if field is None:
            logger.warning(f"Invalid leave type for balance deduction: {leave_type}")
            raise InvalidLeaveTypeError(leave_type)

        balance = await self.balance_repo.get_by_employee_id(employee_id)
        if balance is None:
            logger.warning(f"Leave balance not found for employee {employee_id}")
            raise LeaveBalanceNotFoundError(employee_id)

        remaining = max(getattr(balance, field) - days, 0)
        balance = await self.balance_repo.apply(balance, **{field: remaining})
        return LeaveBalanceResponse.model_validate(balance)
