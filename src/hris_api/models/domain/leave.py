"""Leave domain enums."""

from enum import StrEnum


class LeaveType(StrEnum):
    """Leave request type."""

    ANNUAL = "Annual Leave"
    SICK = "Sick Leave"
    PERSONAL = "Personal Leave"
    MATERNITY = "Maternity Leave"
    PATERNITY = "Paternity Leave"


class LeaveStatus(StrEnum):
    """Leave request status.

    Requests start as PENDING and are decided once, to APPROVED or REJECTED.
    """

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


# Leave types that draw down a balance counter
BALANCE_FIELDS: dict[LeaveType, str] = {
    LeaveType.ANNUAL: "annual_leave_balance",
    LeaveType.SICK: "sick_leave_balance",
    LeaveType.PERSONAL: "personal_leave_balance",
}
