"""Domain-specific exceptions for the HRIS API.

These exceptions provide a clean separation between service-layer errors
and HTTP responses, avoiding string matching in routers.
"""

from datetime import date
from typing import Any


class HrisAPIError(Exception):
    """Base exception for all HRIS API errors."""

    def __init__(self, message: str = "An error occurred", details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


# =============================================================================
# Resource Not Found Errors (404)
# =============================================================================


class NotFoundError(HrisAPIError):
    """Base class for resource not found errors."""

    pass


class EmployeeNotFoundError(NotFoundError):
    """Raised when an employee cannot be found by business key or id."""

    def __init__(
        self, employee_id: str | int | None = None, message: str = "Employee not found"
    ) -> None:
        details = {"employee_id": str(employee_id)} if employee_id is not None else {}
        super().__init__(message, details)


class ManagerNotFoundError(NotFoundError):
    """Raised when a manager reference does not resolve to an employee."""

    def __init__(self, manager_id: str | None = None) -> None:
        message = "Manager not found"
        details = {"manager_id": manager_id} if manager_id else {}
        super().__init__(message, details)


class ReviewerNotFoundError(NotFoundError):
    """Raised when a performance reviewer cannot be found."""

    def __init__(self, reviewer_id: str | None = None) -> None:
        message = f"Reviewer with ID {reviewer_id} not found" if reviewer_id else "Reviewer not found"
        details = {"reviewer_id": reviewer_id} if reviewer_id else {}
        super().__init__(message, details)


class DepartmentNotFoundError(NotFoundError):
    """Raised when a department cannot be found."""

    def __init__(self, department_id: int | None = None) -> None:
        message = "Department not found"
        details = {"department_id": department_id} if department_id is not None else {}
        super().__init__(message, details)


class AttendanceNotFoundError(NotFoundError):
    """Raised when an attendance record cannot be found."""

    def __init__(self, attendance_id: int | None = None) -> None:
        message = "Attendance record not found"
        details = {"attendance_id": attendance_id} if attendance_id is not None else {}
        super().__init__(message, details)


class LeaveRequestNotFoundError(NotFoundError):
    """Raised when a leave request cannot be found."""

    def __init__(self, leave_request_id: int | None = None) -> None:
        message = "Leave request not found"
        details = {"leave_request_id": leave_request_id} if leave_request_id is not None else {}
        super().__init__(message, details)


class LeaveBalanceNotFoundError(NotFoundError):
    """Raised when an employee has no leave balance row."""

    def __init__(self, employee_id: str | None = None) -> None:
        message = f"Leave balance not found for employee {employee_id}" if employee_id else "Leave balance not found"
        details = {"employee_id": employee_id} if employee_id else {}
        super().__init__(message, details)


class PayrollComponentNotFoundError(NotFoundError):
    """Raised when a payroll component cannot be found."""

    def __init__(self, component_id: int | None = None) -> None:
        message = "Payroll component not found"
        details = {"component_id": component_id} if component_id is not None else {}
        super().__init__(message, details)


class SalaryStructureNotFoundError(NotFoundError):
    """Raised when a salary structure entry cannot be found."""

    def __init__(self, structure_id: int | None = None) -> None:
        message = "Salary structure entry not found"
        details = {"structure_id": structure_id} if structure_id is not None else {}
        super().__init__(message, details)


class PerformanceGoalNotFoundError(NotFoundError):
    """Raised when a performance goal cannot be found."""

    def __init__(self, goal_id: int) -> None:
        super().__init__(f"Performance goal with ID {goal_id} not found", {"goal_id": goal_id})


class PerformanceReviewNotFoundError(NotFoundError):
    """Raised when a performance review cannot be found."""

    def __init__(self, review_id: int) -> None:
        super().__init__(f"Performance review with ID {review_id} not found", {"review_id": review_id})


class JobVacancyNotFoundError(NotFoundError):
    """Raised when a job vacancy cannot be found."""

    def __init__(self, vacancy_id: int | None = None) -> None:
        message = "Job vacancy not found"
        details = {"vacancy_id": vacancy_id} if vacancy_id is not None else {}
        super().__init__(message, details)


class ApplicantNotFoundError(NotFoundError):
    """Raised when an applicant cannot be found."""

    def __init__(self, applicant_id: int | None = None) -> None:
        message = "Applicant not found"
        details = {"applicant_id": applicant_id} if applicant_id is not None else {}
        super().__init__(message, details)


# =============================================================================
# Conflict Errors (409)
# =============================================================================


class ConflictError(HrisAPIError):
    """Base class for resource conflict errors."""

    pass


class EmployeeAlreadyExistsError(ConflictError):
    """Raised when the employee business key or email is already taken."""

    def __init__(self, field: str, value: str) -> None:
        super().__init__(f"Employee with this {field} already exists", {field: value})


class DepartmentAlreadyExistsError(ConflictError):
    """Raised when a department name is already taken."""

    def __init__(self, name: str | None = None) -> None:
        message = "Department with this name already exists"
        details = {"name": name} if name else {}
        super().__init__(message, details)


class PayrollComponentAlreadyExistsError(ConflictError):
    """Raised when a payroll component name is already taken."""

    def __init__(self, name: str | None = None) -> None:
        message = "Payroll component with this name already exists"
        details = {"name": name} if name else {}
        super().__init__(message, details)


class LeaveBalanceAlreadyExistsError(ConflictError):
    """Raised when an employee already has a leave balance row."""

    def __init__(self, employee_id: str | None = None) -> None:
        message = "Leave balance already exists for this employee"
        details = {"employee_id": employee_id} if employee_id else {}
        super().__init__(message, details)


class PayslipAlreadyExistsError(ConflictError):
    """Raised when a payslip already exists for the employee and period."""

    def __init__(self, employee_id: str, period_start: date, period_end: date) -> None:
        super().__init__(
            "Payslip already exists for this pay period",
            {
                "employee_id": employee_id,
                "pay_period_start": period_start.isoformat(),
                "pay_period_end": period_end.isoformat(),
            },
        )


# =============================================================================
# Constraint Violation Errors (409)
# =============================================================================


class ConstraintViolationError(HrisAPIError):
    """Base class for deletes or updates blocked by dependent records."""

    pass


class VacancyHasApplicantsError(ConstraintViolationError):
    """Raised when deleting a job vacancy that still has applicants."""

    def __init__(self, vacancy_id: int, applicant_count: int) -> None:
        super().__init__(
            "Cannot delete job vacancy with existing applicants",
            {"vacancy_id": vacancy_id, "applicant_count": applicant_count},
        )


# =============================================================================
# Validation Errors (400)
# =============================================================================


class ValidationError(HrisAPIError):
    """Base class for validation errors."""

    pass


class InvalidDateRangeError(ValidationError):
    """Raised when an end date or time precedes its start."""

    def __init__(self, start: Any, end: Any) -> None:
        super().__init__(
            "End must not be before start",
            {"start": str(start), "end": str(end)},
        )


class InvalidLeaveTypeError(ValidationError):
    """Raised when a leave type has no balance counter."""

    def __init__(self, leave_type: str) -> None:
        super().__init__(f"Invalid leave type: {leave_type}", {"leave_type": leave_type})


class InvalidStatusTransitionError(ValidationError):
    """Raised when a status change is not allowed from the current status."""

    def __init__(self, current: str, requested: str) -> None:
        super().__init__(
            f"Cannot change status from {current} to {requested}",
            {"current_status": current, "requested_status": requested},
        )


class MissingSalaryStructureError(ValidationError):
    """Raised when generating a payslip for an employee without components."""

    def __init__(self, employee_id: str) -> None:
        super().__init__(
            f"No salary structure found for employee {employee_id}",
            {"employee_id": employee_id},
        )
