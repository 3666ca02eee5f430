"""Employee domain enums."""

from enum import StrEnum


class Gender(StrEnum):
    """Employee gender."""

    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class MaritalStatus(StrEnum):
    """Employee marital status."""

    SINGLE = "Single"
    MARRIED = "Married"
    DIVORCED = "Divorced"
    WIDOWED = "Widowed"


class EmploymentStatus(StrEnum):
    """Employment status enum."""

    ACTIVE = "Active"
    ON_LEAVE = "On Leave"
    TERMINATED = "Terminated"


class EmployeeRole(StrEnum):
    """Application role of an employee."""

    ADMIN = "Admin"
    MANAGER = "Manager"
    EMPLOYEE = "Employee"
