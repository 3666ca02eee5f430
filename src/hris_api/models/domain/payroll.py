"""Payroll domain enums."""

from enum import StrEnum


class ComponentType(StrEnum):
    """Payroll component type."""

    ALLOWANCE = "Allowance"
    DEDUCTION = "Deduction"
