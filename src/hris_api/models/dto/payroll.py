"""Payroll DTOs."""

from datetime import date, datetime
from decimal import Decimal
from typing import ClassVar

from pydantic import BaseModel, Field

from hris_api.models.domain.payroll import ComponentType
from hris_api.models.dto.common import PartialUpdate


class PayrollComponentCreate(BaseModel):
    """DTO for creating a payroll component."""

    name: str = Field(min_length=1, max_length=255)
    type: ComponentType
    amount: Decimal = Field(ge=0, max_digits=10, decimal_places=2)


class PayrollComponentUpdate(PartialUpdate):
    """DTO for updating a payroll component."""

    non_nullable_fields: ClassVar[frozenset[str]] = frozenset({"name", "type", "amount"})

    name: str | None = Field(default=None, min_length=1, max_length=255)
    type: ComponentType | None = None
    amount: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)


class PayrollComponentResponse(BaseModel):
    """Payroll component response DTO."""

    id: int
    name: str
    type: ComponentType
    amount: Decimal
    created_at: datetime
    updated_at: datetime

    class Config:
        """Pydantic config."""

        from_attributes = True


class SalaryStructureCreate(BaseModel):
    """DTO for assigning a payroll component to an employee."""

    employee_id: str = Field(min_length=1, max_length=50)
    component_id: int
    amount: Decimal = Field(ge=0, max_digits=10, decimal_places=2)


class SalaryStructureUpdate(BaseModel):
    """DTO for changing an assigned component amount."""

    amount: Decimal = Field(ge=0, max_digits=10, decimal_places=2)


class SalaryStructureResponse(BaseModel):
    """Salary structure entry response DTO."""

    id: int
    employee_id: str
    component_id: int
    amount: Decimal
    created_at: datetime
    updated_at: datetime

    class Config:
        """Pydantic config."""

        from_attributes = True


class PayslipGenerateRequest(BaseModel):
    """DTO for generating one payslip from the salary structure."""

    employee_id: str = Field(min_length=1, max_length=50)
    pay_period_start: date
    pay_period_end: date


class MonthlyPayslipRequest(BaseModel):
    """DTO for generating payslips for all active employees."""

    year: int = Field(ge=1900, le=9999)
    month: int = Field(ge=1, le=12)


class PayslipCreate(BaseModel):
    """DTO for recording a payslip with explicit amounts."""

    employee_id: str = Field(min_length=1, max_length=50)
    pay_period_start: date
    pay_period_end: date
    gross_salary: Decimal = Field(max_digits=10, decimal_places=2)
    total_allowances: Decimal = Field(max_digits=10, decimal_places=2)
    total_deductions: Decimal = Field(max_digits=10, decimal_places=2)
    net_salary: Decimal = Field(max_digits=10, decimal_places=2)


class PayslipResponse(BaseModel):
    """Payslip response DTO."""

    id: int
    employee_id: str
    pay_period_start: date
    pay_period_end: date
    gross_salary: Decimal
    total_allowances: Decimal
    total_deductions: Decimal
    net_salary: Decimal
    created_at: datetime

    class Config:
        """Pydantic config."""

        from_attributes = True
