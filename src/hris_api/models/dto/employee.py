"""Employee DTOs."""

from datetime import date, datetime
from typing import ClassVar

from pydantic import AnyHttpUrl, BaseModel, EmailStr, Field

from hris_api.models.domain.employee import EmployeeRole, EmploymentStatus, Gender, MaritalStatus
from hris_api.models.dto.common import PartialUpdate


class EmployeeCreate(BaseModel):
    """DTO for creating an employee."""

    employee_id: str = Field(min_length=1, max_length=50, description="Business key, e.g. EMP001")
    full_name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    date_of_birth: date | None = None
    gender: Gender | None = None
    marital_status: MaritalStatus | None = None
    address: str | None = Field(default=None, max_length=2000)
    phone_number: str | None = Field(default=None, max_length=20)
    position: str | None = Field(default=None, max_length=255)
    department: str | None = Field(default=None, max_length=255, description="Department label")
    manager_id: str | None = Field(default=None, max_length=50, description="Manager's employee_id")
    start_date: date | None = None
    termination_date: date | None = None
    employment_status: EmploymentStatus = EmploymentStatus.ACTIVE
    bank_name: str | None = Field(default=None, max_length=255)
    bank_account_number: str | None = Field(default=None, max_length=50)
    role: EmployeeRole = EmployeeRole.EMPLOYEE


class EmployeeUpdate(PartialUpdate):
    """DTO for updating an employee. Only fields sent are changed."""

    non_nullable_fields: ClassVar[frozenset[str]] = frozenset(
        {"employee_id", "full_name", "email", "employment_status", "role"}
    )

    employee_id: str | None = Field(default=None, min_length=1, max_length=50)
    full_name: str | None = Field(default=None, min_length=1, max_length=255)
    email: EmailStr | None = None
    date_of_birth: date | None = None
    gender: Gender | None = None
    marital_status: MaritalStatus | None = None
    address: str | None = Field(default=None, max_length=2000)
    phone_number: str | None = Field(default=None, max_length=20)
    position: str | None = Field(default=None, max_length=255)
    department: str | None = Field(default=None, max_length=255)
    manager_id: str | None = Field(default=None, max_length=50)
    start_date: date | None = None
    termination_date: date | None = None
    employment_status: EmploymentStatus | None = None
    bank_name: str | None = Field(default=None, max_length=255)
    bank_account_number: str | None = Field(default=None, max_length=50)
    role: EmployeeRole | None = None


class EmployeeResponse(BaseModel):
    """Employee response DTO."""

    id: int
    employee_id: str
    full_name: str
    email: str
    date_of_birth: date | None = None
    gender: Gender | None = None
    marital_status: MaritalStatus | None = None
    address: str | None = None
    phone_number: str | None = None
    position: str | None = None
    department: str | None = None
    manager_id: str | None = None
    start_date: date | None = None
    termination_date: date | None = None
    employment_status: EmploymentStatus
    bank_name: str | None = None
    bank_account_number: str | None = None
    role: EmployeeRole
    created_at: datetime
    updated_at: datetime

    class Config:
        """Pydantic config."""

        from_attributes = True


class EmployeeDocumentCreate(BaseModel):
    """DTO for attaching a document to an employee."""

    employee_id: str = Field(min_length=1, max_length=50)
    document_name: str = Field(min_length=1, max_length=255)
    document_type: str = Field(min_length=1, max_length=100)
    file_url: AnyHttpUrl


class EmployeeDocumentResponse(BaseModel):
    """Employee document response DTO."""

    id: int
    employee_id: str
    document_name: str
    document_type: str
    file_url: str
    created_at: datetime

    class Config:
        """Pydantic config."""

        from_attributes = True
