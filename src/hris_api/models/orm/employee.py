"""Employee ORM models."""

from datetime import date

from sqlalchemy import Date, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from hris_api.models.domain.employee import EmployeeRole, EmploymentStatus, Gender, MaritalStatus
from hris_api.models.orm.base import Base, IdMixin, TimestampMixin, str_enum


class EmployeeORM(Base, IdMixin, TimestampMixin):
    """Employee database model."""

    __tablename__ = "employees"

    employee_id: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    date_of_birth: Mapped[date | None] = mapped_column(Date, nullable=True)
    gender: Mapped[Gender | None] = mapped_column(str_enum(Gender, "gender"), nullable=True)
    marital_status: Mapped[MaritalStatus | None] = mapped_column(
        str_enum(MaritalStatus, "marital_status"), nullable=True
    )
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    phone_number: Mapped[str | None] = mapped_column(String(20), nullable=True)
    position: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # Free-text label, not a reference to departments.id
    department: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # Business key of another employee
    manager_id: Mapped[str | None] = mapped_column(String(50), nullable=True)
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    termination_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    employment_status: Mapped[EmploymentStatus] = mapped_column(
        str_enum(EmploymentStatus, "employment_status"),
        nullable=False,
        default=EmploymentStatus.ACTIVE,
    )
    bank_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    bank_account_number: Mapped[str | None] = mapped_column(String(50), nullable=True)
    role: Mapped[EmployeeRole] = mapped_column(
        str_enum(EmployeeRole, "employee_role"),
        nullable=False,
        default=EmployeeRole.EMPLOYEE,
    )

    __table_args__ = (
        Index("idx_employees_status", "employment_status"),
        Index("idx_employees_manager_id", "manager_id"),
        Index("idx_employees_department", "department"),
    )

    def __repr__(self) -> str:
        return f"<Employee {self.employee_id} {self.full_name}>"


class EmployeeDocumentORM(Base, IdMixin, TimestampMixin):
    """Document attached to an employee record."""

    __tablename__ = "employee_documents"

    employee_id: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    document_name: Mapped[str] = mapped_column(String(255), nullable=False)
    document_type: Mapped[str] = mapped_column(String(100), nullable=False)
    file_url: Mapped[str] = mapped_column(String(2048), nullable=False)
