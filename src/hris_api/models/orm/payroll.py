"""Payroll ORM models."""

from datetime import date
from decimal import Decimal

from sqlalchemy import Date, ForeignKey, Index, Integer, Numeric, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from hris_api.models.domain.payroll import ComponentType
from hris_api.models.orm.base import Base, IdMixin, TimestampMixin, str_enum


class PayrollComponentORM(Base, IdMixin, TimestampMixin):
    """Named allowance or deduction with a default amount."""

    __tablename__ = "payroll_components"

    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    type: Mapped[ComponentType] = mapped_column(
        str_enum(ComponentType, "component_type"), nullable=False
    )
    amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)

    def __repr__(self) -> str:
        return f"<PayrollComponent {self.name} {self.type} {self.amount}>"


class EmployeeSalaryStructureORM(Base, IdMixin, TimestampMixin):
    """Payroll component assigned to an employee with its own amount."""

    __tablename__ = "employee_salary_structure"

    employee_id: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    component_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("payroll_components.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)


class PayslipORM(Base, IdMixin, TimestampMixin):
    """Generated payslip for one employee and pay period."""

    __tablename__ = "payslips"

    employee_id: Mapped[str] = mapped_column(String(50), nullable=False)
    pay_period_start: Mapped[date] = mapped_column(Date, nullable=False)
    pay_period_end: Mapped[date] = mapped_column(Date, nullable=False)
    gross_salary: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    total_allowances: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    total_deductions: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    net_salary: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)

    __table_args__ = (
        UniqueConstraint(
            "employee_id",
            "pay_period_start",
            "pay_period_end",
            name="uq_payslips_employee_period",
        ),
        Index("idx_payslips_period", "pay_period_start", "pay_period_end"),
    )

    def __repr__(self) -> str:
        return f"<Payslip {self.employee_id} {self.pay_period_start}..{self.pay_period_end} {self.net_salary}>"
