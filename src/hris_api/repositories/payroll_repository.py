"""Payroll repositories: components, salary structures and payslips."""

from datetime import date

from sqlalchemy import delete, select

from hris_api.models.orm.employee import EmployeeORM
from hris_api.models.orm.payroll import (
    EmployeeSalaryStructureORM,
    PayrollComponentORM,
    PayslipORM,
)
from hris_api.repositories.base import BaseRepository


class PayrollComponentRepository(BaseRepository[PayrollComponentORM]):
    """Repository for payroll component operations."""

    model = PayrollComponentORM
    ordering = (PayrollComponentORM.name,)

    async def name_exists(self, name: str, exclude_id: int | None = None) -> bool:
        """Check if a component name is taken."""
        query = select(PayrollComponentORM.id).where(PayrollComponentORM.name == name)
        if exclude_id is not None:
            query = query.where(PayrollComponentORM.id != exclude_id)
        result = await self.session.execute(query)
        return result.first() is not None


class SalaryStructureRepository(BaseRepository[EmployeeSalaryStructureORM]):
    """Repository for employee salary structure operations."""

    model = EmployeeSalaryStructureORM

    async def get_by_employee(self, employee_id: str) -> list[EmployeeSalaryStructureORM]:
        """Get the salary structure entries of an employee."""
        result = await self.session.execute(
            select(EmployeeSalaryStructureORM)
            .where(EmployeeSalaryStructureORM.employee_id == employee_id)
            .order_by(EmployeeSalaryStructureORM.id)
        )
        return list(result.scalars().all())

    async def get_with_components(
        self, employee_id: str
    ) -> list[tuple[EmployeeSalaryStructureORM, PayrollComponentORM]]:
        """Get salary structure entries joined to their components.

        Args:
            employee_id: Employee business key

        Returns:
            List of (structure entry, component) tuples
        """
        result = await self.session.execute(
            select(EmployeeSalaryStructureORM, PayrollComponentORM)
            .join(
                PayrollComponentORM,
                PayrollComponentORM.id == EmployeeSalaryStructureORM.component_id,
            )
            .where(EmployeeSalaryStructureORM.employee_id == employee_id)
            .order_by(EmployeeSalaryStructureORM.id)
        )
        return [(row[0], row[1]) for row in result.all()]

    async def delete_by_component(self, component_id: int) -> int:
        """Delete every assignment of a component.

        Returns:
            Number of deleted rows
        """
        result = await self.session.execute(
            delete(EmployeeSalaryStructureORM).where(
                EmployeeSalaryStructureORM.component_id == component_id
            )
        )
        return result.rowcount or 0


class PayslipRepository(BaseRepository[PayslipORM]):
    """Repository for payslip operations."""

    model = PayslipORM
    # Latest pay period first
    ordering = (PayslipORM.pay_period_end.desc(), PayslipORM.employee_id)

    async def get_by_employee(self, employee_id: str) -> list[PayslipORM]:
        """Get payslips of one employee, latest pay period first."""
        result = await self.session.execute(
            select(PayslipORM)
            .where(PayslipORM.employee_id == employee_id)
            .order_by(PayslipORM.pay_period_end.desc(), PayslipORM.id.desc())
        )
        return list(result.scalars().all())

    async def get_by_period(
        self,
        employee_id: str,
        pay_period_start: date,
        pay_period_end: date,
    ) -> PayslipORM | None:
        """Get the payslip of an employee for exactly this period."""
        result = await self.session.execute(
            select(PayslipORM).where(
                PayslipORM.employee_id == employee_id,
                PayslipORM.pay_period_start == pay_period_start,
                PayslipORM.pay_period_end == pay_period_end,
            )
        )
        return result.scalar_one_or_none()

    async def get_latest_for_employee(self, employee_id: str) -> PayslipORM | None:
        """Get the payslip with the latest period end for an employee."""
        result = await self.session.execute(
            select(PayslipORM)
            .where(PayslipORM.employee_id == employee_id)
            .order_by(PayslipORM.pay_period_end.desc(), PayslipORM.id.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def get_within_with_department(
        self,
        start: date,
        end: date,
    ) -> list[tuple[PayslipORM, str | None]]:
        """Get payslips whose whole period lies in [start, end].

        Each payslip is paired with the current department label of its
        employee (None when unset or the employee row is gone).
        """
        result = await self.session.execute(
            select(PayslipORM, EmployeeORM.department)
            .outerjoin(EmployeeORM, EmployeeORM.employee_id == PayslipORM.employee_id)
            .where(
                PayslipORM.pay_period_start >= start,
                PayslipORM.pay_period_end <= end,
            )
            .order_by(PayslipORM.id)
        )
        return [(row[0], row[1]) for row in result.all()]
