"""Payroll service: components, salary structures and payslip generation."""

import logging
from datetime import date
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from hris_api.exceptions import (
    EmployeeNotFoundError,
    HrisAPIError,
    InvalidDateRangeError,
    MissingSalaryStructureError,
    PayrollComponentAlreadyExistsError,
    PayrollComponentNotFoundError,
    PayslipAlreadyExistsError,
    SalaryStructureNotFoundError,
)
from hris_api.models.domain.employee import EmploymentStatus
from hris_api.models.domain.payroll import ComponentType
from hris_api.models.dto.common import DeleteResponse
from hris_api.models.dto.payroll import (
    PayrollComponentCreate,
    PayrollComponentResponse,
    PayrollComponentUpdate,
    PayslipCreate,
    PayslipResponse,
    SalaryStructureCreate,
    SalaryStructureResponse,
)
from hris_api.repositories.employee_repository import EmployeeRepository
from hris_api.repositories.payroll_repository import (
    PayrollComponentRepository,
    PayslipRepository,
    SalaryStructureRepository,
)
from hris_api.utils.dates import month_bounds
from hris_api.utils.money import sum_money, to_money
from hris_api.utils.secure_logging import log_warning

logger = logging.getLogger(__name__)


class PayrollService:
    """Service for payroll operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session."""
        self.session = session
        self.component_repo = PayrollComponentRepository(session)
        self.structure_repo = SalaryStructureRepository(session)
        self.payslip_repo = PayslipRepository(session)
        self.employee_repo = EmployeeRepository(session)

    # =========================================================================
    # Payroll components
    # =========================================================================

    async def create_component(self, data: PayrollComponentCreate) -> PayrollComponentResponse:
        """Create a payroll component.

        Raises:
            PayrollComponentAlreadyExistsError: If the name is taken
        """
        if await self.component_repo.name_exists(data.name):
            logger.warning(f"Duplicate payroll component name: {data.name}")
            raise PayrollComponentAlreadyExistsError(data.name)
        component = await self.component_repo.create(
            name=data.name,
            type=data.type,
            amount=to_money(data.amount),
        )
        return PayrollComponentResponse.model_validate(component)

    async def list_components(self) -> list[PayrollComponentResponse]:
        """List all payroll components ordered by name."""
        components = await self.component_repo.get_all()
        return [PayrollComponentResponse.model_validate(c) for c in components]

    async def get_component(self, id: int) -> PayrollComponentResponse | None:
        """Get a payroll component by id."""
        component = await self.component_repo.get_by_id(id)
        if component is None:
            return None
        return PayrollComponentResponse.model_validate(component)

    async def update_component(
        self, id: int, data: PayrollComponentUpdate
    ) -> PayrollComponentResponse:
        """Update a payroll component.

        Raises:
            PayrollComponentNotFoundError: If the component does not exist
            PayrollComponentAlreadyExistsError: If the new name is taken
        """
        component = await self.component_repo.get_by_id(id)
        if component is None:
            logger.warning(f"Update of unknown payroll component {id}")
            raise PayrollComponentNotFoundError(id)

        update_data = data.changes()
        if "name" in update_data and await self.component_repo.name_exists(
            update_data["name"], exclude_id=id
        ):
            logger.warning(f"Duplicate payroll component name on update: {update_data['name']}")
            raise PayrollComponentAlreadyExistsError(update_data["name"])
        if "amount" in update_data:
            update_data["amount"] = to_money(update_data["amount"])

        if update_data:
            component = await self.component_repo.apply(component, **update_data)
        return PayrollComponentResponse.model_validate(component)

    async def delete_component(self, id: int) -> DeleteResponse:
        """Delete a payroll component and every assignment of it."""
        if await self.component_repo.get_by_id(id) is None:
            return DeleteResponse(success=False)
        removed = await self.structure_repo.delete_by_component(id)
        await self.component_repo.delete(id)
        logger.info(f"Deleted payroll component {id} and {removed} salary structure entries")
        return DeleteResponse(success=True)

    # =========================================================================
    # Salary structures
    # =========================================================================

    async def create_salary_structure(self, data: SalaryStructureCreate) -> SalaryStructureResponse:
        """Assign a payroll component to an employee.

        Raises:
            EmployeeNotFoundError: If the employee does not exist
            PayrollComponentNotFoundError: If the component does not exist
        """
        if not await self.employee_repo.exists(data.employee_id):
            logger.warning(f"Salary structure for unknown employee {data.employee_id}")
            raise EmployeeNotFoundError(data.employee_id)
        if await self.component_repo.get_by_id(data.component_id) is None:
            logger.warning(f"Salary structure with unknown component {data.component_id}")
            raise PayrollComponentNotFoundError(data.component_id)

        entry = await self.structure_repo.create(
            employee_id=data.employee_id,
            component_id=data.component_id,
            amount=to_money(data.amount),
        )
        return SalaryStructureResponse.model_validate(entry)

    async def get_salary_structure(self, employee_id: str) -> list[SalaryStructureResponse]:
        """List the salary structure entries of an employee."""
        entries = await self.structure_repo.get_by_employee(employee_id)
        return [SalaryStructureResponse.model_validate(e) for e in entries]

    async def update_salary_structure(self, id: int, amount: Decimal) -> SalaryStructureResponse:
        """Change the amount of a salary structure entry.

        Raises:
            SalaryStructureNotFoundError: If the entry does not exist
        """
        entry = await self.structure_repo.update(id, amount=to_money(amount))
        if entry is None:
            logger.warning(f"Update of unknown salary structure entry {id}")
            raise SalaryStructureNotFoundError(id)
        return SalaryStructureResponse.model_validate(entry)

    async def delete_salary_structure(self, id: int) -> DeleteResponse:
        """Remove a component assignment."""
        return DeleteResponse(success=await self.structure_repo.delete(id))

    # =========================================================================
    # Payslips
    # =========================================================================

    async def create_payslip(self, data: PayslipCreate) -> PayslipResponse:
        """Record a payslip with explicit amounts.

        Raises:
            EmployeeNotFoundError: If the employee does not exist
            InvalidDateRangeError: If the period ends before it starts
            PayslipAlreadyExistsError: If the period already has a payslip
        """
        if not await self.employee_repo.exists(data.employee_id):
            logger.warning(f"Payslip for unknown employee {data.employee_id}")
            raise EmployeeNotFoundError(data.employee_id)
        if data.pay_period_end < data.pay_period_start:
            raise InvalidDateRangeError(data.pay_period_start, data.pay_period_end)
        existing = await self.payslip_repo.get_by_period(
            data.employee_id, data.pay_period_start, data.pay_period_end
        )
        if existing is not None:
            logger.warning(f"Duplicate payslip for {data.employee_id} {data.pay_period_start}")
            raise PayslipAlreadyExistsError(
                data.employee_id, data.pay_period_start, data.pay_period_end
            )

        payslip = await self.payslip_repo.create(
            employee_id=data.employee_id,
            pay_period_start=data.pay_period_start,
            pay_period_end=data.pay_period_end,
            gross_salary=to_money(data.gross_salary),
            total_allowances=to_money(data.total_allowances),
            total_deductions=to_money(data.total_deductions),
            net_salary=to_money(data.net_salary),
        )
        return PayslipResponse.model_validate(payslip)

    async def generate_payslip(
        self,
        employee_id: str,
        pay_period_start: date,
        pay_period_end: date,
    ) -> PayslipResponse:
        """Generate a payslip from the employee's salary structure.

        A payslip that already exists for exactly this period is returned
        unchanged, so repeated calls are idempotent.

        Gross salary is the sum of allowances; net salary is gross minus
        deductions and may be negative.

        Args:
            employee_id: Employee business key
            pay_period_start: First day of the period
            pay_period_end: Last day of the period

        Returns:
            PayslipResponse

        Raises:
            EmployeeNotFoundError: If the employee does not exist
            InvalidDateRangeError: If the period ends before it starts
            MissingSalaryStructureError: If no components are assigned
        """
        if pay_period_end < pay_period_start:
            raise InvalidDateRangeError(pay_period_start, pay_period_end)
        if not await self.employee_repo.exists(employee_id):
            logger.warning(f"Payslip generation for unknown employee {employee_id}")
            raise EmployeeNotFoundError(employee_id)

        existing = await self.payslip_repo.get_by_period(
            employee_id, pay_period_start, pay_period_end
        )
        if existing is not None:
            return PayslipResponse.model_validate(existing)

        entries = await self.structure_repo.get_with_components(employee_id)
        if not entries:
            logger.warning(f"No salary structure for employee {employee_id}")
            raise MissingSalaryStructureError(employee_id)

        total_allowances = sum_money(
            entry.amount for entry, component in entries
            if component.type == ComponentType.ALLOWANCE
        )
        total_deductions = sum_money(
            entry.amount for entry, component in entries
            if component.type == ComponentType.DEDUCTION
        )
        gross_salary = total_allowances
        net_salary = to_money(gross_salary - total_deductions)

        payslip = await self.payslip_repo.create(
            employee_id=employee_id,
            pay_period_start=pay_period_start,
            pay_period_end=pay_period_end,
            gross_salary=gross_salary,
            total_allowances=total_allowances,
            total_deductions=total_deductions,
            net_salary=net_salary,
        )
        logger.info(
            f"Generated payslip for {employee_id} {pay_period_start}..{pay_period_end}: net {net_salary}"
        )
        return PayslipResponse.model_validate(payslip)

    async def generate_monthly_payslips(self, year: int, month: int) -> list[PayslipResponse]:
        """Generate payslips of a calendar month for every active employee.

        Employees that already have a payslip for the month get the existing
        one back. Employees that cannot be paid (for example without a salary
        structure) are logged and skipped.

        Args:
            year: Calendar year
            month: Calendar month (1-12)

        Returns:
            List of PayslipResponse ordered by employee_id
        """
        period_start, period_end = month_bounds(year, month)
        employees = await self.employee_repo.get_by_status(EmploymentStatus.ACTIVE)

        payslips: list[PayslipResponse] = []
        for employee in employees:
            try:
                payslip = await self.generate_payslip(
                    employee.employee_id, period_start, period_end
                )
            except HrisAPIError as e:
                log_warning(logger, f"Skipped payslip for employee {employee.employee_id}", e)
                continue
            payslips.append(payslip)

        logger.info(
            f"Monthly payroll {year}-{month:02d}: {len(payslips)} of {len(employees)} active employees"
        )
        return payslips

    async def list_payslips(self) -> list[PayslipResponse]:
        """List all payslips, latest period first."""
        payslips = await self.payslip_repo.get_all()
        return [PayslipResponse.model_validate(p) for p in payslips]

    async def get_payslips_by_employee(self, employee_id: str) -> list[PayslipResponse]:
        """List payslips of one employee, latest period first."""
        payslips = await self.payslip_repo.get_by_employee(employee_id)
        return [PayslipResponse.model_validate(p) for p in payslips]

    async def get_payslip(self, id: int) -> PayslipResponse | None:
        """Get a payslip by id."""
        payslip = await self.payslip_repo.get_by_id(id)
        if payslip is None:
            return None
        return PayslipResponse.model_validate(payslip)
