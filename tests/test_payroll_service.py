"""Payroll service tests: components, salary structures and payslip generation."""

from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy import func, select

from hris_api.exceptions import (
    EmployeeNotFoundError,
    InvalidDateRangeError,
    MissingSalaryStructureError,
    PayrollComponentAlreadyExistsError,
    PayslipAlreadyExistsError,
    ValidationError,
)
from hris_api.models.domain.employee import EmploymentStatus
from hris_api.models.domain.payroll import ComponentType
from hris_api.models.dto.payroll import (
    PayrollComponentCreate,
    PayrollComponentUpdate,
    PayslipCreate,
    SalaryStructureCreate,
)
from hris_api.models.orm import EmployeeSalaryStructureORM, PayslipORM
from hris_api.services.payroll_service import PayrollService

JANUARY = (date(2024, 1, 1), date(2024, 1, 31))


async def _assign(service: PayrollService, employee_id: str, name: str, type: ComponentType, amount: str):
    component = await service.create_component(
        PayrollComponentCreate(name=name, type=type, amount=Decimal(amount))
    )
    await service.create_salary_structure(
        SalaryStructureCreate(employee_id=employee_id, component_id=component.id, amount=Decimal(amount))
    )
    return component


class TestPayslipGeneration:
    """Payslips computed from the salary structure."""

    @pytest.mark.asyncio
    async def test_basic_bonus_and_tax(self, db_session, make_employee) -> None:
        await make_employee("EMP001")
        service = PayrollService(db_session)
        await _assign(service, "EMP001", "Basic Salary", ComponentType.ALLOWANCE, "40000")
        await _assign(service, "EMP001", "Bonus", ComponentType.ALLOWANCE, "10000")
        await _assign(service, "EMP001", "Tax", ComponentType.DEDUCTION, "5000")

        payslip = await service.generate_payslip("EMP001", *JANUARY)

        assert payslip.gross_salary == Decimal("50000.00")
        assert payslip.total_allowances == Decimal("50000.00")
        assert payslip.total_deductions == Decimal("5000.00")
        assert payslip.net_salary == Decimal("45000.00")

    @pytest.mark.asyncio
    async def test_net_salary_may_be_negative(self, db_session, make_employee) -> None:
        await make_employee("EMP002")
        service = PayrollService(db_session)
        await _assign(service, "EMP002", "Stipend", ComponentType.ALLOWANCE, "100")
        await _assign(service, "EMP002", "Loan Repayment", ComponentType.DEDUCTION, "250.50")

        payslip = await service.generate_payslip("EMP002", *JANUARY)

        assert payslip.net_salary == Decimal("-150.50")

    @pytest.mark.asyncio
    async def test_missing_salary_structure(self, db_session, make_employee) -> None:
        await make_employee("EMP003")
        service = PayrollService(db_session)

        with pytest.raises(MissingSalaryStructureError) as exc_info:
            await service.generate_payslip("EMP003", *JANUARY)

        assert isinstance(exc_info.value, ValidationError)
        assert "EMP003" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_unknown_employee(self, db_session) -> None:
        service = PayrollService(db_session)

        with pytest.raises(EmployeeNotFoundError):
            await service.generate_payslip("NOPE", *JANUARY)

    @pytest.mark.asyncio
    async def test_period_end_before_start(self, db_session, make_employee) -> None:
        await make_employee("EMP004")
        service = PayrollService(db_session)

        with pytest.raises(InvalidDateRangeError):
            await service.generate_payslip("EMP004", date(2024, 1, 31), date(2024, 1, 1))

    @pytest.mark.asyncio
    async def test_regenerating_returns_existing_payslip(self, db_session, make_employee) -> None:
        await make_employee("EMP005")
        service = PayrollService(db_session)
        await _assign(service, "EMP005", "Basic Salary", ComponentType.ALLOWANCE, "1000")

        first = await service.generate_payslip("EMP005", *JANUARY)
        second = await service.generate_payslip("EMP005", *JANUARY)

        assert first.id == second.id
        count = await db_session.scalar(select(func.count()).select_from(PayslipORM))
        assert count == 1


class TestMonthlyGeneration:
    """Batch generation for all active employees."""

    @pytest.mark.asyncio
    async def test_skips_unpayable_and_inactive(self, db_session, make_employee) -> None:
        await make_employee("EMP001")
        await make_employee("EMP002")
        await make_employee("EMP003", employment_status=EmploymentStatus.TERMINATED)
        service = PayrollService(db_session)
        await _assign(service, "EMP001", "Basic Salary", ComponentType.ALLOWANCE, "3000")
        component_id = (await service.list_components())[0].id
        await service.create_salary_structure(
            SalaryStructureCreate(employee_id="EMP003", component_id=component_id, amount=Decimal("10"))
        )

        payslips = await service.generate_monthly_payslips(2024, 2)

        assert [p.employee_id for p in payslips] == ["EMP001"]
        assert payslips[0].pay_period_start == date(2024, 2, 1)
        assert payslips[0].pay_period_end == date(2024, 2, 29)

    @pytest.mark.asyncio
    async def test_idempotent(self, db_session, make_employee) -> None:
        await make_employee("EMP001")
        await make_employee("EMP002")
        service = PayrollService(db_session)
        await _assign(service, "EMP001", "Basic Salary", ComponentType.ALLOWANCE, "3000")
        component_id = (await service.list_components())[0].id
        await service.create_salary_structure(
            SalaryStructureCreate(employee_id="EMP002", component_id=component_id, amount=Decimal("4000"))
        )

        first = await service.generate_monthly_payslips(2024, 3)
        second = await service.generate_monthly_payslips(2024, 3)

        assert len(first) == 2
        assert sorted(p.id for p in first) == sorted(p.id for p in second)


class TestComponentsAndStructures:
    """Component CRUD and salary structure maintenance."""

    @pytest.mark.asyncio
    async def test_duplicate_component_name(self, db_session) -> None:
        service = PayrollService(db_session)
        await service.create_component(
            PayrollComponentCreate(name="Tax", type=ComponentType.DEDUCTION, amount=Decimal("10"))
        )

        with pytest.raises(PayrollComponentAlreadyExistsError):
            await service.create_component(
                PayrollComponentCreate(name="Tax", type=ComponentType.DEDUCTION, amount=Decimal("20"))
            )

    @pytest.mark.asyncio
    async def test_update_component_amount_is_rounded(self, db_session) -> None:
        service = PayrollService(db_session)
        component = await service.create_component(
            PayrollComponentCreate(name="Meal", type=ComponentType.ALLOWANCE, amount=Decimal("10"))
        )

        updated = await service.update_component(
            component.id, PayrollComponentUpdate(amount=Decimal("12.5"))
        )

        assert updated.amount == Decimal("12.50")
        assert updated.name == "Meal"

    @pytest.mark.asyncio
    async def test_deleting_component_removes_assignments(self, db_session, make_employee) -> None:
        await make_employee("EMP001")
        service = PayrollService(db_session)
        component = await _assign(service, "EMP001", "Bonus", ComponentType.ALLOWANCE, "500")

        result = await service.delete_component(component.id)

        assert result.success is True
        remaining = await db_session.scalar(
            select(func.count()).select_from(EmployeeSalaryStructureORM)
        )
        assert remaining == 0
        assert (await service.delete_component(component.id)).success is False

    @pytest.mark.asyncio
    async def test_structure_amount_change_affects_next_payslip(self, db_session, make_employee) -> None:
        await make_employee("EMP001")
        service = PayrollService(db_session)
        await _assign(service, "EMP001", "Basic Salary", ComponentType.ALLOWANCE, "1000")
        entry = (await service.get_salary_structure("EMP001"))[0]

        await service.update_salary_structure(entry.id, Decimal("1200"))
        payslip = await service.generate_payslip("EMP001", *JANUARY)

        assert payslip.gross_salary == Decimal("1200.00")


class TestManualPayslips:
    """Payslips recorded with explicit amounts."""

    @pytest.mark.asyncio
    async def test_duplicate_period_rejected(self, db_session, make_employee) -> None:
        await make_employee("EMP001")
        service = PayrollService(db_session)
        data = PayslipCreate(
            employee_id="EMP001",
            pay_period_start=JANUARY[0],
            pay_period_end=JANUARY[1],
            gross_salary=Decimal("100"),
            total_allowances=Decimal("100"),
            total_deductions=Decimal("0"),
            net_salary=Decimal("100"),
        )
        await service.create_payslip(data)

        with pytest.raises(PayslipAlreadyExistsError):
            await service.create_payslip(data)

    @pytest.mark.asyncio
    async def test_listing_orders(self, db_session, make_employee) -> None:
        await make_employee("EMP001")
        service = PayrollService(db_session)
        for name in ("Tax", "Bonus", "Basic Salary"):
            await service.create_component(
                PayrollComponentCreate(name=name, type=ComponentType.ALLOWANCE, amount=Decimal("1"))
            )
        for start, end in (JANUARY, (date(2024, 3, 1), date(2024, 3, 31)), (date(2024, 2, 1), date(2024, 2, 29))):
            await service.create_payslip(
                PayslipCreate(
                    employee_id="EMP001",
                    pay_period_start=start,
                    pay_period_end=end,
                    gross_salary=Decimal("1"),
                    total_allowances=Decimal("1"),
                    total_deductions=Decimal("0"),
                    net_salary=Decimal("1"),
                )
            )

        components = await service.list_components()
        payslips = await service.list_payslips()

        assert [c.name for c in components] == ["Basic Salary", "Bonus", "Tax"]
        assert [p.pay_period_start.month for p in payslips] == [3, 2, 1]
