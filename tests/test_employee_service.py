"""Employee and department service tests."""

from datetime import date

import pytest

from hris_api.exceptions import (
    DepartmentAlreadyExistsError,
    EmployeeAlreadyExistsError,
    EmployeeNotFoundError,
    ManagerNotFoundError,
    ValidationError,
)
from hris_api.models.domain.employee import EmploymentStatus
from hris_api.models.dto.department import DepartmentCreate
from hris_api.models.dto.employee import EmployeeCreate, EmployeeDocumentCreate, EmployeeUpdate
from hris_api.services.department_service import DepartmentService
from hris_api.services.employee_service import EmployeeService


def _employee(employee_id: str, **fields) -> EmployeeCreate:
    fields.setdefault("full_name", f"Person {employee_id}")
    fields.setdefault("email", f"{employee_id.lower()}@example.com")
    return EmployeeCreate(employee_id=employee_id, **fields)


class TestCreateEmployee:
    """Employee creation rules."""

    @pytest.mark.asyncio
    async def test_defaults(self, db_session) -> None:
        service = EmployeeService(db_session)

        employee = await service.create_employee(_employee("EMP001", email="Jane.Doe@Example.com"))

        assert employee.employment_status == EmploymentStatus.ACTIVE
        assert employee.email == "jane.doe@example.com"
        assert employee.termination_date is None

    @pytest.mark.asyncio
    async def test_duplicate_business_key(self, db_session) -> None:
        service = EmployeeService(db_session)
        await service.create_employee(_employee("EMP001"))

        with pytest.raises(EmployeeAlreadyExistsError) as exc_info:
            await service.create_employee(_employee("EMP001", email="other@example.com"))

        assert exc_info.value.details == {"employee_id": "EMP001"}

    @pytest.mark.asyncio
    async def test_duplicate_email_is_case_insensitive(self, db_session) -> None:
        service = EmployeeService(db_session)
        await service.create_employee(_employee("EMP001", email="a@example.com"))

        with pytest.raises(EmployeeAlreadyExistsError):
            await service.create_employee(_employee("EMP002", email="A@Example.com"))

    @pytest.mark.asyncio
    async def test_unknown_manager(self, db_session) -> None:
        service = EmployeeService(db_session)

        with pytest.raises(ManagerNotFoundError):
            await service.create_employee(_employee("EMP001", manager_id="MGR404"))

    @pytest.mark.asyncio
    async def test_own_manager(self, db_session) -> None:
        service = EmployeeService(db_session)

        with pytest.raises(ValidationError):
            await service.create_employee(_employee("EMP001", manager_id="EMP001"))

    @pytest.mark.asyncio
    async def test_terminated_gets_termination_date(self, db_session) -> None:
        service = EmployeeService(db_session)

        employee = await service.create_employee(
            _employee("EMP001", employment_status=EmploymentStatus.TERMINATED)
        )

        assert employee.termination_date == date.today()


class TestUpdateEmployee:
    """Partial updates."""

    @pytest.mark.asyncio
    async def test_only_sent_fields_change(self, db_session) -> None:
        service = EmployeeService(db_session)
        created = await service.create_employee(
            _employee("EMP001", position="Engineer", department="Engineering")
        )

        updated = await service.update_employee(
            created.id, EmployeeUpdate.model_validate({"position": "Lead Engineer"})
        )

        assert updated.position == "Lead Engineer"
        assert updated.department == "Engineering"

    @pytest.mark.asyncio
    async def test_explicit_null_clears_optional_field(self, db_session) -> None:
        service = EmployeeService(db_session)
        created = await service.create_employee(_employee("EMP001", department="Sales"))

        updated = await service.update_employee(
            created.id, EmployeeUpdate.model_validate({"department": None})
        )

        assert updated.department is None

    def test_explicit_null_rejected_for_required_field(self) -> None:
        from pydantic import ValidationError as SchemaError

        with pytest.raises(SchemaError):
            EmployeeUpdate.model_validate({"full_name": None})

    @pytest.mark.asyncio
    async def test_termination_sets_date(self, db_session) -> None:
        service = EmployeeService(db_session)
        created = await service.create_employee(_employee("EMP001"))

        updated = await service.update_employee(
            created.id, EmployeeUpdate(employment_status=EmploymentStatus.TERMINATED)
        )

        assert updated.termination_date == date.today()

    @pytest.mark.asyncio
    async def test_rehire_then_termination_stamps_new_date(self, db_session) -> None:
        service = EmployeeService(db_session)
        created = await service.create_employee(
            _employee(
                "EMP001",
                employment_status=EmploymentStatus.TERMINATED,
                termination_date=date(2023, 1, 15),
            )
        )

        rehired = await service.update_employee(
            created.id, EmployeeUpdate(employment_status=EmploymentStatus.ACTIVE)
        )
        assert rehired.termination_date is None

        terminated = await service.update_employee(
            created.id, EmployeeUpdate(employment_status=EmploymentStatus.TERMINATED)
        )
        assert terminated.termination_date == date.today()

    @pytest.mark.asyncio
    async def test_email_taken_by_other(self, db_session) -> None:
        service = EmployeeService(db_session)
        await service.create_employee(_employee("EMP001", email="one@example.com"))
        second = await service.create_employee(_employee("EMP002", email="two@example.com"))

        with pytest.raises(EmployeeAlreadyExistsError):
            await service.update_employee(second.id, EmployeeUpdate(email="one@example.com"))

    @pytest.mark.asyncio
    async def test_unknown_employee(self, db_session) -> None:
        service = EmployeeService(db_session)

        with pytest.raises(EmployeeNotFoundError):
            await service.update_employee(99, EmployeeUpdate(position="x"))


class TestListAndDelete:
    """Filtering and deletion."""

    @pytest.mark.asyncio
    async def test_filters(self, db_session) -> None:
        service = EmployeeService(db_session)
        await service.create_employee(_employee("EMP001", full_name="Alice Smith", department="Sales"))
        await service.create_employee(_employee("EMP002", full_name="Bob Jones", department="Sales"))
        await service.create_employee(
            _employee(
                "EMP003",
                full_name="Carol Smith",
                department="Engineering",
                employment_status=EmploymentStatus.ON_LEAVE,
            )
        )

        by_name = await service.list_employees(search="smith")
        by_department = await service.list_employees(department="Sales")
        on_leave = await service.list_employees(status=EmploymentStatus.ON_LEAVE)

        assert {e.employee_id for e in by_name} == {"EMP001", "EMP003"}
        assert {e.employee_id for e in by_department} == {"EMP001", "EMP002"}
        assert [e.employee_id for e in on_leave] == ["EMP003"]

    @pytest.mark.asyncio
    async def test_delete(self, db_session) -> None:
        service = EmployeeService(db_session)
        created = await service.create_employee(_employee("EMP001"))

        assert (await service.delete_employee(created.id)).success is True
        assert (await service.delete_employee(created.id)).success is False
        assert await service.get_employee(created.id) is None

    @pytest.mark.asyncio
    async def test_documents(self, db_session) -> None:
        service = EmployeeService(db_session)
        await service.create_employee(_employee("EMP001"))

        document = await service.create_document(
            EmployeeDocumentCreate(
                employee_id="EMP001",
                document_name="Contract",
                document_type="contract",
                file_url="https://files.example.com/emp001/contract.pdf",
            )
        )

        assert [d.id for d in await service.list_documents("EMP001")] == [document.id]
        with pytest.raises(EmployeeNotFoundError):
            await service.create_document(
                EmployeeDocumentCreate(
                    employee_id="EMP404",
                    document_name="ID",
                    document_type="id",
                    file_url="https://files.example.com/id.pdf",
                )
            )


class TestDepartments:
    """Department names are unique."""

    @pytest.mark.asyncio
    async def test_duplicate_name(self, db_session) -> None:
        service = DepartmentService(db_session)
        await service.create_department(DepartmentCreate(name="Finance"))

        with pytest.raises(DepartmentAlreadyExistsError):
            await service.create_department(DepartmentCreate(name=" Finance "))
