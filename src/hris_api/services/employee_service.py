"""Employee service for employee records and their documents."""

import logging
from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from hris_api.exceptions import (
    EmployeeAlreadyExistsError,
    EmployeeNotFoundError,
    ManagerNotFoundError,
    ValidationError,
)
from hris_api.models.domain.employee import EmploymentStatus
from hris_api.models.dto.common import DeleteResponse
from hris_api.models.dto.employee import (
    EmployeeCreate,
    EmployeeDocumentCreate,
    EmployeeDocumentResponse,
    EmployeeResponse,
    EmployeeUpdate,
)
from hris_api.repositories.employee_document_repository import EmployeeDocumentRepository
from hris_api.repositories.employee_repository import EmployeeRepository
from hris_api.utils.validation import sanitize_department, sanitize_search

logger = logging.getLogger(__name__)


class EmployeeService:
    """Service for managing employees."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session."""
        self.session = session
        self.employee_repo = EmployeeRepository(session)
        self.document_repo = EmployeeDocumentRepository(session)

    async def _check_manager(self, manager_id: str | None, employee_id: str) -> None:
        """Validate a manager reference."""
        if manager_id is None:
            return
        if manager_id == employee_id:
            logger.warning(f"Employee {employee_id} cannot be their own manager")
            raise ValidationError(
                "An employee cannot be their own manager", {"manager_id": manager_id}
            )
        if not await self.employee_repo.exists(manager_id):
            logger.warning(f"Manager {manager_id} not found for employee {employee_id}")
            raise ManagerNotFoundError(manager_id)

    async def create_employee(self, data: EmployeeCreate) -> EmployeeResponse:
        """Create an employee.

        Args:
            data: Employee creation data

        Returns:
            Created EmployeeResponse

        Raises:
            EmployeeAlreadyExistsError: If employee_id or email is taken
            ManagerNotFoundError: If manager_id does not resolve
        """
        if await self.employee_repo.employee_id_exists(data.employee_id):
            logger.warning(f"Duplicate employee_id on create: {data.employee_id}")
            raise EmployeeAlreadyExistsError("employee_id", data.employee_id)
        if await self.employee_repo.email_exists(data.email):
            logger.warning(f"Duplicate email on create for employee {data.employee_id}")
            raise EmployeeAlreadyExistsError("email", data.email)
        await self._check_manager(data.manager_id, data.employee_id)

        values = data.model_dump()
        values["email"] = data.email.lower()
        if (
            data.employment_status == EmploymentStatus.TERMINATED
            and data.termination_date is None
        ):
            values["termination_date"] = date.today()

        employee = await self.employee_repo.create(**values)
        logger.info(f"Created employee {employee.employee_id}")
        return EmployeeResponse.model_validate(employee)

    async def list_employees(
        self,
        search: str | None = None,
        status: EmploymentStatus | None = None,
        department: str | None = None,
    ) -> list[EmployeeResponse]:
        """List employees with optional filters.

        Args:
            search: Substring of name, email or employee_id
            status: Employment status filter
            department: Department label filter

        Returns:
            List of EmployeeResponse, most recently created first
        """
        employees = await self.employee_repo.get_all_with_filters(
            search=sanitize_search(search),
            status=status,
            department=sanitize_department(department),
        )
        return [EmployeeResponse.model_validate(e) for e in employees]

    async def get_employee(self, id: int) -> EmployeeResponse | None:
        """Get an employee by surrogate id."""
        employee = await self.employee_repo.get_by_id(id)
        if employee is None:
            return None
        return EmployeeResponse.model_validate(employee)

    async def get_employee_by_employee_id(self, employee_id: str) -> EmployeeResponse | None:
        """Get an employee by business key."""
        employee = await self.employee_repo.get_by_employee_id(employee_id)
        if employee is None:
            return None
        return EmployeeResponse.model_validate(employee)

    async def update_employee(self, id: int, data: EmployeeUpdate) -> EmployeeResponse:
        """Update an employee. Only fields present in the request change.

        Args:
            id: Employee surrogate id
            data: Employee update data

        Returns:
            Updated EmployeeResponse

        Raises:
            EmployeeNotFoundError: If the employee does not exist
            EmployeeAlreadyExistsError: If the new employee_id or email is taken
            ManagerNotFoundError: If the new manager_id does not resolve
        """
        employee = await self.employee_repo.get_by_id(id)
        if employee is None:
            logger.warning(f"Update of unknown employee id {id}")
            raise EmployeeNotFoundError(id)

        update_data = data.changes()

        new_key = update_data.get("employee_id")
        if new_key is not None and new_key != employee.employee_id:
            if await self.employee_repo.employee_id_exists(new_key, exclude_id=id):
                logger.warning(f"Duplicate employee_id on update: {new_key}")
                raise EmployeeAlreadyExistsError("employee_id", new_key)

        if "email" in update_data:
            update_data["email"] = update_data["email"].lower()
            if update_data["email"] != employee.email.lower():
                if await self.employee_repo.email_exists(update_data["email"], exclude_id=id):
                    logger.warning(f"Duplicate email on update for employee {employee.employee_id}")
                    raise EmployeeAlreadyExistsError("email", update_data["email"])

        if "manager_id" in update_data:
            await self._check_manager(
                update_data["manager_id"], update_data.get("employee_id", employee.employee_id)
            )

        new_status = update_data.get("employment_status")
        if new_status is not None and new_status != employee.employment_status:
            if new_status == EmploymentStatus.TERMINATED:
                if update_data.get("termination_date") is None:
                    update_data["termination_date"] = date.today()
            elif (
                employee.employment_status == EmploymentStatus.TERMINATED
                and "termination_date" not in update_data
            ):
                update_data["termination_date"] = None

        if update_data:
            employee = await self.employee_repo.apply(employee, **update_data)
            logger.info(f"Updated employee {employee.employee_id}: {sorted(update_data)}")
        return EmployeeResponse.model_validate(employee)

    async def delete_employee(self, id: int) -> DeleteResponse:
        """Delete an employee row.

        Attendance, payslips and other history keyed by the business key
        are kept.
        """
        deleted = await self.employee_repo.delete(id)
        if deleted:
            logger.info(f"Deleted employee id {id}")
        return DeleteResponse(success=deleted)

    async def create_document(self, data: EmployeeDocumentCreate) -> EmployeeDocumentResponse:
        """Attach a document to an employee.

        Raises:
            EmployeeNotFoundError: If the employee does not exist
        """
        if not await self.employee_repo.exists(data.employee_id):
            logger.warning(f"Document for unknown employee {data.employee_id}")
            raise EmployeeNotFoundError(data.employee_id)

        document = await self.document_repo.create(
            employee_id=data.employee_id,
            document_name=data.document_name,
            document_type=data.document_type,
            file_url=str(data.file_url),
        )
        return EmployeeDocumentResponse.model_validate(document)

    async def list_documents(self, employee_id: str) -> list[EmployeeDocumentResponse]:
        """List documents attached to an employee."""
        documents = await self.document_repo.get_by_employee(employee_id)
        return [EmployeeDocumentResponse.model_validate(d) for d in documents]

    async def delete_document(self, id: int) -> DeleteResponse:
        """Delete a document record."""
        return DeleteResponse(success=await self.document_repo.delete(id))
