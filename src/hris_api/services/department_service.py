"""Department service."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from hris_api.exceptions import DepartmentAlreadyExistsError, DepartmentNotFoundError
from hris_api.models.dto.common import DeleteResponse
from hris_api.models.dto.department import (
    DepartmentCreate,
    DepartmentResponse,
    DepartmentUpdate,
)
from hris_api.repositories.department_repository import DepartmentRepository

logger = logging.getLogger(__name__)


class DepartmentService:
    """Service for managing departments."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session."""
        self.session = session
        self.repo = DepartmentRepository(session)

    async def create_department(self, data: DepartmentCreate) -> DepartmentResponse:
        """Create a department.

        Raises:
            DepartmentAlreadyExistsError: If the name is taken
        """
        name = data.name.strip()
        if await self.repo.name_exists(name):
            logger.warning(f"Duplicate department name: {name}")
            raise DepartmentAlreadyExistsError(name)
        department = await self.repo.create(name=name, description=data.description)
        return DepartmentResponse.model_validate(department)

    async def list_departments(self) -> list[DepartmentResponse]:
        """List all departments."""
        departments = await self.repo.get_all()
        return [DepartmentResponse.model_validate(d) for d in departments]

    async def get_department(self, id: int) -> DepartmentResponse | None:
        """Get a department by id."""
        department = await self.repo.get_by_id(id)
        if department is None:
            return None
        return DepartmentResponse.model_validate(department)

    async def update_department(self, id: int, data: DepartmentUpdate) -> DepartmentResponse:
        """Update a department.

        Raises:
            DepartmentNotFoundError: If the department does not exist
            DepartmentAlreadyExistsError: If the new name is taken
        """
        department = await self.repo.get_by_id(id)
        if department is None:
            logger.warning(f"Update of unknown department id {id}")
            raise DepartmentNotFoundError(id)

        update_data = data.changes()
        if "name" in update_data:
            update_data["name"] = update_data["name"].strip()
            if await self.repo.name_exists(update_data["name"], exclude_id=id):
                logger.warning(f"Duplicate department name on update: {update_data['name']}")
                raise DepartmentAlreadyExistsError(update_data["name"])

        if update_data:
            department = await self.repo.apply(department, **update_data)
        return DepartmentResponse.model_validate(department)

    async def delete_department(self, id: int) -> DeleteResponse:
        """Delete a department. Vacancies referencing it lose the reference."""
        return DeleteResponse(success=await self.repo.delete(id))
