"""Departments router."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from hris_api.dependencies import get_department_service
from hris_api.models.dto.common import DeleteResponse
from hris_api.models.dto.department import DepartmentCreate, DepartmentResponse, DepartmentUpdate
from hris_api.services.department_service import DepartmentService

router = APIRouter()


@router.post("", response_model=DepartmentResponse, status_code=status.HTTP_201_CREATED)
async def create_department(
    body: DepartmentCreate,
    service: Annotated[DepartmentService, Depends(get_department_service)],
) -> DepartmentResponse:
    """Create a department."""
    return await service.create_department(body)


@router.get("", response_model=list[DepartmentResponse])
async def list_departments(
    service: Annotated[DepartmentService, Depends(get_department_service)],
) -> list[DepartmentResponse]:
    """List all departments."""
    return await service.list_departments()


@router.get("/{id}", response_model=DepartmentResponse)
async def get_department(
    id: int,
    service: Annotated[DepartmentService, Depends(get_department_service)],
) -> DepartmentResponse:
    """Get a department by id."""
    department = await service.get_department(id)
    if department is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Department not found")
    return department


@router.patch("/{id}", response_model=DepartmentResponse)
async def update_department(
    id: int,
    body: DepartmentUpdate,
    service: Annotated[DepartmentService, Depends(get_department_service)],
) -> DepartmentResponse:
    """Update a department."""
    return await service.update_department(id, body)


@router.delete("/{id}", response_model=DeleteResponse)
async def delete_department(
    id: int,
    service: Annotated[DepartmentService, Depends(get_department_service)],
) -> DeleteResponse:
    """Delete a department."""
    return await service.delete_department(id)
