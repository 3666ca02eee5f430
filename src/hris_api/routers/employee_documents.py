"""Employee documents router."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from hris_api.dependencies import get_employee_service
from hris_api.models.dto.common import DeleteResponse
from hris_api.models.dto.employee import EmployeeDocumentCreate, EmployeeDocumentResponse
from hris_api.services.employee_service import EmployeeService

router = APIRouter()


@router.post("", response_model=EmployeeDocumentResponse, status_code=status.HTTP_201_CREATED)
async def create_document(
    body: EmployeeDocumentCreate,
    service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> EmployeeDocumentResponse:
    """Attach a document to an employee."""
    return await service.create_document(body)


@router.get("/employee/{employee_id}", response_model=list[EmployeeDocumentResponse])
async def list_documents(
    employee_id: str,
    service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> list[EmployeeDocumentResponse]:
    """List documents of an employee."""
    return await service.list_documents(employee_id)


@router.delete("/{id}", response_model=DeleteResponse)
async def delete_document(
    id: int,
    service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> DeleteResponse:
    """Delete a document record."""
    return await service.delete_document(id)
