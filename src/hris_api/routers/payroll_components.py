"""Payroll components router."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from hris_api.dependencies import get_payroll_service
from hris_api.models.dto.common import DeleteResponse
from hris_api.models.dto.payroll import (
    PayrollComponentCreate,
    PayrollComponentResponse,
    PayrollComponentUpdate,
)
from hris_api.services.payroll_service import PayrollService

router = APIRouter()


@router.post("", response_model=PayrollComponentResponse, status_code=status.HTTP_201_CREATED)
async def create_component(
    body: PayrollComponentCreate,
    service: Annotated[PayrollService, Depends(get_payroll_service)],
) -> PayrollComponentResponse:
    """Create a payroll component."""
    return await service.create_component(body)


@router.get("", response_model=list[PayrollComponentResponse])
async def list_components(
    service: Annotated[PayrollService, Depends(get_payroll_service)],
) -> list[PayrollComponentResponse]:
    """List payroll components."""
    return await service.list_components()


@router.get("/{id}", response_model=PayrollComponentResponse)
async def get_component(
    id: int,
    service: Annotated[PayrollService, Depends(get_payroll_service)],
) -> PayrollComponentResponse:
    """Get a payroll component by id."""
    component = await service.get_component(id)
    if component is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Payroll component not found"
        )
    return component


@router.patch("/{id}", response_model=PayrollComponentResponse)
async def update_component(
    id: int,
    body: PayrollComponentUpdate,
    service: Annotated[PayrollService, Depends(get_payroll_service)],
) -> PayrollComponentResponse:
    """Update a payroll component."""
    return await service.update_component(id, body)


@router.delete("/{id}", response_model=DeleteResponse)
async def delete_component(
    id: int,
    service: Annotated[PayrollService, Depends(get_payroll_service)],
) -> DeleteResponse:
    """Delete a payroll component and its assignments."""
    return await service.delete_component(id)
