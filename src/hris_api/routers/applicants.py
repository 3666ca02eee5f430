"""Applicants router."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from hris_api.dependencies import get_recruitment_service
from hris_api.models.domain.recruitment import ApplicantStatus
from hris_api.models.dto.recruitment import (
    ApplicantCreate,
    ApplicantResponse,
    ApplicantStatusUpdate,
)
from hris_api.services.recruitment_service import RecruitmentService

router = APIRouter()


@router.post("", response_model=ApplicantResponse, status_code=status.HTTP_201_CREATED)
async def create_applicant(
    body: ApplicantCreate,
    service: Annotated[RecruitmentService, Depends(get_recruitment_service)],
) -> ApplicantResponse:
    """Register an application for a vacancy."""
    return await service.create_applicant(body)


@router.get("", response_model=list[ApplicantResponse])
async def list_applicants(
    service: Annotated[RecruitmentService, Depends(get_recruitment_service)],
) -> list[ApplicantResponse]:
    """List all applicants."""
    return await service.list_applicants()


@router.get("/search", response_model=list[ApplicantResponse])
async def search_applicants(
    service: Annotated[RecruitmentService, Depends(get_recruitment_service)],
    q: str = Query(default="", max_length=200),
) -> list[ApplicantResponse]:
    """Search applicants by name or email."""
    return await service.search_applicants(q)


@router.get("/status/{applicant_status}", response_model=list[ApplicantResponse])
async def list_applicants_by_status(
    applicant_status: ApplicantStatus,
    service: Annotated[RecruitmentService, Depends(get_recruitment_service)],
) -> list[ApplicantResponse]:
    """List applicants in a pipeline stage."""
    return await service.get_applicants_by_status(applicant_status)


@router.get("/vacancy/{vacancy_id}", response_model=list[ApplicantResponse])
async def list_vacancy_applicants(
    vacancy_id: int,
    service: Annotated[RecruitmentService, Depends(get_recruitment_service)],
) -> list[ApplicantResponse]:
    """List applicants of a vacancy."""
    return await service.get_applicants_by_vacancy(vacancy_id)


@router.get("/{id}", response_model=ApplicantResponse)
async def get_applicant(
    id: int,
    service: Annotated[RecruitmentService, Depends(get_recruitment_service)],
) -> ApplicantResponse:
    """Get an applicant by id."""
    applicant = await service.get_applicant(id)
    if applicant is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Applicant not found")
    return applicant


@router.patch("/{id}/status", response_model=ApplicantResponse)
async def update_applicant_status(
    id: int,
    body: ApplicantStatusUpdate,
    service: Annotated[RecruitmentService, Depends(get_recruitment_service)],
) -> ApplicantResponse:
    """Move an applicant to another pipeline stage."""
    return await service.update_applicant_status(id, body.status)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_applicant(
    id: int,
    service: Annotated[RecruitmentService, Depends(get_recruitment_service)],
) -> Response:
    """Delete an applicant."""
    await service.delete_applicant(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
