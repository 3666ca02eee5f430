"""Job vacancies router."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status

from hris_api.dependencies import get_recruitment_service
from hris_api.models.dto.recruitment import (
    JobVacancyCreate,
    JobVacancyResponse,
    JobVacancyUpdate,
)
from hris_api.services.recruitment_service import RecruitmentService

router = APIRouter()


@router.post("", response_model=JobVacancyResponse, status_code=status.HTTP_201_CREATED)
async def create_vacancy(
    body: JobVacancyCreate,
    service: Annotated[RecruitmentService, Depends(get_recruitment_service)],
) -> JobVacancyResponse:
    """Post a job vacancy."""
    return await service.create_vacancy(body)


@router.get("", response_model=list[JobVacancyResponse])
async def list_vacancies(
    service: Annotated[RecruitmentService, Depends(get_recruitment_service)],
) -> list[JobVacancyResponse]:
    """List all job vacancies."""
    return await service.list_vacancies()


@router.get("/open", response_model=list[JobVacancyResponse])
async def list_open_vacancies(
    service: Annotated[RecruitmentService, Depends(get_recruitment_service)],
) -> list[JobVacancyResponse]:
    """List vacancies that accept applications."""
    return await service.get_open_vacancies()


@router.get("/department/{department_id}", response_model=list[JobVacancyResponse])
async def list_department_vacancies(
    department_id: int,
    service: Annotated[RecruitmentService, Depends(get_recruitment_service)],
) -> list[JobVacancyResponse]:
    """List vacancies of a department."""
    return await service.get_vacancies_by_department(department_id)


@router.get("/{id}", response_model=JobVacancyResponse)
async def get_vacancy(
    id: int,
    service: Annotated[RecruitmentService, Depends(get_recruitment_service)],
) -> JobVacancyResponse:
    """Get a job vacancy by id."""
    vacancy = await service.get_vacancy(id)
    if vacancy is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job vacancy not found")
    return vacancy


@router.patch("/{id}", response_model=JobVacancyResponse)
async def update_vacancy(
    id: int,
    body: JobVacancyUpdate,
    service: Annotated[RecruitmentService, Depends(get_recruitment_service)],
) -> JobVacancyResponse:
    """Update a job vacancy."""
    return await service.update_vacancy(id, body)


@router.post("/{id}/close", response_model=JobVacancyResponse)
async def close_vacancy(
    id: int,
    service: Annotated[RecruitmentService, Depends(get_recruitment_service)],
) -> JobVacancyResponse:
    """Close a job vacancy."""
    return await service.close_vacancy(id)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_vacancy(
    id: int,
    service: Annotated[RecruitmentService, Depends(get_recruitment_service)],
) -> Response:
    """Delete a job vacancy without applicants."""
    await service.delete_vacancy(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
