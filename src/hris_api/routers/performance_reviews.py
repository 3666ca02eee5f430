"""Performance reviews router."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from hris_api.dependencies import get_performance_service
from hris_api.models.dto.common import DeleteResponse
from hris_api.models.dto.performance import (
    AverageRatingResponse,
    PerformanceReviewCreate,
    PerformanceReviewResponse,
    PerformanceReviewUpdate,
)
from hris_api.services.performance_service import PerformanceService

router = APIRouter()


@router.post("", response_model=PerformanceReviewResponse, status_code=status.HTTP_201_CREATED)
async def create_review(
    body: PerformanceReviewCreate,
    service: Annotated[PerformanceService, Depends(get_performance_service)],
) -> PerformanceReviewResponse:
    """Record a performance review."""
    return await service.create_review(body)


@router.get("", response_model=list[PerformanceReviewResponse])
async def list_reviews(
    service: Annotated[PerformanceService, Depends(get_performance_service)],
) -> list[PerformanceReviewResponse]:
    """List all reviews."""
    return await service.list_reviews()


@router.get("/employee/{employee_id}", response_model=list[PerformanceReviewResponse])
async def list_employee_reviews(
    employee_id: str,
    service: Annotated[PerformanceService, Depends(get_performance_service)],
) -> list[PerformanceReviewResponse]:
    """List reviews of an employee."""
    return await service.get_reviews_by_employee(employee_id)


@router.get("/employee/{employee_id}/average-rating", response_model=AverageRatingResponse)
async def get_average_rating(
    employee_id: str,
    service: Annotated[PerformanceService, Depends(get_performance_service)],
) -> AverageRatingResponse:
    """Mean overall rating of an employee."""
    return await service.get_average_rating(employee_id)


@router.get("/reviewer/{reviewer_id}", response_model=list[PerformanceReviewResponse])
async def list_reviewer_reviews(
    reviewer_id: str,
    service: Annotated[PerformanceService, Depends(get_performance_service)],
) -> list[PerformanceReviewResponse]:
    """List reviews written by a reviewer."""
    return await service.get_reviews_by_reviewer(reviewer_id)


@router.get("/{id}", response_model=PerformanceReviewResponse)
async def get_review(
    id: int,
    service: Annotated[PerformanceService, Depends(get_performance_service)],
) -> PerformanceReviewResponse:
    """Get a review by id."""
    review = await service.get_review(id)
    if review is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Performance review with ID {id} not found",
        )
    return review


@router.patch("/{id}", response_model=PerformanceReviewResponse)
async def update_review(
    id: int,
    body: PerformanceReviewUpdate,
    service: Annotated[PerformanceService, Depends(get_performance_service)],
) -> PerformanceReviewResponse:
    """Update a review."""
    return await service.update_review(id, body)


@router.delete("/{id}", response_model=DeleteResponse)
async def delete_review(
    id: int,
    service: Annotated[PerformanceService, Depends(get_performance_service)],
) -> DeleteResponse:
    """Delete a review."""
    return await service.delete_review(id)
