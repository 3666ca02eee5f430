"""Performance goals router."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from hris_api.dependencies import get_performance_service
from hris_api.models.domain.performance import GoalStatus
from hris_api.models.dto.common import DeleteResponse
from hris_api.models.dto.performance import (
    PerformanceGoalCreate,
    PerformanceGoalResponse,
    PerformanceGoalUpdate,
)
from hris_api.services.performance_service import PerformanceService

router = APIRouter()


@router.post("", response_model=PerformanceGoalResponse, status_code=status.HTTP_201_CREATED)
async def create_goal(
    body: PerformanceGoalCreate,
    service: Annotated[PerformanceService, Depends(get_performance_service)],
) -> PerformanceGoalResponse:
    """Create a performance goal."""
    return await service.create_goal(body)


@router.get("", response_model=list[PerformanceGoalResponse])
async def list_goals(
    service: Annotated[PerformanceService, Depends(get_performance_service)],
) -> list[PerformanceGoalResponse]:
    """List all goals."""
    return await service.list_goals()


@router.get("/overdue", response_model=list[PerformanceGoalResponse])
async def list_overdue_goals(
    service: Annotated[PerformanceService, Depends(get_performance_service)],
) -> list[PerformanceGoalResponse]:
    """List goals past their due date that are not completed."""
    return await service.get_overdue_goals()


@router.get("/status/{goal_status}", response_model=list[PerformanceGoalResponse])
async def list_goals_by_status(
    goal_status: GoalStatus,
    service: Annotated[PerformanceService, Depends(get_performance_service)],
) -> list[PerformanceGoalResponse]:
    """List goals with a status."""
    return await service.get_goals_by_status(goal_status)


@router.get("/employee/{employee_id}", response_model=list[PerformanceGoalResponse])
async def list_employee_goals(
    employee_id: str,
    service: Annotated[PerformanceService, Depends(get_performance_service)],
) -> list[PerformanceGoalResponse]:
    """List goals of an employee."""
    return await service.get_goals_by_employee(employee_id)


@router.get("/{id}", response_model=PerformanceGoalResponse)
async def get_goal(
    id: int,
    service: Annotated[PerformanceService, Depends(get_performance_service)],
) -> PerformanceGoalResponse:
    """Get a goal by id."""
    goal = await service.get_goal(id)
    if goal is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Performance goal with ID {id} not found",
        )
    return goal


@router.patch("/{id}", response_model=PerformanceGoalResponse)
async def update_goal(
    id: int,
    body: PerformanceGoalUpdate,
    service: Annotated[PerformanceService, Depends(get_performance_service)],
) -> PerformanceGoalResponse:
    """Update a goal."""
    return await service.update_goal(id, body)


@router.delete("/{id}", response_model=DeleteResponse)
async def delete_goal(
    id: int,
    service: Annotated[PerformanceService, Depends(get_performance_service)],
) -> DeleteResponse:
    """Delete a goal."""
    return await service.delete_goal(id)
