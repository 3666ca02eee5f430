"""Reports router."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from hris_api.dependencies import get_recruitment_service, get_report_service
from hris_api.models.dto.recruitment import RecruitmentStatsResponse
from hris_api.models.dto.report import (
    AttendanceStatsResponse,
    HRMetricsResponse,
    PayrollStatsResponse,
)
from hris_api.services.recruitment_service import RecruitmentService
from hris_api.services.report_service import ReportService

router = APIRouter()


@router.get("/attendance-stats", response_model=AttendanceStatsResponse)
async def get_attendance_stats(
    service: Annotated[ReportService, Depends(get_report_service)],
    start_date: date = Query(),
    end_date: date = Query(),
) -> AttendanceStatsResponse:
    """Attendance rates per department and per day."""
    return await service.get_attendance_stats(start_date, end_date)


@router.get("/payroll-stats", response_model=PayrollStatsResponse)
async def get_payroll_stats(
    service: Annotated[ReportService, Depends(get_report_service)],
    year: int = Query(ge=1900, le=9999),
    month: int = Query(ge=1, le=12),
) -> PayrollStatsResponse:
    """Payroll totals of a calendar month."""
    return await service.get_payroll_stats(year, month)


@router.get("/hr-metrics", response_model=HRMetricsResponse)
async def get_hr_metrics(
    service: Annotated[ReportService, Depends(get_report_service)],
) -> HRMetricsResponse:
    """Headcount, turnover, tenure and demographic distributions."""
    return await service.get_hr_metrics()


@router.get("/recruitment-stats", response_model=RecruitmentStatsResponse)
async def get_recruitment_stats(
    service: Annotated[RecruitmentService, Depends(get_recruitment_service)],
) -> RecruitmentStatsResponse:
    """Vacancy and applicant counts."""
    return await service.get_recruitment_stats()
