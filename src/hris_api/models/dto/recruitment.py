"""Recruitment DTOs."""

from datetime import date, datetime
from typing import ClassVar

from pydantic import AnyHttpUrl, BaseModel, EmailStr, Field

from hris_api.models.domain.recruitment import ApplicantStatus, VacancyStatus
from hris_api.models.dto.common import PartialUpdate


class JobVacancyCreate(BaseModel):
    """DTO for posting a job vacancy."""

    title: str = Field(min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=10000)
    department_id: int | None = None
    status: VacancyStatus = VacancyStatus.OPEN
    posted_date: date | None = None


class JobVacancyUpdate(PartialUpdate):
    """DTO for updating a job vacancy."""

    non_nullable_fields: ClassVar[frozenset[str]] = frozenset({"title", "status", "posted_date"})

    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=10000)
    department_id: int | None = None
    status: VacancyStatus | None = None
    posted_date: date | None = None


class JobVacancyResponse(BaseModel):
    """Job vacancy response DTO."""

    id: int
    title: str
    description: str | None = None
    department_id: int | None = None
    status: VacancyStatus
    posted_date: date
    created_at: datetime

    class Config:
        """Pydantic config."""

        from_attributes = True


class ApplicantCreate(BaseModel):
    """DTO for registering an applicant."""

    full_name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    phone_number: str | None = Field(default=None, max_length=20)
    resume_url: AnyHttpUrl | None = None
    job_vacancy_id: int
    application_date: date | None = None
    status: ApplicantStatus = ApplicantStatus.APPLIED


class ApplicantStatusUpdate(BaseModel):
    """DTO for moving an applicant through the pipeline."""

    status: ApplicantStatus


class ApplicantResponse(BaseModel):
    """Applicant response DTO."""

    id: int
    full_name: str
    email: str
    phone_number: str | None = None
    resume_url: str | None = None
    job_vacancy_id: int
    application_date: date
    status: ApplicantStatus
    created_at: datetime

    class Config:
        """Pydantic config."""

        from_attributes = True


class RecruitmentStatsResponse(BaseModel):
    """Recruitment pipeline counts."""

    total_vacancies: int
    open_vacancies: int
    total_applicants: int
    applicants_by_status: dict[str, int]
