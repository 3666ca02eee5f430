"""Recruitment service for job vacancies and applicants."""

import logging
from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from hris_api.exceptions import (
    ApplicantNotFoundError,
    DepartmentNotFoundError,
    JobVacancyNotFoundError,
    VacancyHasApplicantsError,
)
from hris_api.models.domain.recruitment import ApplicantStatus, VacancyStatus
from hris_api.models.dto.recruitment import (
    ApplicantCreate,
    ApplicantResponse,
    JobVacancyCreate,
    JobVacancyResponse,
    JobVacancyUpdate,
    RecruitmentStatsResponse,
)
from hris_api.models.orm.recruitment import JobVacancyORM
from hris_api.repositories.department_repository import DepartmentRepository
from hris_api.repositories.recruitment_repository import ApplicantRepository, JobVacancyRepository
from hris_api.utils.validation import sanitize_search

logger = logging.getLogger(__name__)


class RecruitmentService:
    """Service for the recruitment pipeline."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session."""
        self.session = session
        self.vacancy_repo = JobVacancyRepository(session)
        self.applicant_repo = ApplicantRepository(session)
        self.department_repo = DepartmentRepository(session)

    async def _require_department(self, department_id: int | None) -> None:
        if department_id is None:
            return
        if await self.department_repo.get_by_id(department_id) is None:
            logger.warning(f"Vacancy references unknown department {department_id}")
            raise DepartmentNotFoundError(department_id)

    async def _require_vacancy(self, vacancy_id: int) -> JobVacancyORM:
        vacancy = await self.vacancy_repo.get_by_id(vacancy_id)
        if vacancy is None:
            logger.warning(f"Job vacancy {vacancy_id} not found")
            raise JobVacancyNotFoundError(vacancy_id)
        return vacancy

    # =========================================================================
    # Job vacancies
    # =========================================================================

    async def create_vacancy(self, data: JobVacancyCreate) -> JobVacancyResponse:
        """Post a job vacancy.

        Raises:
            DepartmentNotFoundError: If department_id is given and unknown
        """
        await self._require_department(data.department_id)
        values = data.model_dump()
        values["posted_date"] = data.posted_date or date.today()
        vacancy = await self.vacancy_repo.create(**values)
        return JobVacancyResponse.model_validate(vacancy)

    async def list_vacancies(self) -> list[JobVacancyResponse]:
        """List all vacancies, newest first."""
        vacancies = await self.vacancy_repo.get_all()
        return [JobVacancyResponse.model_validate(v) for v in vacancies]

    async def get_open_vacancies(self) -> list[JobVacancyResponse]:
        """List open vacancies, most recently posted first."""
        vacancies = await self.vacancy_repo.get_by_status(VacancyStatus.OPEN)
        return [JobVacancyResponse.model_validate(v) for v in vacancies]

    async def get_vacancy(self, id: int) -> JobVacancyResponse | None:
        """Get a vacancy by id."""
        vacancy = await self.vacancy_repo.get_by_id(id)
        if vacancy is None:
            return None
        return JobVacancyResponse.model_validate(vacancy)

    async def update_vacancy(self, id: int, data: JobVacancyUpdate) -> JobVacancyResponse:
        """Update a vacancy.

        Raises:
            JobVacancyNotFoundError: If the vacancy does not exist
            DepartmentNotFoundError: If a new department_id is unknown
        """
        vacancy = await self._require_vacancy(id)
        update_data = data.changes()
        if "department_id" in update_data:
            await self._require_department(update_data["department_id"])
        if update_data:
            vacancy = await self.vacancy_repo.apply(vacancy, **update_data)
        return JobVacancyResponse.model_validate(vacancy)

    async def delete_vacancy(self, id: int) -> None:
        """Delete a vacancy without applicants.

        Raises:
            JobVacancyNotFoundError: If the vacancy does not exist
            VacancyHasApplicantsError: If applicants still reference it
        """
        await self._require_vacancy(id)
        applicant_count = await self.applicant_repo.count_by_vacancy(id)
        if applicant_count:
            logger.warning(f"Refused to delete job vacancy {id} with {applicant_count} applicants")
            raise VacancyHasApplicantsError(id, applicant_count)
        await self.vacancy_repo.delete(id)
        logger.info(f"Deleted job vacancy {id}")

    async def close_vacancy(self, id: int) -> JobVacancyResponse:
        """Close a vacancy. Closing a closed vacancy is a no-op.

        Raises:
            JobVacancyNotFoundError: If the vacancy does not exist
        """
        vacancy = await self._require_vacancy(id)
        if vacancy.status != VacancyStatus.CLOSED:
            vacancy = await self.vacancy_repo.apply(vacancy, status=VacancyStatus.CLOSED)
        return JobVacancyResponse.model_validate(vacancy)

    async def get_vacancies_by_department(self, department_id: int) -> list[JobVacancyResponse]:
        """List vacancies of a department.

        Raises:
            DepartmentNotFoundError: If the department does not exist
        """
        if await self.department_repo.get_by_id(department_id) is None:
            logger.warning(f"Vacancies requested for unknown department {department_id}")
            raise DepartmentNotFoundError(department_id)
        vacancies = await self.vacancy_repo.get_by_department(department_id)
        return [JobVacancyResponse.model_validate(v) for v in vacancies]

    # =========================================================================
    # Applicants
    # =========================================================================

    async def create_applicant(self, data: ApplicantCreate) -> ApplicantResponse:
        """Register an applicant for a vacancy.

        Raises:
            JobVacancyNotFoundError: If the vacancy does not exist
        """
        await self._require_vacancy(data.job_vacancy_id)
        applicant = await self.applicant_repo.create(
            full_name=data.full_name,
            email=data.email.lower(),
            phone_number=data.phone_number,
            resume_url=str(data.resume_url) if data.resume_url else None,
            job_vacancy_id=data.job_vacancy_id,
            application_date=data.application_date or date.today(),
            status=data.status,
        )
        return ApplicantResponse.model_validate(applicant)

    async def list_applicants(self) -> list[ApplicantResponse]:
        """List all applicants, newest first."""
        applicants = await self.applicant_repo.get_all()
        return [ApplicantResponse.model_validate(a) for a in applicants]

    async def get_applicants_by_vacancy(self, vacancy_id: int) -> list[ApplicantResponse]:
        """List applicants of a vacancy.

        Raises:
            JobVacancyNotFoundError: If the vacancy does not exist
        """
        await self._require_vacancy(vacancy_id)
        applicants = await self.applicant_repo.get_by_vacancy(vacancy_id)
        return [ApplicantResponse.model_validate(a) for a in applicants]

    async def get_applicant(self, id: int) -> ApplicantResponse | None:
        """Get an applicant by id."""
        applicant = await self.applicant_repo.get_by_id(id)
        if applicant is None:
            return None
        return ApplicantResponse.model_validate(applicant)

    async def update_applicant_status(self, id: int, status: ApplicantStatus) -> ApplicantResponse:
        """Move an applicant to another pipeline status.

        Raises:
            ApplicantNotFoundError: If the applicant does not exist
        """
        applicant = await self.applicant_repo.update(id, status=status)
        if applicant is None:
            logger.warning(f"Status update of unknown applicant {id}")
            raise ApplicantNotFoundError(id)
        return ApplicantResponse.model_validate(applicant)

    async def delete_applicant(self, id: int) -> None:
        """Delete an applicant.

        Raises:
            ApplicantNotFoundError: If the applicant does not exist
        """
        if not await self.applicant_repo.delete(id):
            logger.warning(f"Delete of unknown applicant {id}")
            raise ApplicantNotFoundError(id)

    async def get_applicants_by_status(self, status: ApplicantStatus) -> list[ApplicantResponse]:
        """List applicants in a pipeline status."""
        applicants = await self.applicant_repo.get_by_status(status)
        return [ApplicantResponse.model_validate(a) for a in applicants]

    async def search_applicants(self, term: str) -> list[ApplicantResponse]:
        """Search applicants by name or email substring."""
        term = sanitize_search(term)
        if not term:
            return []
        applicants = await self.applicant_repo.search(term)
        return [ApplicantResponse.model_validate(a) for a in applicants]

    async def get_recruitment_stats(self) -> RecruitmentStatsResponse:
        """Vacancy and applicant counts."""
        return RecruitmentStatsResponse(
            total_vacancies=await self.vacancy_repo.count(),
            open_vacancies=await self.vacancy_repo.count_by_status(VacancyStatus.OPEN),
            total_applicants=await self.applicant_repo.count(),
            applicants_by_status=await self.applicant_repo.count_by_status(),
        )
