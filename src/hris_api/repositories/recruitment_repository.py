"""Job vacancy and applicant repositories."""

from sqlalchemy import func, or_, select

from hris_api.models.domain.recruitment import ApplicantStatus, VacancyStatus
from hris_api.models.orm.recruitment import ApplicantORM, JobVacancyORM
from hris_api.repositories.base import BaseRepository
from hris_api.utils.validation import escape_like_wildcards


class JobVacancyRepository(BaseRepository[JobVacancyORM]):
    """Repository for job vacancy operations."""

    model = JobVacancyORM

    async def get_by_status(self, status: VacancyStatus) -> list[JobVacancyORM]:
        """Get vacancies with a status, most recently posted first."""
        result = await self.session.execute(
            select(JobVacancyORM)
            .where(JobVacancyORM.status == status)
            .order_by(JobVacancyORM.posted_date.desc(), JobVacancyORM.id.desc())
        )
        return list(result.scalars().all())

    async def get_by_department(self, department_id: int) -> list[JobVacancyORM]:
        """Get vacancies of a department, most recently posted first."""
        result = await self.session.execute(
            select(JobVacancyORM)
            .where(JobVacancyORM.department_id == department_id)
            .order_by(JobVacancyORM.posted_date.desc(), JobVacancyORM.id.desc())
        )
        return list(result.scalars().all())

    async def count_by_status(self, status: VacancyStatus) -> int:
        """Count vacancies with a status."""
        result = await self.session.execute(
            select(func.count()).select_from(JobVacancyORM).where(JobVacancyORM.status == status)
        )
        return result.scalar_one()


class ApplicantRepository(BaseRepository[ApplicantORM]):
    """Repository for applicant operations."""

    model = ApplicantORM

    async def get_by_vacancy(self, job_vacancy_id: int) -> list[ApplicantORM]:
        """Get applicants of a vacancy, latest application first."""
        result = await self.session.execute(
            select(ApplicantORM)
            .where(ApplicantORM.job_vacancy_id == job_vacancy_id)
            .order_by(ApplicantORM.application_date.desc(), ApplicantORM.id.desc())
        )
        return list(result.scalars().all())

    async def get_by_status(self, status: ApplicantStatus) -> list[ApplicantORM]:
        """Get applicants in a pipeline status, latest application first."""
        result = await self.session.execute(
            select(ApplicantORM)
            .where(ApplicantORM.status == status)
            .order_by(ApplicantORM.application_date.desc(), ApplicantORM.id.desc())
        )
        return list(result.scalars().all())

    async def search(self, term: str) -> list[ApplicantORM]:
        """Case-insensitive substring search on name or email.

        Args:
            term: Search term, LIKE wildcards are matched literally

        Returns:
            Matching applicants ordered by name
        """
        pattern = f"%{escape_like_wildcards(term)}%"
        result = await self.session.execute(
            select(ApplicantORM)
            .where(
                or_(
                    ApplicantORM.full_name.ilike(pattern, escape="\\"),
                    ApplicantORM.email.ilike(pattern, escape="\\"),
                )
            )
            .order_by(ApplicantORM.full_name, ApplicantORM.id)
        )
        return list(result.scalars().all())

    async def count_by_vacancy(self, job_vacancy_id: int) -> int:
        """Count applicants referencing a vacancy."""
        result = await self.session.execute(
            select(func.count())
            .select_from(ApplicantORM)
            .where(ApplicantORM.job_vacancy_id == job_vacancy_id)
        )
        return result.scalar_one()

    async def count_by_status(self) -> dict[str, int]:
        """Count applicants per status (only statuses that occur)."""
        result = await self.session.execute(
            select(ApplicantORM.status, func.count()).group_by(ApplicantORM.status)
        )
        return {str(row[0]): row[1] for row in result.all()}
