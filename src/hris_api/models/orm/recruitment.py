"""Recruitment ORM models."""

from datetime import date

from sqlalchemy import Date, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from hris_api.models.domain.recruitment import ApplicantStatus, VacancyStatus
from hris_api.models.orm.base import Base, IdMixin, TimestampMixin, str_enum


class JobVacancyORM(Base, IdMixin, TimestampMixin):
    """Job vacancy database model."""

    __tablename__ = "job_vacancies"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    department_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("departments.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    status: Mapped[VacancyStatus] = mapped_column(
        str_enum(VacancyStatus, "vacancy_status"),
        nullable=False,
        default=VacancyStatus.OPEN,
        index=True,
    )
    posted_date: Mapped[date] = mapped_column(Date, nullable=False, server_default=func.current_date())


class ApplicantORM(Base, IdMixin, TimestampMixin):
    """Applicant for a job vacancy."""

    __tablename__ = "applicants"

    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone_number: Mapped[str | None] = mapped_column(String(20), nullable=True)
    resume_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    job_vacancy_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("job_vacancies.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    application_date: Mapped[date] = mapped_column(
        Date, nullable=False, server_default=func.current_date()
    )
    status: Mapped[ApplicantStatus] = mapped_column(
        str_enum(ApplicantStatus, "applicant_status"),
        nullable=False,
        default=ApplicantStatus.APPLIED,
        index=True,
    )
