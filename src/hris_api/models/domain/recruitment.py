"""Recruitment domain enums."""

from enum import StrEnum


class VacancyStatus(StrEnum):
    """Job vacancy status."""

    OPEN = "Open"
    CLOSED = "Closed"


class ApplicantStatus(StrEnum):
    """Applicant pipeline status."""

    APPLIED = "Applied"
    SCREENING = "Screening"
    INTERVIEW = "Interview"
    OFFER = "Offer"
    HIRED = "Hired"
    REJECTED = "Rejected"
