"""FastAPI application entry point."""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from hris_api.config import get_settings
from hris_api.exceptions import HrisAPIError
from hris_api.middleware.error_handler import (
    generic_exception_handler,
    hris_exception_handler,
    http_exception_handler,
    sqlalchemy_exception_handler,
    validation_exception_handler,
)
from hris_api.routers import (
    applicants,
    attendance,
    dashboard,
    departments,
    employee_documents,
    employees,
    job_vacancies,
    leave_balances,
    leave_requests,
    payroll_components,
    payslips,
    performance_goals,
    performance_reviews,
    reports,
    salary_structures,
)
from hris_api.utils.secure_logging import configure_logging

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    config = get_settings()
    configure_logging()

    app = FastAPI(
        title=config.app_name,
        version="0.1.0",
        description="Human Resource Information System API",
        docs_url="/docs" if config.debug else None,
        redoc_url="/redoc" if config.debug else None,
    )

    # Domain errors first, then sanitized fallbacks
    app.add_exception_handler(HrisAPIError, hris_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    allowed_origins = config.cors_origins_list
    if "*" in allowed_origins:
        raise ValueError(
            "CORS_ORIGINS cannot contain '*' wildcard when allow_credentials=True. "
            "Specify explicit origins."
        )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "X-Requested-With"],
    )

    # Include routers
    app.include_router(employees.router, prefix="/api/v1/employees", tags=["Employees"])
    app.include_router(
        employee_documents.router,
        prefix="/api/v1/employee-documents",
        tags=["Employee Documents"],
    )
    app.include_router(departments.router, prefix="/api/v1/departments", tags=["Departments"])
    app.include_router(attendance.router, prefix="/api/v1/attendance", tags=["Attendance"])
    app.include_router(
        leave_requests.router, prefix="/api/v1/leave-requests", tags=["Leave Requests"]
    )
    app.include_router(
        leave_balances.router, prefix="/api/v1/leave-balances", tags=["Leave Balances"]
    )
    app.include_router(
        payroll_components.router,
        prefix="/api/v1/payroll-components",
        tags=["Payroll Components"],
    )
    app.include_router(
        salary_structures.router,
        prefix="/api/v1/salary-structures",
        tags=["Salary Structures"],
    )
    app.include_router(payslips.router, prefix="/api/v1/payslips", tags=["Payslips"])
    app.include_router(
        performance_goals.router,
        prefix="/api/v1/performance-goals",
        tags=["Performance Goals"],
    )
    app.include_router(
        performance_reviews.router,
        prefix="/api/v1/performance-reviews",
        tags=["Performance Reviews"],
    )
    app.include_router(job_vacancies.router, prefix="/api/v1/job-vacancies", tags=["Job Vacancies"])
    app.include_router(applicants.router, prefix="/api/v1/applicants", tags=["Applicants"])
    app.include_router(reports.router, prefix="/api/v1/reports", tags=["Reports"])
    app.include_router(dashboard.router, prefix="/api/v1/dashboard", tags=["Dashboard"])

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}

    logger.info(f"{config.app_name} configured for {config.environment}")
    return app


app = create_app()
