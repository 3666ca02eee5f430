"""Initial schema

Revision ID: 001
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def _one_of(column: str, values: list[str], name: str) -> sa.CheckConstraint:
    allowed = ", ".join(f"'{value}'" for value in values)
    return sa.CheckConstraint(f"{column} IN ({allowed})", name=name)


def upgrade() -> None:
    # Create departments table
    op.create_table(
        "departments",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )

    # Create employees table
    op.create_table(
        "employees",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("employee_id", sa.String(50), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("full_name", sa.String(255), nullable=False),
        sa.Column("date_of_birth", sa.Date(), nullable=True),
        sa.Column("gender", sa.String(50), nullable=True),
        sa.Column("marital_status", sa.String(50), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("phone_number", sa.String(20), nullable=True),
        sa.Column("position", sa.String(255), nullable=True),
        sa.Column("department", sa.String(255), nullable=True),
        sa.Column("manager_id", sa.String(50), nullable=True),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("termination_date", sa.Date(), nullable=True),
        sa.Column("employment_status", sa.String(50), nullable=False),
        sa.Column("bank_name", sa.String(255), nullable=True),
        sa.Column("bank_account_number", sa.String(50), nullable=True),
        sa.Column("role", sa.String(50), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("employee_id"),
        sa.UniqueConstraint("email"),
        _one_of("gender", ["Male", "Female", "Other"], "gender"),
        _one_of("marital_status", ["Single", "Married", "Divorced", "Widowed"], "marital_status"),
        _one_of("employment_status", ["Active", "On Leave", "Terminated"], "employment_status"),
        _one_of("role", ["Admin", "Manager", "Employee"], "employee_role"),
    )
    op.create_index("idx_employees_status", "employees", ["employment_status"])
    op.create_index("idx_employees_manager_id", "employees", ["manager_id"])
    op.create_index("idx_employees_department", "employees", ["department"])

    # Create employee_documents table
    op.create_table(
        "employee_documents",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("employee_id", sa.String(50), nullable=False),
        sa.Column("document_name", sa.String(255), nullable=False),
        sa.Column("document_type", sa.String(100), nullable=False),
        sa.Column("file_url", sa.String(2048), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_employee_documents_employee_id", "employee_documents", ["employee_id"]
    )

    # Create attendance table (server-local wall-clock times)
    op.create_table(
        "attendance",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("employee_id", sa.String(50), nullable=False),
        sa.Column("check_in_time", sa.DateTime(), nullable=False),
        sa.Column("check_out_time", sa.DateTime(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_attendance_employee_check_in", "attendance", ["employee_id", "check_in_time"]
    )
    op.create_index("idx_attendance_check_in", "attendance", ["check_in_time"])

    # Create leave_requests table
    op.create_table(
        "leave_requests",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("employee_id", sa.String(50), nullable=False),
        sa.Column("leave_type", sa.String(50), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("reason", sa.Text(), nullable=True),
        sa.Column("status", sa.String(50), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        _one_of(
            "leave_type",
            [
                "Annual Leave",
                "Sick Leave",
                "Personal Leave",
                "Maternity Leave",
                "Paternity Leave",
            ],
            "leave_type",
        ),
        _one_of("status", ["Pending", "Approved", "Rejected"], "leave_status"),
    )
    op.create_index("idx_leave_requests_employee_id", "leave_requests", ["employee_id"])
    op.create_index("idx_leave_requests_status", "leave_requests", ["status"])

    # Create leave_balances table
    op.create_table(
        "leave_balances",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("employee_id", sa.String(50), nullable=False),
        sa.Column("annual_leave_balance", sa.Integer(), nullable=False),
        sa.Column("sick_leave_balance", sa.Integer(), nullable=False),
        sa.Column("personal_leave_balance", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("employee_id"),
        sa.CheckConstraint("annual_leave_balance >= 0", name="ck_leave_balances_annual"),
        sa.CheckConstraint("sick_leave_balance >= 0", name="ck_leave_balances_sick"),
        sa.CheckConstraint("personal_leave_balance >= 0", name="ck_leave_balances_personal"),
    )

    # Create payroll_components table
    op.create_table(
        "payroll_components",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("type", sa.String(50), nullable=False),
        sa.Column("amount", sa.Numeric(10, 2), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
        _one_of("type", ["Allowance", "Deduction"], "component_type"),
    )

    # Create employee_salary_structure table
    op.create_table(
        "employee_salary_structure",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("employee_id", sa.String(50), nullable=False),
        sa.Column("component_id", sa.Integer(), nullable=False),
        sa.Column("amount", sa.Numeric(10, 2), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["component_id"], ["payroll_components.id"], ondelete="CASCADE"
        ),
    )
    op.create_index(
        "ix_employee_salary_structure_employee_id",
        "employee_salary_structure",
        ["employee_id"],
    )
    op.create_index(
        "ix_employee_salary_structure_component_id",
        "employee_salary_structure",
        ["component_id"],
    )

    # Create payslips table
    op.create_table(
        "payslips",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("employee_id", sa.String(50), nullable=False),
        sa.Column("pay_period_start", sa.Date(), nullable=False),
        sa.Column("pay_period_end", sa.Date(), nullable=False),
        sa.Column("gross_salary", sa.Numeric(10, 2), nullable=False),
        sa.Column("total_allowances", sa.Numeric(10, 2), nullable=False),
        sa.Column("total_deductions", sa.Numeric(10, 2), nullable=False),
        sa.Column("net_salary", sa.Numeric(10, 2), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "employee_id",
            "pay_period_start",
            "pay_period_end",
            name="uq_payslips_employee_period",
        ),
    )
    op.create_index("idx_payslips_period", "payslips", ["pay_period_start", "pay_period_end"])

    # Create performance_goals table
    op.create_table(
        "performance_goals",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("employee_id", sa.String(50), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("due_date", sa.Date(), nullable=True),
        sa.Column("status", sa.String(50), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        _one_of(
            "status", ["Not Started", "In Progress", "Completed", "Canceled"], "goal_status"
        ),
    )
    op.create_index("idx_performance_goals_employee_id", "performance_goals", ["employee_id"])
    op.create_index(
        "idx_performance_goals_status_due", "performance_goals", ["status", "due_date"]
    )

    # Create performance_reviews table
    op.create_table(
        "performance_reviews",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("employee_id", sa.String(50), nullable=False),
        sa.Column("reviewer_id", sa.String(50), nullable=False),
        sa.Column("review_date", sa.Date(), nullable=False),
        sa.Column("overall_rating", sa.Integer(), nullable=False),
        sa.Column("comments", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "overall_rating >= 1 AND overall_rating <= 5",
            name="ck_performance_reviews_rating",
        ),
    )
    op.create_index(
        "ix_performance_reviews_employee_id", "performance_reviews", ["employee_id"]
    )
    op.create_index(
        "ix_performance_reviews_reviewer_id", "performance_reviews", ["reviewer_id"]
    )

    # Create job_vacancies table
    op.create_table(
        "job_vacancies",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("department_id", sa.Integer(), nullable=True),
        sa.Column("status", sa.String(50), nullable=False),
        sa.Column(
            "posted_date", sa.Date(), server_default=sa.text("CURRENT_DATE"), nullable=False
        ),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["department_id"], ["departments.id"], ondelete="SET NULL"),
        _one_of("status", ["Open", "Closed"], "vacancy_status"),
    )
    op.create_index("ix_job_vacancies_department_id", "job_vacancies", ["department_id"])
    op.create_index("ix_job_vacancies_status", "job_vacancies", ["status"])

    # Create applicants table
    op.create_table(
        "applicants",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("full_name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("phone_number", sa.String(20), nullable=True),
        sa.Column("resume_url", sa.String(2048), nullable=True),
        sa.Column("job_vacancy_id", sa.Integer(), nullable=False),
        sa.Column(
            "application_date",
            sa.Date(),
            server_default=sa.text("CURRENT_DATE"),
            nullable=False,
        ),
        sa.Column("status", sa.String(50), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["job_vacancy_id"], ["job_vacancies.id"], ondelete="RESTRICT"),
        _one_of(
            "status",
            ["Applied", "Screening", "Interview", "Offer", "Hired", "Rejected"],
            "applicant_status",
        ),
    )
    op.create_index("ix_applicants_job_vacancy_id", "applicants", ["job_vacancy_id"])
    op.create_index("ix_applicants_status", "applicants", ["status"])


def downgrade() -> None:
    op.drop_table("applicants")
    op.drop_table("job_vacancies")
    op.drop_table("performance_reviews")
    op.drop_table("performance_goals")
    op.drop_table("payslips")
    op.drop_table("employee_salary_structure")
    op.drop_table("payroll_components")
    op.drop_table("leave_balances")
    op.drop_table("leave_requests")
    op.drop_table("attendance")
    op.drop_table("employee_documents")
    op.drop_table("employees")
    op.drop_table("departments")
