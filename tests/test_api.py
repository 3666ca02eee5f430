"""HTTP API tests through the FastAPI app."""

from decimal import Decimal

import pytest


async def _create_employee(client, employee_id: str, **fields) -> dict:
    payload = {
        "employee_id": employee_id,
        "full_name": f"Person {employee_id}",
        "email": f"{employee_id.lower()}@example.com",
        **fields,
    }
    response = await client.post("/api/v1/employees", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


class TestHealth:
    """Health endpoint."""

    @pytest.mark.asyncio
    async def test_health(self, client) -> None:
        response = await client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert "timestamp" in body


class TestEmployeesApi:
    """Employee endpoints and error mapping."""

    @pytest.mark.asyncio
    async def test_create_and_fetch(self, client) -> None:
        created = await _create_employee(client, "EMP001", department="Engineering")

        by_id = await client.get(f"/api/v1/employees/{created['id']}")
        by_key = await client.get("/api/v1/employees/by-employee-id/EMP001")

        assert by_id.status_code == 200
        assert by_key.json()["id"] == created["id"]
        assert by_key.json()["employment_status"] == "Active"

    @pytest.mark.asyncio
    async def test_duplicate_is_conflict(self, client) -> None:
        await _create_employee(client, "EMP001")

        response = await client.post(
            "/api/v1/employees",
            json={"employee_id": "EMP001", "full_name": "Dup", "email": "dup@example.com"},
        )

        assert response.status_code == 409
        body = response.json()
        assert body["error"] == "EmployeeAlreadyExistsError"
        assert body["details"] == {"employee_id": "EMP001"}

    @pytest.mark.asyncio
    async def test_invalid_payload(self, client) -> None:
        response = await client.post(
            "/api/v1/employees",
            json={"employee_id": "EMP001", "full_name": "No Email", "email": "not-an-email"},
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_missing_employee(self, client) -> None:
        response = await client.get("/api/v1/employees/999")

        assert response.status_code == 404
        assert response.json()["detail"] == "Employee not found"

    @pytest.mark.asyncio
    async def test_status_filter(self, client) -> None:
        await _create_employee(client, "EMP001")
        await _create_employee(client, "EMP002", employment_status="On Leave")

        response = await client.get("/api/v1/employees", params={"status": "On Leave"})

        assert [e["employee_id"] for e in response.json()] == ["EMP002"]


class TestPayrollApi:
    """Payroll endpoints."""

    @pytest.mark.asyncio
    async def test_generate_payslip(self, client) -> None:
        await _create_employee(client, "EMP001")
        for name, component_type, amount in [
            ("Basic Salary", "Allowance", "50000"),
            ("Tax", "Deduction", "5000"),
        ]:
            component = await client.post(
                "/api/v1/payroll-components",
                json={"name": name, "type": component_type, "amount": amount},
            )
            assert component.status_code == 201
            structure = await client.post(
                "/api/v1/salary-structures",
                json={"employee_id": "EMP001", "component_id": component.json()["id"], "amount": amount},
            )
            assert structure.status_code == 201

        response = await client.post(
            "/api/v1/payslips/generate",
            json={"employee_id": "EMP001", "pay_period_start": "2024-01-01", "pay_period_end": "2024-01-31"},
        )

        assert response.status_code == 200
        body = response.json()
        assert Decimal(body["gross_salary"]) == Decimal("50000")
        assert Decimal(body["net_salary"]) == Decimal("45000")

    @pytest.mark.asyncio
    async def test_generate_without_structure(self, client) -> None:
        await _create_employee(client, "EMP001")

        response = await client.post(
            "/api/v1/payslips/generate",
            json={"employee_id": "EMP001", "pay_period_start": "2024-01-01", "pay_period_end": "2024-01-31"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "MissingSalaryStructureError"


class TestLeaveApi:
    """Leave balance endpoints."""

    @pytest.mark.asyncio
    async def test_deduct(self, client) -> None:
        await _create_employee(client, "EMP001")
        await client.post(
            "/api/v1/leave-balances", json={"employee_id": "EMP001", "annual_leave_balance": 5}
        )

        clamped = await client.post(
            "/api/v1/leave-balances/EMP001/deduct", json={"leave_type": "Annual Leave", "days": 10}
        )
        invalid = await client.post(
            "/api/v1/leave-balances/EMP001/deduct", json={"leave_type": "Maternity Leave", "days": 1}
        )

        assert clamped.status_code == 200
        assert clamped.json()["annual_leave_balance"] == 0
        assert invalid.status_code == 400
        assert invalid.json()["detail"] == "Invalid leave type: Maternity Leave"

    @pytest.mark.asyncio
    async def test_missing_balance(self, client) -> None:
        response = await client.get("/api/v1/leave-balances/EMP404")

        assert response.status_code == 404


class TestRecruitmentApi:
    """Vacancy and applicant endpoints."""

    @pytest.mark.asyncio
    async def test_vacancy_delete_guard(self, client) -> None:
        vacancy = (await client.post("/api/v1/job-vacancies", json={"title": "SRE"})).json()
        applicant = await client.post(
            "/api/v1/applicants",
            json={"full_name": "Ada", "email": "ada@example.com", "job_vacancy_id": vacancy["id"]},
        )
        assert applicant.status_code == 201

        refused = await client.delete(f"/api/v1/job-vacancies/{vacancy['id']}")
        assert refused.status_code == 409
        assert refused.json()["detail"] == "Cannot delete job vacancy with existing applicants"

        removed = await client.delete(f"/api/v1/applicants/{applicant.json()['id']}")
        assert removed.status_code == 204
        deleted = await client.delete(f"/api/v1/job-vacancies/{vacancy['id']}")
        assert deleted.status_code == 204
        assert (await client.get(f"/api/v1/job-vacancies/{vacancy['id']}")).status_code == 404

    @pytest.mark.asyncio
    async def test_recruitment_stats(self, client) -> None:
        response = await client.get("/api/v1/reports/recruitment-stats")

        assert response.status_code == 200
        assert response.json() == {
            "total_vacancies": 0,
            "open_vacancies": 0,
            "total_applicants": 0,
            "applicants_by_status": {},
        }


class TestDashboardApi:
    """Dashboard endpoints."""

    @pytest.mark.asyncio
    async def test_overview_on_empty_database(self, client) -> None:
        response = await client.get("/api/v1/dashboard/overview")

        assert response.status_code == 200
        assert response.json()["total_employees"] == 0
        assert response.json()["average_rating"] == 0.0

    @pytest.mark.asyncio
    async def test_unknown_employee_dashboard(self, client) -> None:
        response = await client.get("/api/v1/dashboard/employee/EMP404")

        assert response.status_code == 404


class TestReportsApi:
    """Report endpoints."""

    @pytest.mark.asyncio
    async def test_attendance_stats_requires_ordered_range(self, client) -> None:
        response = await client.get(
            "/api/v1/reports/attendance-stats",
            params={"start_date": "2024-06-14", "end_date": "2024-06-10"},
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_payroll_stats_rejects_bad_month(self, client) -> None:
        response = await client.get("/api/v1/reports/payroll-stats", params={"year": 2024, "month": 13})

        assert response.status_code == 422
