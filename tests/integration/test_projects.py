"""API tests for project endpoints and the status history."""

from datetime import datetime

import pytest
from httpx import AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.fundtrack.models import Project, ProjectStatus
from src.fundtrack.repositories import ProjectRepository
from tests.factories import ProjectFactory
from tests.helpers import (
    COMMENCED,
    COMPLETED,
    CONSTRUCTION,
    add_project_status,
    create_investment,
    create_investor,
    create_project_with_status,
)

pytestmark = pytest.mark.integration


async def _history_count(db_session: AsyncSession, project_id: int) -> int:
    result = await db_session.execute(
        select(func.count()).select_from(ProjectStatus).where(ProjectStatus.project_id == project_id)
    )
    return result.scalar_one()


class TestCreateProject:
    async def test_create_records_commencement_as_first_status(self, client: AsyncClient):
        response = await client.post(
            "/api/projects",
            json={"Title": "T", "Description": "Desc", "Commencement_Date": "2024-01-01T00:00:00"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["Title"] == "T"
        assert data["Active"] == "Y"
        assert data["Status_ID"] == COMMENCED
        assert data["Status"] == "Commenced"
        assert data["Status_Date"].startswith("2024-01-01")

        history = await client.get(f"/api/projects/{data['Project_ID']}/status-history")
        assert history.status_code == 200
        entries = history.json()
        assert len(entries) == 1
        assert entries[0]["Status_ID"] == COMMENCED
        assert entries[0]["Status_Date"].startswith("2024-01-01")

    @pytest.mark.parametrize(
        "body",
        [
            {"Commencement_Date": "2024-01-01T00:00:00"},
            {"Title": "   ", "Commencement_Date": "2024-01-01T00:00:00"},
            {"Title": "No date"},
        ],
    )
    async def test_create_requires_title_and_date(self, client: AsyncClient, body: dict):
        response = await client.post("/api/projects", json=body)

        assert response.status_code == 400
        assert response.json()["message"] == "Title and Commencement Date are required."

    async def test_failed_create_leaves_no_rows(
        self, client: AsyncClient, db_session: AsyncSession
    ):
        await client.post("/api/projects", json={"Title": "No date"})

        result = await db_session.execute(select(func.count()).select_from(Project))
        assert result.scalar_one() == 0

    async def test_aware_timestamp_stored_as_utc(self, client: AsyncClient):
        response = await client.post(
            "/api/projects",
            json={"Title": "Offset", "Commencement_Date": "2024-01-01T02:00:00+02:00"},
        )

        assert response.status_code == 201
        assert response.json()["Status_Date"].startswith("2024-01-01T00:00:00")


class TestReadProjects:
    async def test_list_excludes_inactive(self, client: AsyncClient, db_session: AsyncSession):
        active = await create_project_with_status(db_session, title="Visible")
        db_session.add(ProjectFactory.inactive(title="Hidden"))
        await db_session.commit()

        response = await client.get("/api/projects")

        assert response.status_code == 200
        ids = [p["Project_ID"] for p in response.json()]
        assert ids == [active.project_id]

    async def test_get_returns_latest_status(self, client: AsyncClient, db_session: AsyncSession):
        project = await create_project_with_status(
            db_session, status_date=datetime(2024, 1, 1)
        )
        await add_project_status(db_session, project, CONSTRUCTION, datetime(2024, 2, 1))

        response = await client.get(f"/api/projects/{project.project_id}")

        assert response.status_code == 200
        data = response.json()
        assert data["Status_ID"] == CONSTRUCTION
        assert data["Percentage_Completion"] == 50

    async def test_get_ignores_active_flag(self, client: AsyncClient, db_session: AsyncSession):
        project = await create_project_with_status(db_session, active="N")

        response = await client.get(f"/api/projects/{project.project_id}")

        assert response.status_code == 200
        assert response.json()["Active"] == "N"

    async def test_get_missing_project_returns_404(self, client: AsyncClient):
        response = await client.get("/api/projects/9999")

        assert response.status_code == 404
        body = response.json()
        assert body["message"] == "Project not found"
        assert "request_id" in body

    async def test_non_numeric_id_returns_400(self, client: AsyncClient):
        response = await client.get("/api/projects/abc")

        assert response.status_code == 400

    async def test_history_for_missing_project_returns_404(self, client: AsyncClient):
        response = await client.get("/api/projects/9999/status-history")

        assert response.status_code == 404


class TestProjectsWithStatus:
    async def test_rollup_sums_active_investments(
        self, client: AsyncClient, db_session: AsyncSession
    ):
        project = await create_project_with_status(db_session)
        alice = await create_investor(db_session, name="Alice")
        bob = await create_investor(db_session, name="Bob")
        await create_investment(db_session, project, alice, "100.00")
        await create_investment(db_session, project, alice, "50.50")
        await create_investment(db_session, project, bob, "25.00")
        await create_investment(db_session, project, bob, "999.00", active="N")

        response = await client.get("/api/projects_with_status")

        assert response.status_code == 200
        [row] = response.json()
        assert row["Project_ID"] == project.project_id
        assert row["Total_Investment"] == pytest.approx(175.50)
        assert row["Total_Unique_Investors"] == 2
        assert row["Status"] == "Commenced"

    async def test_project_without_investments_reports_zero(
        self, client: AsyncClient, db_session: AsyncSession
    ):
        await create_project_with_status(db_session)

        response = await client.get("/api/projects_with_status")

        [row] = response.json()
        assert row["Total_Investment"] == 0
        assert row["Total_Unique_Investors"] == 0

    async def test_ordered_by_latest_status_date(
        self, client: AsyncClient, db_session: AsyncSession
    ):
        older = await create_project_with_status(db_session, status_date=datetime(2024, 1, 1))
        newer = await create_project_with_status(db_session, status_date=datetime(2024, 6, 1))
        await create_project_with_status(db_session, active="N")

        response = await client.get("/api/projects_with_status")

        ids = [row["Project_ID"] for row in response.json()]
        assert ids == [newer.project_id, older.project_id]


class TestUpdateProject:
    async def test_same_status_does_not_append_history(
        self, client: AsyncClient, db_session: AsyncSession
    ):
        project = await create_project_with_status(db_session)

        response = await client.put(
            f"/api/projects/{project.project_id}",
            json={
                "Title": "Renamed",
                "Status_ID": COMMENCED,
                "Status_Date": "2024-05-01T00:00:00",
            },
        )

        assert response.status_code == 200
        assert response.json()["Title"] == "Renamed"
        assert await _history_count(db_session, project.project_id) == 1

    async def test_new_status_appends_one_entry(
        self, client: AsyncClient, db_session: AsyncSession
    ):
        project = await create_project_with_status(db_session, status_date=datetime(2024, 1, 1))

        response = await client.put(
            f"/api/projects/{project.project_id}",
            json={
                "Title": project.title,
                "Status_ID": COMPLETED,
                "Status_Date": "2024-05-01T00:00:00",
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["Status_ID"] == COMPLETED
        assert data["Percentage_Completion"] == 100
        assert await _history_count(db_session, project.project_id) == 2

    async def test_status_without_date_is_ignored(
        self, client: AsyncClient, db_session: AsyncSession
    ):
        project = await create_project_with_status(db_session)

        response = await client.put(
            f"/api/projects/{project.project_id}",
            json={"Title": "Only title", "Status_ID": COMPLETED},
        )

        assert response.status_code == 200
        assert await _history_count(db_session, project.project_id) == 1

    async def test_update_requires_title(self, client: AsyncClient, db_session: AsyncSession):
        project = await create_project_with_status(db_session)

        response = await client.put(
            f"/api/projects/{project.project_id}", json={"Description": "no title"}
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Title is required."

    async def test_update_missing_project_returns_404(self, client: AsyncClient):
        response = await client.put("/api/projects/9999", json={"Title": "Ghost"})

        assert response.status_code == 404


class TestDeleteProject:
    async def test_delete_is_soft_and_not_repeatable(
        self, client: AsyncClient, db_session: AsyncSession
    ):
        project = await create_project_with_status(db_session)

        first = await client.delete(f"/api/projects/{project.project_id}")
        second = await client.delete(f"/api/projects/{project.project_id}")

        assert first.status_code == 200
        assert first.json() == {"message": "Project deactivated successfully"}
        assert second.status_code == 404
        assert second.json()["message"] == "Project not found or already deactivated"

        result = await db_session.execute(
            select(Project.active).where(Project.project_id == project.project_id)
        )
        assert result.scalar_one() == "N"

        listing = await client.get("/api/projects")
        assert listing.json() == []


def _failing_add_status(*args, **kwargs):
    raise RuntimeError("status insert failed")


class TestProjectTransactions:
    async def test_status_failure_rolls_back_create(
        self,
        lenient_client: AsyncClient,
        db_session: AsyncSession,
        monkeypatch: pytest.MonkeyPatch,
    ):
        monkeypatch.setattr(ProjectRepository, "add_status", _failing_add_status)

        response = await lenient_client.post(
            "/api/projects",
            json={"Title": "T", "Commencement_Date": "2024-01-01T00:00:00"},
        )

        assert response.status_code == 500
        projects = await db_session.execute(select(func.count()).select_from(Project))
        assert projects.scalar_one() == 0
        statuses = await db_session.execute(select(func.count()).select_from(ProjectStatus))
        assert statuses.scalar_one() == 0

    async def test_status_failure_rolls_back_update(
        self,
        lenient_client: AsyncClient,
        db_session: AsyncSession,
        monkeypatch: pytest.MonkeyPatch,
    ):
        project = await create_project_with_status(db_session, title="Original")
        monkeypatch.setattr(ProjectRepository, "add_status", _failing_add_status)

        response = await lenient_client.put(
            f"/api/projects/{project.project_id}",
            json={
                "Title": "Renamed",
                "Description": "Changed",
                "Status_ID": CONSTRUCTION,
                "Status_Date": "2024-05-01T00:00:00",
            },
        )

        assert response.status_code == 500
        title = await db_session.execute(
            select(Project.title).where(Project.project_id == project.project_id)
        )
        assert title.scalar_one() == "Original"
        assert await _history_count(db_session, project.project_id) == 1

    async def test_unreadable_project_after_create_is_500(
        self,
        lenient_client: AsyncClient,
        monkeypatch: pytest.MonkeyPatch,
    ):
        async def _missing(self, project_id):
            return None

        monkeypatch.setattr(ProjectRepository, "get_with_latest_status", _missing)

        response = await lenient_client.post(
            "/api/projects",
            json={"Title": "T", "Commencement_Date": "2024-01-01T00:00:00"},
        )

        assert response.status_code == 500
        assert response.json()["message"] == "Internal Server Error"
