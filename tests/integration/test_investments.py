"""API tests for investment endpoints."""

from datetime import date
from decimal import Decimal

import pytest
from httpx import AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.fundtrack.models import Investment
from tests.helpers import create_investment, create_investor, create_project_with_status

pytestmark = pytest.mark.integration


@pytest.fixture
async def project(db_session: AsyncSession):
    return await create_project_with_status(db_session, title="Solar Farm")


@pytest.fixture
async def investor(db_session: AsyncSession):
    return await create_investor(db_session, name="Grace")


class TestCreateInvestment:
    async def test_create_returns_generated_id(self, client: AsyncClient, project, investor):
        response = await client.post(
            "/api/investments",
            json={
                "Project_ID": project.project_id,
                "Investor_ID": investor.investor_id,
                "Investment_Amount": 500,
                "Investment_Date": "2024-03-01",
            },
        )

        assert response.status_code == 201
        data = response.json()
        assert data["Investment_ID"] > 0
        assert data["Active"] == "Y"
        assert data["Investment_Amount"] == 500
        assert data["Investment_Date"] == "2024-03-01"

    @pytest.mark.parametrize(
        "missing",
        ["Project_ID", "Investor_ID", "Investment_Amount", "Investment_Date"],
    )
    async def test_create_requires_every_field(
        self, client: AsyncClient, project, investor, missing: str
    ):
        body = {
            "Project_ID": project.project_id,
            "Investor_ID": investor.investor_id,
            "Investment_Amount": 500,
            "Investment_Date": "2024-03-01",
        }
        del body[missing]

        response = await client.post("/api/investments", json=body)

        assert response.status_code == 400
        assert response.json()["message"] == "All fields are required."

    async def test_zero_amount_is_rejected(self, client: AsyncClient, project, investor):
        response = await client.post(
            "/api/investments",
            json={
                "Project_ID": project.project_id,
                "Investor_ID": investor.investor_id,
                "Investment_Amount": 0,
                "Investment_Date": "2024-03-01",
            },
        )

        assert response.status_code == 400


class TestReadInvestments:
    async def test_details_join_project_and_investor(
        self, client: AsyncClient, db_session: AsyncSession, project, investor
    ):
        investment = await create_investment(db_session, project, investor, "250.75")
        await create_investment(db_session, project, investor, "10.00", active="N")

        listing = await client.get("/api/investments_with_details")
        detail = await client.get(f"/api/investments/{investment.investment_id}")

        assert listing.status_code == 200
        [row] = listing.json()
        assert row["Investment_ID"] == investment.investment_id
        assert row["Project_Title"] == "Solar Farm"
        assert row["Investor_Name"] == "Grace"
        assert row["Investment_Amount"] == pytest.approx(250.75)
        assert detail.status_code == 200
        assert detail.json()["Project_Title"] == "Solar Farm"

    async def test_inactive_investment_is_not_found(
        self, client: AsyncClient, db_session: AsyncSession, project, investor
    ):
        investment = await create_investment(db_session, project, investor, active="N")

        response = await client.get(f"/api/investments/{investment.investment_id}")

        assert response.status_code == 404
        assert response.json()["message"] == "Investment not found or inactive."


class TestUpdateInvestment:
    async def test_partial_update_only_touches_given_fields(
        self, client: AsyncClient, db_session: AsyncSession, project, investor
    ):
        investment = await create_investment(
            db_session, project, investor, "100.00", investment_date=date(2024, 1, 15)
        )

        response = await client.put(
            f"/api/investments/{investment.investment_id}",
            json={"Investment_Amount": 750},
        )

        assert response.status_code == 200
        assert response.json() == {"message": "Investment updated successfully."}
        result = await db_session.execute(
            select(
                Investment.project_id,
                Investment.investor_id,
                Investment.investment_amount,
                Investment.investment_date,
                Investment.active,
            ).where(Investment.investment_id == investment.investment_id)
        )
        row = result.one()
        assert row.project_id == project.project_id
        assert row.investor_id == investor.investor_id
        assert Decimal(row.investment_amount) == Decimal("750")
        assert row.investment_date == date(2024, 1, 15)
        assert row.active == "Y"

    async def test_active_flag_can_be_set(
        self, client: AsyncClient, db_session: AsyncSession, project, investor
    ):
        investment = await create_investment(db_session, project, investor)

        response = await client.put(
            f"/api/investments/{investment.investment_id}", json={"Active": "N"}
        )

        assert response.status_code == 200
        result = await db_session.execute(
            select(Investment.active).where(Investment.investment_id == investment.investment_id)
        )
        assert result.scalar_one() == "N"

    async def test_invalid_active_flag_is_rejected(
        self, client: AsyncClient, db_session: AsyncSession, project, investor
    ):
        investment = await create_investment(db_session, project, investor)

        response = await client.put(
            f"/api/investments/{investment.investment_id}", json={"Active": "maybe"}
        )

        assert response.status_code == 400

    async def test_empty_update_is_rejected(
        self, client: AsyncClient, db_session: AsyncSession, project, investor
    ):
        investment = await create_investment(db_session, project, investor)

        response = await client.put(f"/api/investments/{investment.investment_id}", json={})

        assert response.status_code == 400
        assert response.json()["message"] == "At least one field is required."

    async def test_update_missing_investment_returns_404(self, client: AsyncClient):
        response = await client.put("/api/investments/9999", json={"Investment_Amount": 1})

        assert response.status_code == 404
        assert response.json()["message"] == "Investment not found or no changes made."


async def test_delete_investment_twice(
    client: AsyncClient, db_session: AsyncSession, project, investor
):
    investment = await create_investment(db_session, project, investor)

    first = await client.delete(f"/api/investments/{investment.investment_id}")
    second = await client.delete(f"/api/investments/{investment.investment_id}")

    assert first.json() == {"message": "Investment deactivated successfully."}
    assert second.status_code == 404
    assert second.json()["message"] == "Investment not found or already inactive."
