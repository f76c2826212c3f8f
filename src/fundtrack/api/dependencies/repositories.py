"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.fundtrack.api.dependencies.db import DBSession
from src.fundtrack.repositories import (
    DashboardRepository,
    InvestmentRepository,
    InvestorRepository,
    ProjectRepository,
    StatusDefinitionRepository,
    StatusUpdateRepository,
)


def get_project_repository(session: DBSession) -> ProjectRepository:
    return ProjectRepository(session)


def get_investor_repository(session: DBSession) -> InvestorRepository:
    return InvestorRepository(session)


def get_investment_repository(session: DBSession) -> InvestmentRepository:
    return InvestmentRepository(session)


def get_status_definition_repository(session: DBSession) -> StatusDefinitionRepository:
    return StatusDefinitionRepository(session)


def get_status_update_repository(session: DBSession) -> StatusUpdateRepository:
    return StatusUpdateRepository(session)


def get_dashboard_repository(session: DBSession) -> DashboardRepository:
    return DashboardRepository(session)


ProjectRepo = Annotated[ProjectRepository, Depends(get_project_repository)]
InvestorRepo = Annotated[InvestorRepository, Depends(get_investor_repository)]
InvestmentRepo = Annotated[InvestmentRepository, Depends(get_investment_repository)]
StatusDefinitionRepo = Annotated[
    StatusDefinitionRepository, Depends(get_status_definition_repository)
]
StatusUpdateRepo = Annotated[StatusUpdateRepository, Depends(get_status_update_repository)]
DashboardRepo = Annotated[DashboardRepository, Depends(get_dashboard_repository)]
