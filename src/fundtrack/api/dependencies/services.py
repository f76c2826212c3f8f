"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.fundtrack.api.dependencies.db import DBSession
from src.fundtrack.api.dependencies.repositories import (
    InvestmentRepo,
    InvestorRepo,
    ProjectRepo,
    StatusDefinitionRepo,
    StatusUpdateRepo,
)
from src.fundtrack.core.config import get_settings
from src.fundtrack.services import (
    InvestmentService,
    InvestorService,
    ProjectService,
    StatusService,
)


def get_project_service(project_repo: ProjectRepo, session: DBSession) -> ProjectService:
    """Get project service configured with the initial status id."""
    return ProjectService(project_repo, session, get_settings().initial_status_id)


def get_investor_service(investor_repo: InvestorRepo, session: DBSession) -> InvestorService:
    return InvestorService(investor_repo, session)


def get_investment_service(
    investment_repo: InvestmentRepo, session: DBSession
) -> InvestmentService:
    return InvestmentService(investment_repo, session)


def get_status_service(
    definition_repo: StatusDefinitionRepo,
    update_repo: StatusUpdateRepo,
    session: DBSession,
) -> StatusService:
    return StatusService(definition_repo, update_repo, session)


ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
InvestorServiceDep = Annotated[InvestorService, Depends(get_investor_service)]
InvestmentServiceDep = Annotated[InvestmentService, Depends(get_investment_service)]
StatusServiceDep = Annotated[StatusService, Depends(get_status_service)]
