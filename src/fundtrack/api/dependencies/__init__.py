"""FastAPI dependency injection definitions."""

from src.fundtrack.api.dependencies.db import DBSession, get_db_session
from src.fundtrack.api.dependencies.repositories import (
    DashboardRepo,
    InvestmentRepo,
    InvestorRepo,
    ProjectRepo,
    StatusDefinitionRepo,
    StatusUpdateRepo,
    get_dashboard_repository,
    get_investment_repository,
    get_investor_repository,
    get_project_repository,
    get_status_definition_repository,
    get_status_update_repository,
)
from src.fundtrack.api.dependencies.services import (
    InvestmentServiceDep,
    InvestorServiceDep,
    ProjectServiceDep,
    StatusServiceDep,
    get_investment_service,
    get_investor_service,
    get_project_service,
    get_status_service,
)

__all__ = [
    # Database
    "DBSession",
    "get_db_session",
    # Repositories
    "DashboardRepo",
    "InvestmentRepo",
    "InvestorRepo",
    "ProjectRepo",
    "StatusDefinitionRepo",
    "StatusUpdateRepo",
    "get_dashboard_repository",
    "get_investment_repository",
    "get_investor_repository",
    "get_project_repository",
    "get_status_definition_repository",
    "get_status_update_repository",
    # Services
    "InvestmentServiceDep",
    "InvestorServiceDep",
    "ProjectServiceDep",
    "StatusServiceDep",
    "get_investment_service",
    "get_investor_service",
    "get_project_service",
    "get_status_service",
]
