"""Repository layer - data access abstraction."""

from src.fundtrack.repositories.base import BaseRepository
from src.fundtrack.repositories.dashboard import DashboardRepository
from src.fundtrack.repositories.investment import InvestmentRepository
from src.fundtrack.repositories.investor import InvestorRepository
from src.fundtrack.repositories.latest_status import is_in_progress, latest_status_subquery
from src.fundtrack.repositories.project import ProjectRepository
from src.fundtrack.repositories.status import StatusDefinitionRepository, StatusUpdateRepository

__all__ = [
    # Base
    "BaseRepository",
    # Query fragments
    "is_in_progress",
    "latest_status_subquery",
    # Entities
    "DashboardRepository",
    "InvestmentRepository",
    "InvestorRepository",
    "ProjectRepository",
    "StatusDefinitionRepository",
    "StatusUpdateRepository",
]
