from src.fundtrack.services.investment_service import InvestmentService
from src.fundtrack.services.investor_service import InvestorService
from src.fundtrack.services.project_service import ProjectService
from src.fundtrack.services.status_service import StatusService

__all__ = [
    "InvestmentService",
    "InvestorService",
    "ProjectService",
    "StatusService",
]
