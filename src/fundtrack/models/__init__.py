"""Model exports.

Import from here: `from src.fundtrack.models import Project, Investment`
"""

from src.fundtrack.models.enums import ActiveFlag, EventType
from src.fundtrack.models.investment import Investment
from src.fundtrack.models.investor import Investor
from src.fundtrack.models.project import Project, ProjectStatus
from src.fundtrack.models.status import StatusDefinition, StatusUpdate

__all__ = [
    # Enums
    "ActiveFlag",
    "EventType",
    # Models
    "Investment",
    "Investor",
    "Project",
    "ProjectStatus",
    "StatusDefinition",
    "StatusUpdate",
]
