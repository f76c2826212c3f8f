from src.fundtrack.schemas.common import MessageResponse, Money, WireModel, to_wire_name
from src.fundtrack.schemas.dashboard import (
    InvestmentTotals,
    InvestorTotals,
    ProjectTotals,
    TimelineEvent,
)
from src.fundtrack.schemas.investment import (
    InvestmentCreate,
    InvestmentRead,
    InvestmentUpdate,
    InvestmentWithDetails,
)
from src.fundtrack.schemas.investor import InvestorRead, InvestorWithDetails, InvestorWrite
from src.fundtrack.schemas.project import (
    ProjectCreate,
    ProjectRead,
    ProjectStatusHistoryEntry,
    ProjectStatusSummary,
    ProjectUpdate,
    ProjectWithLatestStatus,
)
from src.fundtrack.schemas.status import (
    StatusDefinitionRead,
    StatusUpdateChange,
    StatusUpdateCreate,
    StatusUpdateRead,
)

__all__ = [
    # Common
    "MessageResponse",
    "Money",
    "WireModel",
    "to_wire_name",
    # Dashboard
    "InvestmentTotals",
    "InvestorTotals",
    "ProjectTotals",
    "TimelineEvent",
    # Investment
    "InvestmentCreate",
    "InvestmentRead",
    "InvestmentUpdate",
    "InvestmentWithDetails",
    # Investor
    "InvestorRead",
    "InvestorWithDetails",
    "InvestorWrite",
    # Project
    "ProjectCreate",
    "ProjectRead",
    "ProjectStatusHistoryEntry",
    "ProjectStatusSummary",
    "ProjectUpdate",
    "ProjectWithLatestStatus",
    # Status
    "StatusDefinitionRead",
    "StatusUpdateChange",
    "StatusUpdateCreate",
    "StatusUpdateRead",
]
