"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import ProjectFactory, InvestorFactory, ...
"""

from tests.factories.base import BaseFactory, utc_now
from tests.factories.investment import InvestmentFactory, StatusUpdateFactory
from tests.factories.investor import InvestorFactory
from tests.factories.project import ProjectFactory, ProjectStatusFactory

__all__ = [
    # Base
    "BaseFactory",
    "utc_now",
    # Projects
    "ProjectFactory",
    "ProjectStatusFactory",
    # Investors and investments
    "InvestorFactory",
    "InvestmentFactory",
    # Status log
    "StatusUpdateFactory",
]
