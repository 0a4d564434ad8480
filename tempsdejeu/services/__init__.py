"""
Services package for the Temps De Jeu statistics engine.

This package contains the services deriving statistics from a match record.
Includes a factory wiring them together for one match snapshot.
"""
from .stoppage_ledger import StoppageLedger
from .period_tracker import PeriodState, PeriodTracker
from .substitution_service import SubstitutionReconstructor
from .discipline_service import DisciplineService
from .analytics_service import MatchAnalyticsService
from .season_service import SeasonAnalyticsService
from .service_factory import ServiceFactory

__all__ = [
    "StoppageLedger", "PeriodState", "PeriodTracker", "SubstitutionReconstructor",
    "DisciplineService", "MatchAnalyticsService", "SeasonAnalyticsService",
    "ServiceFactory"
]
