"""
Models package for the Temps De Jeu statistics engine.

This package contains the core data models used throughout the application.
"""
from .interval import Interval, total_duration, subtract_all
from .events import (
    Period, BeneficiaryTeam, StoppageType, CardType,
    StoppageEvent, SubstitutionEvent, CardEvent, GoalEvent
)
from .roster import PlayerPosition, PlayerStatus, MatchRosterEntry
from .match_record import MatchRecord
from .match_report import (
    PeriodBreakdown, StoppageTypeBreakdown, PlayerPlayingTime, PlayerCardSummary,
    CardSummary, ScorerSummary, GoalSummary, MatchReport, SeasonPlayerTotal, SeasonReport
)

__all__ = [
    "Interval", "total_duration", "subtract_all",
    "Period", "BeneficiaryTeam", "StoppageType", "CardType",
    "StoppageEvent", "SubstitutionEvent", "CardEvent", "GoalEvent",
    "PlayerPosition", "PlayerStatus", "MatchRosterEntry", "MatchRecord",
    "PeriodBreakdown", "StoppageTypeBreakdown", "PlayerPlayingTime", "PlayerCardSummary",
    "CardSummary", "ScorerSummary", "GoalSummary", "MatchReport",
    "SeasonPlayerTotal", "SeasonReport"
]
