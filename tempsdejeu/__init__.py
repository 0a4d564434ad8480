"""
Temps De Jeu

Match time statistics for football: effective play time, stoppage time by
type and team, suggested added time per period, and per-player playing time
reconstructed from the substitution log.

This package provides the statistics engine and a small Flask JSON API
for reporting collaborators.
"""
from .models import MatchRecord, Period, StoppageType, Interval
from .services import MatchAnalyticsService, SeasonAnalyticsService, ServiceFactory
from .ui import create_app, run_web_app
from .utils import fmt_mmss, APP_TITLE

__version__ = "1.0.0"

__all__ = [
    "MatchRecord", "Period", "StoppageType", "Interval",
    "MatchAnalyticsService", "SeasonAnalyticsService", "ServiceFactory",
    "create_app", "run_web_app", "fmt_mmss", "APP_TITLE"
]
