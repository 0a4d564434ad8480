"""
Utilities package for the Temps De Jeu statistics engine.

This package contains formatting helpers and constants used throughout the application.
"""
from .time_utils import fmt_mmss, fmt_short, fmt_match_minute, ceil_minutes
from .constants import (
    APP_TITLE, HALF_REGULATION_SECONDS, EXTRA_HALF_REGULATION_SECONDS,
    SECONDS_PER_MINUTE, SUBSTITUTION_ALLOWANCE_SECONDS, TEMP_EXPULSION_SECONDS,
    DEFAULT_RANKING_LIMIT, DEFAULT_WEB_HOST, DEFAULT_WEB_PORT,
    PERIOD_LABELS, POS_SHORT
)

__all__ = [
    "fmt_mmss", "fmt_short", "fmt_match_minute", "ceil_minutes",
    "APP_TITLE", "HALF_REGULATION_SECONDS", "EXTRA_HALF_REGULATION_SECONDS",
    "SECONDS_PER_MINUTE", "SUBSTITUTION_ALLOWANCE_SECONDS", "TEMP_EXPULSION_SECONDS",
    "DEFAULT_RANKING_LIMIT", "DEFAULT_WEB_HOST", "DEFAULT_WEB_PORT",
    "PERIOD_LABELS", "POS_SHORT"
]
