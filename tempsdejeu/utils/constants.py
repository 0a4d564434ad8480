"""
Constants for the Temps De Jeu statistics engine.

This module contains configuration constants used throughout the application.
"""

# Application metadata
APP_TITLE = "Temps De Jeu"

# Period timing (seconds)
HALF_REGULATION_SECONDS = 45 * 60
EXTRA_HALF_REGULATION_SECONDS = 15 * 60

# Added time
SECONDS_PER_MINUTE = 60
SUBSTITUTION_ALLOWANCE_SECONDS = 30  # flat allowance per substitution stoppage

# Discipline
TEMP_EXPULSION_SECONDS = 10 * 60  # white card
DEFAULT_RANKING_LIMIT = 10

# Web API
DEFAULT_WEB_HOST = "127.0.0.1"
DEFAULT_WEB_PORT = 7122

# Friendly labels used by reporting collaborators
PERIOD_LABELS = {
    "first_half": "1ère Mi-Temps",
    "second_half": "2ème Mi-Temps",
    "extra_first_half": "Prolongation 1",
    "extra_second_half": "Prolongation 2",
}

POS_SHORT = {
    "goalkeeper": "G",
    "defender": "DEF",
    "midfielder": "MIL",
    "forward": "ATT",
}
