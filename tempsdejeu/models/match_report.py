"""Dataclasses representing the statistics produced for a match or a season."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class PeriodBreakdown:
    """Timing figures for a single period."""

    period: str
    label: str
    short_name: str
    state: str
    regulation_seconds: int
    observed_seconds: float
    stoppage_seconds: float
    effective_seconds: float
    suggested_added_seconds: int
    suggested_added_minutes: int
    regulatory_added_seconds: float
    overtime_minutes: int


@dataclass
class StoppageTypeBreakdown:
    """Count and total time for one stoppage type, overall and per team."""

    type: str
    label: str
    count: int
    total_seconds: float
    home_count: int = 0
    home_seconds: float = 0.0
    away_count: int = 0
    away_seconds: float = 0.0


@dataclass
class PlayerPlayingTime:
    """Reconstructed playing time for one rostered player."""

    player_id: str
    player_name: str
    shirt_number: int
    position: str
    is_titulaire: bool
    total_time: float
    effective_time: float
    bench_time: float = 0.0


@dataclass
class PlayerCardSummary:
    """Cards received by one player."""

    player_key: str
    player_name: str
    total: int
    counts: Dict[str, int] = field(default_factory=dict)


@dataclass
class CardSummary:
    """
    Card counts; ``counts`` includes served cards, ``active_counts`` does not.

    ``expulsions`` counts red and second yellow cards, ``temporary_suspension_seconds``
    sums the time-limited suspensions of white cards.
    """

    total: int
    counts: Dict[str, int] = field(default_factory=dict)
    active_counts: Dict[str, int] = field(default_factory=dict)
    ranking: List[PlayerCardSummary] = field(default_factory=list)
    expulsions: int = 0
    temporary_suspension_seconds: int = 0


@dataclass
class ScorerSummary:
    name: str
    goals: int


@dataclass
class GoalSummary:
    home_goals: int
    away_goals: int
    my_goals: int
    opponent_goals: int
    top_scorers: List[ScorerSummary] = field(default_factory=list)


@dataclass
class MatchReport:
    """Read-only statistics snapshot for one match."""

    match_id: str
    label: str
    is_finished: bool
    current_period: Optional[str]
    total_duration: float
    total_effective_time: float
    total_stoppage_time: float
    effective_percentage: float
    periods: List[PeriodBreakdown] = field(default_factory=list)
    stoppage_breakdown: List[StoppageTypeBreakdown] = field(default_factory=list)
    players: List[PlayerPlayingTime] = field(default_factory=list)
    cards: Optional[CardSummary] = None
    goals: Optional[GoalSummary] = None
    ended_periods: List[str] = field(default_factory=list)
    unfinished_periods: List[str] = field(default_factory=list)


@dataclass
class SeasonPlayerTotal:
    """Cumulative playing time of one player across finished matches."""

    player_id: str
    player_name: str
    matches_played: int
    matches_started: int
    total_time: float
    effective_time: float


@dataclass
class SeasonReport:
    """Aggregate statistics over the finished matches of a season."""

    matches_played: int
    total_duration: float
    total_effective_time: float
    average_effective_time: float
    average_effective_percentage: float
    total_stoppages: int
    stoppage_breakdown: List[StoppageTypeBreakdown] = field(default_factory=list)
    card_counts: Dict[str, int] = field(default_factory=dict)
    my_goals: int = 0
    opponent_goals: int = 0
    top_scorers: List[ScorerSummary] = field(default_factory=list)
    player_totals: List[SeasonPlayerTotal] = field(default_factory=list)
