"""Match statistics for the Temps De Jeu statistics engine."""

from __future__ import annotations

import logging
from typing import List, Optional, Protocol

from ..models import MatchRecord, MatchReport, Period, PlayerPlayingTime
from .discipline_service import DisciplineService
from .period_tracker import PeriodState, PeriodTracker
from .stoppage_ledger import StoppageLedger
from .substitution_service import SubstitutionReconstructor

logger = logging.getLogger(__name__)


class PlayingTimeProvider(Protocol):
    """Anything able to produce the player playing-time table."""

    def player_playing_times(self, played_only: bool = False) -> List[PlayerPlayingTime]:
        ...


class MatchAnalyticsService:
    """
    Read-only statistics over one match snapshot.

    Every figure is recomputed from the record on each call. The record is
    never modified, so calling any method twice yields identical results.
    """

    def __init__(
        self,
        record: MatchRecord,
        live_elapsed: Optional[float] = None,
        ledger: Optional[StoppageLedger] = None,
        tracker: Optional[PeriodTracker] = None,
        playing_time: Optional[PlayingTimeProvider] = None,
        discipline: Optional[DisciplineService] = None,
        infer_starters: bool = False,
    ) -> None:
        self.record = record
        self.ledger = ledger or StoppageLedger(record.stoppages)
        self.tracker = tracker or PeriodTracker(
            record.period_durations,
            self.ledger,
            current_period=record.current_period,
            live_elapsed=live_elapsed,
        )
        self.playing_time = playing_time or SubstitutionReconstructor(
            record.roster, record.substitutions, self.tracker, self.ledger,
            infer_starters=infer_starters,
        )
        self.discipline = discipline or DisciplineService(
            record.cards, record.goals, record.is_my_team_home
        )

    # ------------------------------------------------------------------
    # Scalar summaries
    # ------------------------------------------------------------------
    def total_match_duration(self) -> float:
        return self.tracker.total_match_duration()

    def total_effective_play_time(self) -> float:
        return self.tracker.total_effective_play_time()

    def total_stoppage_time(self) -> float:
        return self.ledger.total_stoppage_time()

    def effective_percentage(self) -> float:
        return self.tracker.effective_percentage()

    # ------------------------------------------------------------------
    # Flags
    # ------------------------------------------------------------------
    def ended_periods(self) -> List[Period]:
        return [p for p in Period.ordered() if self.tracker.state(p) is PeriodState.ENDED]

    def unfinished_periods(self) -> List[Period]:
        return [p for p in Period.ordered() if self.tracker.state(p) is not PeriodState.ENDED]

    # ------------------------------------------------------------------
    # Report
    # ------------------------------------------------------------------
    def player_playing_times(self, played_only: bool = False) -> List[PlayerPlayingTime]:
        return self.playing_time.player_playing_times(played_only=played_only)

    def generate_match_report(self, played_only: bool = False) -> MatchReport:
        """Build a :class:`MatchReport` snapshot for the match."""

        report = MatchReport(
            match_id=self.record.id,
            label=self.record.label,
            is_finished=self.record.is_finished,
            current_period=self.record.current_period.value if self.record.current_period else None,
            total_duration=self.total_match_duration(),
            total_effective_time=self.total_effective_play_time(),
            total_stoppage_time=self.total_stoppage_time(),
            effective_percentage=self.effective_percentage(),
            periods=self.tracker.period_breakdown(),
            stoppage_breakdown=self.ledger.breakdown(),
            players=self.player_playing_times(played_only=played_only),
            cards=self.discipline.card_summary(),
            goals=self.discipline.goal_summary(),
            ended_periods=[p.value for p in self.ended_periods()],
            unfinished_periods=[p.value for p in self.unfinished_periods()],
        )
        logger.debug(
            "Report for match %s: %.0fs played, %.1f%% effective",
            report.match_id, report.total_duration, report.effective_percentage,
        )
        return report
