"""Period tracker for the Temps De Jeu statistics engine."""

import logging
from enum import Enum
from typing import Dict, List, Optional

from ..models import Period, PeriodBreakdown
from ..utils import ceil_minutes
from .stoppage_ledger import StoppageLedger

logger = logging.getLogger(__name__)


class PeriodState(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    ENDED = "ended"


class PeriodTracker:
    """
    Regulation vs observed duration per period, and the effective play time
    derived from it.

    Ended periods carry a recorded duration. The running period, if any, is
    measured with the live elapsed time supplied by the caller; nothing is
    read from a wall clock here.
    """

    def __init__(
        self,
        period_durations: Dict[Period, float],
        ledger: StoppageLedger,
        current_period: Optional[Period] = None,
        live_elapsed: Optional[float] = None,
    ) -> None:
        self._durations: Dict[Period, float] = {}
        for period, duration in period_durations.items():
            if duration < 0:
                logger.debug("Clamping negative duration %s for %s", duration, period.value)
            self._durations[period] = max(0.0, float(duration))
        self._ledger = ledger
        self._current_period = current_period
        self._live_elapsed = None if live_elapsed is None else max(0.0, float(live_elapsed))

    # ------------------------------------------------------------------
    # Period state
    # ------------------------------------------------------------------
    def state(self, period: Period) -> PeriodState:
        """Return not-started, running or ended for the period."""

        if period in self._durations:
            return PeriodState.ENDED
        if period == self._current_period and self._live_elapsed is not None:
            return PeriodState.RUNNING
        return PeriodState.NOT_STARTED

    def observed_duration(self, period: Period) -> Optional[float]:
        """Recorded duration, live elapsed time while running, None before kick-off."""

        state = self.state(period)
        if state is PeriodState.ENDED:
            return self._durations[period]
        if state is PeriodState.RUNNING:
            return self._live_elapsed
        return None

    def played_periods(self) -> List[Period]:
        """Periods with an observed duration, in playing order."""

        return [p for p in Period.ordered() if self.state(p) is not PeriodState.NOT_STARTED]

    # ------------------------------------------------------------------
    # Query helpers
    # ------------------------------------------------------------------
    def effective_play_time(self, period: Period) -> float:
        """Observed duration minus stoppage time, never below zero."""

        observed = self.observed_duration(period) or 0.0
        stoppage = self._ledger.total_stoppage_time(period)
        if stoppage > observed:
            logger.debug(
                "Stoppage time %.1fs exceeds observed %.1fs in %s; effective time floored",
                stoppage, observed, period.value,
            )
        return max(0.0, observed - stoppage)

    def total_effective_play_time(self) -> float:
        return sum(self.effective_play_time(p) for p in self.played_periods())

    def total_match_duration(self) -> float:
        return sum(self.observed_duration(p) or 0.0 for p in self.played_periods())

    def effective_percentage(self) -> float:
        """Share of the match that was effective play, 0 when nothing has been played."""

        duration = self.total_match_duration()
        if duration <= 0:
            return 0.0
        return 100.0 * self.total_effective_play_time() / duration

    def overtime_minutes(self, period: Period) -> int:
        """Whole minutes played beyond regulation, rounded up."""

        observed = self.observed_duration(period) or 0.0
        return ceil_minutes(observed - period.regulation_duration)

    def period_breakdown(self) -> List[PeriodBreakdown]:
        """Return timing figures for each played period."""

        rows: List[PeriodBreakdown] = []
        for period in self.played_periods():
            rows.append(
                PeriodBreakdown(
                    period=period.value,
                    label=period.label,
                    short_name=period.short_name,
                    state=self.state(period).value,
                    regulation_seconds=period.regulation_duration,
                    observed_seconds=self.observed_duration(period) or 0.0,
                    stoppage_seconds=self._ledger.total_stoppage_time(period),
                    effective_seconds=self.effective_play_time(period),
                    suggested_added_seconds=self._ledger.suggested_added_time(period),
                    suggested_added_minutes=self._ledger.suggested_added_minutes(period),
                    regulatory_added_seconds=self._ledger.regulatory_added_time(period),
                    overtime_minutes=self.overtime_minutes(period),
                )
            )
        return rows
