"""Stoppage ledger for the Temps De Jeu statistics engine."""

from typing import Iterable, List, Optional

from ..models import (
    BeneficiaryTeam, Interval, Period, StoppageEvent, StoppageType, StoppageTypeBreakdown
)
from ..utils import SECONDS_PER_MINUTE, SUBSTITUTION_ALLOWANCE_SECONDS, ceil_minutes


class StoppageLedger:
    """
    Ordered collection of stoppage events with aggregate queries.

    Durations are summed as recorded: two stoppages entered over the same
    stretch of play are both counted.
    """

    def __init__(self, stoppages: Iterable[StoppageEvent] = ()) -> None:
        self._stoppages: List[StoppageEvent] = list(stoppages)

    def __len__(self) -> int:
        return len(self._stoppages)

    @property
    def stoppages(self) -> List[StoppageEvent]:
        """Copy of the recorded stoppages, in recording order."""
        return list(self._stoppages)

    def for_period(self, period: Period) -> List[StoppageEvent]:
        return [s for s in self._stoppages if s.period == period]

    # ------------------------------------------------------------------
    # Totals
    # ------------------------------------------------------------------
    def total_stoppage_time(self, period: Optional[Period] = None) -> float:
        """Total stoppage seconds for one period, or for the whole match when omitted."""

        events = self._stoppages if period is None else self.for_period(period)
        return sum(max(0.0, s.duration) for s in events)

    def total_time(
        self, stoppage_type: StoppageType, team: Optional[BeneficiaryTeam] = None
    ) -> float:
        """Total seconds for a stoppage type, optionally for one beneficiary team."""

        return sum(max(0.0, s.duration) for s in self._filtered(stoppage_type, team))

    def stoppage_count(
        self, stoppage_type: StoppageType, team: Optional[BeneficiaryTeam] = None
    ) -> int:
        """Number of stoppages of a type, optionally for one beneficiary team."""

        return len(self._filtered(stoppage_type, team))

    # ------------------------------------------------------------------
    # Added time
    # ------------------------------------------------------------------
    def suggested_added_time(self, period: Period) -> int:
        """Stoppage time of the period rounded up to the next whole minute, in seconds."""

        return self.suggested_added_minutes(period) * SECONDS_PER_MINUTE

    def suggested_added_minutes(self, period: Period) -> int:
        return ceil_minutes(self.total_stoppage_time(period))

    def regulatory_added_time(self, period: Period) -> float:
        """
        Added time under the officiating guideline.

        Only injuries, VAR checks and time wasting count, plus a flat
        allowance per substitution stoppage.
        """

        events = self.for_period(period)
        counted = sum(s.duration for s in events if s.type.counts_for_added_time)
        substitutions = sum(1 for s in events if s.type is StoppageType.SUBSTITUTION)
        return counted + substitutions * SUBSTITUTION_ALLOWANCE_SECONDS

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------
    def stoppage_intervals(self, period: Period) -> List[Interval]:
        """Stoppages of the period as closed intervals on the period clock."""

        return [
            Interval(s.start_time, s.end_time)
            for s in self.for_period(period)
            if s.duration > 0
        ]

    def breakdown(self) -> List[StoppageTypeBreakdown]:
        """Per-type breakdown for the types that occurred, in catalogue order."""

        rows: List[StoppageTypeBreakdown] = []
        for stoppage_type in StoppageType:
            count = self.stoppage_count(stoppage_type)
            if count == 0:
                continue
            rows.append(
                StoppageTypeBreakdown(
                    type=stoppage_type.value,
                    label=stoppage_type.label,
                    count=count,
                    total_seconds=self.total_time(stoppage_type),
                    home_count=self.stoppage_count(stoppage_type, BeneficiaryTeam.HOME),
                    home_seconds=self.total_time(stoppage_type, BeneficiaryTeam.HOME),
                    away_count=self.stoppage_count(stoppage_type, BeneficiaryTeam.AWAY),
                    away_seconds=self.total_time(stoppage_type, BeneficiaryTeam.AWAY),
                )
            )
        return rows

    def _filtered(
        self, stoppage_type: StoppageType, team: Optional[BeneficiaryTeam]
    ) -> List[StoppageEvent]:
        return [
            s for s in self._stoppages
            if s.type == stoppage_type and (team is None or s.beneficiary_team == team)
        ]
