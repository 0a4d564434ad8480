"""
Service factory for the Temps De Jeu statistics engine.

Wires the stoppage ledger, period tracker, substitution reconstructor and
discipline service for one match snapshot. The factory holds no match state;
each call builds a fresh set of services from the record it is given.
"""
from typing import Dict, Iterable, Optional

from ..models import MatchRecord
from .analytics_service import MatchAnalyticsService
from .discipline_service import DisciplineService
from .period_tracker import PeriodTracker
from .season_service import SeasonAnalyticsService
from .stoppage_ledger import StoppageLedger
from .substitution_service import SubstitutionReconstructor


class ServiceFactory:
    """Factory for creating statistics services with their dependencies injected."""

    def create_stoppage_ledger(self, record: MatchRecord) -> StoppageLedger:
        return StoppageLedger(record.stoppages)

    def create_period_tracker(
        self,
        record: MatchRecord,
        ledger: StoppageLedger,
        live_elapsed: Optional[float] = None,
    ) -> PeriodTracker:
        """
        Create PeriodTracker for the record.

        Args:
            record: Match snapshot
            ledger: Stoppage ledger of the same record
            live_elapsed: Elapsed seconds of the running period, if any

        Returns:
            Configured PeriodTracker instance
        """
        return PeriodTracker(
            record.period_durations,
            ledger,
            current_period=record.current_period,
            live_elapsed=live_elapsed,
        )

    def create_match_services(
        self,
        record: MatchRecord,
        live_elapsed: Optional[float] = None,
        infer_starters: bool = False,
    ) -> Dict[str, object]:
        """
        Create the complete suite of services for one match.

        Args:
            record: Match snapshot
            live_elapsed: Elapsed seconds of the running period, if any
            infer_starters: Rebuild the starting eleven from the substitution
                log rather than the roster statuses

        Returns:
            Dictionary containing all configured services
        """
        ledger = self.create_stoppage_ledger(record)
        tracker = self.create_period_tracker(record, ledger, live_elapsed)
        reconstructor = SubstitutionReconstructor(
            record.roster, record.substitutions, tracker, ledger, infer_starters=infer_starters
        )
        discipline = DisciplineService(record.cards, record.goals, record.is_my_team_home)
        return {
            'ledger': ledger,
            'tracker': tracker,
            'substitutions': reconstructor,
            'discipline': discipline,
        }

    def create_match_analytics(
        self,
        record: MatchRecord,
        live_elapsed: Optional[float] = None,
        infer_starters: bool = False,
    ) -> MatchAnalyticsService:
        services = self.create_match_services(record, live_elapsed, infer_starters)
        return MatchAnalyticsService(
            record,
            ledger=services['ledger'],
            tracker=services['tracker'],
            playing_time=services['substitutions'],
            discipline=services['discipline'],
        )

    def create_season_analytics(
        self, records: Iterable[MatchRecord], infer_starters: bool = False
    ) -> SeasonAnalyticsService:
        return SeasonAnalyticsService(records, infer_starters=infer_starters)
