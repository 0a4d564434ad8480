"""Season-level statistics across finished matches."""

import logging
from typing import Dict, Iterable, List

from ..models import (
    GoalEvent, MatchRecord, SeasonPlayerTotal, SeasonReport, StoppageEvent, StoppageTypeBreakdown
)
from .analytics_service import MatchAnalyticsService
from .discipline_service import card_counts, top_scorers
from .stoppage_ledger import StoppageLedger

logger = logging.getLogger(__name__)


class SeasonAnalyticsService:
    """Aggregate the finished matches of a season; unfinished ones are ignored."""

    def __init__(self, records: Iterable[MatchRecord], infer_starters: bool = False) -> None:
        records = list(records)
        self._infer_starters = infer_starters
        self.records: List[MatchRecord] = [r for r in records if r.is_finished]
        skipped = len(records) - len(self.records)
        if skipped:
            logger.debug("Ignoring %d unfinished matches", skipped)

    def _match_services(self) -> List[MatchAnalyticsService]:
        return [
            MatchAnalyticsService(record, infer_starters=self._infer_starters)
            for record in self.records
        ]

    def stoppage_breakdown(self) -> List[StoppageTypeBreakdown]:
        stoppages: List[StoppageEvent] = []
        for record in self.records:
            stoppages.extend(record.stoppages)
        return StoppageLedger(stoppages).breakdown()

    def player_totals(self) -> List[SeasonPlayerTotal]:
        """Cumulative playing time per player, most played first."""

        totals: Dict[str, SeasonPlayerTotal] = {}
        for service in self._match_services():
            for row in service.player_playing_times():
                entry = totals.get(row.player_id)
                if entry is None:
                    entry = SeasonPlayerTotal(
                        player_id=row.player_id,
                        player_name=row.player_name,
                        matches_played=0,
                        matches_started=0,
                        total_time=0.0,
                        effective_time=0.0,
                    )
                    totals[row.player_id] = entry
                if row.total_time > 0:
                    entry.matches_played += 1
                if row.is_titulaire:
                    entry.matches_started += 1
                entry.total_time += row.total_time
                entry.effective_time += row.effective_time

        return sorted(totals.values(), key=lambda t: (-t.total_time, t.player_name))

    def generate_season_report(self) -> SeasonReport:
        services = self._match_services()
        count = len(services)
        total_duration = sum(s.total_match_duration() for s in services)
        total_effective = sum(s.total_effective_play_time() for s in services)
        average_percentage = (
            sum(s.effective_percentage() for s in services) / count if count else 0.0
        )

        my_goals: List[GoalEvent] = []
        opponent_goals = 0
        for record in self.records:
            mine = [g for g in record.goals if g.is_home == record.is_my_team_home]
            my_goals.extend(mine)
            opponent_goals += len(record.goals) - len(mine)

        return SeasonReport(
            matches_played=count,
            total_duration=total_duration,
            total_effective_time=total_effective,
            average_effective_time=total_effective / count if count else 0.0,
            average_effective_percentage=average_percentage,
            total_stoppages=sum(len(r.stoppages) for r in self.records),
            stoppage_breakdown=self.stoppage_breakdown(),
            card_counts=card_counts(card for r in self.records for card in r.cards),
            my_goals=len(my_goals),
            opponent_goals=opponent_goals,
            top_scorers=top_scorers(my_goals),
            player_totals=self.player_totals(),
        )
