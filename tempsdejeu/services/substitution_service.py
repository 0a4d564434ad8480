"""
Substitution reconstruction for the Temps De Jeu statistics engine.

Rebuilds, from the match roster and the substitution log, the half-open
intervals during which each player was on the field, then derives playing
time, effective playing time and bench time from them.
"""
import logging
from typing import Dict, Iterable, List, Optional, Set, Tuple

from ..models import (
    Interval, MatchRosterEntry, Period, PlayerPlayingTime, SubstitutionEvent,
    subtract_all, total_duration
)
from .period_tracker import PeriodTracker
from .stoppage_ledger import StoppageLedger

logger = logging.getLogger(__name__)

PlayerIntervals = Dict[str, Dict[Period, List[Interval]]]


class SubstitutionReconstructor:
    """
    Convert a roster and ordered substitution events into playing intervals.

    The starting eleven comes from the roster statuses. Records whose statuses
    were rewritten during play can pass ``infer_starters=True`` to rebuild it
    from the substitution log instead.

    Malformed sequences never abort the reconstruction. A player coming on
    while already on the field keeps a single open interval, a player going
    off while already on the bench is ignored, and minutes outside the period
    are clamped to it.
    """

    def __init__(
        self,
        roster: Iterable[MatchRosterEntry],
        substitutions: Iterable[SubstitutionEvent],
        tracker: PeriodTracker,
        ledger: StoppageLedger,
        infer_starters: bool = False,
    ) -> None:
        self._roster: List[MatchRosterEntry] = list(roster)
        self._substitutions: List[SubstitutionEvent] = list(substitutions)
        self._tracker = tracker
        self._ledger = ledger
        self._infer_starters = infer_starters
        self._by_id = {entry.player_id: entry for entry in self._roster}
        self._by_name: Dict[str, str] = {}
        for entry in self._roster:
            for name in (entry.full_name, entry.display_name, entry.short_name):
                if name:
                    self._by_name.setdefault(name.strip().lower(), entry.player_id)

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------
    def resolve_player(self, player_id: Optional[str], name: str) -> Optional[str]:
        """
        Key under which a substitution side is tracked.

        Resolution order: roster id, roster name, raw id, raw name. Returns
        None when the event side carries neither an id nor a name.
        """
        if player_id and player_id in self._by_id:
            return player_id
        cleaned = (name or "").strip()
        if cleaned and cleaned.lower() in self._by_name:
            return self._by_name[cleaned.lower()]
        if player_id:
            return player_id
        if cleaned:
            return f"name:{cleaned}"
        return None

    def _keys(self, event: SubstitutionEvent) -> Tuple[Optional[str], Optional[str]]:
        return (
            self.resolve_player(event.player_out_id, event.player_out),
            self.resolve_player(event.player_in_id, event.player_in),
        )

    def _ordered_events(self) -> List[SubstitutionEvent]:
        # sorted() is stable, so insertion order breaks ties on the same minute
        return sorted(self._substitutions, key=lambda e: (e.period.index, e.minute))

    # ------------------------------------------------------------------
    # Starting eleven
    # ------------------------------------------------------------------
    def starting_players(self) -> Set[str]:
        """
        Players on the field at the start of the first played period.

        By default these are the rostered titulaires (expelled players started
        too). With ``infer_starters`` the first substitution involving a player
        decides instead: going off first means the player started. Players
        with no substitution keep their status.
        """
        if not self._infer_starters:
            return {entry.player_id for entry in self._roster if entry.status.started_on_field}

        first_move: Dict[str, bool] = {}
        for event in self._ordered_events():
            out_key, in_key = self._keys(event)
            if out_key is not None:
                first_move.setdefault(out_key, False)
            if in_key is not None and in_key != out_key:
                first_move.setdefault(in_key, True)

        starters: Set[str] = set()
        for entry in self._roster:
            entered_first = first_move.get(entry.player_id)
            if entered_first is None:
                if entry.status.started_on_field:
                    starters.add(entry.player_id)
            elif not entered_first:
                starters.add(entry.player_id)
        return starters

    # ------------------------------------------------------------------
    # Reconstruction
    # ------------------------------------------------------------------
    def player_intervals(self) -> PlayerIntervals:
        """
        On-field intervals for every player, keyed by player then period.

        Rostered players always appear, with no periods when they never
        played. Players referenced only by substitutions appear under their
        resolved key.
        """
        result: PlayerIntervals = {entry.player_id: {} for entry in self._roster}
        played = self._tracker.played_periods()
        events = self._ordered_events()

        skipped = [e for e in events if e.period not in played]
        if skipped:
            logger.debug("Ignoring %d substitutions in periods without a duration", len(skipped))

        on_field: Set[str] = self.starting_players()
        for period in played:
            period_end = self._tracker.observed_duration(period) or 0.0
            open_since: Dict[str, float] = {key: 0.0 for key in on_field}

            for event in (e for e in events if e.period == period):
                minute = min(max(0.0, event.minute), period_end)
                if minute != event.minute:
                    logger.debug(
                        "Clamping substitution %s minute %.1f to %.1f", event.id, event.minute, minute
                    )
                out_key, in_key = self._keys(event)
                if out_key is not None and out_key == in_key:
                    logger.debug("Substitution %s swaps a player with itself; ignored", event.id)
                    continue

                if out_key is not None:
                    if out_key in open_since:
                        self._append(result, out_key, period, open_since.pop(out_key), minute)
                    else:
                        logger.debug("Substitution %s: %s was not on the field", event.id, out_key)

                if in_key is not None:
                    if in_key in open_since:
                        logger.debug("Substitution %s: %s already on the field", event.id, in_key)
                    else:
                        open_since[in_key] = minute

            for key, start in open_since.items():
                self._append(result, key, period, start, period_end)
            on_field = set(open_since)

        return result

    @staticmethod
    def _append(
        result: PlayerIntervals, key: str, period: Period, start: float, end: float
    ) -> None:
        periods = result.setdefault(key, {})
        if end <= start:
            periods.setdefault(period, [])
            return
        periods.setdefault(period, []).append(Interval(start, end))

    # ------------------------------------------------------------------
    # Playing time
    # ------------------------------------------------------------------
    def player_playing_times(self, played_only: bool = False) -> List[PlayerPlayingTime]:
        """
        Playing-time table for the rostered players.

        Args:
            played_only: Drop players with no time on the field

        Returns:
            Rows ordered by shirt number, then name
        """
        intervals = self.player_intervals()
        starters = self.starting_players()
        rows: List[PlayerPlayingTime] = []

        for entry in self._roster:
            periods = intervals.get(entry.player_id, {})
            total = sum(total_duration(items) for items in periods.values())
            if played_only and total <= 0:
                continue
            rows.append(
                PlayerPlayingTime(
                    player_id=entry.player_id,
                    player_name=entry.display_name,
                    shirt_number=entry.shirt_number,
                    position=entry.position.value,
                    is_titulaire=entry.player_id in starters,
                    total_time=total,
                    effective_time=self._effective_time(periods, total),
                    bench_time=self._bench_time(periods),
                )
            )

        rows.sort(key=lambda row: (row.shirt_number, row.player_name))
        return rows

    def _effective_time(self, periods: Dict[Period, List[Interval]], total: float) -> float:
        # Each (on-field, stoppage) overlap is removed; overlapping stoppages count twice
        overlap = 0.0
        for period, items in periods.items():
            stoppages = self._ledger.stoppage_intervals(period)
            for interval in items:
                for stoppage in stoppages:
                    shared = interval.intersection(stoppage)
                    if shared is not None:
                        overlap += shared.duration()
        return max(0.0, total - overlap)

    def _bench_time(self, periods: Dict[Period, List[Interval]]) -> float:
        bench = 0.0
        for period in self._tracker.played_periods():
            period_end = self._tracker.observed_duration(period) or 0.0
            remaining = subtract_all(Interval(0.0, period_end), periods.get(period, []))
            bench += total_duration(remaining)
        return bench
