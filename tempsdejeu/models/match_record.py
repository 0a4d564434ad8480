"""
MatchRecord model for the Temps De Jeu statistics engine.

This module contains the MatchRecord dataclass, the event snapshot of one
match handed to the statistics services, together with its JSON helpers and
the merge used when events from another copy of the match are imported.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set, Tuple

from .events import (
    CardEvent, GoalEvent, Period, StoppageEvent, SubstitutionEvent, new_event_id
)
from .roster import MatchRosterEntry

logger = logging.getLogger(__name__)


@dataclass
class MatchRecord:
    """
    Complete event log of a match.

    Attributes:
        id: Stable match identifier
        home_team: Home team name
        away_team: Away team name
        competition: Competition label
        is_my_team_home: Whether the tracked team plays at home
        is_finished: Whether the match has been marked finished
        current_period: Period currently in play, None between periods
        period_durations: Observed duration of each ended period (seconds)
        roster: Players selected for the match
        stoppages: Stoppage events in recording order
        substitutions: Substitution events in recording order
        cards: Card events, served ones included
        goals: Goal events
    """
    id: str = field(default_factory=new_event_id)
    home_team: str = ""
    away_team: str = ""
    competition: str = ""
    is_my_team_home: bool = True
    is_finished: bool = False
    current_period: Optional[Period] = None
    period_durations: Dict[Period, float] = field(default_factory=dict)
    roster: List[MatchRosterEntry] = field(default_factory=list)
    stoppages: List[StoppageEvent] = field(default_factory=list)
    substitutions: List[SubstitutionEvent] = field(default_factory=list)
    cards: List[CardEvent] = field(default_factory=list)
    goals: List[GoalEvent] = field(default_factory=list)

    @property
    def my_team_name(self) -> str:
        return self.home_team if self.is_my_team_home else self.away_team

    @property
    def opponent_name(self) -> str:
        return self.away_team if self.is_my_team_home else self.home_team

    @property
    def label(self) -> str:
        """``Home - Away`` label used on cards and reports."""
        return " - ".join(name for name in (self.home_team, self.away_team) if name)

    @property
    def home_score(self) -> int:
        return sum(1 for goal in self.goals if goal.is_home)

    @property
    def away_score(self) -> int:
        return sum(1 for goal in self.goals if not goal.is_home)

    def roster_entry(self, player_id: str) -> Optional[MatchRosterEntry]:
        for entry in self.roster:
            if entry.player_id == player_id:
                return entry
        return None

    def serve_card(self, card_id: str) -> bool:
        """
        Mark a card as served without removing it.

        Returns:
            True if the card was found
        """
        for card in self.cards:
            if card.id == card_id:
                card.is_served = True
                return True
        return False

    def merge_events(self, other: "MatchRecord") -> int:
        """
        Append events from another copy of this match that are not already here.

        An event is a duplicate when its id is already present or when an
        event with the same content fingerprint exists. Roster entries are
        merged by player id; ended period durations already recorded win.

        Args:
            other: Imported copy of the match

        Returns:
            Number of events appended
        """
        added = 0
        for attr in ("stoppages", "substitutions", "cards", "goals"):
            own: List[Any] = getattr(self, attr)
            seen_ids: Set[str] = {event.id for event in own}
            seen_prints: Set[Tuple[Any, ...]] = {event.fingerprint() for event in own}
            for event in getattr(other, attr):
                if event.id in seen_ids or event.fingerprint() in seen_prints:
                    continue
                own.append(event)
                seen_ids.add(event.id)
                seen_prints.add(event.fingerprint())
                added += 1

        known_players = {entry.player_id for entry in self.roster}
        for entry in other.roster:
            if entry.player_id not in known_players:
                self.roster.append(entry)
                known_players.add(entry.player_id)

        for period, duration in other.period_durations.items():
            self.period_durations.setdefault(period, duration)

        logger.debug("Merged %d new events into match %s", added, self.id)
        return added

    def to_json(self) -> dict:
        """
        Convert MatchRecord to JSON-serializable dictionary.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {
            "id": self.id,
            "home_team": self.home_team,
            "away_team": self.away_team,
            "competition": self.competition,
            "is_my_team_home": self.is_my_team_home,
            "is_finished": self.is_finished,
            "current_period": self.current_period.value if self.current_period else None,
            "period_durations": {p.value: d for p, d in self.period_durations.items()},
            "roster": [entry.to_dict() for entry in self.roster],
            "stoppages": [s.to_dict() for s in self.stoppages],
            "substitutions": [s.to_dict() for s in self.substitutions],
            "cards": [c.to_dict() for c in self.cards],
            "goals": [g.to_dict() for g in self.goals],
        }

    @staticmethod
    def from_json(data: dict) -> "MatchRecord":
        """
        Create MatchRecord from JSON dictionary.

        Older records may omit the roster and event lists; those default to
        empty. Unknown enumeration values raise ValueError.

        Args:
            data: Dictionary with match data

        Returns:
            New MatchRecord instance
        """
        record = MatchRecord(id=data.get("id") or new_event_id())
        record.home_team = data.get("home_team", "")
        record.away_team = data.get("away_team", "")
        record.competition = data.get("competition", "")
        record.is_my_team_home = bool(data.get("is_my_team_home", True))
        record.is_finished = bool(data.get("is_finished", False))

        current = data.get("current_period")
        record.current_period = Period(current) if current else None

        for key, value in (data.get("period_durations") or {}).items():
            if value is None:
                continue
            record.period_durations[Period(key)] = max(0.0, float(value))

        record.roster = [MatchRosterEntry.from_dict(p) for p in data.get("roster") or []]
        record.stoppages = [StoppageEvent.from_dict(s) for s in data.get("stoppages") or []]
        record.substitutions = [
            SubstitutionEvent.from_dict(s) for s in data.get("substitutions") or []
        ]
        record.cards = [CardEvent.from_dict(c) for c in data.get("cards") or []]
        record.goals = [GoalEvent.from_dict(g) for g in data.get("goals") or []]
        return record
