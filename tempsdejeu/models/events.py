"""
Event models for the Temps De Jeu statistics engine.

This module contains the enumerations (periods, stoppage types, teams, cards)
and the event dataclasses recorded live during a match: stoppages,
substitutions, cards and goals. Events carry plain JSON-compatible
``to_dict``/``from_dict`` helpers; numeric fields are clamped on the way in so
the engine can rely on non-negative times.
"""
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from ..utils.constants import (
    EXTRA_HALF_REGULATION_SECONDS, HALF_REGULATION_SECONDS, PERIOD_LABELS, TEMP_EXPULSION_SECONDS
)


def new_event_id() -> str:
    """Generate a unique event identifier."""
    return str(uuid.uuid4())


def _seconds(value: Any) -> float:
    """Coerce a stored time to non-negative seconds."""
    if value is None:
        return 0.0
    return max(0.0, float(value))


class Period(Enum):
    """Periods of a match, in playing order."""
    FIRST_HALF = "first_half"
    SECOND_HALF = "second_half"
    EXTRA_FIRST_HALF = "extra_first_half"
    EXTRA_SECOND_HALF = "extra_second_half"

    @classmethod
    def ordered(cls) -> List["Period"]:
        return list(cls)

    @property
    def index(self) -> int:
        return Period.ordered().index(self)

    @property
    def regulation_duration(self) -> int:
        """Regulation length in seconds."""
        if self in (Period.FIRST_HALF, Period.SECOND_HALF):
            return HALF_REGULATION_SECONDS
        return EXTRA_HALF_REGULATION_SECONDS

    @property
    def short_name(self) -> str:
        return {
            Period.FIRST_HALF: "MT1",
            Period.SECOND_HALF: "MT2",
            Period.EXTRA_FIRST_HALF: "PR1",
            Period.EXTRA_SECOND_HALF: "PR2",
        }[self]

    @property
    def label(self) -> str:
        return PERIOD_LABELS[self.value]


class BeneficiaryTeam(Enum):
    """Team that benefits from a stoppage."""
    HOME = "home"
    AWAY = "away"


class StoppageType(Enum):
    """Kinds of stoppage recorded by the operator."""
    THROW_IN = "throw_in"
    GOAL_KICK = "goal_kick"
    CORNER = "corner"
    FREE_KICK = "free_kick"
    PENALTY = "penalty"
    SUBSTITUTION = "substitution"
    INJURY = "injury"
    VAR = "var"
    GOAL = "goal"
    TIME_WASTING = "time_wasting"
    OTHER = "other"

    @property
    def label(self) -> str:
        return _STOPPAGE_LABELS[self]

    @property
    def counts_for_added_time(self) -> bool:
        """Only injuries, VAR checks and time wasting feed regulatory added time."""
        return self in (StoppageType.INJURY, StoppageType.VAR, StoppageType.TIME_WASTING)

    @property
    def requires_team_selection(self) -> bool:
        return self not in (
            StoppageType.SUBSTITUTION,
            StoppageType.INJURY,
            StoppageType.VAR,
            StoppageType.OTHER,
        )

    @property
    def chainable_types(self) -> List["StoppageType"]:
        """Stoppages that may follow this one without play resuming."""
        if self is StoppageType.FREE_KICK:
            return [
                StoppageType.THROW_IN,
                StoppageType.PENALTY,
                StoppageType.GOAL,
                StoppageType.INJURY,
                StoppageType.SUBSTITUTION,
            ]
        if self is StoppageType.PENALTY:
            return [StoppageType.GOAL, StoppageType.INJURY, StoppageType.SUBSTITUTION]
        return []

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.value,
            "label": self.label,
            "counts_for_added_time": self.counts_for_added_time,
            "requires_team_selection": self.requires_team_selection,
            "chainable_types": [t.value for t in self.chainable_types],
        }


_STOPPAGE_LABELS = {
    StoppageType.THROW_IN: "Touche",
    StoppageType.GOAL_KICK: "6 Mètres",
    StoppageType.CORNER: "Corner",
    StoppageType.FREE_KICK: "Coup Franc",
    StoppageType.PENALTY: "Penalty",
    StoppageType.SUBSTITUTION: "Remplacement",
    StoppageType.INJURY: "Blessure / Soins",
    StoppageType.VAR: "VAR",
    StoppageType.GOAL: "But / Célébration",
    StoppageType.TIME_WASTING: "Anti-jeu",
    StoppageType.OTHER: "Autre",
}


class CardType(Enum):
    """Disciplinary card colours."""
    YELLOW = "yellow"
    SECOND_YELLOW = "second_yellow"
    RED = "red"
    WHITE = "white"

    @property
    def is_expulsion(self) -> bool:
        return self in (CardType.RED, CardType.SECOND_YELLOW)

    @property
    def is_temporary_expulsion(self) -> bool:
        return self is CardType.WHITE

    @property
    def suspension_seconds(self) -> Optional[int]:
        """Time off the field: None for the rest of the match, 0 for no suspension."""
        if self.is_expulsion:
            return None
        if self.is_temporary_expulsion:
            return TEMP_EXPULSION_SECONDS
        return 0


@dataclass
class StoppageEvent:
    """
    A recorded interruption of play.

    Attributes:
        period: Period during which play stopped
        type: Kind of stoppage
        start_time: Seconds from period start when play stopped
        duration: Length of the stoppage in seconds (0 while still running)
        beneficiary_team: Team awarded the restart, if any
        id: Unique identifier
    """
    period: Period
    type: StoppageType
    start_time: float = 0.0
    duration: float = 0.0
    beneficiary_team: Optional[BeneficiaryTeam] = None
    id: str = field(default_factory=new_event_id)

    def __post_init__(self) -> None:
        self.start_time = _seconds(self.start_time)
        self.duration = _seconds(self.duration)

    @property
    def end_time(self) -> float:
        return self.start_time + self.duration

    def fingerprint(self) -> Tuple[Any, ...]:
        return ("stoppage", self.period.value, self.type.value, round(self.start_time), round(self.duration))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "period": self.period.value,
            "type": self.type.value,
            "start_time": self.start_time,
            "duration": self.duration,
            "beneficiary_team": self.beneficiary_team.value if self.beneficiary_team else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StoppageEvent":
        start_time = _seconds(data.get("start_time"))
        if "duration" in data:
            duration = _seconds(data.get("duration"))
        elif data.get("end_time") is not None:
            # Older records store the restart time instead of a duration
            duration = _seconds(float(data["end_time"]) - start_time)
        else:
            duration = 0.0
        team = data.get("beneficiary_team")
        return cls(
            id=data.get("id") or new_event_id(),
            period=Period(data["period"]),
            type=StoppageType(data["type"]),
            start_time=start_time,
            duration=duration,
            beneficiary_team=BeneficiaryTeam(team) if team else None,
        )


@dataclass
class SubstitutionEvent:
    """
    A player swap.

    Attributes:
        period: Period of the substitution
        minute: Seconds from period start
        player_out: Name of the player leaving the field
        player_in: Name of the player entering the field
        player_out_id: Roster identity of the outgoing player, when known
        player_in_id: Roster identity of the incoming player, when known
        id: Unique identifier
    """
    period: Period
    minute: float
    player_out: str = ""
    player_in: str = ""
    player_out_id: Optional[str] = None
    player_in_id: Optional[str] = None
    id: str = field(default_factory=new_event_id)

    def __post_init__(self) -> None:
        self.minute = _seconds(self.minute)

    def fingerprint(self) -> Tuple[Any, ...]:
        return (
            "substitution", self.period.value, round(self.minute),
            self.player_out_id or self.player_out, self.player_in_id or self.player_in,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "period": self.period.value,
            "minute": self.minute,
            "player_out": self.player_out,
            "player_in": self.player_in,
            "player_out_id": self.player_out_id,
            "player_in_id": self.player_in_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SubstitutionEvent":
        return cls(
            id=data.get("id") or new_event_id(),
            period=Period(data["period"]),
            minute=_seconds(data.get("minute")),
            player_out=data.get("player_out", ""),
            player_in=data.get("player_in", ""),
            player_out_id=data.get("player_out_id"),
            player_in_id=data.get("player_in_id"),
        )


@dataclass
class CardEvent:
    """
    A disciplinary card.

    ``is_served`` is a tombstone: a served card disappears from the active
    card list but still counts in historical statistics.
    """
    period: Period
    minute: float
    type: CardType
    player_name: str = ""
    player_id: Optional[str] = None
    is_served: bool = False
    id: str = field(default_factory=new_event_id)

    def __post_init__(self) -> None:
        self.minute = _seconds(self.minute)

    def fingerprint(self) -> Tuple[Any, ...]:
        return ("card", self.period.value, round(self.minute), self.type.value, self.player_id or self.player_name)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "period": self.period.value,
            "minute": self.minute,
            "type": self.type.value,
            "player_name": self.player_name,
            "player_id": self.player_id,
            "is_served": self.is_served,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CardEvent":
        return cls(
            id=data.get("id") or new_event_id(),
            period=Period(data["period"]),
            minute=_seconds(data.get("minute")),
            type=CardType(data["type"]),
            player_name=data.get("player_name", ""),
            player_id=data.get("player_id"),
            is_served=bool(data.get("is_served", False)),
        )


@dataclass
class GoalEvent:
    """A goal; ``is_home`` tells which side scored."""
    period: Period
    minute: float
    is_home: bool
    player_name: str = ""
    id: str = field(default_factory=new_event_id)

    def __post_init__(self) -> None:
        self.minute = _seconds(self.minute)

    def fingerprint(self) -> Tuple[Any, ...]:
        return ("goal", self.period.value, round(self.minute), self.is_home, self.player_name)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "period": self.period.value,
            "minute": self.minute,
            "is_home": self.is_home,
            "player_name": self.player_name,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GoalEvent":
        return cls(
            id=data.get("id") or new_event_id(),
            period=Period(data["period"]),
            minute=_seconds(data.get("minute")),
            is_home=bool(data["is_home"]),
            player_name=data.get("player_name", ""),
        )
